from dataclasses import dataclass
from typing import Iterable, Optional

from bdseeker.core.errors import ForbiddenError, UnauthorizedError
from bdseeker.core.security import TokenClaims
from bdseeker.models.user import Role


@dataclass(frozen=True)
class Identity:
    """Who is calling, as proven by a validated token."""

    user_id: int
    email: str
    role: Role

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> "Identity":
        return cls(user_id=claims.user_id, email=claims.email, role=claims.role)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def authorize(identity: Optional[Identity], allowed: Iterable[Role]) -> Identity:
    """Pass the identity through if its role is one of ``allowed``.

    No identity at all is an authentication failure, a present but
    insufficient role is an authorization failure.
    """
    if identity is None:
        raise UnauthorizedError("User role not found in context")
    if identity.role not in set(allowed):
        raise ForbiddenError("Insufficient permissions")
    return identity
