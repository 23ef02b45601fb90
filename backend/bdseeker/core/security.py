import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext

from bdseeker.models.user import Role

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted one-way password hashing.

    Digests are self-describing (scheme, cost and salt embedded), so verify
    needs nothing but the stored string.
    """

    def __init__(self, schemes: Optional[list[str]] = None) -> None:
        # Prefer argon2, keep bcrypt as fallback for digests created by older deployments
        self._ctx = CryptContext(schemes=schemes or ["argon2", "bcrypt"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._ctx.hash(password)

    def verify(self, password: str, digest: str) -> bool:
        if not password or not digest:
            return False
        try:
            return self._ctx.verify(password, digest)
        except (ValueError, TypeError):
            # Unknown or corrupt digest: treat as mismatch.
            return False


class TokenErrorKind(str, enum.Enum):
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"
    MALFORMED = "malformed"


class TokenError(Exception):
    def __init__(self, kind: TokenErrorKind, detail: str = "") -> None:
        self.kind = kind
        super().__init__(detail or kind.value)


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    email: str
    role: Role
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issues and validates signed, time-limited access tokens."""

    def __init__(self, secret: str, ttl: timedelta, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: int, email: str, role: Role, ttl: Optional[timedelta] = None) -> str:
        now = datetime.now(tz=timezone.utc)
        expire = now + (ttl if ttl is not None else self.ttl)
        to_encode: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "role": Role(role).value,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenClaims:
        """Decode and verify a token.

        Raises TokenError; any decode or verify failure is a rejection.
        """
        if not token:
            raise TokenError(TokenErrorKind.MALFORMED, "empty token")
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenError(TokenErrorKind.EXPIRED, str(e)) from e
        except jwt.InvalidSignatureError as e:
            raise TokenError(TokenErrorKind.INVALID_SIGNATURE, str(e)) from e
        except jwt.PyJWTError as e:
            raise TokenError(TokenErrorKind.MALFORMED, str(e)) from e
        return self._claims_from_payload(payload)

    @staticmethod
    def _claims_from_payload(payload: dict[str, Any]) -> TokenClaims:
        try:
            user_id = int(payload["sub"])
            email = payload["email"]
            role = Role(payload["role"])
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
        except (KeyError, ValueError, TypeError) as e:
            raise TokenError(TokenErrorKind.MALFORMED, f"bad claims: {e}") from e
        if not isinstance(email, str) or not email:
            raise TokenError(TokenErrorKind.MALFORMED, "bad claims: email")
        return TokenClaims(user_id=user_id, email=email, role=role, issued_at=issued_at, expires_at=expires_at)
