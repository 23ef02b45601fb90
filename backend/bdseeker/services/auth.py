import logging
from dataclasses import dataclass

from bdseeker.core.errors import ConflictError, NotFoundError, UnauthorizedError
from bdseeker.core.permissions import Identity
from bdseeker.core.security import PasswordHasher, TokenService
from bdseeker.models.user import Role, User
from bdseeker.repositories.users import UserRepository

logger = logging.getLogger(__name__)

# Same text for unknown email and wrong password so callers cannot probe accounts.
INVALID_CREDENTIALS = "invalid email or password"


@dataclass
class AuthResult:
    token: str
    user: User


class AuthService:
    def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens: TokenService) -> None:
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def register(self, email: str, password: str, full_name: str, role: Role) -> AuthResult:
        # Soft-deleted accounts keep their email reserved.
        if self.users.find_by_email(email, include_deleted=True) is not None:
            raise ConflictError("user with this email already exists")
        user = User(
            email=email,
            password_hash=self.hasher.hash(password),
            full_name=full_name,
            role=Role(role),
        )
        user = self.users.create(user)
        logger.info("registered user id=%s role=%s", user.id, user.role.value)
        return AuthResult(token=self._issue(user), user=user)

    def login(self, email: str, password: str) -> AuthResult:
        user = self.users.find_by_email(email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.info("failed login attempt")
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return AuthResult(token=self._issue(user), user=user)

    def get_current_user(self, identity: Identity) -> User:
        user = self.users.find_by_id(identity.user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def _issue(self, user: User) -> str:
        return self.tokens.issue(user.id, user.email, user.role)
