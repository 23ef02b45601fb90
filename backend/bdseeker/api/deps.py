import logging
from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from bdseeker.core.context import AppContext
from bdseeker.core.cookies import get_auth_cookie
from bdseeker.core.errors import UnauthorizedError
from bdseeker.core.permissions import Identity, authorize
from bdseeker.core.security import TokenError
from bdseeker.models.user import Role
from bdseeker.repositories.users import UserRepository
from bdseeker.services.auth import AuthService
from bdseeker.services.moderation import ModerationService

logger = logging.getLogger(__name__)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(ctx: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    db = ctx.session_factory()
    try:
        yield db
    finally:
        db.close()


def extract_token(request: Request) -> str:
    """Token from the auth cookie, falling back to ``Authorization: Bearer``."""
    token = get_auth_cookie(request)
    if token:
        return token
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise UnauthorizedError("Authentication required")
    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthorizedError("Invalid authorization header format")
    return parts[1]


def get_current_identity(request: Request, ctx: AppContext = Depends(get_context)) -> Identity:
    token = extract_token(request)
    try:
        claims = ctx.tokens.validate(token)
    except TokenError as e:
        logger.info("rejected token: %s", e.kind.value)
        # The handler drops the stale cookie along with the 401.
        raise UnauthorizedError("Invalid or expired token", clear_cookie=True) from e
    return Identity.from_claims(claims)


def require_roles(*allowed: Role):
    def checker(identity: Identity = Depends(get_current_identity)) -> Identity:
        return authorize(identity, allowed)
    return checker


def get_auth_service(db: Session = Depends(get_db), ctx: AppContext = Depends(get_context)) -> AuthService:
    return AuthService(UserRepository(db), ctx.hasher, ctx.tokens)


def get_moderation_service(db: Session = Depends(get_db)) -> ModerationService:
    return ModerationService(db)
