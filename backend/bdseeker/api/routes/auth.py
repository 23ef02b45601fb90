from fastapi import APIRouter, Depends, Response, status

from bdseeker.api.deps import get_auth_service, get_context, get_current_identity
from bdseeker.api.responses import ok
from bdseeker.core.context import AppContext
from bdseeker.core.cookies import clear_all_auth_cookies, set_auth_cookie
from bdseeker.core.permissions import Identity
from bdseeker.schemas.auth import AuthOut, UserLogin, UserOut, UserRegister
from bdseeker.services.auth import AuthResult, AuthService

router = APIRouter()


def _auth_payload(result: AuthResult) -> AuthOut:
    return AuthOut(token=result.token, user=UserOut.model_validate(result.user))


def _set_cookie(response: Response, token: str, ctx: AppContext) -> None:
    max_age = int(ctx.tokens.ttl.total_seconds())
    set_auth_cookie(response, token, max_age, secure=ctx.settings.cookie_secure)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    payload: UserRegister,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    ctx: AppContext = Depends(get_context),
):
    result = service.register(payload.email, payload.password, payload.full_name, payload.role)
    _set_cookie(response, result.token, ctx)
    return ok("User registered successfully", _auth_payload(result))


@router.post("/login")
def login(
    payload: UserLogin,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    ctx: AppContext = Depends(get_context),
):
    result = service.login(payload.email, payload.password)
    _set_cookie(response, result.token, ctx)
    return ok("Login successful", _auth_payload(result))


@router.get("/me")
def me(identity: Identity = Depends(get_current_identity), service: AuthService = Depends(get_auth_service)):
    user = service.get_current_user(identity)
    return ok("User retrieved successfully", UserOut.model_validate(user))


@router.post("/logout")
def logout(response: Response, ctx: AppContext = Depends(get_context)):
    """Clear auth cookies. The token itself stays valid until it expires."""
    clear_all_auth_cookies(response, secure=ctx.settings.cookie_secure)
    return ok("Logged out successfully")
