import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from bdseeker.api.responses import error_response
from bdseeker.api.router import api_router
from bdseeker.core.config import Settings, get_settings
from bdseeker.core.context import AppContext
from bdseeker.core.cookies import clear_auth_cookie
from bdseeker.core.errors import AppError, UnauthorizedError
from bdseeker.core.logging import setup_logging
from bdseeker.db.init_db import seed_admin_user

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Last line of defence: any unhandled exception becomes a generic 500."""

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return error_response(500, "Internal server error")


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "body"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc.message)
        resp = error_response(exc.status_code, exc.message, exc.data)
        if isinstance(exc, UnauthorizedError) and exc.clear_cookie:
            ctx: AppContext = request.app.state.context
            clear_auth_cookie(resp, secure=ctx.settings.cookie_secure)
        return resp

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors: dict[str, str] = {}
        for err in exc.errors():
            field = _field_name(err.get("loc", ()))
            errors.setdefault(field, f"{field}: {err.get('msg', 'is invalid')}")
        return error_response(400, "Validation failed", errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))


def create_app(settings: Optional[Settings] = None, context: Optional[AppContext] = None) -> FastAPI:
    """Build the ASGI app around an explicitly constructed AppContext."""
    settings = settings or (context.settings if context else get_settings())
    setup_logging(settings.log_level)
    ctx = context or AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.seed_on_startup:
            seed_admin_user(ctx)
        yield
        ctx.close()

    app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)
    app.state.context = ctx

    app.add_middleware(RecoveryMiddleware)

    origins = settings.cors_origins
    logger.info("Resolved CORS origins: %s", origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=API_PREFIX)
    return app
