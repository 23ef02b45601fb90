import logging

from bdseeker.core.context import AppContext
from bdseeker.models import company, developer, job, report, user  # noqa: F401
from bdseeker.models.base import Base
from bdseeker.models.user import Role, User

logger = logging.getLogger(__name__)


def create_tables(ctx: AppContext) -> None:
    """Create every table directly; used by tests and throwaway databases."""
    Base.metadata.create_all(bind=ctx.engine)


def seed_admin_user(ctx: AppContext) -> None:
    """Create the default admin unless some admin already exists (idempotent)."""
    settings = ctx.settings
    db = ctx.session_factory()
    try:
        exists = db.query(User.id).filter(User.role == Role.ADMIN, User.deleted_at.is_(None)).first()
        if exists:
            logger.info("Admin user already exists")
            return
        admin = User(
            email=settings.seed_admin_email,
            full_name="System Administrator",
            password_hash=ctx.hasher.hash(settings.seed_admin_password),
            role=Role.ADMIN,
        )
        db.add(admin)
        db.commit()
        logger.info("Default admin user created: %s", admin.email)
        if settings.is_production:
            logger.warning("Change the seeded admin password in production")
    finally:
        db.close()
