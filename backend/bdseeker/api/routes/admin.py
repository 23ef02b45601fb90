import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bdseeker.api.deps import get_db, get_moderation_service, require_roles
from bdseeker.api.responses import ok
from bdseeker.core.errors import NotFoundError, ValidationError
from bdseeker.core.permissions import Identity
from bdseeker.models.report import ReportStatus
from bdseeker.models.user import Role
from bdseeker.repositories.companies import CompanyRepository
from bdseeker.repositories.developers import DeveloperRepository
from bdseeker.repositories.jobs import JobRepository
from bdseeker.repositories.reports import ReportRepository
from bdseeker.repositories.users import UserRepository
from bdseeker.schemas.admin import StatsOut
from bdseeker.schemas.auth import UserOut
from bdseeker.schemas.common import Page, PageParams
from bdseeker.schemas.company import ReviewCommentOut, ReviewOut
from bdseeker.schemas.job import JobCommentOut
from bdseeker.schemas.report import ReportOut, ReportStatusUpdate
from bdseeker.services.moderation import CommentKind, ModerationService

logger = logging.getLogger(__name__)

admin_only = require_roles(Role.ADMIN)

router = APIRouter(dependencies=[Depends(admin_only)])


def _comment_out(kind: CommentKind, comment):
    if kind == CommentKind.REVIEW:
        return ReviewCommentOut.model_validate(comment)
    return JobCommentOut.model_validate(comment)


@router.get("/stats")
def platform_stats(db: Session = Depends(get_db)):
    companies = CompanyRepository(db)
    jobs = JobRepository(db)
    stats = StatsOut(
        total_users=UserRepository(db).count(),
        total_developers=DeveloperRepository(db).count(),
        total_companies=companies.count(),
        total_jobs=jobs.count(),
        total_reports=ReportRepository(db).count(),
        pending_reviews=companies.count_reviews(approved=False),
        pending_comments=companies.count_comments(approved=False) + jobs.count_comments(approved=False),
    )
    return ok("Statistics retrieved successfully", stats)


@router.get("/users")
def list_users(
    page: int | None = None,
    limit: int | None = None,
    role: Role | None = None,
    db: Session = Depends(get_db),
):
    """Paginated list of live users, optionally narrowed to one role."""
    params = PageParams.normalize(page, limit)
    users, total = UserRepository(db).list(params.offset, params.limit, role=role)
    data = Page[UserOut].build([UserOut.model_validate(u) for u in users], total, params)
    return ok("Users retrieved successfully", data)


@router.delete("/users/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db), admin: Identity = Depends(admin_only)):
    if user_id == admin.user_id:
        raise ValidationError("Admins cannot delete their own account")
    repo = UserRepository(db)
    user = repo.find_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    repo.soft_delete(user)
    logger.info("user id=%s soft-deleted by admin=%s", user_id, admin.user_id)
    return ok("User deleted successfully")


@router.get("/reviews/pending")
def list_pending_reviews(
    page: int | None = None,
    limit: int | None = None,
    admin: Identity = Depends(admin_only),
    service: ModerationService = Depends(get_moderation_service),
):
    params = PageParams.normalize(page, limit)
    reviews, total = service.list_pending_reviews(admin, params)
    data = Page[ReviewOut].build([ReviewOut.model_validate(r) for r in reviews], total, params)
    return ok("Pending reviews retrieved successfully", data)


@router.put("/reviews/{review_id}/approve")
def approve_review(
    review_id: int,
    admin: Identity = Depends(admin_only),
    service: ModerationService = Depends(get_moderation_service),
):
    review = service.approve_review(admin, review_id)
    return ok("Review approved successfully", ReviewOut.model_validate(review))


@router.delete("/reviews/{review_id}")
def reject_review(
    review_id: int,
    admin: Identity = Depends(admin_only),
    service: ModerationService = Depends(get_moderation_service),
):
    service.remove_review(admin, review_id)
    return ok("Review rejected successfully")


@router.get("/comments/pending")
def list_pending_comments(
    kind: CommentKind = CommentKind.REVIEW,
    page: int | None = None,
    limit: int | None = None,
    admin: Identity = Depends(admin_only),
    service: ModerationService = Depends(get_moderation_service),
):
    params = PageParams.normalize(page, limit)
    comments, total = service.list_pending_comments(admin, kind, params)
    data = Page.build([_comment_out(kind, c) for c in comments], total, params)
    return ok("Pending comments retrieved successfully", data)


@router.put("/comments/{kind}/{comment_id}/approve")
def approve_comment(
    kind: CommentKind,
    comment_id: int,
    admin: Identity = Depends(admin_only),
    service: ModerationService = Depends(get_moderation_service),
):
    comment = service.approve_comment(admin, kind, comment_id)
    return ok("Comment approved successfully", _comment_out(kind, comment))


@router.delete("/comments/{kind}/{comment_id}")
def reject_comment(
    kind: CommentKind,
    comment_id: int,
    admin: Identity = Depends(admin_only),
    service: ModerationService = Depends(get_moderation_service),
):
    service.remove_comment(admin, kind, comment_id)
    return ok("Comment rejected successfully")


@router.get("/reports")
def list_reports(
    page: int | None = None,
    limit: int | None = None,
    status: ReportStatus | None = None,
    type: str | None = None,
    admin: Identity = Depends(admin_only),
    service: ModerationService = Depends(get_moderation_service),
):
    params = PageParams.normalize(page, limit)
    reports, total = service.list_reports(admin, params, status=status, report_type=type)
    data = Page[ReportOut].build([ReportOut.model_validate(r) for r in reports], total, params)
    return ok("Reports retrieved successfully", data)


@router.put("/reports/{report_id}/status")
def update_report_status(
    report_id: int,
    payload: ReportStatusUpdate,
    admin: Identity = Depends(admin_only),
    service: ModerationService = Depends(get_moderation_service),
):
    report = service.update_report_status(admin, report_id, ReportStatus(payload.status))
    return ok("Report status updated successfully", ReportOut.model_validate(report))
