"""Moderation workflows.

Two state machines live here:

* content approval for company reviews, review comments and job comments:
  ``pending -> approved`` or ``pending -> removed``, both terminal;
* report handling: ``pending -> reviewed | resolved | dismissed``.

Every transition requires an admin identity. Creation of content happens in
the owning routes and always lands in ``pending``.
"""
import enum
import logging
from typing import List, Optional, Tuple, Union

from sqlalchemy.orm import Session

from bdseeker.core.errors import ConflictError, NotFoundError, ValidationError
from bdseeker.core.permissions import Identity, authorize
from bdseeker.models.base import utcnow
from bdseeker.models.company import CompanyReview, ReviewComment
from bdseeker.models.job import JobComment
from bdseeker.models.report import ReportStatus, UserReport
from bdseeker.models.user import Role
from bdseeker.repositories.companies import CompanyRepository
from bdseeker.repositories.jobs import JobRepository
from bdseeker.repositories.reports import ReportRepository
from bdseeker.repositories.users import UserRepository
from bdseeker.schemas.common import PageParams

logger = logging.getLogger(__name__)

Moderatable = Union[CompanyReview, ReviewComment, JobComment]

REPORT_FINAL_STATUSES = (ReportStatus.REVIEWED, ReportStatus.RESOLVED, ReportStatus.DISMISSED)


class ContentState(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REMOVED = "removed"


class CommentKind(str, enum.Enum):
    REVIEW = "review"
    JOB = "job"


def content_state(item: Moderatable) -> ContentState:
    if item.deleted_at is not None:
        return ContentState.REMOVED
    if item.is_approved:
        return ContentState.APPROVED
    return ContentState.PENDING


def transition_content(item: Moderatable, target: ContentState) -> Moderatable:
    """Move a piece of content out of ``pending``; anything else is rejected."""
    current = content_state(item)
    if target == ContentState.PENDING:
        raise ValidationError("content cannot be moved back to pending")
    if current != ContentState.PENDING:
        raise ConflictError(f"content is already {current.value}")
    if target == ContentState.APPROVED:
        item.is_approved = True
    else:
        item.soft_delete()
    return item


class ModerationService:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.companies = CompanyRepository(db)
        self.jobs = JobRepository(db)
        self.reports = ReportRepository(db)
        self.users = UserRepository(db)

    # Reviews

    def list_pending_reviews(self, admin: Identity, params: PageParams) -> Tuple[List[CompanyReview], int]:
        authorize(admin, [Role.ADMIN])
        return self.companies.list_reviews(params.offset, params.limit, approved=False)

    def approve_review(self, admin: Identity, review_id: int) -> CompanyReview:
        return self._moderate(admin, lambda: self._get_review(review_id), ContentState.APPROVED)

    def remove_review(self, admin: Identity, review_id: int) -> CompanyReview:
        return self._moderate(admin, lambda: self._get_review(review_id), ContentState.REMOVED)

    # Comments

    def list_pending_comments(
        self, admin: Identity, kind: CommentKind, params: PageParams
    ) -> Tuple[List[Union[ReviewComment, JobComment]], int]:
        authorize(admin, [Role.ADMIN])
        if kind == CommentKind.REVIEW:
            return self.companies.list_comments(params.offset, params.limit, approved=False)
        return self.jobs.list_comments(params.offset, params.limit, approved=False)

    def approve_comment(self, admin: Identity, kind: CommentKind, comment_id: int) -> Union[ReviewComment, JobComment]:
        return self._moderate(admin, lambda: self._get_comment(kind, comment_id), ContentState.APPROVED)

    def remove_comment(self, admin: Identity, kind: CommentKind, comment_id: int) -> Union[ReviewComment, JobComment]:
        return self._moderate(admin, lambda: self._get_comment(kind, comment_id), ContentState.REMOVED)

    def _get_review(self, review_id: int) -> CompanyReview:
        review = self.companies.find_review(review_id)
        if review is None:
            raise NotFoundError("Review not found")
        return review

    def _get_comment(self, kind: CommentKind, comment_id: int) -> Union[ReviewComment, JobComment]:
        if kind == CommentKind.REVIEW:
            comment = self.companies.find_comment(comment_id)
        else:
            comment = self.jobs.find_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        return comment

    def _moderate(self, admin: Identity, load, target: ContentState):
        authorize(admin, [Role.ADMIN])
        item = load()
        transition_content(item, target)
        self.db.commit()
        self.db.refresh(item)
        logger.info(
            "moderation: %s id=%s -> %s by admin=%s", type(item).__name__, item.id, target.value, admin.user_id
        )
        return item

    # Reports

    def create_report(self, reporter: Identity, reported_id: int, report_type: str, description: str) -> UserReport:
        if reported_id == reporter.user_id:
            raise ValidationError("cannot report yourself")
        if self.users.find_by_id(reported_id) is None:
            raise NotFoundError("Reported user not found")
        report = UserReport(
            reporter_id=reporter.user_id,
            reported_id=reported_id,
            report_type=report_type,
            description=description,
            status=ReportStatus.PENDING,
        )
        return self.reports.create(report)

    def list_reports(
        self,
        admin: Identity,
        params: PageParams,
        status: Optional[ReportStatus] = None,
        report_type: Optional[str] = None,
    ) -> Tuple[List[UserReport], int]:
        authorize(admin, [Role.ADMIN])
        return self.reports.list(params.offset, params.limit, status=status, report_type=report_type)

    def update_report_status(self, admin: Identity, report_id: int, status: ReportStatus) -> UserReport:
        """Set a report's status and stamp the reviewing admin.

        Calling this again on an already-handled report is accepted and
        overwrites status, reviewer and timestamp.
        """
        authorize(admin, [Role.ADMIN])
        try:
            status = ReportStatus(status)
        except ValueError as e:
            raise ValidationError("status must be one of: reviewed resolved dismissed") from e
        if status not in REPORT_FINAL_STATUSES:
            raise ValidationError("status must be one of: reviewed resolved dismissed")
        report = self.reports.find_by_id(report_id)
        if report is None:
            raise NotFoundError("Report not found")
        previous = report.status
        report.status = status
        report.reviewed_by = admin.user_id
        report.reviewed_at = utcnow()
        report = self.reports.update(report)
        logger.info(
            "report id=%s status %s -> %s by admin=%s", report.id, previous.value, status.value, admin.user_id
        )
        return report
