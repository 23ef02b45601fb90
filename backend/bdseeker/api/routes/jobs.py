from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bdseeker.api.deps import get_current_identity, get_db, require_roles
from bdseeker.api.responses import ok
from bdseeker.core.errors import NotFoundError, ValidationError
from bdseeker.core.permissions import Identity
from bdseeker.models.job import JobComment, JobPost
from bdseeker.models.user import Role
from bdseeker.repositories.companies import CompanyRepository
from bdseeker.repositories.jobs import JobRepository
from bdseeker.schemas.common import Page, PageParams
from bdseeker.schemas.company import ContentCreate
from bdseeker.schemas.job import JobCommentOut, JobCreate, JobDetailOut, JobOut

router = APIRouter()

DETAIL_COMMENTS_LIMIT = 50


def _get_job(repo: JobRepository, job_id: int) -> JobPost:
    job = repo.find_by_id(job_id)
    if not job:
        raise NotFoundError("Job not found")
    return job


@router.get("")
def list_jobs(
    page: int | None = None,
    limit: int | None = None,
    work_mode: str | None = None,
    location: str | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
):
    params = PageParams.normalize(page, limit)
    items, total = JobRepository(db).list(
        params.offset, params.limit, work_mode=work_mode, location=location, search=search
    )
    data = Page[JobOut].build([JobOut.model_validate(j) for j in items], total, params)
    return ok("Jobs retrieved successfully", data)


@router.get("/{job_id}")
def get_job(job_id: int, db: Session = Depends(get_db)):
    repo = JobRepository(db)
    job = _get_job(repo, job_id)
    comments, _total = repo.list_comments(0, DETAIL_COMMENTS_LIMIT, job_post_id=job.id, approved=True)
    detail = JobDetailOut.model_validate(job).model_copy(
        update={"comments": [JobCommentOut.model_validate(c) for c in comments]}
    )
    return ok("Job retrieved successfully", detail)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_roles(Role.COMPANY, Role.ADMIN)),
):
    company_id = None
    if not identity.is_admin:
        company = CompanyRepository(db).find_by_user_id(identity.user_id)
        if not company:
            raise ValidationError("User must have a company profile to post jobs")
        company_id = company.id
    job = JobRepository(db).create(JobPost(company_id=company_id, **payload.model_dump()))
    return ok("Job created successfully", JobOut.model_validate(job))


@router.post("/{job_id}/comments", status_code=status.HTTP_201_CREATED)
def comment_on_job(
    job_id: int,
    payload: ContentCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    repo = JobRepository(db)
    job = _get_job(repo, job_id)
    comment = repo.create_comment(
        JobComment(job_post_id=job.id, user_id=identity.user_id, content=payload.content, is_approved=False)
    )
    return ok("Comment created successfully (pending approval)", JobCommentOut.model_validate(comment))


@router.get("/{job_id}/comments")
def list_job_comments(
    job_id: int,
    page: int | None = None,
    limit: int | None = None,
    db: Session = Depends(get_db),
):
    repo = JobRepository(db)
    job = _get_job(repo, job_id)
    params = PageParams.normalize(page, limit)
    items, total = repo.list_comments(params.offset, params.limit, job_post_id=job.id, approved=True)
    data = Page[JobCommentOut].build([JobCommentOut.model_validate(c) for c in items], total, params)
    return ok("Comments retrieved successfully", data)
