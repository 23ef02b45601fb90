from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from bdseeker.api.deps import get_current_identity, get_db, require_roles
from bdseeker.api.responses import ok
from bdseeker.core.errors import ConflictError, NotFoundError
from bdseeker.core.permissions import Identity
from bdseeker.models.company import CompanyProfile, CompanyRating, CompanyReview, ReviewComment
from bdseeker.models.user import Role
from bdseeker.repositories.companies import CompanyRepository
from bdseeker.schemas.common import Page, PageParams
from bdseeker.schemas.company import (
    CompanyCreate,
    CompanyDetailOut,
    CompanyOut,
    ContentCreate,
    RatingCreate,
    RatingOut,
    ReviewCommentOut,
    ReviewOut,
)

router = APIRouter()

# Reviews preloaded on the company detail page.
DETAIL_REVIEWS_LIMIT = 20


def _get_company(repo: CompanyRepository, company_id: int) -> CompanyProfile:
    company = repo.find_by_id(company_id)
    if not company:
        raise NotFoundError("Company not found")
    return company


@router.get("")
def list_companies(
    page: int | None = None,
    limit: int | None = None,
    location: str | None = None,
    db: Session = Depends(get_db),
):
    params = PageParams.normalize(page, limit)
    items, total = CompanyRepository(db).list(params.offset, params.limit, location=location)
    data = Page[CompanyOut].build([CompanyOut.model_validate(c) for c in items], total, params)
    return ok("Companies retrieved successfully", data)


@router.get("/{company_id}")
def get_company(company_id: int, db: Session = Depends(get_db)):
    repo = CompanyRepository(db)
    company = _get_company(repo, company_id)
    reviews, _total = repo.list_reviews(0, DETAIL_REVIEWS_LIMIT, company_id=company.id, approved=True)
    detail = CompanyDetailOut.model_validate(company).model_copy(
        update={
            "average_rating": repo.average_rating(company.id),
            "reviews": [ReviewOut.model_validate(r) for r in reviews],
        }
    )
    return ok("Company retrieved successfully", detail)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_company(
    payload: CompanyCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_roles(Role.COMPANY)),
):
    repo = CompanyRepository(db)
    if repo.find_by_user_id(identity.user_id):
        raise ConflictError("User already has a company profile")
    company = repo.create(
        CompanyProfile(
            user_id=identity.user_id,
            company_name=payload.company_name,
            description=payload.description,
            website=payload.website,
            location=payload.location,
        )
    )
    return ok("Company created successfully", CompanyOut.model_validate(company))


@router.post("/{company_id}/ratings", status_code=status.HTTP_201_CREATED)
def rate_company(
    company_id: int,
    payload: RatingCreate,
    response: Response,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Create the caller's rating, or update it in place if one exists."""
    repo = CompanyRepository(db)
    _get_company(repo, company_id)
    existing = repo.find_rating(identity.user_id, company_id)
    if existing:
        existing.rating = payload.rating
        rating = repo.save_rating(existing)
        response.status_code = status.HTTP_200_OK
        return ok("Rating updated successfully", RatingOut.model_validate(rating))
    rating = repo.save_rating(CompanyRating(company_id=company_id, user_id=identity.user_id, rating=payload.rating))
    return ok("Rating created successfully", RatingOut.model_validate(rating))


@router.post("/{company_id}/reviews", status_code=status.HTTP_201_CREATED)
def create_review(
    company_id: int,
    payload: ContentCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    repo = CompanyRepository(db)
    _get_company(repo, company_id)
    review = repo.create_review(
        CompanyReview(company_id=company_id, user_id=identity.user_id, content=payload.content, is_approved=False)
    )
    return ok("Review created successfully (pending approval)", ReviewOut.model_validate(review))


@router.get("/{company_id}/reviews")
def list_reviews(
    company_id: int,
    page: int | None = None,
    limit: int | None = None,
    db: Session = Depends(get_db),
):
    repo = CompanyRepository(db)
    _get_company(repo, company_id)
    params = PageParams.normalize(page, limit)
    items, total = repo.list_reviews(params.offset, params.limit, company_id=company_id, approved=True)
    data = Page[ReviewOut].build([ReviewOut.model_validate(r) for r in items], total, params)
    return ok("Reviews retrieved successfully", data)


@router.post("/reviews/{review_id}/comments", status_code=status.HTTP_201_CREATED)
def comment_on_review(
    review_id: int,
    payload: ContentCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    repo = CompanyRepository(db)
    review = repo.find_review(review_id)
    # Pending reviews are not public yet, so they cannot be commented on.
    if not review or not review.is_approved:
        raise NotFoundError("Review not found")
    comment = repo.create_comment(
        ReviewComment(review_id=review.id, user_id=identity.user_id, content=payload.content, is_approved=False)
    )
    return ok("Comment created successfully (pending approval)", ReviewCommentOut.model_validate(comment))


@router.get("/reviews/{review_id}/comments")
def list_review_comments(
    review_id: int,
    page: int | None = None,
    limit: int | None = None,
    db: Session = Depends(get_db),
):
    repo = CompanyRepository(db)
    review = repo.find_review(review_id)
    if not review or not review.is_approved:
        raise NotFoundError("Review not found")
    params = PageParams.normalize(page, limit)
    items, total = repo.list_comments(params.offset, params.limit, review_id=review.id, approved=True)
    data = Page[ReviewCommentOut].build([ReviewCommentOut.model_validate(c) for c in items], total, params)
    return ok("Comments retrieved successfully", data)
