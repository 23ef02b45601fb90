from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from bdseeker.models.company import CompanyProfile, CompanyRating, CompanyReview, ReviewComment


class CompanyRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, company: CompanyProfile) -> CompanyProfile:
        self.db.add(company)
        self.db.commit()
        self.db.refresh(company)
        return company

    def find_by_id(self, company_id: int) -> Optional[CompanyProfile]:
        return (
            self.db.query(CompanyProfile)
            .filter(CompanyProfile.id == company_id, CompanyProfile.deleted_at.is_(None))
            .first()
        )

    def find_by_user_id(self, user_id: int) -> Optional[CompanyProfile]:
        return (
            self.db.query(CompanyProfile)
            .filter(CompanyProfile.user_id == user_id, CompanyProfile.deleted_at.is_(None))
            .first()
        )

    def list(self, offset: int, limit: int, location: Optional[str] = None) -> Tuple[List[CompanyProfile], int]:
        q = self.db.query(CompanyProfile).filter(CompanyProfile.deleted_at.is_(None))
        if location:
            q = q.filter(CompanyProfile.location.ilike(f"%{location.strip()}%"))
        total = q.count()
        items = q.order_by(CompanyProfile.id.asc()).offset(offset).limit(limit).all()
        return items, total

    def count(self) -> int:
        return self.db.query(func.count(CompanyProfile.id)).filter(CompanyProfile.deleted_at.is_(None)).scalar() or 0

    # Ratings

    def find_rating(self, user_id: int, company_id: int) -> Optional[CompanyRating]:
        return (
            self.db.query(CompanyRating)
            .filter(CompanyRating.user_id == user_id, CompanyRating.company_id == company_id)
            .first()
        )

    def save_rating(self, rating: CompanyRating) -> CompanyRating:
        self.db.add(rating)
        self.db.commit()
        self.db.refresh(rating)
        return rating

    def average_rating(self, company_id: int) -> float:
        avg = (
            self.db.query(func.coalesce(func.avg(CompanyRating.rating), 0))
            .filter(CompanyRating.company_id == company_id)
            .scalar()
        )
        return float(avg or 0)

    # Reviews

    def create_review(self, review: CompanyReview) -> CompanyReview:
        self.db.add(review)
        self.db.commit()
        self.db.refresh(review)
        return review

    def find_review(self, review_id: int) -> Optional[CompanyReview]:
        return (
            self.db.query(CompanyReview)
            .filter(CompanyReview.id == review_id, CompanyReview.deleted_at.is_(None))
            .first()
        )

    def list_reviews(
        self, offset: int, limit: int, company_id: Optional[int] = None, approved: Optional[bool] = True
    ) -> Tuple[List[CompanyReview], int]:
        """Live reviews, filtered on approval state; ``approved=None`` means any."""
        q = self.db.query(CompanyReview).filter(CompanyReview.deleted_at.is_(None))
        if company_id is not None:
            q = q.filter(CompanyReview.company_id == company_id)
        if approved is not None:
            q = q.filter(CompanyReview.is_approved == approved)
        total = q.count()
        items = q.order_by(CompanyReview.created_at.desc(), CompanyReview.id.desc()).offset(offset).limit(limit).all()
        return items, total

    def count_reviews(self, approved: bool) -> int:
        return (
            self.db.query(func.count(CompanyReview.id))
            .filter(CompanyReview.deleted_at.is_(None), CompanyReview.is_approved == approved)
            .scalar()
            or 0
        )

    # Review comments

    def create_comment(self, comment: ReviewComment) -> ReviewComment:
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def find_comment(self, comment_id: int) -> Optional[ReviewComment]:
        return (
            self.db.query(ReviewComment)
            .filter(ReviewComment.id == comment_id, ReviewComment.deleted_at.is_(None))
            .first()
        )

    def list_comments(
        self, offset: int, limit: int, review_id: Optional[int] = None, approved: Optional[bool] = True
    ) -> Tuple[List[ReviewComment], int]:
        q = self.db.query(ReviewComment).filter(ReviewComment.deleted_at.is_(None))
        if review_id is not None:
            q = q.filter(ReviewComment.review_id == review_id)
        if approved is not None:
            q = q.filter(ReviewComment.is_approved == approved)
        total = q.count()
        items = q.order_by(ReviewComment.created_at.asc(), ReviewComment.id.asc()).offset(offset).limit(limit).all()
        return items, total

    def count_comments(self, approved: bool) -> int:
        return (
            self.db.query(func.count(ReviewComment.id))
            .filter(ReviewComment.deleted_at.is_(None), ReviewComment.is_approved == approved)
            .scalar()
            or 0
        )
