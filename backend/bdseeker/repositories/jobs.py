from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from bdseeker.models.job import JobComment, JobPost


class JobRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, job: JobPost) -> JobPost:
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        return job

    def find_by_id(self, job_id: int) -> Optional[JobPost]:
        return self.db.query(JobPost).filter(JobPost.id == job_id, JobPost.deleted_at.is_(None)).first()

    def list(
        self,
        offset: int,
        limit: int,
        work_mode: Optional[str] = None,
        location: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[JobPost], int]:
        q = self.db.query(JobPost).filter(JobPost.deleted_at.is_(None))
        if work_mode:
            q = q.filter(JobPost.work_mode == work_mode)
        if location:
            q = q.filter(JobPost.location.ilike(f"%{location.strip()}%"))
        if search:
            s = f"%{search.strip()}%"
            q = q.filter(or_(JobPost.title.ilike(s), JobPost.description.ilike(s)))
        total = q.count()
        items = q.order_by(JobPost.created_at.desc(), JobPost.id.desc()).offset(offset).limit(limit).all()
        return items, total

    def count(self) -> int:
        return self.db.query(func.count(JobPost.id)).filter(JobPost.deleted_at.is_(None)).scalar() or 0

    # Comments

    def create_comment(self, comment: JobComment) -> JobComment:
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment

    def find_comment(self, comment_id: int) -> Optional[JobComment]:
        return self.db.query(JobComment).filter(JobComment.id == comment_id, JobComment.deleted_at.is_(None)).first()

    def list_comments(
        self, offset: int, limit: int, job_post_id: Optional[int] = None, approved: Optional[bool] = True
    ) -> Tuple[List[JobComment], int]:
        q = self.db.query(JobComment).filter(JobComment.deleted_at.is_(None))
        if job_post_id is not None:
            q = q.filter(JobComment.job_post_id == job_post_id)
        if approved is not None:
            q = q.filter(JobComment.is_approved == approved)
        total = q.count()
        items = q.order_by(JobComment.created_at.asc(), JobComment.id.asc()).offset(offset).limit(limit).all()
        return items, total

    def count_comments(self, approved: bool) -> int:
        return (
            self.db.query(func.count(JobComment.id))
            .filter(JobComment.deleted_at.is_(None), JobComment.is_approved == approved)
            .scalar()
            or 0
        )
