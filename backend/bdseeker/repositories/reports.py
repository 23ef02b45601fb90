from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from bdseeker.models.report import ReportStatus, UserReport


class ReportRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, report: UserReport) -> UserReport:
        self.db.add(report)
        self.db.commit()
        self.db.refresh(report)
        return report

    def find_by_id(self, report_id: int) -> Optional[UserReport]:
        return self.db.query(UserReport).filter(UserReport.id == report_id, UserReport.deleted_at.is_(None)).first()

    def update(self, report: UserReport) -> UserReport:
        self.db.add(report)
        self.db.commit()
        self.db.refresh(report)
        return report

    def list(
        self,
        offset: int,
        limit: int,
        status: Optional[ReportStatus] = None,
        report_type: Optional[str] = None,
    ) -> Tuple[List[UserReport], int]:
        q = self.db.query(UserReport).filter(UserReport.deleted_at.is_(None))
        if status is not None:
            q = q.filter(UserReport.status == status)
        if report_type:
            q = q.filter(UserReport.report_type == report_type)
        total = q.count()
        items = q.order_by(UserReport.created_at.desc(), UserReport.id.desc()).offset(offset).limit(limit).all()
        return items, total

    def count(self) -> int:
        return self.db.query(func.count(UserReport.id)).filter(UserReport.deleted_at.is_(None)).scalar() or 0
