from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from bdseeker.models.developer import DeveloperProfile


class DeveloperRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, profile: DeveloperProfile) -> DeveloperProfile:
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def find_by_id(self, profile_id: int) -> Optional[DeveloperProfile]:
        return (
            self.db.query(DeveloperProfile)
            .filter(DeveloperProfile.id == profile_id, DeveloperProfile.deleted_at.is_(None))
            .first()
        )

    def find_by_user_id(self, user_id: int) -> Optional[DeveloperProfile]:
        return (
            self.db.query(DeveloperProfile)
            .filter(DeveloperProfile.user_id == user_id, DeveloperProfile.deleted_at.is_(None))
            .first()
        )

    def list(self, offset: int, limit: int) -> Tuple[List[DeveloperProfile], int]:
        q = self.db.query(DeveloperProfile).filter(DeveloperProfile.deleted_at.is_(None))
        total = q.count()
        items = q.order_by(DeveloperProfile.created_at.desc(), DeveloperProfile.id.desc()).offset(offset).limit(limit).all()
        return items, total

    def count(self) -> int:
        return self.db.query(func.count(DeveloperProfile.id)).filter(DeveloperProfile.deleted_at.is_(None)).scalar() or 0
