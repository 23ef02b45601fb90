from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bdseeker.core.errors import ConflictError
from bdseeker.models.user import Role, User


class UserRepository:
    """Credential store: user rows over an open Session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, user: User) -> User:
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email.
            self.db.rollback()
            raise ConflictError("user with this email already exists") from e
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str, include_deleted: bool = False) -> Optional[User]:
        q = self.db.query(User).filter(User.email == email)
        if not include_deleted:
            q = q.filter(User.deleted_at.is_(None))
        return q.first()

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id, User.deleted_at.is_(None)).first()

    def list(self, offset: int, limit: int, role: Optional[Role] = None) -> Tuple[List[User], int]:
        q = self.db.query(User).filter(User.deleted_at.is_(None))
        if role is not None:
            q = q.filter(User.role == role)
        total = q.count()
        users = q.order_by(User.id.asc()).offset(offset).limit(limit).all()
        return users, total

    def soft_delete(self, user: User) -> None:
        user.soft_delete()
        self.db.commit()

    def count(self) -> int:
        return self.db.query(func.count(User.id)).filter(User.deleted_at.is_(None)).scalar() or 0
