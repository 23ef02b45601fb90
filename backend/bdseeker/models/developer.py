from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bdseeker.models.base import Base, SoftDeleteMixin, TimestampMixin
from bdseeker.models.user import User


class DeveloperProfile(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "developer_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), unique=True, index=True)
    bio: Mapped[str] = mapped_column(Text, default="")

    user: Mapped[User] = relationship(lazy="joined")
