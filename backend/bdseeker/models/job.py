from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bdseeker.models.base import Base, SoftDeleteMixin, TimestampMixin
from bdseeker.models.company import CompanyProfile
from bdseeker.models.user import User

WORK_MODES = ("office", "hybrid", "remote", "onsite")


class JobPost(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "job_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Admin-created posts have no owning company.
    company_id: Mapped[Optional[int]] = mapped_column(ForeignKey("company_profiles.id"), nullable=True, index=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    salary_min: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    salary_max: Mapped[float] = mapped_column(Numeric(12, 2), default=0)
    experience_min_years: Mapped[int] = mapped_column(Integer, default=0)
    experience_max_years: Mapped[int] = mapped_column(Integer, default=0)
    work_mode: Mapped[str] = mapped_column(String(50), default="")  # office | hybrid | remote | onsite
    location: Mapped[str] = mapped_column(String(255), default="")

    company: Mapped[Optional[CompanyProfile]] = relationship(lazy="joined")


class JobComment(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "job_comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    job_post_id: Mapped[int] = mapped_column(ForeignKey("job_posts.id"), index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    content: Mapped[str] = mapped_column(Text)
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())

    user: Mapped[Optional[User]] = relationship(lazy="joined")
