import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bdseeker.models.base import Base, SoftDeleteMixin, TimestampMixin


class Role(str, enum.Enum):
    DEVELOPER = "developer"
    COMPANY = "company"
    ADMIN = "admin"


class User(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    # Stored and compared exactly as submitted (no case folding).
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    full_name: Mapped[str] = mapped_column(String(255), default="")
    password_hash: Mapped[str] = mapped_column(String(255))
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", values_callable=lambda e: [m.value for m in e], native_enum=False, length=50),
        default=Role.DEVELOPER,
    )
