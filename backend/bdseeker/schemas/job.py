from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bdseeker.schemas.auth import UserOut


class JobCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    salary_min: float = Field(default=0, ge=0)
    salary_max: float = Field(default=0, ge=0)
    experience_min_years: int = Field(default=0, ge=0)
    experience_max_years: int = Field(default=0, ge=0)
    work_mode: Literal["office", "hybrid", "remote", "onsite", ""] = ""
    location: str = ""

    @model_validator(mode="after")
    def _ranges(self) -> "JobCreate":
        if self.salary_max and self.salary_min > self.salary_max:
            raise ValueError("salary_min must not exceed salary_max")
        if self.experience_max_years and self.experience_min_years > self.experience_max_years:
            raise ValueError("experience_min_years must not exceed experience_max_years")
        return self


class JobOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int | None
    title: str
    description: str
    salary_min: float
    salary_max: float
    experience_min_years: int
    experience_max_years: int
    work_mode: str
    location: str
    created_at: datetime | None = None


class JobCommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    job_post_id: int
    user_id: int
    content: str
    is_approved: bool
    created_at: datetime | None = None
    user: UserOut | None = None


class JobDetailOut(JobOut):
    comments: list[JobCommentOut] = []
