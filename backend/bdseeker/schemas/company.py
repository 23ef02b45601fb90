from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bdseeker.schemas.auth import UserOut


class CompanyCreate(BaseModel):
    company_name: str = Field(min_length=1, max_length=255)
    description: str = ""
    website: str = ""
    location: str = ""


class CompanyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    company_name: str
    description: str
    website: str
    location: str
    created_at: datetime | None = None


class RatingCreate(BaseModel):
    rating: int = Field(ge=1, le=5)


class RatingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    user_id: int
    rating: int


class ContentCreate(BaseModel):
    content: str = Field(min_length=1)


class ReviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    user_id: int
    content: str
    is_approved: bool
    created_at: datetime | None = None
    user: UserOut | None = None


class ReviewCommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    review_id: int
    user_id: int
    content: str
    is_approved: bool
    created_at: datetime | None = None
    user: UserOut | None = None


class CompanyDetailOut(CompanyOut):
    average_rating: float = 0.0
    reviews: list[ReviewOut] = []
