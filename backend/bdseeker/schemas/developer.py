from datetime import datetime

from pydantic import BaseModel, ConfigDict

from bdseeker.schemas.auth import UserOut


class DeveloperCreate(BaseModel):
    bio: str = ""


class DeveloperOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    bio: str
    created_at: datetime | None = None
    user: UserOut | None = None
