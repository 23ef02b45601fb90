from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from bdseeker.models.report import ReportStatus
from bdseeker.schemas.auth import UserOut


class ReportCreate(BaseModel):
    reported_id: int = Field(ge=1)
    report_type: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1)


class ReportStatusUpdate(BaseModel):
    status: Literal["reviewed", "resolved", "dismissed"]


class ReportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    reporter_id: int
    reported_id: int
    report_type: str
    description: str
    status: ReportStatus
    reviewed_by: int | None = None
    reviewed_at: datetime | None = None
    created_at: datetime | None = None
    reporter: UserOut | None = None
    reported: UserOut | None = None
    reviewer: UserOut | None = None
