from fastapi import APIRouter, Depends, status

from bdseeker.api.deps import get_current_identity, get_moderation_service
from bdseeker.api.responses import ok
from bdseeker.core.permissions import Identity
from bdseeker.schemas.report import ReportCreate, ReportOut
from bdseeker.services.moderation import ModerationService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_report(
    payload: ReportCreate,
    identity: Identity = Depends(get_current_identity),
    service: ModerationService = Depends(get_moderation_service),
):
    report = service.create_report(identity, payload.reported_id, payload.report_type, payload.description)
    return ok("Report submitted successfully", ReportOut.model_validate(report))
