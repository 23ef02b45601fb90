from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bdseeker.api.deps import get_db, require_roles
from bdseeker.api.responses import ok
from bdseeker.core.errors import ConflictError, NotFoundError
from bdseeker.core.permissions import Identity
from bdseeker.models.developer import DeveloperProfile
from bdseeker.models.user import Role
from bdseeker.repositories.developers import DeveloperRepository
from bdseeker.schemas.common import Page, PageParams
from bdseeker.schemas.developer import DeveloperCreate, DeveloperOut

router = APIRouter()


@router.get("")
def list_developers(page: int | None = None, limit: int | None = None, db: Session = Depends(get_db)):
    params = PageParams.normalize(page, limit)
    items, total = DeveloperRepository(db).list(params.offset, params.limit)
    data = Page[DeveloperOut].build([DeveloperOut.model_validate(d) for d in items], total, params)
    return ok("Developers retrieved successfully", data)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_developer(
    payload: DeveloperCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_roles(Role.DEVELOPER)),
):
    repo = DeveloperRepository(db)
    if repo.find_by_user_id(identity.user_id):
        raise ConflictError("User already has a developer profile")
    profile = repo.create(DeveloperProfile(user_id=identity.user_id, bio=payload.bio))
    return ok("Developer profile created successfully", DeveloperOut.model_validate(profile))


@router.get("/{developer_id}")
def get_developer(developer_id: int, db: Session = Depends(get_db)):
    profile = DeveloperRepository(db).find_by_id(developer_id)
    if not profile:
        raise NotFoundError("Developer not found")
    return ok("Developer retrieved successfully", DeveloperOut.model_validate(profile))
