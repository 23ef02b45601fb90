from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from bdseeker.api.deps import get_db
from bdseeker.api.responses import ok

router = APIRouter()


@router.get("/")
def health(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return ok("ok", {"status": "healthy"})
