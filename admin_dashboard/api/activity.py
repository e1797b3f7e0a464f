"""Activity log API router (read-only)."""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.schemas import ActivityLogOut
from admin_dashboard.services.audit_service import audit_service
from admin_dashboard.core.security import require_admin

router = APIRouter(prefix="/activity", tags=["activity"], dependencies=[Depends(require_admin)])


@router.get("")
def list_activity_logs(
    actor_type: Optional[str] = Query(None, alias="actorType"),
    entity_type: Optional[str] = Query(None, alias="entityType"),
    cursor: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Query activity logs, newest first."""
    logs = audit_service.list_logs(db, actor_type, entity_type, cursor, limit)
    return {"logs": [ActivityLogOut.model_validate(log) for log in logs]}


@router.get("/stats")
def activity_stats(db: Session = Depends(get_db)):
    """Entries written in the last 24 hours."""
    return {"stats": audit_service.stats(db)}


@router.get("/{log_id}")
def get_activity_log(log_id: str, db: Session = Depends(get_db)):
    return {"log": ActivityLogOut.model_validate(audit_service.get_log(db, log_id))}
