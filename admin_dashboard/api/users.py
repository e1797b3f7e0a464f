"""Users API router — list, inspect and change account status."""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.schemas import (
    UserOut, UserStatusUpdate, UserBulkUpdate, BulkUpdateResponse,
)
from admin_dashboard.services.user_service import user_service
from admin_dashboard.services.audit_service import audit_service
from admin_dashboard.models.activity_log import ActorType, EntityType
from admin_dashboard.core.security import require_admin

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_admin)])


@router.get("")
def list_users(
    status: Optional[str] = Query(None),
    role: Optional[str] = Query(None),
    cursor: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """List users, newest first."""
    users = user_service.list_users(db, status, role, cursor, limit)
    return {"users": [UserOut.model_validate(u) for u in users]}


@router.get("/stats")
def user_stats(db: Session = Depends(get_db)):
    return {"stats": user_service.stats(db)}


@router.patch("/bulk")
def bulk_update_users(body: UserBulkUpdate, db: Session = Depends(get_db)):
    """Set the same status on many users at once."""
    updated_count = user_service.bulk_update_status(db, body.user_ids, body.status)
    audit_service.try_log(
        db,
        actor_type=ActorType.ADMIN,
        action=f"Bulk updated {updated_count} users to status {body.status.value}",
        entity_type=EntityType.USER,
        metadata={
            "userIds": body.user_ids,
            "status": body.status.value,
            "count": updated_count,
        },
    )
    return BulkUpdateResponse(updated_count=updated_count)


@router.get("/{user_id}")
def get_user(user_id: str, db: Session = Depends(get_db)):
    return {"user": UserOut.model_validate(user_service.get_user(db, user_id))}


@router.patch("/{user_id}")
def update_user(user_id: str, body: UserStatusUpdate, db: Session = Depends(get_db)):
    """Change one user's status."""
    user = user_service.update_status(db, user_id, body.status)
    out = UserOut.model_validate(user)
    audit_service.try_log(
        db,
        actor_type=ActorType.ADMIN,
        action="Updated user: status",
        entity_type=EntityType.USER,
        entity_id=out.id,
        metadata={"updates": {"status": body.status.value}},
        user_id=out.id,
    )
    return {"user": out}
