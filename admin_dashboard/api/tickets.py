"""Support tickets API router — list, edit, bulk status change."""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.schemas import (
    TicketOut, TicketUpdate, TicketBulkUpdate, BulkUpdateResponse,
)
from admin_dashboard.services.support_service import support_service
from admin_dashboard.services.audit_service import audit_service
from admin_dashboard.models.activity_log import ActorType, EntityType
from admin_dashboard.core.security import require_admin

router = APIRouter(prefix="/tickets", tags=["tickets"], dependencies=[Depends(require_admin)])


@router.get("")
def list_tickets(
    status: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    cursor: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """List tickets, newest first, with the cursor of the next page."""
    tickets, next_cursor = support_service.list_tickets(db, status, priority, cursor, limit)
    return {
        "tickets": [TicketOut.model_validate(t) for t in tickets],
        "nextCursor": next_cursor,
    }


@router.get("/stats")
def ticket_stats(db: Session = Depends(get_db)):
    return {"stats": support_service.stats(db)}


@router.patch("/bulk")
def bulk_update_tickets(body: TicketBulkUpdate, db: Session = Depends(get_db)):
    """Set the same status on many tickets at once."""
    updated_count = support_service.bulk_update_status(db, body.ticket_ids, body.status)
    audit_service.try_log(
        db,
        actor_type=ActorType.ADMIN,
        action=f"Bulk updated {updated_count} tickets to status {body.status.value}",
        entity_type=EntityType.TICKET,
        metadata={
            "ticketIds": body.ticket_ids,
            "status": body.status.value,
            "count": updated_count,
        },
    )
    return BulkUpdateResponse(updated_count=updated_count)


@router.get("/{ticket_id}")
def get_ticket(ticket_id: str, db: Session = Depends(get_db)):
    return {"ticket": TicketOut.model_validate(support_service.get_ticket(db, ticket_id))}


@router.patch("/{ticket_id}")
def update_ticket(ticket_id: str, body: TicketUpdate, db: Session = Depends(get_db)):
    """Edit a ticket's title, status or priority."""
    updates = body.model_dump(exclude_unset=True, exclude_none=True)
    ticket = support_service.update_ticket(db, ticket_id, updates)
    out = TicketOut.model_validate(ticket)
    audit_service.try_log(
        db,
        actor_type=ActorType.ADMIN,
        action=f"Updated ticket: {', '.join(updates)}",
        entity_type=EntityType.TICKET,
        entity_id=out.id,
        metadata={"updates": body.model_dump(mode="json", exclude_unset=True, exclude_none=True)},
    )
    return {"ticket": out}
