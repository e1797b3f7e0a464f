"""Support ticket service — listing, edits, bulk status changes and counts."""

from typing import Optional, Any, Dict, List, Tuple

from sqlalchemy import update
from sqlalchemy.orm import Session

from admin_dashboard.core.exceptions import ResourceNotFoundError, ValidationError
from admin_dashboard.models.support_ticket import SupportTicket, TicketStatus, TicketPriority
from admin_dashboard.services.pagination import (
    apply_filters, coerce_enum, paginate_with_next_cursor, parse_limit,
)

EDITABLE_FIELDS = ("title", "status", "priority")


class SupportService:
    """Handles support ticket queries and mutations."""

    @staticmethod
    def list_tickets(
        db: Session,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[Any] = None,
    ) -> Tuple[List[SupportTicket], Optional[str]]:
        """Newest tickets first.

        Returns the page and ``next_cursor``: the id of the first ticket of
        the following page, or None when this page is the last one.
        """
        query = apply_filters(
            db.query(SupportTicket), SupportTicket,
            status=coerce_enum(TicketStatus, status),
            priority=coerce_enum(TicketPriority, priority),
        )
        return paginate_with_next_cursor(db, query, SupportTicket, cursor, parse_limit(limit))

    @staticmethod
    def get_ticket(db: Session, ticket_id: str) -> SupportTicket:
        ticket = db.query(SupportTicket).filter(SupportTicket.id == ticket_id).first()
        if not ticket:
            raise ResourceNotFoundError("Support ticket not found")
        return ticket

    @staticmethod
    def update_ticket(db: Session, ticket_id: str, updates: Dict[str, Any]) -> SupportTicket:
        """Apply a partial update of title/status/priority.

        Raises:
            ResourceNotFoundError: If the ticket does not exist.
            ValidationError: If no editable field is supplied.
        """
        changes = {
            k: v for k, v in updates.items()
            if k in EDITABLE_FIELDS and v is not None
        }
        if not changes:
            raise ValidationError("No fields to update")

        ticket = SupportService.get_ticket(db, ticket_id)
        for field, value in changes.items():
            setattr(ticket, field, value)
        db.commit()
        db.refresh(ticket)
        return ticket

    @staticmethod
    def bulk_update_status(db: Session, ticket_ids: List[str], status: TicketStatus) -> int:
        """Set ``status`` on every listed ticket in one statement; unknown ids
        are skipped. Returns the number of rows matched."""
        if not ticket_ids:
            return 0
        result = db.execute(
            update(SupportTicket)
            .where(SupportTicket.id.in_(ticket_ids))
            .values(status=status)
            .execution_options(synchronize_session=False)
        )
        db.commit()
        return result.rowcount

    @staticmethod
    def stats(db: Session) -> Dict[str, int]:
        return {
            "open": db.query(SupportTicket).filter(SupportTicket.status == TicketStatus.OPEN).count(),
            "resolved": db.query(SupportTicket).filter(SupportTicket.status == TicketStatus.RESOLVED).count(),
            "urgent": db.query(SupportTicket).filter(SupportTicket.priority == TicketPriority.URGENT).count(),
        }


support_service = SupportService()
