"""Audit service — append-only activity trail for administrative actions."""

import logging
from datetime import timedelta
from typing import Optional, Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from admin_dashboard.core.exceptions import ResourceNotFoundError
from admin_dashboard.db.base import utcnow
from admin_dashboard.models.activity_log import ActivityLog, ActorType, EntityType
from admin_dashboard.services.pagination import (
    apply_filters, coerce_enum, paginate_by_recency, parse_limit,
)

logger = logging.getLogger("admin_dashboard")


class AuditService:
    """Records immutable activity log entries and serves them back."""

    @staticmethod
    def log(
        db: Session,
        actor_type: ActorType,
        action: str,
        entity_type: EntityType,
        entity_id: Optional[str] = None,
        actor_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None,
    ) -> ActivityLog:
        """Write a single activity log record.

        Args:
            action: free text, e.g. "Updated ticket: status, priority"
            metadata: arbitrary JSON payload stored as-is

        This method commits immediately; ``created_at`` is stamped here.
        """
        entry = ActivityLog(
            actor_type=actor_type,
            actor_id=actor_id,
            action=action,
            entity_type=entity_type,
            entity_id=str(entity_id) if entity_id else None,
            meta=metadata,
            user_id=user_id,
            created_at=utcnow(),
        )
        db.add(entry)
        db.commit()
        return entry

    @staticmethod
    def try_log(db: Session, *args, **kwargs) -> Optional[ActivityLog]:
        """Best-effort ``log``: a failed write is rolled back and reported to
        the operational log, never to the caller."""
        try:
            return AuditService.log(db, *args, **kwargs)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to write activity log (action=%r)", kwargs.get("action"))
            return None

    @staticmethod
    def list_logs(
        db: Session,
        actor_type: Optional[str] = None,
        entity_type: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[Any] = None,
    ):
        """Newest-first logs; cursor is the id of the last log already seen."""
        query = apply_filters(
            db.query(ActivityLog), ActivityLog,
            actor_type=coerce_enum(ActorType, actor_type),
            entity_type=coerce_enum(EntityType, entity_type),
        )
        return paginate_by_recency(db, query, ActivityLog, cursor, parse_limit(limit))

    @staticmethod
    def get_log(db: Session, log_id: str) -> ActivityLog:
        entry = db.query(ActivityLog).filter(ActivityLog.id == log_id).first()
        if not entry:
            raise ResourceNotFoundError("Activity log not found")
        return entry

    @staticmethod
    def stats(db: Session) -> Dict[str, int]:
        """Number of entries written in the trailing 24 hours."""
        since = utcnow() - timedelta(hours=24)
        return {
            "last24h": db.query(ActivityLog).filter(ActivityLog.created_at >= since).count(),
        }


audit_service = AuditService()
