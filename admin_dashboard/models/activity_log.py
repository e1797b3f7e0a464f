"""Activity log model — append-only."""

import enum

from sqlalchemy import Column, String, Text, Enum, ForeignKey, JSON
from sqlalchemy.orm import relationship

from admin_dashboard.db.base import Base, Timestamp, new_id, utcnow


class ActorType(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"
    SYSTEM = "SYSTEM"


class EntityType(str, enum.Enum):
    USER = "USER"
    SUBSCRIPTION = "SUBSCRIPTION"
    TICKET = "TICKET"
    SYSTEM = "SYSTEM"


class ActivityLog(Base):
    """Immutable trail of who did what to which entity.

    This table is APPEND-ONLY: application code never updates or deletes
    rows. ``actor_id`` is a loose reference with no foreign key, while
    ``user_id`` optionally links the row to a user for queries.
    """
    __tablename__ = "activity_logs"

    id = Column(String(36), primary_key=True, default=new_id)
    actor_type = Column(Enum(ActorType), default=ActorType.USER, nullable=False, index=True)
    actor_id = Column(String(36), nullable=True)
    action = Column(Text, nullable=False)
    entity_type = Column(Enum(EntityType), nullable=False, index=True)
    entity_id = Column(String(36), nullable=True)
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(Timestamp, default=utcnow, nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    user = relationship("User", back_populates="activity_logs")
