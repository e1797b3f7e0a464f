"""Support ticket model."""

import enum

from sqlalchemy import Column, String, Enum, ForeignKey
from sqlalchemy.orm import relationship

from admin_dashboard.db.base import Base, Timestamp, new_id, utcnow


class TicketStatus(str, enum.Enum):
    OPEN = "OPEN"
    RESOLVED = "RESOLVED"


class TicketPriority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class SupportTicket(Base):
    __tablename__ = "support_tickets"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    status = Column(Enum(TicketStatus), default=TicketStatus.OPEN, nullable=False, index=True)
    priority = Column(Enum(TicketPriority), default=TicketPriority.MEDIUM, nullable=False, index=True)
    created_at = Column(Timestamp, default=utcnow, nullable=False, index=True)

    user = relationship("User", back_populates="support_tickets")
