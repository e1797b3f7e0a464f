"""User model."""

import enum

from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship

from admin_dashboard.db.base import Base, Timestamp, new_id, utcnow


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class UserStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"


class User(Base):
    """End user of the product, managed from the dashboard."""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False, index=True)
    status = Column(Enum(UserStatus), default=UserStatus.ACTIVE, nullable=False, index=True)
    created_at = Column(Timestamp, default=utcnow, nullable=False, index=True)
    last_login = Column(Timestamp, nullable=True)

    subscriptions = relationship(
        "Subscription", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    support_tickets = relationship(
        "SupportTicket", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
    )
    activity_logs = relationship("ActivityLog", back_populates="user", passive_deletes=True)
