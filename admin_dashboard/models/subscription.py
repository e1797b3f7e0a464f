"""Subscription model."""

import enum

from sqlalchemy import Column, String, Numeric, Enum, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from admin_dashboard.db.base import Base, Timestamp, new_id, utcnow


class SubscriptionStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"
    FAILED = "FAILED"


class Subscription(Base):
    """A user's paid plan."""
    __tablename__ = "subscriptions"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_subscriptions_price"),)

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    plan = Column(String(100), nullable=False)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    status = Column(Enum(SubscriptionStatus), default=SubscriptionStatus.ACTIVE, nullable=False, index=True)
    created_at = Column(Timestamp, default=utcnow, nullable=False)

    user = relationship("User", back_populates="subscriptions")
