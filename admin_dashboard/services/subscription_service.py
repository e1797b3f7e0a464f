"""Subscription service — read-only listing and counts."""

from typing import Optional, Any, Dict, List

from sqlalchemy.orm import Session

from admin_dashboard.core.exceptions import ResourceNotFoundError
from admin_dashboard.models.subscription import Subscription, SubscriptionStatus
from admin_dashboard.services.pagination import (
    apply_filters, coerce_enum, paginate_by_id, parse_limit,
)


class SubscriptionService:

    @staticmethod
    def list_subscriptions(
        db: Session,
        status: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[Any] = None,
    ) -> List[Subscription]:
        """Subscriptions in ascending id order after ``cursor``."""
        query = apply_filters(
            db.query(Subscription), Subscription,
            status=coerce_enum(SubscriptionStatus, status),
        )
        return paginate_by_id(query, Subscription, cursor, parse_limit(limit))

    @staticmethod
    def get_subscription(db: Session, subscription_id: str) -> Subscription:
        subscription = db.query(Subscription).filter(Subscription.id == subscription_id).first()
        if not subscription:
            raise ResourceNotFoundError("Subscription not found")
        return subscription

    @staticmethod
    def stats(db: Session) -> Dict[str, int]:
        def count(status: SubscriptionStatus) -> int:
            return db.query(Subscription).filter(Subscription.status == status).count()

        return {
            "active": count(SubscriptionStatus.ACTIVE),
            "canceled": count(SubscriptionStatus.CANCELED),
            "failed": count(SubscriptionStatus.FAILED),
        }


subscription_service = SubscriptionService()
