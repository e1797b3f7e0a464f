"""Subscriptions API router (read-only)."""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.schemas import SubscriptionOut
from admin_dashboard.services.subscription_service import subscription_service
from admin_dashboard.core.security import require_admin

router = APIRouter(
    prefix="/subscriptions", tags=["subscriptions"], dependencies=[Depends(require_admin)],
)


@router.get("")
def list_subscriptions(
    status: Optional[str] = Query(None),
    cursor: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """List subscriptions in id order."""
    subscriptions = subscription_service.list_subscriptions(db, status, cursor, limit)
    return {"subscriptions": [SubscriptionOut.model_validate(s) for s in subscriptions]}


@router.get("/stats")
def subscription_stats(db: Session = Depends(get_db)):
    return {"stats": subscription_service.stats(db)}


@router.get("/{subscription_id}")
def get_subscription(subscription_id: str, db: Session = Depends(get_db)):
    subscription = subscription_service.get_subscription(db, subscription_id)
    return {"subscription": SubscriptionOut.model_validate(subscription)}
