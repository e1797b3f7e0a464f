"""Shared fixtures: in-memory SQLite database, API client, record factories."""

import os
from datetime import datetime, timedelta

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_PASSWORD"] = "test-admin-password"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient

from admin_dashboard.core.rate_limiter import limiter
from admin_dashboard.core.security import create_admin_token
from admin_dashboard.db.base import Base
from admin_dashboard.db.session import SessionLocal, engine
from admin_dashboard.main import app
from admin_dashboard.models import (
    ActivityLog, Subscription, SupportTicket, User,
    UserRole, UserStatus, SubscriptionStatus, TicketStatus, TicketPriority,
)

ADMIN_PASSWORD = "test-admin-password"
BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_admin_token()}"}


_counter = {"n": 0}


def _next() -> int:
    _counter["n"] += 1
    return _counter["n"]


def make_user(db, created_at=None, **fields) -> User:
    n = _next()
    user = User(
        email=fields.pop("email", f"user{n}@example.com"),
        role=fields.pop("role", UserRole.USER),
        status=fields.pop("status", UserStatus.ACTIVE),
        created_at=created_at or BASE_TIME + timedelta(minutes=n),
        **fields,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_subscription(db, user, **fields) -> Subscription:
    subscription = Subscription(
        user_id=user.id,
        plan=fields.pop("plan", "Pro"),
        price=fields.pop("price", 19.99),
        status=fields.pop("status", SubscriptionStatus.ACTIVE),
        created_at=fields.pop("created_at", user.created_at + timedelta(days=1)),
        **fields,
    )
    db.add(subscription)
    db.commit()
    db.refresh(subscription)
    return subscription


def make_ticket(db, user, created_at=None, **fields) -> SupportTicket:
    n = _next()
    ticket = SupportTicket(
        user_id=user.id,
        title=fields.pop("title", f"Ticket {n}"),
        status=fields.pop("status", TicketStatus.OPEN),
        priority=fields.pop("priority", TicketPriority.MEDIUM),
        created_at=created_at or BASE_TIME + timedelta(minutes=n),
        **fields,
    )
    db.add(ticket)
    db.commit()
    db.refresh(ticket)
    return ticket


def activity_rows(db):
    """All activity logs, oldest first, read fresh from the database."""
    db.expire_all()
    return db.query(ActivityLog).order_by(ActivityLog.created_at.asc()).all()
