"""Seed demo users, subscriptions and support tickets."""

from collections import OrderedDict
from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, Optional

from faker import Faker
from sqlalchemy.orm import Session

from admin_dashboard.core.config import settings
from admin_dashboard.db.base import utcnow
from admin_dashboard.models.user import User, UserRole, UserStatus
from admin_dashboard.models.subscription import Subscription, SubscriptionStatus
from admin_dashboard.models.support_ticket import SupportTicket, TicketStatus, TicketPriority

ADMIN_COUNT = 5

SUBSCRIPTION_PLANS = [
    ("Basic", 9.99),
    ("Pro", 19.99),
    ("Premium", 39.99),
    ("Enterprise", 99.99),
]

TICKET_TITLES = [
    "Login Issues",
    "Payment Problem",
    "Feature Request",
    "Bug Report",
    "Account Suspension Appeal",
    "Billing Question",
    "Technical Support",
    "Password Reset Help",
    "Data Export Request",
    "Account Deletion Request",
]

USER_STATUS_WEIGHTS = OrderedDict([
    (UserStatus.ACTIVE, 0.9),
    (UserStatus.SUSPENDED, 0.1),
])
SUBSCRIPTION_STATUS_WEIGHTS = OrderedDict([
    (SubscriptionStatus.ACTIVE, 0.85),
    (SubscriptionStatus.CANCELED, 0.10),
    (SubscriptionStatus.FAILED, 0.05),
])
TICKET_STATUS_WEIGHTS = OrderedDict([
    (TicketStatus.OPEN, 0.3),
    (TicketStatus.RESOLVED, 0.7),
])
TICKET_PRIORITY_WEIGHTS = OrderedDict([
    (TicketPriority.LOW, 0.4),
    (TicketPriority.MEDIUM, 0.4),
    (TicketPriority.HIGH, 0.15),
    (TicketPriority.URGENT, 0.05),
])


@dataclass
class SeedState:
    """Tracks whether seeding already ran (or is running) for a database."""
    running: bool = False
    done: bool = False

    def reset(self) -> None:
        self.running = False
        self.done = False


def make_faker(seed: Optional[int] = None) -> Faker:
    """Faker instance, reproducible when ``seed`` is given."""
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def seed_demo_data(
    db: Session,
    state: SeedState,
    fake: Optional[Faker] = None,
    user_count: Optional[int] = None,
) -> Optional[Dict[str, int]]:
    """Replace users, subscriptions and tickets with random demo records.

    Runs at most once per ``state``; later calls return None. Activity logs
    are kept.
    """
    if state.running or state.done:
        print("ℹ️  Seed already running or completed, skipping.")
        return None

    state.running = True
    fake = fake or make_faker()
    user_count = settings.SEED_USER_COUNT if user_count is None else user_count
    # whole seconds, so generated children never land before their parent
    now = utcnow().replace(microsecond=0)

    try:
        db.query(SupportTicket).delete(synchronize_session=False)
        db.query(Subscription).delete(synchronize_session=False)
        db.query(User).delete(synchronize_session=False)
        db.flush()

        users = []
        for i in range(user_count):
            created_at = fake.date_time_between(
                start_date=now - timedelta(days=365), end_date=now - timedelta(days=30),
            ).replace(microsecond=0)
            last_login = None
            if fake.boolean(chance_of_getting_true=80):
                last_login = fake.date_time_between(start_date=created_at, end_date=now)
            users.append(User(
                email=fake.unique.email(),
                role=UserRole.ADMIN if i < ADMIN_COUNT else UserRole.USER,
                status=fake.random_element(USER_STATUS_WEIGHTS),
                created_at=created_at,
                last_login=last_login,
            ))
        db.add_all(users)
        db.flush()

        subscription_count = 0
        for user in users:
            if fake.boolean(chance_of_getting_true=70):
                plan, price = fake.random_element(SUBSCRIPTION_PLANS)
                db.add(Subscription(
                    user_id=user.id,
                    plan=plan,
                    price=price,
                    status=fake.random_element(SUBSCRIPTION_STATUS_WEIGHTS),
                    created_at=fake.date_time_between(start_date=user.created_at, end_date=now),
                ))
                subscription_count += 1

        ticket_count = 0
        for user in users:
            if fake.boolean(chance_of_getting_true=30):
                db.add(SupportTicket(
                    user_id=user.id,
                    title=fake.random_element(TICKET_TITLES),
                    status=fake.random_element(TICKET_STATUS_WEIGHTS),
                    priority=fake.random_element(TICKET_PRIORITY_WEIGHTS),
                    created_at=fake.date_time_between(
                        start_date=max(user.created_at, now - timedelta(days=90)), end_date=now,
                    ),
                ))
                ticket_count += 1

        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        state.running = False

    state.done = True
    print(
        f"✅ Seeded {len(users)} users, {subscription_count} subscriptions, "
        f"{ticket_count} support tickets"
    )
    return {
        "users": len(users),
        "subscriptions": subscription_count,
        "tickets": ticket_count,
    }
