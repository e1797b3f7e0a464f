"""Subscription listing (ascending id cursor) and counts."""

import uuid

from admin_dashboard.models import SubscriptionStatus

from conftest import make_user, make_subscription


def _ids(res):
    return [s["id"] for s in res.json()["subscriptions"]]


def test_pages_follow_ascending_ids(client, db, admin_headers):
    user = make_user(db)
    subs = [make_subscription(db, user) for _ in range(8)]
    expected = sorted(s.id for s in subs)

    first = _ids(client.get("/subscriptions?limit=3", headers=admin_headers))
    second = _ids(client.get(f"/subscriptions?limit=3&cursor={first[-1]}", headers=admin_headers))
    third = _ids(client.get(f"/subscriptions?limit=3&cursor={second[-1]}", headers=admin_headers))

    assert first + second + third == expected
    assert not set(first) & set(second)
    assert len(third) == 2


def test_status_filter_and_leniency(client, db, admin_headers):
    user = make_user(db)
    make_subscription(db, user, status=SubscriptionStatus.ACTIVE)
    make_subscription(db, user, status=SubscriptionStatus.CANCELED)
    make_subscription(db, user, status=SubscriptionStatus.FAILED)

    canceled = client.get("/subscriptions?status=CANCELED", headers=admin_headers).json()
    assert [s["status"] for s in canceled["subscriptions"]] == ["CANCELED"]

    everything = _ids(client.get("/subscriptions", headers=admin_headers))
    lenient = _ids(client.get("/subscriptions?status=canceled", headers=admin_headers))
    assert lenient == everything
    assert len(everything) == 3


def test_get_subscription(client, db, admin_headers):
    user = make_user(db)
    sub = make_subscription(db, user, plan="Enterprise", price=99.99)

    body = client.get(f"/subscriptions/{sub.id}", headers=admin_headers).json()["subscription"]
    assert body["plan"] == "Enterprise"
    assert body["price"] == 99.99
    assert body["userId"] == user.id

    res = client.get(f"/subscriptions/{uuid.uuid4()}", headers=admin_headers)
    assert res.status_code == 404


def test_subscription_stats(client, db, admin_headers):
    user = make_user(db)
    make_subscription(db, user, status=SubscriptionStatus.ACTIVE)
    make_subscription(db, user, status=SubscriptionStatus.ACTIVE)
    make_subscription(db, user, status=SubscriptionStatus.FAILED)

    res = client.get("/subscriptions/stats", headers=admin_headers)
    assert res.json() == {"stats": {"active": 2, "canceled": 0, "failed": 1}}
