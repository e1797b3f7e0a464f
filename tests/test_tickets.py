"""Support ticket listing, pagination, edits and bulk updates."""

import uuid

from admin_dashboard.models import (
    ActivityLog, SupportTicket, EntityType, ActorType, TicketStatus, TicketPriority,
)

from conftest import make_user, make_ticket, activity_rows


def _ids(res):
    return [t["id"] for t in res.json()["tickets"]]


def test_twelve_tickets_paginate_five_five_two(client, db, admin_headers):
    user = make_user(db)
    tickets = [make_ticket(db, user) for _ in range(12)]
    newest_first = [t.id for t in reversed(tickets)]

    pages = []
    cursor = None
    for _ in range(3):
        params = {"limit": 5}
        if cursor:
            params["cursor"] = cursor
        res = client.get("/tickets", params=params, headers=admin_headers)
        assert res.status_code == 200
        pages.append(_ids(res))
        cursor = res.json()["nextCursor"]

    assert [len(p) for p in pages] == [5, 5, 2]
    assert cursor is None
    flat = [i for page in pages for i in page]
    assert len(set(flat)) == 12
    assert flat == newest_first


def test_next_cursor_is_first_ticket_of_next_page(client, db, admin_headers):
    user = make_user(db)
    tickets = [make_ticket(db, user) for _ in range(4)]

    res = client.get("/tickets?limit=3", headers=admin_headers)
    assert res.json()["nextCursor"] == tickets[0].id

    res = client.get("/tickets?limit=4", headers=admin_headers)
    assert res.json()["nextCursor"] is None


def test_filters_are_conjunctive(client, db, admin_headers):
    user = make_user(db)
    make_ticket(db, user, status=TicketStatus.OPEN, priority=TicketPriority.URGENT)
    make_ticket(db, user, status=TicketStatus.OPEN, priority=TicketPriority.LOW)
    make_ticket(db, user, status=TicketStatus.RESOLVED, priority=TicketPriority.URGENT)

    res = client.get("/tickets?status=OPEN&priority=URGENT", headers=admin_headers)
    tickets = res.json()["tickets"]
    assert len(tickets) == 1
    assert tickets[0]["status"] == "OPEN"
    assert tickets[0]["priority"] == "URGENT"


def test_invalid_filter_values_are_ignored(client, db, admin_headers):
    user = make_user(db)
    make_ticket(db, user, status=TicketStatus.OPEN)
    make_ticket(db, user, status=TicketStatus.RESOLVED)

    unfiltered = _ids(client.get("/tickets", headers=admin_headers))
    garbage = _ids(client.get("/tickets?status=NONEXISTENT&priority=open", headers=admin_headers))
    assert garbage == unfiltered
    assert len(garbage) == 2


def test_malformed_limit_falls_back_to_default(client, db, admin_headers):
    user = make_user(db)
    for _ in range(12):
        make_ticket(db, user)

    for raw in ("abc", "0", "-3"):
        res = client.get(f"/tickets?limit={raw}", headers=admin_headers)
        assert res.status_code == 200
        assert len(res.json()["tickets"]) == 10


def test_limit_reads_leading_integer(client, db, admin_headers):
    user = make_user(db)
    for _ in range(8):
        make_ticket(db, user)

    assert len(client.get("/tickets?limit=5abc", headers=admin_headers).json()["tickets"]) == 5
    assert len(client.get("/tickets?limit=2.5", headers=admin_headers).json()["tickets"]) == 2


def test_ticket_fields_are_camel_case(client, db, admin_headers):
    user = make_user(db)
    make_ticket(db, user)
    ticket = client.get("/tickets?limit=1", headers=admin_headers).json()["tickets"][0]
    assert set(ticket) == {"id", "userId", "title", "status", "priority", "createdAt"}
    assert ticket["userId"] == user.id


def test_get_ticket_and_not_found(client, db, admin_headers):
    user = make_user(db)
    ticket = make_ticket(db, user)

    res = client.get(f"/tickets/{ticket.id}", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["ticket"]["id"] == ticket.id

    res = client.get(f"/tickets/{uuid.uuid4()}", headers=admin_headers)
    assert res.status_code == 404
    assert res.json() == {"detail": "Support ticket not found"}


def test_update_ticket_writes_one_audit_row(client, db, admin_headers):
    user = make_user(db)
    ticket = make_ticket(db, user, status=TicketStatus.OPEN, priority=TicketPriority.LOW)

    res = client.patch(
        f"/tickets/{ticket.id}",
        json={"status": "RESOLVED", "priority": "HIGH"},
        headers=admin_headers,
    )
    assert res.status_code == 200
    body = res.json()["ticket"]
    assert body["status"] == "RESOLVED"
    assert body["priority"] == "HIGH"

    rows = activity_rows(db)
    assert len(rows) == 1
    log = rows[0]
    assert log.actor_type == ActorType.ADMIN
    assert log.entity_type == EntityType.TICKET
    assert log.entity_id == ticket.id
    assert log.action == "Updated ticket: status, priority"
    assert log.meta == {"updates": {"status": "RESOLVED", "priority": "HIGH"}}


def test_update_ticket_title(client, db, admin_headers):
    user = make_user(db)
    ticket = make_ticket(db, user)
    res = client.patch(f"/tickets/{ticket.id}", json={"title": "Renamed"}, headers=admin_headers)
    assert res.json()["ticket"]["title"] == "Renamed"


def test_update_missing_ticket_is_not_found(client, db, admin_headers):
    res = client.patch(f"/tickets/{uuid.uuid4()}", json={"status": "RESOLVED"}, headers=admin_headers)
    assert res.status_code == 404
    assert activity_rows(db) == []


def test_update_ticket_rejects_empty_and_bad_values(client, db, admin_headers):
    user = make_user(db)
    ticket = make_ticket(db, user)

    assert client.patch(f"/tickets/{ticket.id}", json={}, headers=admin_headers).status_code == 400
    res = client.patch(f"/tickets/{ticket.id}", json={"priority": "CRITICAL"}, headers=admin_headers)
    assert res.status_code == 422
    assert activity_rows(db) == []


def test_bulk_update_skips_missing_ids(client, db, admin_headers):
    user = make_user(db)
    first = make_ticket(db, user, status=TicketStatus.OPEN)
    second = make_ticket(db, user, status=TicketStatus.OPEN)
    untouched = make_ticket(db, user, status=TicketStatus.OPEN)
    ids = [first.id, second.id, str(uuid.uuid4())]

    res = client.patch(
        "/tickets/bulk", json={"ticketIds": ids, "status": "RESOLVED"}, headers=admin_headers,
    )
    assert res.status_code == 200
    assert res.json() == {"updatedCount": 2}

    db.expire_all()
    statuses = {t.id: t.status for t in db.query(SupportTicket).all()}
    assert statuses[first.id] == TicketStatus.RESOLVED
    assert statuses[second.id] == TicketStatus.RESOLVED
    assert statuses[untouched.id] == TicketStatus.OPEN

    rows = activity_rows(db)
    assert len(rows) == 1
    log = rows[0]
    assert log.entity_type == EntityType.TICKET
    assert log.entity_id is None
    assert log.action == "Bulk updated 2 tickets to status RESOLVED"
    assert log.meta == {"ticketIds": ids, "status": "RESOLVED", "count": 2}


def test_audit_failure_does_not_fail_update(client, db, admin_headers, monkeypatch, caplog):
    from sqlalchemy.exc import OperationalError
    from admin_dashboard.services.audit_service import AuditService

    def broken_log(*args, **kwargs):
        raise OperationalError("INSERT INTO activity_logs", {}, Exception("disk full"))

    monkeypatch.setattr(AuditService, "log", staticmethod(broken_log))
    user = make_user(db)
    ticket = make_ticket(db, user)

    res = client.patch(f"/tickets/{ticket.id}", json={"status": "RESOLVED"}, headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["ticket"]["status"] == "RESOLVED"
    assert db.query(ActivityLog).count() == 0
    assert "Failed to write activity log" in caplog.text


def test_ticket_stats(client, db, admin_headers):
    user = make_user(db)
    make_ticket(db, user, status=TicketStatus.OPEN, priority=TicketPriority.URGENT)
    make_ticket(db, user, status=TicketStatus.OPEN)
    make_ticket(db, user, status=TicketStatus.RESOLVED, priority=TicketPriority.URGENT)

    res = client.get("/tickets/stats", headers=admin_headers)
    assert res.json() == {"stats": {"open": 2, "resolved": 1, "urgent": 2}}
