"""Lenient filter parsing and cursor pagination helpers shared by services."""

import enum
import re
from typing import Optional, Type, TypeVar, List, Tuple, Any

from sqlalchemy import and_, or_
from sqlalchemy.orm import Query, Session

from admin_dashboard.core.config import settings

E = TypeVar("E", bound=enum.Enum)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def coerce_enum(enum_cls: Type[E], raw: Optional[Any]) -> Optional[E]:
    """Return the enum member for ``raw``, or None if it is not a legal value.

    Unknown values mean "no filter", never an error.
    """
    if raw is None or raw == "":
        return None
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(raw)
    except ValueError:
        return None


def parse_limit(raw: Optional[Any], default: Optional[int] = None) -> int:
    """Parse a page size the way the dashboard always has.

    The leading integer is read (``"5abc"`` is 5, ``"2.5"`` is 2). Garbage,
    zero or negative falls back to the default; oversized values are clamped.
    """
    default = default or settings.DEFAULT_PAGE_SIZE
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return default
    limit = int(match.group(0))
    if limit <= 0:
        return default
    return min(limit, settings.MAX_PAGE_SIZE)


def apply_filters(query: Query, model, **filters) -> Query:
    """AND together equality filters, skipping the ones that are None."""
    for column_name, value in filters.items():
        if value is not None:
            query = query.filter(getattr(model, column_name) == value)
    return query


def paginate_by_id(query: Query, model, cursor: Optional[str], limit: int) -> List[Any]:
    """Ascending-id pagination: the cursor is the last id already seen."""
    if cursor:
        query = query.filter(model.id > cursor)
    return query.order_by(model.id.asc()).limit(limit).all()


def _recency_order(query: Query, model) -> Query:
    return query.order_by(model.created_at.desc(), model.id.desc())


def _cursor_row(db: Session, model, cursor: str):
    return db.query(model.created_at, model.id).filter(model.id == cursor).first()


def paginate_by_recency(
    db: Session, query: Query, model, cursor: Optional[str], limit: int,
) -> List[Any]:
    """Newest-first pagination resuming strictly after the cursor row.

    An unknown cursor id yields an empty page.
    """
    if cursor:
        anchor = _cursor_row(db, model, cursor)
        if anchor is None:
            return []
        query = query.filter(
            or_(
                model.created_at < anchor.created_at,
                and_(model.created_at == anchor.created_at, model.id < anchor.id),
            )
        )
    return _recency_order(query, model).limit(limit).all()


def paginate_with_next_cursor(
    db: Session, query: Query, model, cursor: Optional[str], limit: int,
) -> Tuple[List[Any], Optional[str]]:
    """Newest-first pagination with an explicit continuation token.

    Fetches ``limit + 1`` rows; when the extra row exists it is left off the
    page and its id becomes ``next_cursor``. A cursor therefore marks the
    first row of the page it requests.
    """
    if cursor:
        anchor = _cursor_row(db, model, cursor)
        if anchor is None:
            return [], None
        query = query.filter(
            or_(
                model.created_at < anchor.created_at,
                and_(model.created_at == anchor.created_at, model.id <= anchor.id),
            )
        )
    rows = _recency_order(query, model).limit(limit + 1).all()

    next_cursor = None
    if len(rows) > limit:
        next_cursor = rows.pop().id
    return rows, next_cursor
