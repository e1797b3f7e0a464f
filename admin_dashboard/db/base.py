"""Declarative base shared by all models."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# MySQL DATETIME defaults to whole seconds; keep microseconds so rows written
# in the same second still sort newest-first.
Timestamp = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")


def new_id() -> str:
    """Opaque primary key for every table."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
