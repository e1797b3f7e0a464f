"""Pydantic schemas for API request/response serialization.

Responses are built from ORM rows by field name and serialized with
camelCase keys, which is what the dashboard front end reads.
"""

from pydantic import AliasGenerator, BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from datetime import datetime

from admin_dashboard.models import (
    UserRole, UserStatus, SubscriptionStatus,
    TicketStatus, TicketPriority, ActorType, EntityType,
)


class OutModel(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = AliasGenerator(serialization_alias=to_camel)


class InModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ---- Auth ----
class LoginRequest(BaseModel):
    password: Optional[str] = None

class TokenResponse(BaseModel):
    token: str


# ---- User ----
class UserOut(OutModel):
    id: str
    email: str
    role: UserRole
    status: UserStatus
    created_at: datetime
    last_login: Optional[datetime] = None

class UserStatusUpdate(InModel):
    status: UserStatus

class UserBulkUpdate(InModel):
    user_ids: List[str]
    status: UserStatus


# ---- Subscription ----
class SubscriptionOut(OutModel):
    id: str
    user_id: str
    plan: str
    price: float
    status: SubscriptionStatus
    created_at: datetime


# ---- Support ticket ----
class TicketOut(OutModel):
    id: str
    user_id: str
    title: str
    status: TicketStatus
    priority: TicketPriority
    created_at: datetime

class TicketUpdate(InModel):
    title: Optional[str] = Field(None, min_length=1)
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None

class TicketBulkUpdate(InModel):
    ticket_ids: List[str]
    status: TicketStatus


# ---- Activity log ----
class ActivityLogOut(OutModel):
    id: str
    actor_type: ActorType
    actor_id: Optional[str] = None
    action: str
    entity_type: EntityType
    entity_id: Optional[str] = None
    meta: Optional[Dict[str, Any]] = Field(None, serialization_alias="metadata")
    created_at: datetime
    user_id: Optional[str] = None


# ---- Generic ----
class BulkUpdateResponse(OutModel):
    updated_count: int
