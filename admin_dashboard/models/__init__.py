"""Models package — import all models so the mappers are registered."""

from admin_dashboard.models.user import User, UserRole, UserStatus
from admin_dashboard.models.subscription import Subscription, SubscriptionStatus
from admin_dashboard.models.support_ticket import SupportTicket, TicketStatus, TicketPriority
from admin_dashboard.models.activity_log import ActivityLog, ActorType, EntityType

__all__ = [
    "User", "UserRole", "UserStatus",
    "Subscription", "SubscriptionStatus",
    "SupportTicket", "TicketStatus", "TicketPriority",
    "ActivityLog", "ActorType", "EntityType",
]
