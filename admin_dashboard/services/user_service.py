"""User service — listing, status changes and counts."""

from typing import Optional, Any, Dict, List

from sqlalchemy import update
from sqlalchemy.orm import Session

from admin_dashboard.core.exceptions import ResourceNotFoundError
from admin_dashboard.models.user import User, UserRole, UserStatus
from admin_dashboard.services.pagination import (
    apply_filters, coerce_enum, paginate_by_recency, parse_limit,
)


class UserService:
    """Read and status-mutation operations on users."""

    @staticmethod
    def list_users(
        db: Session,
        status: Optional[str] = None,
        role: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[Any] = None,
    ) -> List[User]:
        """Newest users first; cursor is the id of the last user already seen."""
        query = apply_filters(
            db.query(User), User,
            status=coerce_enum(UserStatus, status),
            role=coerce_enum(UserRole, role),
        )
        return paginate_by_recency(db, query, User, cursor, parse_limit(limit))

    @staticmethod
    def get_user(db: Session, user_id: str) -> User:
        """Get a user by id."""
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise ResourceNotFoundError("User not found")
        return user

    @staticmethod
    def update_status(db: Session, user_id: str, status: UserStatus) -> User:
        user = UserService.get_user(db, user_id)
        user.status = status
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def bulk_update_status(db: Session, user_ids: List[str], status: UserStatus) -> int:
        """Set ``status`` on every listed user in one statement.

        Unknown ids are skipped; returns the number of rows matched.
        """
        if not user_ids:
            return 0
        result = db.execute(
            update(User)
            .where(User.id.in_(user_ids))
            .values(status=status)
            .execution_options(synchronize_session=False)
        )
        db.commit()
        return result.rowcount

    @staticmethod
    def stats(db: Session) -> Dict[str, int]:
        return {
            "active": db.query(User).filter(User.status == UserStatus.ACTIVE).count(),
            "suspended": db.query(User).filter(User.status == UserStatus.SUSPENDED).count(),
            "admins": db.query(User).filter(User.role == UserRole.ADMIN).count(),
            "users": db.query(User).filter(User.role == UserRole.USER).count(),
        }


user_service = UserService()
