"""Auth service — shared-password admin login."""

from typing import Optional, Dict

from sqlalchemy.orm import Session

from admin_dashboard.core.exceptions import AuthenticationError, ValidationError
from admin_dashboard.core.security import AdminCredentialVerifier, create_admin_token
from admin_dashboard.models.activity_log import ActorType, EntityType
from admin_dashboard.services.audit_service import audit_service

FAILED_LOGIN_ACTION = "Failed admin login attempt"
SUCCESSFUL_LOGIN_ACTION = "Admin login successful"


class AuthService:
    """Handles the single admin credential check."""

    def __init__(self, verifier: Optional[AdminCredentialVerifier] = None):
        self.verifier = verifier or AdminCredentialVerifier()

    def login(self, db: Session, password: Optional[str]) -> Dict[str, str]:
        """Verify the admin password and return a bearer token.

        Both outcomes are recorded in the activity log.

        Raises:
            ValidationError: If no password was supplied.
            AuthenticationError: If the password does not match.
        """
        if not password:
            raise ValidationError("Password is required")

        if not self.verifier.verify(password):
            audit_service.try_log(
                db,
                actor_type=ActorType.SYSTEM,
                action=FAILED_LOGIN_ACTION,
                entity_type=EntityType.SYSTEM,
            )
            raise AuthenticationError("Invalid password")

        audit_service.try_log(
            db,
            actor_type=ActorType.ADMIN,
            action=SUCCESSFUL_LOGIN_ACTION,
            entity_type=EntityType.SYSTEM,
        )
        return {"token": create_admin_token()}


auth_service = AuthService()
