"""Auth API router — admin login."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from admin_dashboard.core.config import settings
from admin_dashboard.core.rate_limiter import limiter
from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.schemas import LoginRequest, TokenResponse
from admin_dashboard.services.auth_service import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
def login(body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """Check the shared admin password and return a bearer token."""
    return auth_service.login(db, body.password)
