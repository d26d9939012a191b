from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.errors import AuthError, NotFoundError
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.utils.security import decode_access_token


# auto_error off so a missing header is a 401 from us, not a framework 403
security = HTTPBearer(auto_error=False)


def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """Verified JWT payload from the Authorization header"""
    if credentials is None or not credentials.credentials:
        raise AuthError("Authorization token missing")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise AuthError("Invalid or expired token")

    if payload.get("id") is None:
        raise AuthError("Invalid or expired token")

    return payload


def get_current_user(
    payload: dict = Depends(get_token_payload),
    db: Session = Depends(get_db)
) -> User:
    """Get current authenticated user from JWT token"""
    try:
        user_id = int(payload["id"])
    except (TypeError, ValueError):
        raise AuthError("Invalid or expired token")

    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")

    return user
