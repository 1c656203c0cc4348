"""
Authentication dependencies for FastAPI route protection.
Provides dependency injection for authenticated and password-gated routes.
"""

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Callable, Optional
import secrets

from database import get_db
from models import User
from auth.utils import decode_token

# HTTP Bearer scheme for JWT tokens
security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Dependency to get the current authenticated user from JWT token.

    Args:
        credentials: Bearer token from request header
        db: Database session

    Returns:
        User: The authenticated user object

    Raises:
        HTTPException: If token is invalid or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise credentials_exception

    email: str = payload.get("sub")
    if email is None:
        raise credentials_exception

    user = db.query(User).filter(User.email == email).first()
    if user is None:
        raise credentials_exception

    return user


def require_action_password(get_expected: Callable[[], str], action: str):
    """
    Build a dependency guarding a destructive or sensitive action.

    The X-Action-Password header must match the configured password. When no
    password is configured the action is open.

    Args:
        get_expected: Returns the configured password (read per request)
        action: Human-readable action, used in the error message
    """
    async def dependency(x_action_password: Optional[str] = Header(None)) -> None:
        expected = get_expected()
        if not expected:
            return
        if not x_action_password or not secrets.compare_digest(
            x_action_password.encode("utf-8"), expected.encode("utf-8")
        ):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Incorrect password to {action}."
            )

    return dependency
