"""
Authentication Routes.
Handles e-mail sign-up, sign-in, profile and sign-out.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from datetime import timedelta
import logging

from database import get_db
from models import User
from auth import (
    verify_password, get_password_hash, create_access_token,
    UserCredentials, Token, UserResponse, SignUpResponse,
    get_current_user
)
from auth.schemas import MessageResponse
from config import settings

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


def _issue_token(user: User) -> str:
    return create_access_token(
        data={"sub": user.email},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )


@router.post("/register", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
async def register_user(user_data: UserCredentials, db: Session = Depends(get_db)):
    """
    Create an account with e-mail and password.

    - E-mail must be unique (case-insensitive)
    - Password is hashed using bcrypt
    - Returns an access token so the user is signed in right away
    """
    existing_user = db.query(User).filter(User.email == user_data.email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="This e-mail is already registered. Try logging in."
        )

    new_user = User(
        email=user_data.email,
        password_hash=get_password_hash(user_data.password),
    )

    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"Registered user {new_user.email}")
    return SignUpResponse(
        user=UserResponse.model_validate(new_user),
        access_token=_issue_token(new_user),
        message="Account created successfully."
    )


@router.post("/login", response_model=Token)
async def login(user_data: UserCredentials, db: Session = Depends(get_db)):
    """
    Authenticate user and return JWT token.

    - Validates e-mail and password
    - Returns JWT access token on success
    """
    user = db.query(User).filter(User.email == user_data.email).first()

    if not user or not verify_password(user_data.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect e-mail or password",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return Token(
        access_token=_issue_token(user),
        token_type="bearer",
        email=user.email
    )


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(current_user: User = Depends(get_current_user)):
    """
    Get current authenticated user's profile.
    """
    return UserResponse.model_validate(current_user)


@router.post("/logout", response_model=MessageResponse)
async def logout(current_user: User = Depends(get_current_user)):
    """
    Sign out. Tokens are stateless, so the client discards its token.
    """
    logger.info(f"User {current_user.email} signed out")
    return MessageResponse(message="Signed out successfully")


@router.get("/callback", include_in_schema=False)
async def auth_callback():
    """
    Landing point for e-mail confirmation links; sends the user home.
    """
    return RedirectResponse(url="/")
