"""
Pydantic schemas for authentication requests and responses.
Defines data validation models for the auth module.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime


class UserCredentials(BaseModel):
    """Schema for sign-up and sign-in requests."""
    email: str = Field(..., min_length=3, max_length=255, description="Account e-mail")
    password: str = Field(..., min_length=6, max_length=100, description="Account password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        local, _, domain = value.partition("@")
        if not local or "." not in domain:
            raise ValueError("Invalid e-mail address")
        return value

    class Config:
        json_schema_extra = {
            "example": {
                "email": "agente@divecar.sp.gov.br",
                "password": "securepassword123"
            }
        }


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
    email: str


class UserResponse(BaseModel):
    """Schema for user data response."""
    id: int
    email: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SignUpResponse(BaseModel):
    """Schema for the sign-up result."""
    user: UserResponse
    access_token: Optional[str] = None
    message: str


class MessageResponse(BaseModel):
    """Schema for simple message responses."""
    message: str
    success: bool = True
