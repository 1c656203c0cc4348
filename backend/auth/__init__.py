"""
Authentication package initialization.
Exports auth utilities and dependencies.
"""

from auth.utils import verify_password, get_password_hash, create_access_token, decode_token
from auth.dependencies import get_current_user, require_action_password
from auth.schemas import UserCredentials, Token, UserResponse, SignUpResponse, MessageResponse

__all__ = [
    "verify_password", "get_password_hash", "create_access_token", "decode_token",
    "get_current_user", "require_action_password",
    "UserCredentials", "Token", "UserResponse", "SignUpResponse", "MessageResponse"
]
