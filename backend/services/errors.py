"""
Service-layer errors and message normalization.

Failures coming back from the database or the object store arrive in many
shapes (boto ClientError, SQLAlchemy DBAPI errors, plain dicts returned by
REST gateways, bare strings). Routes only ever see a ServiceError carrying a
single human-readable message.
"""

from typing import Any, Mapping
import logging

from botocore.exceptions import ClientError
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base error surfaced to API clients with a normalized message."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RecordNotFoundError(ServiceError):
    status_code = 404


class StorageError(ServiceError):
    status_code = 502


class InvalidObjectUrlError(StorageError):
    status_code = 400


class DatabaseError(ServiceError):
    status_code = 502


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _describe_mapping(error: Mapping) -> str:
    message = _text(error.get("message"))
    if message:
        details = _text(error.get("details"))
        hint = _text(error.get("hint"))
        if details:
            message += f" Details: {details}"
        if hint:
            message += f" Hint: {hint}"
        return message

    for key in ("error_description", "error"):
        if _text(error.get(key)):
            return _text(error.get(key))

    code = error.get("code")
    status = error.get("statusCode", error.get("status"))
    if code or status:
        return f"Service error (Code: {code}, Status: {status}). Check server logs."
    return ""


def describe_error(error: Any, operation: str) -> str:
    """
    Normalize an arbitrary error into a client-facing message.

    Args:
        error: Exception, mapping or string describing the failure
        operation: Name of the failing operation, used in logs and fallbacks

    Returns:
        str: Non-empty message suitable for API responses
    """
    fallback = (
        f"An unexpected error of type {type(error).__name__} occurred in {operation}. "
        "Check server logs for full details."
    )

    if isinstance(error, ClientError):
        err = error.response.get("Error", {})
        status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        message = _text(err.get("Message")) or (
            f"Storage error (Code: {err.get('Code')}, Status: {status}). Check server logs."
        )
    elif isinstance(error, SQLAlchemyError):
        original = getattr(error, "orig", None)
        message = _text(str(original)) if original is not None else _text(str(error))
    elif isinstance(error, Exception):
        message = _text(str(error))
    elif isinstance(error, Mapping):
        message = _describe_mapping(error)
    elif isinstance(error, str):
        message = error.strip()
    else:
        message = ""

    message = message or fallback
    logger.error(f"[{operation}] {type(error).__name__}: {error!r} -> {message}")
    return message
