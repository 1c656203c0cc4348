"""
Object naming helpers for uploaded media.
"""

from datetime import datetime, timezone
from typing import Optional
import re
import unicodedata

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_.\-]")


def sanitize_filename(filename: str) -> str:
    """
    Make a user-supplied filename safe to use inside an object key.

    Accents are stripped (NFD decomposition, combining marks dropped) and
    every remaining character outside [A-Za-z0-9_.-] becomes an underscore.

    Example:
        "Foto Câmera 1.jpg" -> "Foto_Camera_1.jpg"
    """
    decomposed = unicodedata.normalize("NFD", filename or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _UNSAFE_CHARS.sub("_", stripped) or "file"


def build_object_path(
    record_id: str, filename: str, now: Optional[datetime] = None, sequence: int = 0
) -> str:
    """
    Key for a new upload: "{record_id}/{epoch_ms}_{sanitized filename}".

    A non-zero sequence is inserted after the timestamp ("{epoch_ms}_{n}_{name}")
    so repeated names within one batch get distinct keys.
    """
    now = now or datetime.now(timezone.utc)
    stamp = int(now.timestamp() * 1000)
    if sequence:
        return f"{record_id}/{stamp}_{sequence}_{sanitize_filename(filename)}"
    return f"{record_id}/{stamp}_{sanitize_filename(filename)}"
