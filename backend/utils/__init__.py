"""
Utility modules for the DIVECAR Osasco portal backend.
"""

from utils.filenames import sanitize_filename, build_object_path

__all__ = [
    "sanitize_filename",
    "build_object_path",
]
