"""
Services package initialization.
Exports all service modules.

- database_service: investigation and suspicious vehicle records
- storage: media upload/deletion against the object store
- content: informational pages of the site
- errors: service errors and message normalization
"""

from services.database_service import InvestigationService, SuspiciousVehicleService
from services.storage import (
    StorageClient, S3StorageClient, InMemoryStorageClient, MediaFile, get_storage_client,
    extract_object_key, delete_file_by_url, upload_files
)
from services.content import get_page, list_pages
from services.errors import (
    ServiceError, RecordNotFoundError, StorageError, InvalidObjectUrlError, DatabaseError,
    describe_error
)

__all__ = [
    # Records
    "InvestigationService", "SuspiciousVehicleService",
    # Storage
    "StorageClient", "S3StorageClient", "InMemoryStorageClient", "MediaFile", "get_storage_client",
    "extract_object_key", "delete_file_by_url", "upload_files",
    # Content
    "get_page", "list_pages",
    # Errors
    "ServiceError", "RecordNotFoundError", "StorageError", "InvalidObjectUrlError", "DatabaseError",
    "describe_error",
]
