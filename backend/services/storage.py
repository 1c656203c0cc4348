"""
Object storage for investigation media and suspicious vehicle photos.

Uploaded files live in public buckets of the hosted service, which exposes
them at "{public_base_url}/{bucket}/{key}" and accepts writes through its
S3-compatible gateway. Records only keep the public URL, so deleting a file
means recovering the object key from that URL first.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Protocol, Sequence
from urllib.parse import quote, unquote, urlparse
import logging
import threading

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from config import settings
from services.errors import InvalidObjectUrlError, StorageError, describe_error
from utils.filenames import build_object_path

logger = logging.getLogger(__name__)


class StorageClient(Protocol):
    """Operations the portal needs from object storage."""

    def upload(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        ...

    def remove(self, bucket: str, keys: Sequence[str]) -> None:
        ...

    def public_url(self, bucket: str, key: str) -> str:
        ...

    def ping(self, bucket: str) -> None:
        ...


@dataclass
class MediaFile:
    """An uploaded file read into memory."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


def _public_url(base_url: str, bucket: str, key: str) -> str:
    return f"{base_url.rstrip('/')}/{bucket}/{quote(key)}"


@dataclass
class InMemoryStorageClient:
    """Test double for storage interactions; mirrors the hosted service's errors."""

    public_base_url: str = "https://storage.test/storage/v1/object/public"
    objects: Dict[str, Dict[str, bytes]] = field(default_factory=dict)

    def upload(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        stored = self.objects.setdefault(bucket, {})
        if key in stored:
            raise ClientError(
                {
                    "Error": {"Code": "Duplicate", "Message": "The resource already exists"},
                    "ResponseMetadata": {"HTTPStatusCode": 409},
                },
                "PutObject",
            )
        stored[key] = data

    def remove(self, bucket: str, keys: Sequence[str]) -> None:
        stored = self.objects.get(bucket, {})
        for key in keys:
            if key not in stored:
                raise ClientError(
                    {
                        "Error": {"Code": "NoSuchKey", "Message": "Object not found"},
                        "ResponseMetadata": {"HTTPStatusCode": 404},
                    },
                    "DeleteObject",
                )
            del stored[key]

    def public_url(self, bucket: str, key: str) -> str:
        return _public_url(self.public_base_url, bucket, key)

    def ping(self, bucket: str) -> None:
        return None

    def keys(self, bucket: str) -> List[str]:
        return sorted(self.objects.get(bucket, {}))


@dataclass
class S3StorageClient:
    """
    Storage client for the hosted service's S3-compatible gateway.
    """

    endpoint_url: str
    public_base_url: str
    region: str
    access_key_id: str
    secret_access_key: str
    cache_control: str = "max-age=3600"

    def __post_init__(self):
        config = Config(
            s3={"addressing_style": "path"},
            signature_version="s3v4",
        )
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            region_name=self.region,
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            config=config,
        )

    def upload(self, bucket: str, key: str, data: bytes, content_type: str) -> None:
        self._client.put_object(
            Bucket=bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
            CacheControl=self.cache_control,
            IfNoneMatch="*",
        )

    def remove(self, bucket: str, keys: Sequence[str]) -> None:
        for key in keys:
            self._client.delete_object(Bucket=bucket, Key=key)

    def public_url(self, bucket: str, key: str) -> str:
        return _public_url(self.public_base_url, bucket, key)

    def ping(self, bucket: str) -> None:
        self._client.head_bucket(Bucket=bucket)


def extract_object_key(file_url: str, bucket: str) -> str:
    """
    Recover the object key of a public file URL.

    The key is everything after the first path segment equal to the bucket
    name, percent-decoded. Query strings are ignored.

    Example:
        https://x.supabase.co/storage/v1/object/public/investigationmedia/abc/1_a%20b.jpg
        -> "abc/1_a b.jpg"

    Raises:
        InvalidObjectUrlError: If no key can be extracted
    """
    if not file_url or not isinstance(file_url, str):
        raise InvalidObjectUrlError(f"Invalid file URL provided for deletion: {file_url!r}")

    parsed = urlparse(file_url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidObjectUrlError(f"Invalid file URL provided for deletion: {file_url}")

    segments = parsed.path.split("/")
    try:
        bucket_index = segments.index(bucket)
    except ValueError:
        bucket_index = -1

    if bucket_index == -1 or bucket_index >= len(segments) - 1:
        raise InvalidObjectUrlError(
            f"Could not reliably extract file path key from URL: {file_url} "
            f"using bucket name '{bucket}'. Pathname: {parsed.path}"
        )

    key = unquote("/".join(segments[bucket_index + 1:]))
    if not key.strip():
        raise InvalidObjectUrlError(f"Extracted file path is empty from URL, cannot delete: {file_url}")
    return key


def is_missing_object_error(error: Exception) -> bool:
    """True when a storage failure only says the object is already gone."""
    if isinstance(error, ClientError):
        code = str(error.response.get("Error", {}).get("Code", ""))
        message = str(error.response.get("Error", {}).get("Message", "")).lower()
        status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        if code in ("NoSuchKey", "NotFound", "404") or status == 404:
            return True
        if status == 400 and "object not found" in message:
            return True
        text = str(error.response).lower()
    else:
        text = str(error).lower()
    return "not found" in text or "no object exists" in text


def delete_file_by_url(storage: StorageClient, file_url: str, bucket: str) -> None:
    """
    Delete the object behind a public URL.

    Objects that no longer exist count as deleted.

    Raises:
        InvalidObjectUrlError: If the URL does not point into the bucket
        StorageError: If the storage service rejects the deletion
    """
    key = extract_object_key(file_url, bucket)
    logger.info(f"Deleting '{key}' from bucket '{bucket}'")
    try:
        storage.remove(bucket, [key])
    except (ClientError, BotoCoreError) as e:
        if is_missing_object_error(e):
            logger.warning(
                f"File not found in bucket {bucket} at path '{key}', "
                f"considered deleted ({e})"
            )
            return
        raise StorageError(describe_error(e, f"delete {bucket}/{key}")) from e


def delete_files_best_effort(storage: StorageClient, file_urls: Iterable[str], bucket: str) -> int:
    """
    Delete several files, logging failures instead of raising.

    Returns:
        int: Number of files confirmed deleted (or already gone)
    """
    deleted = 0
    for url in file_urls:
        try:
            delete_file_by_url(storage, url, bucket)
            deleted += 1
        except StorageError as e:
            logger.warning(f"Failed to delete media file {url}: {e.message}")
    return deleted


def upload_files(
    storage: StorageClient,
    bucket: str,
    record_id: str,
    files: Sequence[MediaFile],
    now: Optional[datetime] = None,
) -> List[str]:
    """
    Upload files under "{record_id}/" and return their public URLs in order.

    Every file in the batch shares one timestamp; repeated names get a
    sequence number so no two files map to the same key. The batch fails
    fast: on the first failure, objects already uploaded in this batch are
    removed before StorageError is raised.
    """
    now = now or datetime.now(timezone.utc)
    uploaded: List[str] = []
    for media in files:
        sequence = 0
        key = build_object_path(record_id, media.filename, now)
        while key in uploaded:
            sequence += 1
            key = build_object_path(record_id, media.filename, now, sequence)
        try:
            storage.upload(bucket, key, media.content, media.content_type)
        except (ClientError, BotoCoreError) as e:
            message = describe_error(e, f"upload {bucket}/{key}")
            if uploaded:
                _remove_orphans(storage, bucket, uploaded)
            raise StorageError(f"Upload error for {media.filename}: {message}") from e
        uploaded.append(key)
        logger.info(f"Uploaded {media.filename} to {bucket}/{key}")

    return [storage.public_url(bucket, key) for key in uploaded]


def _remove_orphans(storage: StorageClient, bucket: str, keys: List[str]) -> None:
    try:
        storage.remove(bucket, keys)
    except (ClientError, BotoCoreError) as e:
        logger.warning(f"Failed to remove orphaned files {keys}: {describe_error(e, 'remove orphans')}")


# Global service instance
_storage_client: Optional[StorageClient] = None
_storage_client_lock = threading.Lock()


def get_storage_client() -> StorageClient:
    """Get or create the storage client; falls back to memory when no endpoint is configured."""
    global _storage_client
    if _storage_client is not None:
        return _storage_client
    with _storage_client_lock:
        if _storage_client is not None:
            return _storage_client
        if settings.USE_IN_MEMORY_STORAGE or not settings.STORAGE_ENDPOINT_URL:
            logger.warning("No storage endpoint configured; keeping uploads in memory")
            _storage_client = InMemoryStorageClient(public_base_url=settings.STORAGE_PUBLIC_BASE_URL)
        else:
            _storage_client = S3StorageClient(
                endpoint_url=settings.STORAGE_ENDPOINT_URL,
                public_base_url=settings.STORAGE_PUBLIC_BASE_URL,
                region=settings.STORAGE_REGION,
                access_key_id=settings.STORAGE_ACCESS_KEY_ID,
                secret_access_key=settings.STORAGE_SECRET_ACCESS_KEY,
                cache_control=settings.UPLOAD_CACHE_CONTROL,
            )
    return _storage_client
