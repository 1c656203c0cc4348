"""
Configuration module for the DIVECAR Osasco portal backend.
Loads environment variables and provides centralized configuration.
"""

import os
from dotenv import load_dotenv
from pathlib import Path

# Load environment variables
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Application settings loaded from environment variables."""

    # Database - Default to SQLite for easy local development
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'divecar.db'}"
    )

    # JWT Authentication
    SECRET_KEY: str = os.getenv("SECRET_KEY", "your-super-secret-key-change-in-production")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

    # Object storage (S3-compatible gateway of the hosted service)
    STORAGE_ENDPOINT_URL: str = os.getenv("STORAGE_ENDPOINT_URL", "")
    # Public objects are served from {STORAGE_PUBLIC_BASE_URL}/{bucket}/{key}
    STORAGE_PUBLIC_BASE_URL: str = os.getenv(
        "STORAGE_PUBLIC_BASE_URL",
        "http://localhost:8000/storage/v1/object/public"
    ).rstrip("/")
    STORAGE_REGION: str = os.getenv("STORAGE_REGION", "us-east-1")
    STORAGE_ACCESS_KEY_ID: str = os.getenv("STORAGE_ACCESS_KEY_ID", "")
    STORAGE_SECRET_ACCESS_KEY: str = os.getenv("STORAGE_SECRET_ACCESS_KEY", "")
    # Keeps uploads in process memory; used automatically when no endpoint is set
    USE_IN_MEMORY_STORAGE: bool = _env_bool("USE_IN_MEMORY_STORAGE", "false")

    # Buckets
    INVESTIGATION_MEDIA_BUCKET: str = os.getenv("INVESTIGATION_MEDIA_BUCKET", "investigationmedia")
    SUSPICIOUS_VEHICLE_PHOTOS_BUCKET: str = os.getenv(
        "SUSPICIOUS_VEHICLE_PHOTOS_BUCKET", "suspiciousvehiclephotos"
    )

    # Action passwords for the suspicious vehicle registry (empty = gate disabled)
    SUSPICIOUS_VEHICLE_CREATE_PASSWORD: str = os.getenv("SUSPICIOUS_VEHICLE_CREATE_PASSWORD", "")
    SUSPICIOUS_VEHICLE_DELETE_PASSWORD: str = os.getenv("SUSPICIOUS_VEHICLE_DELETE_PASSWORD", "")

    # Upload Settings
    MAX_FILE_SIZE: int = int(os.getenv("MAX_FILE_SIZE", str(50 * 1024 * 1024)))  # 50MB
    UPLOAD_CACHE_CONTROL: str = "max-age=3600"

    # Frontend
    BASE_URL: str = os.getenv("BASE_URL", "http://localhost:3000")
    CORS_ORIGINS: list = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"
        ).split(",")
        if origin.strip()
    ]

settings = Settings()
