"""
Database Service for investigation and suspicious vehicle records.
Provides CRUD operations plus the media bookkeeping tied to each record.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Sequence
import logging

from config import settings
from models import Investigation, InvestigationStatus, SuspiciousVehicle
from services.errors import DatabaseError, RecordNotFoundError, describe_error
from services.storage import (
    MediaFile, StorageClient, delete_file_by_url, delete_files_best_effort, upload_files
)

logger = logging.getLogger(__name__)

INVESTIGATION_UPDATABLE_FIELDS = {
    "title", "description", "assigned_investigator", "status", "occurrence_date"
}
SUSPICIOUS_VEHICLE_UPDATABLE_FIELDS = {
    "vehicle_model", "license_plate", "suspect_name", "suspect_phone",
    "spotted_date", "notes"
}


def _commit(db: Session, operation: str) -> None:
    """Commit the session, rolling back and normalizing any database failure."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise DatabaseError(describe_error(e, operation)) from e


def _find(db: Session, model, record_id: str, operation: str):
    """Look up a record by ID, normalizing database failures; None when missing."""
    try:
        return db.query(model).filter(model.id == record_id).first()
    except SQLAlchemyError as e:
        raise DatabaseError(describe_error(e, operation)) from e


def _normalize_plate(plate: str) -> str:
    return plate.strip().upper()


class InvestigationService:
    """Service for managing investigation records."""

    @staticmethod
    def next_ro_number(db: Session) -> str:
        """R.O. numbers follow the record count: "1.0", "2.0", ..."""
        return f"{db.query(Investigation).count() + 1}.0"

    @staticmethod
    def create(
        db: Session,
        title: str,
        assigned_investigator: str,
        description: str = "",
        status: InvestigationStatus = InvestigationStatus.OPEN,
        occurrence_date=None,
    ) -> Investigation:
        """
        Open a new investigation.

        Args:
            db: Database session
            title: Case title
            assigned_investigator: Responsible investigator
            description: Optional case description
            status: Initial status
            occurrence_date: When the occurrence took place

        Returns:
            Investigation: Created record with its R.O. number
        """
        try:
            ro_number = InvestigationService.next_ro_number(db)
        except SQLAlchemyError as e:
            raise DatabaseError(describe_error(e, "addInvestigation - count")) from e

        investigation = Investigation(
            title=title,
            description=description or "",
            assigned_investigator=assigned_investigator,
            status=InvestigationStatus(status),
            occurrence_date=occurrence_date,
            ro_number=ro_number,
            media_urls=[],
        )

        db.add(investigation)
        _commit(db, "addInvestigation - insert")
        db.refresh(investigation)

        logger.info(f"Opened investigation {investigation.id} (R.O. {ro_number})")
        return investigation

    @staticmethod
    def get_all(db: Session) -> List[Investigation]:
        """Get all investigations, newest first."""
        try:
            return db.query(Investigation).order_by(Investigation.created_at.desc()).all()
        except SQLAlchemyError as e:
            raise DatabaseError(describe_error(e, "getInvestigations")) from e

    @staticmethod
    def get_by_id(db: Session, investigation_id: str) -> Investigation:
        """Get an investigation by ID or raise RecordNotFoundError."""
        investigation = _find(db, Investigation, investigation_id, "getInvestigationById")
        if investigation is None:
            raise RecordNotFoundError(f"Investigation record with ID {investigation_id} not found.")
        return investigation

    @staticmethod
    def update(db: Session, investigation_id: str, updates: Dict[str, Any]) -> Investigation:
        """
        Update the given fields of an investigation.

        The R.O. number, ID and creation date are never touched. An update
        with no recognised fields returns the current record unchanged.
        """
        investigation = _find(db, Investigation, investigation_id, "updateInvestigation - lookup")
        if investigation is None:
            raise RecordNotFoundError(
                f"Investigation record with ID {investigation_id} not found for update. "
                "It might have been deleted."
            )

        changes = {k: v for k, v in updates.items() if k in INVESTIGATION_UPDATABLE_FIELDS}
        if not changes:
            logger.warning(f"No updatable fields provided for investigation {investigation_id}")
            return investigation

        for key, value in changes.items():
            if key == "status":
                value = InvestigationStatus(value)
            elif key == "description" and value is None:
                value = ""
            setattr(investigation, key, value)

        _commit(db, "updateInvestigation")
        db.refresh(investigation)
        return investigation

    @staticmethod
    def add_media(
        db: Session,
        storage: StorageClient,
        investigation_id: str,
        files: Sequence[MediaFile],
    ) -> Investigation:
        """Upload media files and attach their public URLs to the investigation."""
        investigation = InvestigationService.get_by_id(db, investigation_id)
        bucket = settings.INVESTIGATION_MEDIA_BUCKET

        urls = upload_files(storage, bucket, investigation.id, files)
        if not urls:
            return investigation

        investigation.media_urls = list(investigation.media_urls or []) + urls
        try:
            _commit(db, "updateInvestigation - attach media")
        except DatabaseError:
            delete_files_best_effort(storage, urls, bucket)
            raise
        db.refresh(investigation)

        logger.info(f"Attached {len(urls)} media file(s) to investigation {investigation.id}")
        return investigation

    @staticmethod
    def remove_media(
        db: Session,
        storage: StorageClient,
        investigation_id: str,
        media_url: str,
    ) -> Investigation:
        """Delete one media file from storage and detach it from the investigation."""
        investigation = InvestigationService.get_by_id(db, investigation_id)
        current = list(investigation.media_urls or [])
        if media_url not in current:
            raise RecordNotFoundError(
                f"Media file is not attached to investigation {investigation_id}: {media_url}"
            )

        delete_file_by_url(storage, media_url, settings.INVESTIGATION_MEDIA_BUCKET)

        investigation.media_urls = [url for url in current if url != media_url]
        _commit(db, "updateInvestigation - detach media")
        db.refresh(investigation)
        return investigation

    @staticmethod
    def delete(db: Session, storage: StorageClient, investigation_id: str) -> None:
        """
        Delete an investigation and, best-effort, its media files.

        Media deletion failures are logged and never block removing the record.
        """
        investigation = InvestigationService.get_by_id(db, investigation_id)

        media_urls = list(investigation.media_urls or [])
        if media_urls:
            deleted = delete_files_best_effort(
                storage, media_urls, settings.INVESTIGATION_MEDIA_BUCKET
            )
            logger.info(
                f"Deleted {deleted}/{len(media_urls)} media file(s) of investigation {investigation_id}"
            )

        db.delete(investigation)
        _commit(db, "deleteInvestigation")
        logger.info(f"Deleted investigation {investigation_id}")


class SuspiciousVehicleService:
    """Service for managing suspicious vehicle records."""

    @staticmethod
    def create(
        db: Session,
        vehicle_model: str,
        license_plate: str,
        suspect_name=None,
        suspect_phone=None,
        spotted_date=None,
        notes=None,
    ) -> SuspiciousVehicle:
        """
        Register a suspicious vehicle. The photo is attached separately.

        Returns:
            SuspiciousVehicle: Created record
        """
        vehicle = SuspiciousVehicle(
            vehicle_model=vehicle_model,
            license_plate=_normalize_plate(license_plate),
            suspect_name=suspect_name,
            suspect_phone=suspect_phone,
            spotted_date=spotted_date,
            notes=notes,
            photo_url=None,
        )

        db.add(vehicle)
        _commit(db, "addSuspiciousVehicle - insert")
        db.refresh(vehicle)

        logger.info(f"Registered suspicious vehicle {vehicle.id}: {vehicle.license_plate}")
        return vehicle

    @staticmethod
    def get_all(db: Session) -> List[SuspiciousVehicle]:
        """Get all suspicious vehicles, newest first."""
        try:
            return db.query(SuspiciousVehicle).order_by(SuspiciousVehicle.created_at.desc()).all()
        except SQLAlchemyError as e:
            raise DatabaseError(describe_error(e, "getSuspiciousVehicles")) from e

    @staticmethod
    def get_by_id(db: Session, vehicle_id: str) -> SuspiciousVehicle:
        """Get a suspicious vehicle by ID or raise RecordNotFoundError."""
        vehicle = _find(db, SuspiciousVehicle, vehicle_id, "getSuspiciousVehicleById")
        if vehicle is None:
            raise RecordNotFoundError(f"Suspicious vehicle record with ID {vehicle_id} not found.")
        return vehicle

    @staticmethod
    def update(db: Session, vehicle_id: str, updates: Dict[str, Any]) -> SuspiciousVehicle:
        """Update the given fields; an empty update returns the current record."""
        vehicle = _find(db, SuspiciousVehicle, vehicle_id, "updateSuspiciousVehicle - lookup")
        if vehicle is None:
            raise RecordNotFoundError(
                f"Suspicious vehicle record with ID {vehicle_id} not found for update. "
                "It might have been deleted."
            )

        changes = {k: v for k, v in updates.items() if k in SUSPICIOUS_VEHICLE_UPDATABLE_FIELDS}
        if not changes:
            logger.warning(f"No updatable fields provided for suspicious vehicle {vehicle_id}")
            return vehicle

        for key, value in changes.items():
            if key == "license_plate":
                value = _normalize_plate(value)
            setattr(vehicle, key, value)

        _commit(db, "updateSuspiciousVehicle")
        db.refresh(vehicle)
        return vehicle

    @staticmethod
    def set_photo(
        db: Session,
        storage: StorageClient,
        vehicle_id: str,
        photo: MediaFile,
    ) -> SuspiciousVehicle:
        """
        Upload a new photo for the vehicle.

        The previous photo, if any, is deleted only after the record points
        at the new one.
        """
        vehicle = SuspiciousVehicleService.get_by_id(db, vehicle_id)
        bucket = settings.SUSPICIOUS_VEHICLE_PHOTOS_BUCKET

        new_url = upload_files(storage, bucket, vehicle.id, [photo])[0]
        previous_url = vehicle.photo_url

        vehicle.photo_url = new_url
        try:
            _commit(db, "updateSuspiciousVehicle - set photo")
        except DatabaseError:
            delete_files_best_effort(storage, [new_url], bucket)
            raise
        db.refresh(vehicle)

        if previous_url:
            logger.info(f"Replacing photo of vehicle {vehicle.id}; deleting {previous_url}")
            delete_files_best_effort(storage, [previous_url], bucket)
        return vehicle

    @staticmethod
    def remove_photo(db: Session, storage: StorageClient, vehicle_id: str) -> SuspiciousVehicle:
        """Delete the vehicle photo from storage and clear its reference."""
        vehicle = SuspiciousVehicleService.get_by_id(db, vehicle_id)
        if not vehicle.photo_url:
            raise RecordNotFoundError(f"Suspicious vehicle {vehicle_id} has no photo.")

        delete_file_by_url(storage, vehicle.photo_url, settings.SUSPICIOUS_VEHICLE_PHOTOS_BUCKET)

        vehicle.photo_url = None
        _commit(db, "updateSuspiciousVehicle - remove photo")
        db.refresh(vehicle)
        return vehicle

    @staticmethod
    def delete(db: Session, storage: StorageClient, vehicle_id: str) -> None:
        """Delete a suspicious vehicle and, best-effort, its photo."""
        vehicle = SuspiciousVehicleService.get_by_id(db, vehicle_id)

        if vehicle.photo_url:
            delete_files_best_effort(
                storage, [vehicle.photo_url], settings.SUSPICIOUS_VEHICLE_PHOTOS_BUCKET
            )

        db.delete(vehicle)
        _commit(db, "deleteSuspiciousVehicle")
        logger.info(f"Deleted suspicious vehicle {vehicle_id}")
