"""
Suspicious Vehicle Routes.
Registry of vehicles flagged by agents, each with an optional photo.
"""

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session
from typing import List

from config import settings
from database import get_db
from auth import require_action_password
from services.database_service import SuspiciousVehicleService
from services.storage import StorageClient, get_storage_client
from routes.schemas import (
    SuspiciousVehicleCreate, SuspiciousVehicleUpdate, SuspiciousVehicleResponse
)
from routes.uploads import read_upload
from auth.schemas import MessageResponse

router = APIRouter(prefix="/suspicious-vehicles", tags=["Suspicious Vehicles"])

require_create_password = require_action_password(
    lambda: settings.SUSPICIOUS_VEHICLE_CREATE_PASSWORD, "register the vehicle"
)
require_delete_password = require_action_password(
    lambda: settings.SUSPICIOUS_VEHICLE_DELETE_PASSWORD, "delete the vehicle"
)


@router.post(
    "/",
    response_model=SuspiciousVehicleResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_create_password)],
)
async def register_suspicious_vehicle(
    vehicle_data: SuspiciousVehicleCreate,
    db: Session = Depends(get_db)
):
    """
    Register a suspicious vehicle (requires the `X-Action-Password` header).

    - Vehicle model and license plate are required
    - The plate is stored uppercased
    - The photo is uploaded afterwards via `PUT /suspicious-vehicles/{id}/photo`
    """
    vehicle = SuspiciousVehicleService.create(db=db, **vehicle_data.model_dump())
    return SuspiciousVehicleResponse.model_validate(vehicle)


@router.get("/", response_model=List[SuspiciousVehicleResponse])
async def get_all_suspicious_vehicles(db: Session = Depends(get_db)):
    """
    Get all suspicious vehicles, most recent first.
    """
    return [SuspiciousVehicleResponse.model_validate(v) for v in SuspiciousVehicleService.get_all(db)]


@router.get("/{vehicle_id}", response_model=SuspiciousVehicleResponse)
async def get_suspicious_vehicle(vehicle_id: str, db: Session = Depends(get_db)):
    """
    Get a specific suspicious vehicle by ID.
    """
    return SuspiciousVehicleResponse.model_validate(SuspiciousVehicleService.get_by_id(db, vehicle_id))


@router.put("/{vehicle_id}", response_model=SuspiciousVehicleResponse)
async def update_suspicious_vehicle(
    vehicle_id: str,
    vehicle_data: SuspiciousVehicleUpdate,
    db: Session = Depends(get_db)
):
    """
    Update a suspicious vehicle; only the fields present in the body change.
    """
    vehicle = SuspiciousVehicleService.update(db, vehicle_id, vehicle_data.model_dump(exclude_unset=True))
    return SuspiciousVehicleResponse.model_validate(vehicle)


@router.delete(
    "/{vehicle_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_delete_password)],
)
async def delete_suspicious_vehicle(
    vehicle_id: str,
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage_client)
):
    """
    Delete a suspicious vehicle and its photo (requires the `X-Action-Password` header).
    """
    SuspiciousVehicleService.delete(db, storage, vehicle_id)
    return MessageResponse(message="Suspicious vehicle and its photo were removed")


@router.put("/{vehicle_id}/photo", response_model=SuspiciousVehicleResponse)
async def upload_suspicious_vehicle_photo(
    vehicle_id: str,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage_client)
):
    """
    Upload or replace the vehicle photo.

    The previous photo is deleted once the new one is saved.
    """
    photo = await read_upload(file)
    vehicle = SuspiciousVehicleService.set_photo(db, storage, vehicle_id, photo)
    return SuspiciousVehicleResponse.model_validate(vehicle)


@router.delete("/{vehicle_id}/photo", response_model=SuspiciousVehicleResponse)
async def delete_suspicious_vehicle_photo(
    vehicle_id: str,
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage_client)
):
    """
    Remove the vehicle photo from storage and from the record.
    """
    vehicle = SuspiciousVehicleService.remove_photo(db, storage, vehicle_id)
    return SuspiciousVehicleResponse.model_validate(vehicle)
