"""
Investigation Routes.
Case board endpoints: open, list, edit and close investigations and manage
the media attached to them.
"""

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from sqlalchemy.orm import Session
from typing import List

from database import get_db
from services.database_service import InvestigationService
from services.storage import StorageClient, get_storage_client
from routes.schemas import InvestigationCreate, InvestigationUpdate, InvestigationResponse
from routes.uploads import read_uploads
from auth.schemas import MessageResponse

router = APIRouter(prefix="/investigations", tags=["Investigations"])


@router.post("/", response_model=InvestigationResponse, status_code=status.HTTP_201_CREATED)
async def create_investigation(
    investigation_data: InvestigationCreate,
    db: Session = Depends(get_db)
):
    """
    Open a new investigation.

    - Title and assigned investigator are required
    - The R.O. number is assigned automatically
    - Media files are attached afterwards via `POST /investigations/{id}/media`
    """
    investigation = InvestigationService.create(
        db=db,
        title=investigation_data.title,
        assigned_investigator=investigation_data.assigned_investigator,
        description=investigation_data.description,
        status=investigation_data.status,
        occurrence_date=investigation_data.occurrence_date,
    )
    return InvestigationResponse.model_validate(investigation)


@router.get("/", response_model=List[InvestigationResponse])
async def get_all_investigations(db: Session = Depends(get_db)):
    """
    Get all investigations, most recent first.
    """
    return [InvestigationResponse.model_validate(inv) for inv in InvestigationService.get_all(db)]


@router.get("/{investigation_id}", response_model=InvestigationResponse)
async def get_investigation(investigation_id: str, db: Session = Depends(get_db)):
    """
    Get a specific investigation by ID.
    """
    return InvestigationResponse.model_validate(InvestigationService.get_by_id(db, investigation_id))


@router.put("/{investigation_id}", response_model=InvestigationResponse)
async def update_investigation(
    investigation_id: str,
    investigation_data: InvestigationUpdate,
    db: Session = Depends(get_db)
):
    """
    Update an investigation.

    - Only the fields present in the body change
    - The R.O. number and creation date cannot be changed
    """
    investigation = InvestigationService.update(
        db, investigation_id, investigation_data.model_dump(exclude_unset=True)
    )
    return InvestigationResponse.model_validate(investigation)


@router.delete("/{investigation_id}", response_model=MessageResponse)
async def delete_investigation(
    investigation_id: str,
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage_client)
):
    """
    Delete an investigation and its media files.

    Media files that cannot be removed from storage are logged and skipped.
    """
    InvestigationService.delete(db, storage, investigation_id)
    return MessageResponse(message="Investigation and its media were removed")


@router.post("/{investigation_id}/media", response_model=InvestigationResponse)
async def upload_investigation_media(
    investigation_id: str,
    files: List[UploadFile] = File(...),
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage_client)
):
    """
    Upload media files and attach them to an investigation.

    - Files are stored under `{investigation_id}/{timestamp}_{filename}`
    - If any upload fails, files uploaded in the same request are removed
    """
    media = await read_uploads(files)
    investigation = InvestigationService.add_media(db, storage, investigation_id, media)
    return InvestigationResponse.model_validate(investigation)


@router.delete("/{investigation_id}/media", response_model=InvestigationResponse)
async def delete_investigation_media(
    investigation_id: str,
    url: str = Query(..., description="Public URL of the media file"),
    db: Session = Depends(get_db),
    storage: StorageClient = Depends(get_storage_client)
):
    """
    Remove one media file from storage and from the investigation.

    A file already missing from storage counts as removed.
    """
    investigation = InvestigationService.remove_media(db, storage, investigation_id, url)
    return InvestigationResponse.model_validate(investigation)
