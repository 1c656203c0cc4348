"""
Pydantic schemas for API request/response validation.
Defines data transfer objects for all record endpoints.
"""

from pydantic import BaseModel, BeforeValidator, Field, StringConstraints, field_validator
from typing import Annotated, List, Optional
from datetime import datetime

from models import InvestigationStatus


def _required_text(value):
    if value is None:
        raise ValueError("must not be blank")
    if isinstance(value, str):
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()
    return value


def _optional_text(value):
    if isinstance(value, str):
        return value.strip() or None
    return value


# Required text: surrounding whitespace trimmed, blank rejected
RequiredText = Annotated[str, StringConstraints(max_length=255), BeforeValidator(_required_text)]
PlateText = Annotated[str, StringConstraints(max_length=20), BeforeValidator(_required_text)]
# Optional text: blank becomes null
OptionalText = Annotated[
    Optional[Annotated[str, StringConstraints(max_length=255)]], BeforeValidator(_optional_text)
]
PhoneText = Annotated[
    Optional[Annotated[str, StringConstraints(max_length=50)]], BeforeValidator(_optional_text)
]
NotesText = Annotated[Optional[str], BeforeValidator(_optional_text)]


# ============ Investigation Schemas ============

class InvestigationCreate(BaseModel):
    """Schema for opening an investigation."""
    title: RequiredText = Field(..., description="Case title")
    description: Optional[str] = Field("", description="Case description")
    assigned_investigator: RequiredText = Field(..., description="Responsible investigator")
    status: InvestigationStatus = Field(InvestigationStatus.OPEN, description="Initial status")
    occurrence_date: Optional[datetime] = Field(None, description="When the occurrence took place")

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Furto de veículo - Centro",
                "description": "Honda Civic preto levado do estacionamento da Av. dos Autonomistas.",
                "assigned_investigator": "Investigador Silva",
                "status": "Aberta",
                "occurrence_date": "2025-03-14T21:30:00Z"
            }
        }


class InvestigationUpdate(BaseModel):
    """Schema for updating an investigation; only provided fields change."""
    title: Optional[RequiredText] = None
    description: Optional[str] = None
    assigned_investigator: Optional[RequiredText] = None
    status: Optional[InvestigationStatus] = None
    occurrence_date: Optional[datetime] = None

    @field_validator("title", "assigned_investigator", "status", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class InvestigationResponse(BaseModel):
    """Schema for investigation response."""
    id: str
    title: str
    description: str
    assigned_investigator: str
    status: InvestigationStatus
    ro_number: str
    occurrence_date: Optional[datetime] = None
    media_urls: List[str] = []
    created_at: datetime

    class Config:
        from_attributes = True


# ============ Suspicious Vehicle Schemas ============

class SuspiciousVehicleCreate(BaseModel):
    """Schema for registering a suspicious vehicle."""
    vehicle_model: RequiredText = Field(..., description="Model and colour")
    license_plate: PlateText = Field(..., description="License plate")
    suspect_name: OptionalText = None
    suspect_phone: PhoneText = None
    spotted_date: Optional[datetime] = None
    notes: NotesText = None

    class Config:
        json_schema_extra = {
            "example": {
                "vehicle_model": "Honda Civic Preto",
                "license_plate": "BRA2E19",
                "suspect_name": "Desconhecido",
                "spotted_date": "2025-03-15T10:00:00Z",
                "notes": "Visto rondando a Rua Antônio Agu."
            }
        }


class SuspiciousVehicleUpdate(BaseModel):
    """Schema for updating a suspicious vehicle; only provided fields change."""
    vehicle_model: Optional[RequiredText] = None
    license_plate: Optional[PlateText] = None
    suspect_name: OptionalText = None
    suspect_phone: PhoneText = None
    spotted_date: Optional[datetime] = None
    notes: NotesText = None

    @field_validator("vehicle_model", "license_plate", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class SuspiciousVehicleResponse(BaseModel):
    """Schema for suspicious vehicle response."""
    id: str
    vehicle_model: str
    license_plate: str
    suspect_name: Optional[str] = None
    suspect_phone: Optional[str] = None
    photo_url: Optional[str] = None
    spotted_date: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


# ============ Health Check ============

class HealthResponse(BaseModel):
    """Schema for health check response."""
    status: str
    version: str
    timestamp: datetime
    services: dict
