"""
Suspicious Vehicle model for vehicles flagged by the unit's agents.
"""

import uuid

from sqlalchemy import Column, String, Text, DateTime
from database.connection import Base, utcnow


class SuspiciousVehicle(Base):
    """
    Suspicious vehicle sighting.

    Attributes:
        id: UUID primary key
        vehicle_model: Model and colour as described by the agent
        license_plate: Uppercased license plate
        suspect_name: Optional name of the associated suspect
        suspect_phone: Optional phone of the associated suspect
        photo_url: Public URL of the vehicle photo, if uploaded
        spotted_date: When the vehicle was spotted
        notes: Free-text notes
        created_at: Creation timestamp, used for list ordering
    """
    __tablename__ = "suspicious_vehicles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    vehicle_model = Column(String(255), nullable=False)
    license_plate = Column(String(20), nullable=False, index=True)
    suspect_name = Column(String(255), nullable=True)
    suspect_phone = Column(String(50), nullable=True)
    photo_url = Column(String(1024), nullable=True)
    spotted_date = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<SuspiciousVehicle(id={self.id}, plate='{self.license_plate}')>"
