"""
Models package initialization.
Exports all database models.
"""

from models.user import User
from models.investigation import Investigation, InvestigationStatus
from models.suspicious_vehicle import SuspiciousVehicle

__all__ = [
    "User",
    "Investigation", "InvestigationStatus",
    "SuspiciousVehicle",
]
