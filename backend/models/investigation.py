"""
Investigation model for the unit's case board.
Defines the investigations table mirrored from the hosted database.
"""

import enum
import uuid

from sqlalchemy import Column, String, Text, DateTime, Enum, JSON
from database.connection import Base, utcnow


class InvestigationStatus(str, enum.Enum):
    """Lifecycle of an investigation, stored by its display value."""
    OPEN = "Aberta"
    IN_PROGRESS = "Em Andamento"
    CONCLUDED = "Concluída"
    ARCHIVED = "Arquivada"


class Investigation(Base):
    """
    Investigation model backing the investigations page.

    Attributes:
        id: UUID primary key
        title: Short case title
        description: Free-text case description
        assigned_investigator: Name of the responsible investigator
        status: Current lifecycle status
        occurrence_date: When the reported occurrence took place
        ro_number: Occurrence report number ("R.O."), assigned once on creation
        media_urls: Public URLs of media files attached to the case
        created_at: Creation timestamp, used for list ordering
    """
    __tablename__ = "investigations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    assigned_investigator = Column(String(255), nullable=False)
    status = Column(
        Enum(
            InvestigationStatus,
            name="investigation_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=InvestigationStatus.OPEN,
    )
    occurrence_date = Column(DateTime(timezone=True), nullable=True)
    ro_number = Column(String(20), nullable=False, index=True)
    media_urls = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<Investigation(id={self.id}, ro='{self.ro_number}', status='{self.status}')>"
