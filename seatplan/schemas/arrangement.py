"""
Auto-arrangement Pydantic schemas
"""

from typing import Any, List, Optional
from pydantic import BaseModel

from seatplan.models import ArrangementResult, Guest, Table, VenueElement

class ConstraintOverrides(BaseModel):
    """Constraints supplied by the client; anything left out uses the configured default"""
    respect_relationships: Optional[bool] = None
    consider_dietary_restrictions: Optional[bool] = None
    keep_families_together: Optional[bool] = None
    optimize_venue_proximity: Optional[bool] = None
    balance_bride_groom_sides: Optional[bool] = None
    min_guests_per_table: Optional[int] = None
    max_guests_per_table: Optional[int] = None
    preferred_table_distance: Optional[float] = None

class AutoArrangeRequest(BaseModel):
    """Schema for an auto-arrangement request"""
    guests: List[Guest]
    tables: List[Table]
    venue_elements: List[VenueElement] = []
    constraints: Optional[ConstraintOverrides] = None

class AutoArrangeData(BaseModel):
    """Proposed arrangement plus the event's guests with their new tables"""
    arrangement: ArrangementResult
    guests: List[Guest]

class AutoArrangeResponse(BaseModel):
    """Envelope for a successful auto-arrangement"""
    success: bool = True
    message: str
    data: AutoArrangeData

class ArrangementErrorResponse(BaseModel):
    """Envelope for a failed auto-arrangement"""
    success: bool = False
    message: str
    error_code: Optional[str] = None
    details: Optional[Any] = None
