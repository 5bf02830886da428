"""
Auto-arrangement models: constraints, results and the call-scoped records
the engine builds while it works
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set
from pydantic import BaseModel, field_validator

from .guest import Guest, RelationshipType
from .venue import VenueElementType

class ArrangementConstraints(BaseModel):
    """Caller supplied policy for one arrangement run"""
    respect_relationships: bool = True
    consider_dietary_restrictions: bool = True
    keep_families_together: bool = True
    optimize_venue_proximity: bool = True
    balance_bride_groom_sides: bool = True
    min_guests_per_table: int = 2
    max_guests_per_table: int = 8
    preferred_table_distance: float = 100.0
    
    @field_validator("min_guests_per_table")
    @classmethod
    def clamp_min_guests(cls, value: int) -> int:
        return max(0, value)
    
    @field_validator("max_guests_per_table")
    @classmethod
    def clamp_max_guests(cls, value: int) -> int:
        return max(1, value)
    
    @field_validator("preferred_table_distance")
    @classmethod
    def clamp_distance(cls, value: float) -> float:
        return max(1.0, value)

class ConflictType(str, Enum):
    CAPACITY = "capacity"
    DIETARY = "dietary"
    RELATIONSHIP = "relationship"
    BALANCE = "balance"
    PROXIMITY = "proximity"

class ConflictSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

class ArrangementConflict(BaseModel):
    type: ConflictType
    severity: ConflictSeverity
    message: str
    affected_guests: List[str] = []
    affected_tables: List[str] = []

class ArrangementResult(BaseModel):
    success: bool
    message: str
    arranged_guests: int = 0
    table_assignments: Dict[str, List[str]] = {}
    conflicts: List[ArrangementConflict] = []
    score: float = 0.0

# --- Call-scoped records, never persisted

@dataclass(frozen=True)
class ProximityPreference:
    element_type: VenueElementType
    preference: str  # close, far or neutral
    weight: float

@dataclass
class GroupConstraints:
    must_sit_together: bool
    preferred_side: str  # bride, groom or mixed
    dietary_restrictions: Set[str]
    relationship_type: RelationshipType
    proximity_preferences: List[ProximityPreference] = field(default_factory=list)

@dataclass
class GuestGroup:
    id: str
    guests: List[Guest]
    priority: float
    constraints: GroupConstraints
    
    @property
    def seat_demand(self) -> int:
        return sum(guest.seat_demand for guest in self.guests)
    
    @property
    def min_seat_demand(self) -> int:
        return min((guest.seat_demand for guest in self.guests), default=0)

@dataclass(frozen=True)
class ScoreFactors:
    capacity: float
    balance: float
    dietary: float
    proximity: float
    relationship: float

@dataclass(frozen=True)
class TableScore:
    table_id: str
    score: float
    factors: ScoreFactors

@dataclass
class TableSeating:
    """Running state of one table during a single assignment pass"""
    table_id: str
    remaining: int
    guests: List[Guest] = field(default_factory=list)
    
    def seat(self, guests: List[Guest]) -> None:
        self.guests.extend(guests)
        self.remaining -= sum(guest.seat_demand for guest in guests)
