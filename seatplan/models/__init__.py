"""
Domain models package
"""

from .guest import Guest, RelationshipType, RSVPStatus, Side
from .table import Position, Table
from .venue import Dimensions, VenueElement, VenueElementType
from .arrangement import (
    ArrangementConflict,
    ArrangementConstraints,
    ArrangementResult,
    ConflictSeverity,
    ConflictType,
    GroupConstraints,
    GuestGroup,
    ProximityPreference,
    ScoreFactors,
    TableScore,
    TableSeating,
)

__all__ = [
    "Guest",
    "RelationshipType",
    "RSVPStatus",
    "Side",
    "Position",
    "Table",
    "Dimensions",
    "VenueElement",
    "VenueElementType",
    "ArrangementConflict",
    "ArrangementConstraints",
    "ArrangementResult",
    "ConflictSeverity",
    "ConflictType",
    "GroupConstraints",
    "GuestGroup",
    "ProximityPreference",
    "ScoreFactors",
    "TableScore",
    "TableSeating",
]
