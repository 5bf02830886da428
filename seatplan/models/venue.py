"""
Venue element model
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel

from .table import Position

class VenueElementType(str, Enum):
    STAGE = "stage"
    DANCE_FLOOR = "dance_floor"
    BAR = "bar"
    ENTRANCE = "entrance"
    WALKWAY = "walkway"
    DECORATION = "decoration"
    CUSTOM = "custom"

class Dimensions(BaseModel):
    width: float = 0.0
    height: float = 0.0

class VenueElement(BaseModel):
    """Non-table item on the floor plan; position is its top-left corner"""
    id: str
    type: VenueElementType
    name: str = ""
    position: Position = Position()
    dimensions: Dimensions = Dimensions()
    event_id: Optional[str] = None
    
    @property
    def center(self) -> Position:
        return Position(
            x=self.position.x + self.dimensions.width / 2,
            y=self.position.y + self.dimensions.height / 2,
        )
