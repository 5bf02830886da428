"""
Table model
"""

from typing import Optional
from pydantic import BaseModel

class Position(BaseModel):
    x: float = 0.0
    y: float = 0.0

class Table(BaseModel):
    """A seating table on the venue floor plan"""
    id: str
    name: str = ""
    capacity: int
    position: Position = Position()
    is_locked: bool = False
    event_id: Optional[str] = None
    
    @property
    def label(self) -> str:
        return self.name or self.id
