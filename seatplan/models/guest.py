"""
Guest model
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, field_validator

class RelationshipType(str, Enum):
    BRIDE = "Bride"
    GROOM = "Groom"
    PARENT = "Parent"
    SIBLING = "Sibling"
    GRANDPARENT = "Grandparent"
    GRANDUNCLE = "Granduncle"
    GRANDAUNT = "Grandaunt"
    UNCLE = "Uncle"
    AUNT = "Aunt"
    COUSIN = "Cousin"
    COLLEAGUE = "Colleague"
    FRIEND = "Friend"
    OTHER = "Other"

class Side(str, Enum):
    BRIDE = "bride"
    GROOM = "groom"

class RSVPStatus(str, Enum):
    NOT_INVITED = "not_invited"
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    NO_RESPONSE = "no_response"

class Guest(BaseModel):
    """A guest as the arrangement engine sees it"""
    id: str
    name: str
    additional_guest_count: int = 0
    dietary_restrictions: List[str] = []
    relationship_type: RelationshipType = RelationshipType.OTHER
    bride_or_groom_side: Side
    rsvp_status: RSVPStatus = RSVPStatus.ACCEPTED
    event_id: Optional[str] = None
    table_assignment: Optional[str] = None
    
    @field_validator("dietary_restrictions", mode="before")
    @classmethod
    def normalize_dietary(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        cleaned: List[str] = []
        for item in value:
            item = str(item).strip().lower()
            if item and item not in cleaned:
                cleaned.append(item)
        return cleaned
    
    @property
    def seat_demand(self) -> int:
        """Seats taken by the guest plus anyone they bring along"""
        return 1 + max(0, self.additional_guest_count)
