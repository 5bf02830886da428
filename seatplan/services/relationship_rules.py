"""
Seating priority and venue proximity rules per relationship type
"""

from typing import Dict, List

from seatplan.models import ProximityPreference, RelationshipType, VenueElementType

# Higher priority groups are seated first
RELATIONSHIP_PRIORITIES: Dict[RelationshipType, int] = {
    RelationshipType.BRIDE: 100,
    RelationshipType.GROOM: 100,
    RelationshipType.PARENT: 90,
    RelationshipType.SIBLING: 80,
    RelationshipType.GRANDPARENT: 70,
    RelationshipType.GRANDUNCLE: 60,
    RelationshipType.GRANDAUNT: 60,
    RelationshipType.UNCLE: 50,
    RelationshipType.AUNT: 50,
    RelationshipType.COUSIN: 40,
    RelationshipType.FRIEND: 30,
    RelationshipType.COLLEAGUE: 20,
    RelationshipType.OTHER: 10,
}

MIN_PRIORITY = min(RELATIONSHIP_PRIORITIES.values())
MAX_PRIORITY = max(RELATIONSHIP_PRIORITIES.values())

# Groups at or above this priority are expected near their preferred elements
HIGH_PRIORITY_THRESHOLD = 80

# The couple's table is seated before every relationship group
HEAD_TABLE_PRIORITY = 200
HEAD_TABLE_TYPES = frozenset({RelationshipType.BRIDE, RelationshipType.GROOM})

FAMILY_TYPES = frozenset({
    RelationshipType.BRIDE,
    RelationshipType.GROOM,
    RelationshipType.PARENT,
    RelationshipType.SIBLING,
    RelationshipType.GRANDPARENT,
    RelationshipType.GRANDUNCLE,
    RelationshipType.GRANDAUNT,
    RelationshipType.UNCLE,
    RelationshipType.AUNT,
    RelationshipType.COUSIN,
})

def _prefs(*rules) -> List[ProximityPreference]:
    return [
        ProximityPreference(element_type=element_type, preference=preference, weight=weight)
        for element_type, preference, weight in rules
    ]

STAGE = VenueElementType.STAGE
DANCE_FLOOR = VenueElementType.DANCE_FLOOR
BAR = VenueElementType.BAR

VENUE_PROXIMITY_RULES: Dict[RelationshipType, List[ProximityPreference]] = {
    RelationshipType.BRIDE: _prefs((STAGE, "close", 1.0), (DANCE_FLOOR, "close", 0.8)),
    RelationshipType.GROOM: _prefs((STAGE, "close", 1.0), (DANCE_FLOOR, "close", 0.8)),
    RelationshipType.PARENT: _prefs((STAGE, "close", 0.9), (DANCE_FLOOR, "close", 0.6)),
    RelationshipType.SIBLING: _prefs((STAGE, "close", 0.7), (DANCE_FLOOR, "close", 0.6)),
    RelationshipType.GRANDPARENT: _prefs(
        (STAGE, "close", 0.8), (BAR, "far", 0.5), (DANCE_FLOOR, "far", 0.4)
    ),
    RelationshipType.GRANDUNCLE: _prefs((STAGE, "close", 0.6), (BAR, "neutral", 0.3)),
    RelationshipType.GRANDAUNT: _prefs((STAGE, "close", 0.6), (BAR, "neutral", 0.3)),
    RelationshipType.UNCLE: _prefs((STAGE, "close", 0.5)),
    RelationshipType.AUNT: _prefs((STAGE, "close", 0.5)),
    RelationshipType.COUSIN: _prefs((DANCE_FLOOR, "close", 0.4)),
    RelationshipType.COLLEAGUE: _prefs((BAR, "close", 0.5), (STAGE, "neutral", 0.3)),
    RelationshipType.FRIEND: _prefs((DANCE_FLOOR, "close", 0.7), (BAR, "close", 0.6)),
    RelationshipType.OTHER: [],
}

def priority_of(relationship_type: RelationshipType) -> int:
    return RELATIONSHIP_PRIORITIES.get(relationship_type, MIN_PRIORITY)

def proximity_rules_for(relationship_type: RelationshipType) -> List[ProximityPreference]:
    return list(VENUE_PROXIMITY_RULES.get(relationship_type, []))
