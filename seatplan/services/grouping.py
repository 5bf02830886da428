"""
Guest grouping for auto-arrangement
"""

from collections import Counter
from typing import Dict, List, Tuple

from seatplan.models import (
    ArrangementConstraints,
    GroupConstraints,
    Guest,
    GuestGroup,
    RelationshipType,
)
from seatplan.services.relationship_rules import (
    FAMILY_TYPES,
    HEAD_TABLE_PRIORITY,
    HEAD_TABLE_TYPES,
    priority_of,
    proximity_rules_for,
)

class GroupBuilder:
    """Partitions a guest list into groups that should share a table"""
    
    @staticmethod
    def build_groups(
        guests: List[Guest],
        constraints: ArrangementConstraints
    ) -> List[GuestGroup]:
        """Build guest groups, highest seating priority first"""
        buckets: Dict[Tuple[str, ...], List[Guest]] = {}
        couple: List[Guest] = []
        seen = set()
        
        for guest in guests:
            if guest.id in seen:
                continue
            seen.add(guest.id)
            if guest.relationship_type in HEAD_TABLE_TYPES:
                couple.append(guest)
                continue
            buckets.setdefault(GroupBuilder._bucket_key(guest, constraints), []).append(guest)
        
        groups: List[GuestGroup] = []
        if couple:
            groups.append(GroupBuilder.head_table_group(couple))
        for key, members in buckets.items():
            kind = key[0]
            if kind == "family":
                groups.append(GroupBuilder.make_group(f"{key[1]}-{key[2]}", members, must_sit_together=True))
            elif kind == "cluster":
                chunks = GroupBuilder._chunk_by_seats(members, constraints.max_guests_per_table)
                for index, chunk in enumerate(chunks, start=1):
                    groups.append(
                        GroupBuilder.make_group(f"{key[1]}-{key[2]}-{index}", chunk, must_sit_together=False)
                    )
            else:
                groups.append(GroupBuilder.make_group(f"guest-{key[1]}", members, must_sit_together=False))
        
        # sorted() is stable, so equal priorities keep guest-list order
        return sorted(groups, key=lambda group: -group.priority)
    
    @staticmethod
    def head_table_group(couple: List[Guest]) -> GuestGroup:
        """Bride and groom share one table whatever side they were entered on"""
        group = GroupBuilder.make_group("head-table", couple, must_sit_together=True)
        group.priority = float(HEAD_TABLE_PRIORITY)
        group.constraints.preferred_side = "mixed"
        group.constraints.relationship_type = RelationshipType.BRIDE
        preferences = []
        for relationship_type in dict.fromkeys(guest.relationship_type for guest in couple):
            for preference in proximity_rules_for(relationship_type):
                if preference not in preferences:
                    preferences.append(preference)
        group.constraints.proximity_preferences = preferences
        return group
    
    @staticmethod
    def _bucket_key(guest: Guest, constraints: ArrangementConstraints) -> Tuple[str, ...]:
        side = guest.bride_or_groom_side.value
        relationship = guest.relationship_type.value
        
        if constraints.keep_families_together and guest.relationship_type in FAMILY_TYPES:
            return ("family", side, relationship)
        if constraints.respect_relationships:
            return ("cluster", side, relationship)
        return ("single", guest.id)
    
    @staticmethod
    def _chunk_by_seats(members: List[Guest], max_seats: int) -> List[List[Guest]]:
        """Split a cluster so no chunk needs more seats than one table allows"""
        chunks: List[List[Guest]] = []
        current: List[Guest] = []
        used = 0
        for guest in members:
            if current and used + guest.seat_demand > max_seats:
                chunks.append(current)
                current, used = [], 0
            current.append(guest)
            used += guest.seat_demand
        if current:
            chunks.append(current)
        return chunks
    
    @staticmethod
    def make_group(group_id: str, guests: List[Guest], must_sit_together: bool) -> GuestGroup:
        """Create a group, deriving side, dietary needs and priority from its members"""
        relationship_types = {guest.relationship_type for guest in guests}
        if len(relationship_types) == 1:
            relationship_type = next(iter(relationship_types))
            priority = float(priority_of(relationship_type))
        else:
            relationship_type = RelationshipType.OTHER
            priority = sum(priority_of(guest.relationship_type) for guest in guests) / len(guests)
        
        sides = Counter(guest.bride_or_groom_side.value for guest in guests)
        if sides["bride"] > sides["groom"]:
            preferred_side = "bride"
        elif sides["groom"] > sides["bride"]:
            preferred_side = "groom"
        else:
            preferred_side = "mixed"
        
        dietary = set()
        for guest in guests:
            dietary.update(guest.dietary_restrictions)
        
        return GuestGroup(
            id=group_id,
            guests=list(guests),
            priority=priority,
            constraints=GroupConstraints(
                must_sit_together=must_sit_together,
                preferred_side=preferred_side,
                dietary_restrictions=dietary,
                relationship_type=relationship_type,
                proximity_preferences=proximity_rules_for(relationship_type),
            ),
        )
    
    @staticmethod
    def remainder(group: GuestGroup, guests: List[Guest], part: int) -> GuestGroup:
        """The members of a split group still waiting for a seat"""
        rest = GroupBuilder.make_group(f"{group.id}#{part}", guests, group.constraints.must_sit_together)
        rest.priority = group.priority
        rest.constraints.preferred_side = group.constraints.preferred_side
        rest.constraints.relationship_type = group.constraints.relationship_type
        rest.constraints.proximity_preferences = list(group.constraints.proximity_preferences)
        return rest
    
    @staticmethod
    def split_to_fit(guests: List[Guest], seats: int) -> Tuple[List[Guest], List[Guest]]:
        """First-fit in guest order: who takes the free seats, and who is left over.
        
        A guest too big for the seats still free is skipped, not a stopping
        point, so later (smaller) guests can be seated ahead of them.
        """
        taken: List[Guest] = []
        left: List[Guest] = []
        for guest in guests:
            if guest.seat_demand <= seats:
                taken.append(guest)
                seats -= guest.seat_demand
            else:
                left.append(guest)
        return taken, left
