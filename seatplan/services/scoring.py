"""
Table scoring for auto-arrangement

Every factor is normalised to [0, 1]; a factor whose constraint flag is off
scores a neutral 1.0 so it cannot change the ranking.
"""

import math
from typing import Dict, List, Optional

from seatplan.models import (
    ArrangementConstraints,
    Guest,
    GuestGroup,
    Position,
    ScoreFactors,
    Table,
    TableScore,
    TableSeating,
    VenueElement,
)
from seatplan.services.grouping import GroupBuilder
from seatplan.services.relationship_rules import MAX_PRIORITY, MIN_PRIORITY, priority_of

class TableScorer:
    """Ranks candidate tables for a guest group"""
    
    WEIGHTS = {
        "capacity": 0.35,
        "relationship": 0.25,
        "balance": 0.15,
        "proximity": 0.15,
        "dietary": 0.10,
    }
    
    @staticmethod
    def score_tables_for_group(
        group: GuestGroup,
        tables: List[Table],
        venue_elements: List[VenueElement],
        constraints: ArrangementConstraints,
        seating: Optional[Dict[str, TableSeating]] = None
    ) -> List[TableScore]:
        """Score every table the group could use, best first"""
        seating = seating or {}
        scores: List[TableScore] = []
        
        for table in tables:
            if table.is_locked:
                continue
            state = seating.get(table.id) or TableSeating(table_id=table.id, remaining=max(0, table.capacity))
            if state.remaining <= 0 or state.remaining < group.min_seat_demand:
                continue
            scores.append(TableScorer.score_table(group, table, state, venue_elements, constraints))
        
        # Ties go to the lowest table id
        scores.sort(key=lambda item: (-item.score, item.table_id))
        return scores
    
    @staticmethod
    def score_table(
        group: GuestGroup,
        table: Table,
        state: TableSeating,
        venue_elements: List[VenueElement],
        constraints: ArrangementConstraints
    ) -> TableScore:
        factors = ScoreFactors(
            capacity=TableScorer.capacity_score(group, state.remaining),
            balance=TableScorer.balance_score(group, state.guests, constraints),
            dietary=TableScorer.dietary_score(group, state.guests, constraints),
            proximity=TableScorer.proximity_score(group, table, venue_elements, constraints),
            relationship=TableScorer.relationship_score(group, state.guests, constraints),
        )
        weights = TableScorer.WEIGHTS
        total = (
            factors.capacity * weights["capacity"]
            + factors.relationship * weights["relationship"]
            + factors.balance * weights["balance"]
            + factors.proximity * weights["proximity"]
            + factors.dietary * weights["dietary"]
        )
        return TableScore(table_id=table.id, score=min(1.0, total), factors=factors)
    
    @staticmethod
    def capacity_score(group: GuestGroup, remaining: int) -> float:
        """1.0 when the whole group fits, else the share of its seats that would"""
        demand = group.seat_demand
        if remaining <= 0 or demand <= 0:
            return 0.0
        if demand <= remaining:
            return 1.0
        taken, _ = GroupBuilder.split_to_fit(group.guests, remaining)
        return sum(guest.seat_demand for guest in taken) / demand
    
    @staticmethod
    def balance_score(
        group: GuestGroup,
        occupants: List[Guest],
        constraints: ArrangementConstraints
    ) -> float:
        """Prefer empty tables and tables already held by the group's own side"""
        if not constraints.balance_bride_groom_sides or not occupants:
            return 1.0
        
        bride = sum(1 for guest in occupants if guest.bride_or_groom_side.value == "bride")
        groom = len(occupants) - bride
        side = group.constraints.preferred_side
        if side == "bride":
            return bride / len(occupants)
        if side == "groom":
            return groom / len(occupants)
        return 1.0 - abs(bride - groom) / len(occupants)
    
    @staticmethod
    def dietary_score(
        group: GuestGroup,
        occupants: List[Guest],
        constraints: ArrangementConstraints
    ) -> float:
        """Overlap between the group's restrictions and those already at the table"""
        wanted = group.constraints.dietary_restrictions
        if not constraints.consider_dietary_restrictions or not wanted:
            return 1.0
        
        present = set()
        for guest in occupants:
            present.update(guest.dietary_restrictions)
        if not present:
            return 0.5
        
        shared = wanted & present
        if not shared:
            return 0.0
        return 0.5 + 0.5 * len(shared) / len(wanted | present)
    
    @staticmethod
    def proximity_score(
        group: GuestGroup,
        table: Table,
        venue_elements: List[VenueElement],
        constraints: ArrangementConstraints
    ) -> float:
        """Weighted fit of the table's distance to the group's preferred venue elements"""
        preferences = group.constraints.proximity_preferences
        if not constraints.optimize_venue_proximity or not preferences:
            return 1.0
        
        reach = 2 * constraints.preferred_table_distance
        total_score = 0.0
        total_weight = 0.0
        for preference in preferences:
            nearest = TableScorer.nearest_distance(table.position, venue_elements, preference.element_type)
            if nearest is None:
                continue
            if preference.preference == "close":
                fit = max(0.0, 1.0 - nearest / reach)
            elif preference.preference == "far":
                fit = min(1.0, nearest / reach)
            else:
                fit = 0.5
            total_score += fit * preference.weight
            total_weight += preference.weight
        
        return total_score / total_weight if total_weight > 0 else 1.0
    
    @staticmethod
    def relationship_score(
        group: GuestGroup,
        occupants: List[Guest],
        constraints: ArrangementConstraints
    ) -> float:
        """How close in the priority order the group is to the people already seated"""
        if not constraints.respect_relationships or not occupants:
            return 1.0
        
        span = MAX_PRIORITY - MIN_PRIORITY
        similarity = [
            max(0.0, 1.0 - abs(priority_of(guest.relationship_type) - group.priority) / span)
            for guest in occupants
        ]
        return sum(similarity) / len(similarity)
    
    @staticmethod
    def nearest_distance(
        position: Position,
        venue_elements: List[VenueElement],
        element_type
    ) -> Optional[float]:
        distances = [
            TableScorer.distance(position, element.center)
            for element in venue_elements
            if element.type == element_type
        ]
        return min(distances) if distances else None
    
    @staticmethod
    def distance(a: Position, b: Position) -> float:
        return math.hypot(a.x - b.x, a.y - b.y)
