"""
Post-arrangement validation and quality scoring
"""

from itertools import combinations
from typing import Dict, List, Optional

from seatplan.models import (
    ArrangementConflict,
    ArrangementConstraints,
    ConflictSeverity,
    ConflictType,
    Guest,
    Table,
    VenueElement,
)
from seatplan.services.grouping import GroupBuilder
from seatplan.services.relationship_rules import HIGH_PRIORITY_THRESHOLD
from seatplan.services.scoring import TableScorer

class ArrangementValidator:
    """Inspects a finished assignment map for conflicts and grades it"""
    
    MIN_MINORITY_SHARE = 0.2
    
    SEVERITY_PENALTIES = {
        ConflictSeverity.ERROR: 0.25,
        ConflictSeverity.WARNING: 0.05,
        ConflictSeverity.INFO: 0.01,
    }
    
    SCORE_WEIGHTS = {
        "arranged": 0.5,
        "intact": 0.2,
        "tables": 0.3,
    }
    
    @staticmethod
    def validate(
        table_assignments: Dict[str, List[str]],
        guests: List[Guest],
        tables: List[Table],
        constraints: ArrangementConstraints,
        venue_elements: Optional[List[VenueElement]] = None
    ) -> List[ArrangementConflict]:
        """List every conflict in the assignment map"""
        guest_by_id = ArrangementValidator._index_guests(guests)
        table_by_id = {table.id: table for table in tables}
        conflicts: List[ArrangementConflict] = []
        
        placement: Dict[str, str] = {}
        for table_id, guest_ids in table_assignments.items():
            for guest_id in guest_ids:
                if guest_id in placement and placement[guest_id] != table_id:
                    conflicts.append(ArrangementConflict(
                        type=ConflictType.CAPACITY,
                        severity=ConflictSeverity.ERROR,
                        message=f"Guest {guest_id} is assigned to more than one table",
                        affected_guests=[guest_id],
                        affected_tables=[placement[guest_id], table_id],
                    ))
                    continue
                placement.setdefault(guest_id, table_id)
        
        for table_id, guest_ids in table_assignments.items():
            table = table_by_id.get(table_id)
            seated = [guest_by_id[guest_id] for guest_id in guest_ids if guest_id in guest_by_id]
            if table is None or not seated:
                continue
            conflicts.extend(ArrangementValidator._table_conflicts(table, seated, constraints))
        
        conflicts.extend(ArrangementValidator._split_group_conflicts(guests, placement, constraints))
        if venue_elements:
            conflicts.extend(ArrangementValidator._proximity_conflicts(
                guests, placement, table_by_id, venue_elements, constraints
            ))
        
        unseated = [guest_id for guest_id in guest_by_id if guest_id not in placement]
        if unseated:
            conflicts.append(ArrangementConflict(
                type=ConflictType.CAPACITY,
                severity=ConflictSeverity.INFO,
                message=f"{len(unseated)} guest(s) could not be seated: not enough free table capacity",
                affected_guests=unseated,
                affected_tables=[],
            ))
        
        return conflicts
    
    @staticmethod
    def _index_guests(guests: List[Guest]) -> Dict[str, Guest]:
        index: Dict[str, Guest] = {}
        for guest in guests:
            index.setdefault(guest.id, guest)
        return index
    
    @staticmethod
    def _table_conflicts(
        table: Table,
        seated: List[Guest],
        constraints: ArrangementConstraints
    ) -> List[ArrangementConflict]:
        conflicts: List[ArrangementConflict] = []
        guest_ids = [guest.id for guest in seated]
        seats = sum(guest.seat_demand for guest in seated)
        
        if table.is_locked:
            conflicts.append(ArrangementConflict(
                type=ConflictType.CAPACITY,
                severity=ConflictSeverity.ERROR,
                message=f'Table "{table.label}" is locked but has automatic assignments',
                affected_guests=guest_ids,
                affected_tables=[table.id],
            ))
        
        if seats > table.capacity:
            conflicts.append(ArrangementConflict(
                type=ConflictType.CAPACITY,
                severity=ConflictSeverity.ERROR,
                message=f'Table "{table.label}" is over capacity: {seats}/{table.capacity} seats',
                affected_guests=guest_ids,
                affected_tables=[table.id],
            ))
        
        if constraints.consider_dietary_restrictions:
            clashing = ArrangementValidator._dietary_clashes(seated)
            if clashing:
                conflicts.append(ArrangementConflict(
                    type=ConflictType.DIETARY,
                    severity=ConflictSeverity.WARNING,
                    message=f'Table "{table.label}" mixes unrelated dietary requirements',
                    affected_guests=[guest.id for guest in clashing],
                    affected_tables=[table.id],
                ))
        
        if constraints.balance_bride_groom_sides:
            minority = ArrangementValidator._side_minority(seated)
            if minority:
                conflicts.append(ArrangementConflict(
                    type=ConflictType.BALANCE,
                    severity=ConflictSeverity.WARNING,
                    message=(
                        f'Table "{table.label}" is unbalanced: only {len(minority)} of '
                        f'{len(seated)} guests are from the {minority[0].bride_or_groom_side.value} side'
                    ),
                    affected_guests=[guest.id for guest in minority],
                    affected_tables=[table.id],
                ))
        
        return conflicts
    
    @staticmethod
    def _dietary_clashes(seated: List[Guest]) -> List[Guest]:
        """Guests whose restrictions share nothing with another restricted guest"""
        restricted = [guest for guest in seated if guest.dietary_restrictions]
        clashing = []
        for guest in restricted:
            mine = set(guest.dietary_restrictions)
            if any(not mine & set(other.dietary_restrictions) for other in restricted if other is not guest):
                clashing.append(guest)
        return clashing
    
    @staticmethod
    def _side_minority(seated: List[Guest]) -> List[Guest]:
        """Minority-side guests when a mixed table of three or more is lopsided"""
        if len(seated) <= 2:
            return []
        bride = [guest for guest in seated if guest.bride_or_groom_side.value == "bride"]
        groom = [guest for guest in seated if guest.bride_or_groom_side.value == "groom"]
        minority = bride if len(bride) < len(groom) else groom
        if not minority or len(minority) == len(seated):
            return []
        if len(minority) / len(seated) < ArrangementValidator.MIN_MINORITY_SHARE:
            return minority
        return []
    
    @staticmethod
    def _split_group_conflicts(
        guests: List[Guest],
        placement: Dict[str, str],
        constraints: ArrangementConstraints
    ) -> List[ArrangementConflict]:
        conflicts: List[ArrangementConflict] = []
        for group in GroupBuilder.build_groups(guests, constraints):
            if not group.constraints.must_sit_together or len(group.guests) < 2:
                continue
            used = []
            for guest in group.guests:
                table_id = placement.get(guest.id)
                if table_id is not None and table_id not in used:
                    used.append(table_id)
            if len(used) > 1:
                conflicts.append(ArrangementConflict(
                    type=ConflictType.RELATIONSHIP,
                    severity=ConflictSeverity.WARNING,
                    message=(
                        f"{group.constraints.relationship_type.value} group ({group.constraints.preferred_side} side) "
                        f"is split across {len(used)} tables"
                    ),
                    affected_guests=[guest.id for guest in group.guests],
                    affected_tables=used,
                ))
        return conflicts
    
    @staticmethod
    def _proximity_conflicts(
        guests: List[Guest],
        placement: Dict[str, str],
        table_by_id: Dict[str, Table],
        venue_elements: List[VenueElement],
        constraints: ArrangementConstraints
    ) -> List[ArrangementConflict]:
        if not constraints.optimize_venue_proximity:
            return []
        
        conflicts: List[ArrangementConflict] = []
        available_types = {element.type for element in venue_elements}
        for group in GroupBuilder.build_groups(guests, constraints):
            if group.priority < HIGH_PRIORITY_THRESHOLD:
                continue
            wanted = [
                preference for preference in group.constraints.proximity_preferences
                if preference.preference == "close" and preference.element_type in available_types
            ]
            if not wanted:
                continue
            target = max(wanted, key=lambda preference: preference.weight)
            
            for table_id in dict.fromkeys(placement.get(guest.id) for guest in group.guests):
                table = table_by_id.get(table_id)
                if table is None:
                    continue
                nearest = TableScorer.nearest_distance(table.position, venue_elements, target.element_type)
                if nearest is not None and nearest > constraints.preferred_table_distance:
                    conflicts.append(ArrangementConflict(
                        type=ConflictType.PROXIMITY,
                        severity=ConflictSeverity.INFO,
                        message=(
                            f'{group.constraints.relationship_type.value} guests at table "{table.label}" are '
                            f"{nearest:.0f} units from the {target.element_type.value}"
                        ),
                        affected_guests=[guest.id for guest in group.guests if placement.get(guest.id) == table_id],
                        affected_tables=[table_id],
                    ))
        return conflicts
    
    @staticmethod
    def compute_score(
        table_assignments: Dict[str, List[str]],
        guests: List[Guest],
        tables: List[Table],
        constraints: ArrangementConstraints,
        venue_elements: Optional[List[VenueElement]] = None,
        conflicts: Optional[List[ArrangementConflict]] = None
    ) -> float:
        """Overall quality in [0, 1]; 1.0 for a complete, conflict-free arrangement"""
        guest_by_id = ArrangementValidator._index_guests(guests)
        assigned = {guest_id for guest_ids in table_assignments.values() for guest_id in guest_ids}
        if not assigned or not guest_by_id:
            return 1.0
        
        if conflicts is None:
            conflicts = ArrangementValidator.validate(
                table_assignments, guests, tables, constraints, venue_elements=venue_elements
            )
        
        arranged = len(assigned & guest_by_id.keys()) / len(guest_by_id)
        intact = ArrangementValidator._intact_fraction(guests, table_assignments, constraints)
        table_quality = ArrangementValidator._table_quality(table_assignments, guest_by_id, tables, constraints)
        
        weights = ArrangementValidator.SCORE_WEIGHTS
        score = weights["arranged"] * arranged + weights["intact"] * intact + weights["tables"] * table_quality
        for conflict in conflicts:
            score *= 1.0 - ArrangementValidator.SEVERITY_PENALTIES[conflict.severity]
        
        return round(min(1.0, max(0.0, score)), 6)
    
    @staticmethod
    def _intact_fraction(
        guests: List[Guest],
        table_assignments: Dict[str, List[str]],
        constraints: ArrangementConstraints
    ) -> float:
        placement: Dict[str, str] = {}
        for table_id, guest_ids in table_assignments.items():
            for guest_id in guest_ids:
                placement.setdefault(guest_id, table_id)
        
        together = [
            group for group in GroupBuilder.build_groups(guests, constraints)
            if group.constraints.must_sit_together and len(group.guests) > 1
        ]
        if not together:
            return 1.0
        
        intact = 0
        for group in together:
            used = {placement.get(guest.id) for guest in group.guests}
            if len(used) == 1 and None not in used:
                intact += 1
        return intact / len(together)
    
    @staticmethod
    def _table_quality(
        table_assignments: Dict[str, List[str]],
        guest_by_id: Dict[str, Guest],
        tables: List[Table],
        constraints: ArrangementConstraints
    ) -> float:
        """Mean per-table fit for capacity, dietary mix and side balance"""
        table_by_id = {table.id: table for table in tables}
        grades: List[float] = []
        
        for table_id, guest_ids in table_assignments.items():
            table = table_by_id.get(table_id)
            seated = [guest_by_id[guest_id] for guest_id in guest_ids if guest_id in guest_by_id]
            if table is None or not seated:
                continue
            
            seats = sum(guest.seat_demand for guest in seated)
            capacity = 1.0 if seats <= table.capacity else max(0, table.capacity) / seats
            
            dietary = 1.0
            if constraints.consider_dietary_restrictions:
                kinds = list(dict.fromkeys(
                    frozenset(guest.dietary_restrictions) for guest in seated if guest.dietary_restrictions
                ))
                pairs = list(combinations(kinds, 2))
                if pairs:
                    disjoint = sum(1 for first, second in pairs if not first & second)
                    dietary = 1.0 - disjoint / len(pairs)
            
            balance = 1.0
            if constraints.balance_bride_groom_sides:
                minority = ArrangementValidator._side_minority(seated)
                if minority:
                    share = len(minority) / len(seated)
                    balance = share / ArrangementValidator.MIN_MINORITY_SHARE
            
            grades.append((capacity + dietary + balance) / 3)
        
        return sum(grades) / len(grades) if grades else 1.0
