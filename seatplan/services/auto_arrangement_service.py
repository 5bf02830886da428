"""
Automatic guest-to-table arrangement
"""

import logging
from typing import Dict, List

from seatplan.models import (
    ArrangementConstraints,
    ArrangementResult,
    Guest,
    Table,
    VenueElement,
)
from seatplan.services.assignment import Assigner
from seatplan.services.grouping import GroupBuilder
from seatplan.services.validation import ArrangementValidator

logger = logging.getLogger(__name__)

class AutoArrangementService:
    """Groups guests, ranks tables, seats groups and grades the outcome.
    
    A run is a pure computation over the records it is handed: nothing is
    stored between calls and caller objects are never modified, so one
    instance can serve concurrent requests.
    """
    
    def generate_arrangement(
        self,
        guests: List[Guest],
        tables: List[Table],
        venue_elements: List[VenueElement],
        constraints: ArrangementConstraints
    ) -> ArrangementResult:
        """Arrange the given (already filtered) guests around the given tables"""
        try:
            if not guests:
                return self._vacuous_result("No guests to arrange")
            if not any(not table.is_locked for table in tables):
                return self._vacuous_result("No unlocked tables available for auto-arrangement")
            
            groups = GroupBuilder.build_groups(guests, constraints)
            assignments = Assigner.assign(groups, tables, venue_elements, constraints)
            conflicts = ArrangementValidator.validate(
                assignments, guests, tables, constraints, venue_elements=venue_elements
            )
            score = ArrangementValidator.compute_score(
                assignments, guests, tables, constraints,
                venue_elements=venue_elements, conflicts=conflicts
            )
        except Exception as exc:
            logger.exception("Auto-arrangement failed")
            return ArrangementResult(
                success=False,
                message=f"Auto-arrangement failed: {exc}",
                arranged_guests=0,
                table_assignments={},
                conflicts=[],
                score=0.0,
            )
        
        arranged = self.count_arranged(assignments)
        total = len({guest.id for guest in guests})
        if arranged < total:
            logger.warning(f"Auto-arrangement left {total - arranged} of {total} guests unseated")
        logger.info(
            f"Arranged {arranged} guests in {len(groups)} groups across {len(assignments)} tables "
            f"(score {score:.3f}, {len(conflicts)} conflicts)"
        )
        
        return ArrangementResult(
            success=True,
            message=f"Successfully arranged {arranged} guests across {len(assignments)} tables",
            arranged_guests=arranged,
            table_assignments=assignments,
            conflicts=conflicts,
            score=score,
        )
    
    @staticmethod
    def count_arranged(table_assignments: Dict[str, List[str]]) -> int:
        return len({guest_id for guest_ids in table_assignments.values() for guest_id in guest_ids})
    
    @staticmethod
    def _vacuous_result(message: str) -> ArrangementResult:
        logger.info(message)
        return ArrangementResult(
            success=True,
            message=message,
            arranged_guests=0,
            table_assignments={},
            conflicts=[],
            score=1.0,
        )
