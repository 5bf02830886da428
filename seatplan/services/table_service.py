"""
Table management service: runs auto-arrangement on behalf of an event
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from seatplan.core.config import settings
from seatplan.models import (
    ArrangementConstraints,
    ArrangementResult,
    Guest,
    RSVPStatus,
    Table,
    VenueElement,
)
from seatplan.services.auto_arrangement_service import AutoArrangementService

logger = logging.getLogger(__name__)

class TableService:
    """Prepares event data for the arrangement engine and applies its output"""
    
    def __init__(self, arrangement_service: Optional[AutoArrangementService] = None):
        self.arrangement_service = arrangement_service or AutoArrangementService()
    
    @staticmethod
    def resolve_constraints(overrides: Optional[Dict[str, Any]] = None) -> ArrangementConstraints:
        """Fill in any constraint the caller left out from configured defaults"""
        values = {
            "respect_relationships": settings.DEFAULT_RESPECT_RELATIONSHIPS,
            "consider_dietary_restrictions": settings.DEFAULT_CONSIDER_DIETARY_RESTRICTIONS,
            "keep_families_together": settings.DEFAULT_KEEP_FAMILIES_TOGETHER,
            "optimize_venue_proximity": settings.DEFAULT_OPTIMIZE_VENUE_PROXIMITY,
            "balance_bride_groom_sides": settings.DEFAULT_BALANCE_BRIDE_GROOM_SIDES,
            "min_guests_per_table": settings.DEFAULT_MIN_GUESTS_PER_TABLE,
            "max_guests_per_table": settings.DEFAULT_MAX_GUESTS_PER_TABLE,
            "preferred_table_distance": settings.DEFAULT_PREFERRED_TABLE_DISTANCE,
        }
        values.update({key: value for key, value in (overrides or {}).items() if value is not None})
        return ArrangementConstraints(**values)
    
    def auto_arrange(
        self,
        event_id: str,
        guests: List[Guest],
        tables: List[Table],
        venue_elements: List[VenueElement],
        overrides: Optional[Dict[str, Any]] = None
    ) -> Tuple[ArrangementResult, List[Guest]]:
        """Arrange an event's attending guests and return the result with updated guest records"""
        constraints = self.resolve_constraints(overrides)
        
        event_guests = [guest for guest in guests if self._in_event(guest.event_id, event_id)]
        event_tables = [table for table in tables if self._in_event(table.event_id, event_id)]
        event_elements = [element for element in venue_elements if self._in_event(element.event_id, event_id)]
        
        # Guests already seated at a locked table keep that seat
        locked_ids = {table.id for table in event_tables if table.is_locked}
        candidates = [
            guest for guest in event_guests
            if guest.rsvp_status == RSVPStatus.ACCEPTED and guest.table_assignment not in locked_ids
        ]
        logger.info(
            f"Event {event_id}: arranging {len(candidates)} of {len(event_guests)} guests "
            f"over {len(event_tables) - len(locked_ids)} unlocked tables"
        )
        
        result = self.arrangement_service.generate_arrangement(
            candidates, event_tables, event_elements, constraints
        )
        if not result.success:
            return result, event_guests
        
        # Seats outside locked tables are rebuilt, even for guests not attending
        updated = self.apply_table_assignments(
            event_guests,
            result.table_assignments,
            cleared=[guest.id for guest in event_guests if guest.table_assignment not in locked_ids],
        )
        return result, updated
    
    @staticmethod
    def apply_table_assignments(
        guests: List[Guest],
        table_assignments: Dict[str, List[str]],
        cleared: Iterable[str] = ()
    ) -> List[Guest]:
        """Return guest copies carrying their new table; ids in ``cleared`` lose any old seat first"""
        seat_of: Dict[str, str] = {}
        for table_id, guest_ids in table_assignments.items():
            for guest_id in guest_ids:
                seat_of.setdefault(guest_id, table_id)
        cleared = set(cleared)
        
        updated = []
        for guest in guests:
            if guest.id in seat_of:
                updated.append(guest.model_copy(update={"table_assignment": seat_of[guest.id]}))
            elif guest.id in cleared:
                updated.append(guest.model_copy(update={"table_assignment": None}))
            else:
                updated.append(guest.model_copy())
        return updated
    
    @staticmethod
    def _in_event(record_event_id: Optional[str], event_id: str) -> bool:
        return record_event_id is None or record_event_id == event_id
