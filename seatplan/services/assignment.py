"""
Greedy guest-to-table assignment
"""

import logging
from typing import Dict, List

from seatplan.models import (
    ArrangementConstraints,
    GuestGroup,
    Table,
    TableSeating,
    VenueElement,
)
from seatplan.services.grouping import GroupBuilder
from seatplan.services.scoring import TableScorer

logger = logging.getLogger(__name__)

class Assigner:
    """Seats guest groups table by table in a single pass, without backtracking"""
    
    @staticmethod
    def assign(
        groups: List[GuestGroup],
        tables: List[Table],
        venue_elements: List[VenueElement],
        constraints: ArrangementConstraints
    ) -> Dict[str, List[str]]:
        """Return table id -> seated guest ids; tables left empty are omitted"""
        available = [table for table in tables if not table.is_locked]
        if not available or not groups:
            return {}
        
        seating: Dict[str, TableSeating] = {
            table.id: TableSeating(table_id=table.id, remaining=max(0, table.capacity))
            for table in available
        }
        
        for group in groups:
            Assigner._seat_group(group, available, venue_elements, constraints, seating)
        
        return {
            table.id: [guest.id for guest in seating[table.id].guests]
            for table in available
            if seating[table.id].guests
        }
    
    @staticmethod
    def _seat_group(
        group: GuestGroup,
        tables: List[Table],
        venue_elements: List[VenueElement],
        constraints: ArrangementConstraints,
        seating: Dict[str, TableSeating]
    ) -> None:
        pending = group
        part = 1
        
        while pending.guests:
            scores = TableScorer.score_tables_for_group(pending, tables, venue_elements, constraints, seating)
            if not scores:
                logger.warning(
                    f"No table has room for {len(pending.guests)} guest(s) of group {group.id}; leaving them unseated"
                )
                return
            
            whole = [score for score in scores if seating[score.table_id].remaining >= pending.seat_demand]
            if whole:
                best = seating[whole[0].table_id]
                best.seat(pending.guests)
                logger.debug(f"Seated group {pending.id} ({len(pending.guests)} guests) at table {best.table_id}")
                return
            
            best = seating[scores[0].table_id]
            taken, left = GroupBuilder.split_to_fit(pending.guests, best.remaining)
            best.seat(taken)
            logger.debug(
                f"Split group {group.id}: {len(taken)} guest(s) at table {best.table_id}, {len(left)} still waiting"
            )
            part += 1
            pending = GroupBuilder.remainder(group, left, part)
