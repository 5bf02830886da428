"""
Table arrangement API routes
"""

from fastapi import APIRouter

from seatplan.schemas.arrangement import AutoArrangeRequest
from seatplan.services.table_service import TableService
from seatplan.utils.responses import arrangement_response

router = APIRouter()

table_service = TableService()

@router.post("/events/{event_id}/tables/auto-arrange")
def auto_arrange_tables(event_id: str, payload: AutoArrangeRequest):
    """Run automatic seating for an event and return the proposed assignments"""
    overrides = payload.constraints.model_dump(exclude_none=True) if payload.constraints else None
    
    result, guests = table_service.auto_arrange(
        event_id=event_id,
        guests=payload.guests,
        tables=payload.tables,
        venue_elements=payload.venue_elements,
        overrides=overrides,
    )
    
    return arrangement_response(result, guests)
