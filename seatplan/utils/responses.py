"""
Response envelopes for the arrangement routes
"""

from typing import List
from fastapi.responses import JSONResponse

from seatplan.models import ArrangementResult, Guest
from seatplan.schemas.arrangement import (
    ArrangementErrorResponse,
    AutoArrangeData,
    AutoArrangeResponse,
)

ARRANGEMENT_FAILED = "ARRANGEMENT_FAILED"

def arrangement_response(result: ArrangementResult, guests: List[Guest]) -> JSONResponse:
    """Wrap an engine result; failed runs become a 500 with ARRANGEMENT_FAILED"""
    if not result.success:
        return arrangement_error(result.message, status_code=500)
    
    response = AutoArrangeResponse(
        message=result.message,
        data=AutoArrangeData(arrangement=result, guests=guests),
    )
    return JSONResponse(content=response.model_dump(mode="json"), status_code=200)

def arrangement_error(message: str, status_code: int = 400, details=None) -> JSONResponse:
    response = ArrangementErrorResponse(
        message=message,
        error_code=ARRANGEMENT_FAILED,
        details=details,
    )
    return JSONResponse(content=response.model_dump(mode="json"), status_code=status_code)
