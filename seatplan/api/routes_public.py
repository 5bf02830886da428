"""
Public API routes - no authentication required
"""

from fastapi import APIRouter

from seatplan.core.config import settings

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": settings.APP_NAME}
