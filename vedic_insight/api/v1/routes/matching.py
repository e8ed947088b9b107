"""
Kundali Milan (Matching) API Routes
"""

from fastapi import APIRouter, Depends

from vedic_insight.api.dependencies import get_reading_service
from vedic_insight.domain.matching.schemas import MatchInput, MatchResult
from vedic_insight.security.validators import validate_name
from vedic_insight.services.reading_service import ReadingService


router = APIRouter()


@router.post(
    "/matchmaking",
    response_model=MatchResult,
    summary="Ashta Koota matching of two Moon nakshatras",
)
def match_nakshatras(
    payload: MatchInput,
    service: ReadingService = Depends(get_reading_service),
):
    """
    Calculate Ashta Koota compatibility (36 gunas) between two partners.
    """
    if payload.boy_name:
        payload.boy_name = validate_name(payload.boy_name)
    if payload.girl_name:
        payload.girl_name = validate_name(payload.girl_name)

    return service.match(payload)
