from fastapi import APIRouter, Depends

from vedic_insight.api.dependencies import get_reading_service
from vedic_insight.domain.astrology.schemas import AstroInput, AstroChart
from vedic_insight.security.validators import (
    validate_name,
    validate_place,
    validate_date_format,
    validate_time_format,
)
from vedic_insight.services.reading_service import ReadingService


router = APIRouter()


@router.post(
    "/astrology",
    response_model=AstroChart,
    summary="Simulated Vedic birth chart",
)
def astrology_chart(
    payload: AstroInput,
    service: ReadingService = Depends(get_reading_service),
):
    """
    Lagna, planets, houses, Vimshottari dasha, yogas and panchang.

    Name and place are optional and only echoed back in the chart meta.
    """
    validate_date_format(payload.dob)
    validate_time_format(payload.tob)
    if payload.name:
        payload.name = validate_name(payload.name)
    if payload.pob:
        payload.pob = validate_place(payload.pob)

    return service.astrology_reading(payload)
