from fastapi import APIRouter, Depends

from vedic_insight.api.dependencies import get_reading_service
from vedic_insight.domain.numerology.schemas import NumerologyInput, NumerologyResult
from vedic_insight.security.validators import validate_name, validate_date_format
from vedic_insight.services.reading_service import ReadingService


router = APIRouter()


@router.post(
    "/numerology",
    response_model=NumerologyResult,
    summary="Numerology reading from name and birth date",
)
def numerology_reading(
    payload: NumerologyInput,
    service: ReadingService = Depends(get_reading_service),
):
    """
    Mulank, Bhagyank and Namank with charts and a short lucky-day forecast.
    """
    payload.name = validate_name(payload.name)
    validate_date_format(payload.dob)

    return service.numerology_reading(payload)
