from fastapi import APIRouter, Depends

from vedic_insight.api.dependencies import get_reading_service
from vedic_insight.domain.palmistry.schemas import PalmInput, PalmAnalysis
from vedic_insight.services.reading_service import ReadingService


router = APIRouter()


@router.post(
    "/palmistry",
    response_model=PalmAnalysis,
    summary="Score palm metrics",
)
def palm_reading(
    payload: PalmInput,
    service: ReadingService = Depends(get_reading_service),
):
    return service.palm_reading(payload)
