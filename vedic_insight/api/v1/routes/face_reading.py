from fastapi import APIRouter, Depends

from vedic_insight.api.dependencies import get_reading_service
from vedic_insight.domain.face_reading.schemas import FaceMetrics, FaceAnalysis
from vedic_insight.services.reading_service import ReadingService


router = APIRouter()


@router.post(
    "/face-reading",
    response_model=FaceAnalysis,
    summary="Score facial metrics (Mukha Samudrika)",
)
def face_reading(
    payload: FaceMetrics,
    service: ReadingService = Depends(get_reading_service),
):
    return service.face_reading_analysis(payload)
