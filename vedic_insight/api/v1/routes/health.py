from fastapi import APIRouter

from vedic_insight.config import settings

router = APIRouter()


@router.get("/health", summary="Health check")
def health_check():
    """
    Basic health check endpoint.
    """
    return {
        "status": "ok",
        "service": settings.APP_NAME,
    }
