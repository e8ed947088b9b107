from functools import lru_cache

from vedic_insight.services.reading_service import ReadingService


@lru_cache(maxsize=1)
def get_reading_service() -> ReadingService:
    """
    Engines are stateless, so one service instance serves every request.
    """
    return ReadingService()
