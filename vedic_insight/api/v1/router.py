from fastapi import APIRouter

from vedic_insight.api.v1.routes.health import router as health_router
from vedic_insight.api.v1.routes.numerology import router as numerology_router
from vedic_insight.api.v1.routes.astrology import router as astrology_router
from vedic_insight.api.v1.routes.palmistry import router as palmistry_router
from vedic_insight.api.v1.routes.face_reading import router as face_reading_router
from vedic_insight.api.v1.routes.matching import router as matching_router

api_router = APIRouter()

# ─────────────────────────────────────────────
# Public Routes
# ─────────────────────────────────────────────

api_router.include_router(
    health_router,
    tags=["Health"],
)

# ─────────────────────────────────────────────
# Readings
# ─────────────────────────────────────────────

api_router.include_router(numerology_router, tags=["Numerology"])
api_router.include_router(astrology_router, tags=["Astrology"])
api_router.include_router(palmistry_router, tags=["Palmistry"])
api_router.include_router(face_reading_router, tags=["Face Reading"])
api_router.include_router(matching_router, tags=["Matchmaking"])
