import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from vedic_insight.api.v1.router import api_router
from vedic_insight.config import settings
from vedic_insight.domain.errors import ReadingError
from vedic_insight.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Vedic Insight", debug=settings.DEBUG)

# 1. Enable CORS for the browser front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 2. Domain errors become 400s
@app.exception_handler(ReadingError)
async def reading_error_handler(request: Request, exc: ReadingError):
    logger.warning(f"Rejected {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


# 3. Include API Routes
app.include_router(api_router, prefix="/api/v1")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    logger.info(f"{settings.APP_NAME} starting on http://{args.host}:{args.port}/api/v1")

    uvicorn.run("vedic_insight.main:app", host=args.host, port=args.port, reload=settings.DEBUG)
