from pydantic_settings import BaseSettings
from typing import List, Literal


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "vedic-insight"
    ENV: str = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # ─── HTTP ─────────────────────────────
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # ─── Numerology defaults ──────────────
    NUMEROLOGY_DEFAULT_SYSTEM: Literal["chaldean", "pythagorean"] = "chaldean"
    NUMEROLOGY_USE_MASTER_NUMBERS: bool = False


    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
