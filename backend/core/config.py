import os
import logging
from functools import lru_cache
from typing import List

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


def _split_origins(value: str) -> List[str]:
    return [o.strip() for o in value.split(",") if o.strip()]


class Settings(BaseModel):
    SERVICE_NAME: str = "Video Call Service"
    SIGNALING_SERVER_URL: str = "http://localhost:4000"
    CORS_ORIGINS: List[str] = _split_origins(DEFAULT_CORS_ORIGINS)
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults"""
        return cls(
            SERVICE_NAME=os.getenv("SERVICE_NAME", "Video Call Service"),
            SIGNALING_SERVER_URL=os.getenv("SIGNALING_SERVER_URL", "http://localhost:4000"),
            CORS_ORIGINS=_split_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
            HOST=os.getenv("HOST", "0.0.0.0"),
            PORT=int(os.getenv("PORT", "8080")),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache()
def get_settings() -> Settings:
    settings = Settings.from_env()
    logger.debug(f"[Config] Signaling server: {settings.SIGNALING_SERVER_URL}")
    return settings
