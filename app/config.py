import logging
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    MONGO_URI: str = "mongodb://localhost:27017/ielts_admin"
    MONGO_TLS: bool = False

    # JWT Authentication (tokens are issued elsewhere, only verified here)
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",  # Admin frontend
        "http://localhost:3001",  # Client frontend
    ]

    class Config:
        env_file = ".env"


settings = Settings()

# Set up logging for the whole app
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

logger.info("[CONFIG] Settings loaded successfully")
logger.info(f"[CONFIG] Mongo URI: {settings.MONGO_URI[:10]}**** (redacted)")
logger.info(f"[CONFIG] JWT Secret: {settings.JWT_SECRET_KEY[:4]}**** (redacted)")
logger.info(f"[CONFIG] Mongo TLS: {settings.MONGO_TLS}")
