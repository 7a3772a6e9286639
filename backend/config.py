import logging

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    ANTHROPIC_API_KEY: str = ""
    COMPLETION_MODEL: str = "claude-3-5-haiku-latest"
    COMPLETION_MAX_TOKENS: int = 1024
    MAX_QUESTIONS: int = 20
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

if not settings.ANTHROPIC_API_KEY:
    logger.warning(
        "ANTHROPIC_API_KEY is not set. Question generation and grading will fail until configured."
    )
