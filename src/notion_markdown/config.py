import logging
import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    notion_token: Optional[str] = None
    timeout_ms: int = 60_000
    log_level: str = "WARNING"

    @field_validator("timeout_ms")
    @classmethod
    def _positive_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("timeout_ms must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value


def load_settings() -> Settings:
    """Read settings from the environment, loading a .env file first if present.

    Raises:
        pydantic.ValidationError: A variable holds an unusable value.
    """
    load_dotenv()
    return Settings(
        notion_token=os.getenv("NOTION_TOKEN"),
        timeout_ms=os.getenv("NOTION_TIMEOUT_MS", "60000"),
        log_level=os.getenv("NOTION_MARKDOWN_LOG_LEVEL", "WARNING"),
    )
