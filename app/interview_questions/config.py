# interview_questions/config.py
from __future__ import annotations
import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError
from .models import INTERVIEW_DEFAULT_MODEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    openai_api_key: str = ""
    openai_base_url: Optional[str] = None
    model: str = Field(INTERVIEW_DEFAULT_MODEL, validation_alias="INTERVIEW_MODEL")
    timeout: float = Field(30.0, validation_alias="INTERVIEW_TIMEOUT")
    max_retries: int = Field(0, validation_alias="OPENAI_MAX_RETRIES")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
        frozen=True,
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


def load_config(env_file: Optional[str] = None) -> AppConfig:
    try:
        if env_file:
            return AppConfig(_env_file=env_file)
        return AppConfig()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
