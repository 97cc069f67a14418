"""Application settings powered by Pydantic BaseSettings."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pairrank.constants import DEFAULT_OUTPUT_FILENAME


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PAIRRANK_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed: int | None = None
    output_path: Path = Path(DEFAULT_OUTPUT_FILENAME)
    json_logs: bool = False
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for the configured level name."""
        return logging.getLevelNamesMapping()[self.log_level]


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
