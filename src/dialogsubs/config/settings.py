from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dialogsubs.exceptions import ConfigurationError


OutputFormat = Literal["pseudo", "srt"]


class Settings(BaseSettings):
    """
    Runtime configuration for dialogsubs.

    All settings are loaded from environment variables with the
    `DIALOGSUBS_` prefix and optional `.env` support.

    Speaking-rate and readability thresholds are deliberately not here:
    they are fixed constants of the timing and splitting modules.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIALOGSUBS_",
        env_file=".env",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Segmentation
    # ------------------------------------------------------------------
    auto_split: bool = Field(
        default=True,
        description="Re-split segments longer than four words after timing.",
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_format: OutputFormat = Field(
        default="pseudo",
        description="Output format for generated subtitles: pseudo or srt.",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    def to_public_dict(self) -> dict:
        """
        Return a dictionary of settings suitable for logging or CLI display.
        """
        return {
            "auto_split": self.auto_split,
            "output_format": self.output_format,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Build Settings, turning validation failures into ConfigurationError."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc.errors()[0]['msg']}") from exc
