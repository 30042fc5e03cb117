"""Configuration for the genv command line tool.

Environment Variables:
    GENV_LOG_LEVEL: Log level (DEBUG/INFO/WARNING/ERROR, default: WARNING)
    GENV_LOG_JSON: Emit JSON log lines instead of console output (default: false)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class GenvSettings(BaseSettings):
    """CLI settings - read from environment variables"""

    log_level: str = Field(default="WARNING", description="Log level")
    log_json: bool = Field(default=False, description="Emit JSON log lines")

    model_config = SettingsConfigDict(
        env_prefix="GENV_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
