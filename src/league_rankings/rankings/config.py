"""Configuration module for League Rankings.

Run options are collected by the CLI and validated here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_TOP_N = 3
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RankingConfig(BaseModel):
    """Configuration for one ranking run."""

    input_path: Path = Field(..., description="Results file to read")
    top_n: int = Field(
        default=DEFAULT_TOP_N, ge=1, description="Number of teams per snapshot"
    )
    detailed: bool = Field(default=False, description="Render the detailed table")
    log_level: str = Field(default="ERROR", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v.upper()

    def to_log_dict(self) -> dict:
        return self.model_dump(mode="json")
