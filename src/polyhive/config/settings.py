"""Configuration settings for Polyhive."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for the analysis pipeline.

    Coordinates are compared exactly; there is no tolerance setting.
    """

    remove_colinear: bool = Field(
        default=True,
        description="Merge straight runs of edges before screening and decomposition",
    )
    max_recursion_depth: int = Field(
        default=256,
        ge=1,
        le=10000,
        description="Deepest nesting of hived-off pieces before decomposition aborts",
    )
    record_steps: bool = Field(
        default=False,
        description="Keep every decomposer decision in the analysis result",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyhiveSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
