"""Configuration management for polyhive.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Analysis pipeline settings
- LoggingConfig: Logging settings
- PolyhiveSettings: Main application settings
"""

from polyhive.config.settings import (
    GeometryConfig,
    LoggingConfig,
    PolyhiveSettings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PolyhiveSettings",
]
