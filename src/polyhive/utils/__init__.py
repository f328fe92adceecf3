"""Utility functions for polyhive.

This module provides utility functions including:

- Logging setup and configuration
- Per-analysis statistics
"""

from polyhive.utils.logging import (
    AnalysisLogger,
    AnalysisStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "AnalysisLogger",
    "AnalysisStats",
    "configure_logging",
    "get_logger",
]
