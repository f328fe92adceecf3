"""Logging utilities for Polyhive."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class AnalysisStats:
    """Statistics from one analysis run."""

    vertex_count: int = 0
    segment_count: int = 0
    colinear_removed: int = 0
    crossing_count: int = 0
    piece_count: int = 0
    triangle_count: int = 0
    chords_tried: int = 0
    chords_accepted: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate analysis duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def chords_rejected(self) -> int:
        return self.chords_tried - self.chords_accepted


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger of the same name.

    Events go through stdlib logging whether or not configure_logging has
    run, so library calls stay silent until an application adds handlers.

    Args:
        name: Logger name, usually the module's __name__

    Returns:
        Lazily bound structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polyhive")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class AnalysisLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = AnalysisStats()

    def log_polygon_loaded(self, name: str | None, vertices: int) -> None:
        """Log the polygon entering the pipeline."""
        self._logger.debug("Analyzing polygon", polygon=name, vertices=vertices)
        self._stats.vertex_count = vertices

    def log_colinear_removed(self, removed: int, segments: int) -> None:
        """Log colinear vertex cleanup."""
        if removed:
            self._logger.info("Colinear points removed", removed=removed, segments=segments)
        self._stats.colinear_removed = removed
        self._stats.segment_count = segments

    def log_crossings(self, descriptions: list[str]) -> None:
        """Log the outcome of the crossing screen."""
        if descriptions:
            self._logger.warning(
                "Malformed polygon",
                crossings=len(descriptions),
                segments=descriptions,
            )
        else:
            self._logger.debug("No crossed segments")
        self._stats.crossing_count = len(descriptions)

    def log_direction(self, direction: str) -> None:
        """Log the winding direction."""
        self._logger.debug("Convex direction", direction=direction)

    def log_chord(self, accepted: bool) -> None:
        """Count a candidate chord."""
        self._stats.chords_tried += 1
        if accepted:
            self._stats.chords_accepted += 1

    def log_decomposition(self, pieces: int) -> None:
        """Log convex decomposition results."""
        self._logger.info(
            "Convex decomposition",
            pieces=pieces,
            chords_tried=self._stats.chords_tried,
            chords_accepted=self._stats.chords_accepted,
        )
        self._stats.piece_count = pieces

    def log_centroid(self, x: float, y: float, area: float, triangles: int) -> None:
        """Log the final centroid."""
        self._logger.info(
            "Centroid found",
            x=x,
            y=y,
            area=area,
            triangles=triangles,
        )
        self._stats.triangle_count = triangles

    def log_analysis_error(self, error: Exception) -> None:
        """Log an aborted analysis."""
        self._logger.error(
            "Analysis failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> AnalysisStats:
        """Get current analysis statistics."""
        return self._stats
