"""CLI application entry point for polyhive.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from polyhive import __version__
from polyhive.cli.output import (
    console,
    print_crossings,
    print_direction,
    print_error,
    print_header,
    print_malformed,
    print_pieces,
    print_points,
    print_polygon_info,
    print_removed_points,
    print_step,
    print_steps,
    print_success,
)
from polyhive.config import GeometryConfig, LoggingConfig, PolyhiveSettings
from polyhive.core import PolygonAnalyzer
from polyhive.exceptions import (
    AnalysisSaveError,
    DecompositionError,
    PolygonLoadError,
    PolyhiveError,
)
from polyhive.io import AnalysisWriter, PolygonReader
from polyhive.utils import configure_logging

EXIT_MALFORMED = 2

# Create the Typer app
app = typer.Typer(
    name="polyhive",
    help="Decompose a simple polygon into convex pieces and compute its centroid and area.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyhive[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def analyze(
    input_polygon: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON polygon file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-analysis.json)",
        ),
    ] = None,
    keep_colinear: Annotated[
        bool,
        typer.Option(
            "--keep-colinear",
            help="Keep vertices that sit on a straight run of edges",
        ),
    ] = False,
    max_depth: Annotated[
        int,
        typer.Option(
            "--max-depth",
            help="Deepest nesting of concavities before giving up",
            min=1,
            max=10000,
        ),
    ] = 256,
    show_steps: Annotated[
        bool,
        typer.Option(
            "--steps",
            help="Show every decomposer decision",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Analyze a polygon: screen it for crossings, split it into convex pieces,
    and compute its centroid and area.

    The polygon file holds the vertices in traversal order, either as
    [[x, y], ...] or as {"points": [{"x": ..., "y": ...}, ...]}.

    Example:
        polyhive L-shape.json

    This will create L-shape-analysis.json with the perimeter, the convex
    pieces, the fan triangles and the weighted centroid.

    Exits with code 2 when the polygon crosses or overlaps itself.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_polygon.exists():
        print_error(
            f"Input file not found: {input_polygon}",
            details=f"The file '{input_polygon}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_polygon.is_file():
        print_error(
            f"Input path is not a file: {input_polygon}",
            details="Please provide a path to a JSON polygon file.",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    # Create settings from CLI arguments
    settings = PolyhiveSettings(
        geometry=GeometryConfig(
            remove_colinear=not keep_colinear,
            max_recursion_depth=max_depth,
            record_steps=show_steps,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    output_path = output or AnalysisWriter.get_default_output_path(input_polygon)

    try:
        if not quiet:
            print_step("Loading polygon")

        polygon = PolygonReader(input_polygon).load()

        if not quiet:
            print_polygon_info(str(input_polygon), polygon.name, len(polygon.normalized()))
            print_points(polygon.normalized().points, verbose)

        analyzer = PolygonAnalyzer(settings.geometry, logger=logger)
        analysis = analyzer.analyze(polygon)

        if not quiet:
            print_step("Removing colinear points")
            if keep_colinear:
                console.print("  Skipped (--keep-colinear)")
            else:
                print_removed_points(analysis.removed_points)
            print_step("Checking for crossings")
            print_crossings(analysis.ordered_crossings())

        if analysis.is_malformed:
            AnalysisWriter(output_path).write(analysis)
            if not quiet:
                print_malformed(str(output_path), len(analysis.crossings))
            raise typer.Exit(code=EXIT_MALFORMED)

        if not quiet:
            print_step("Decomposing")
            if analysis.direction is not None:
                print_direction(analysis.direction)
            if show_steps:
                print_steps(analysis.steps)
            print_pieces(analysis.pieces, verbose)

        AnalysisWriter(output_path).write(analysis)

        if not quiet and analysis.centroid is not None:
            stats = analyzer.stats
            print_success(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                centroid=analysis.centroid,
                pieces=stats.piece_count,
                triangles=stats.triangle_count,
                chords_rejected=stats.chords_rejected,
            )

    except PolygonLoadError as e:
        print_error(f"Could not load polygon: {e.reason}")
        raise typer.Exit(code=1)
    except AnalysisSaveError as e:
        print_error(f"Could not save analysis: {e.reason}")
        raise typer.Exit(code=1)
    except DecompositionError as e:
        print_error(
            f"Decomposition failed: {e}",
            details="Try a larger --max-depth if the polygon is deeply nested.",
        )
        raise typer.Exit(code=1)
    except PolyhiveError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except KeyboardInterrupt:
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
