"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages for each pipeline stage.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polyhive.domain import Centroid, Curvature, DecompositionStep, Point, Segment, StepKind

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

_STEP_STYLES = {
    StepKind.CONVEX_TURN: "dim",
    StepKind.CONCAVITY: "yellow",
    StepKind.CHORD_REJECTED: "red",
    StepKind.CHORD_ACCEPTED: "green",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polyhive[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon_info(polygon_path: str, name: str | None, vertex_count: int) -> None:
    """Print polygon information.

    Args:
        polygon_path: Path to the polygon file
        name: Polygon label
        vertex_count: Number of distinct vertices
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(polygon_path)
    if name:
        line.append(f" ({name})")
    console.print(line)
    console.print(f"  {vertex_count} vertices")


def print_points(points: list[Point], verbose: bool) -> None:
    """Print the vertex list.

    Args:
        points: Vertices in traversal order
        verbose: Whether to list every vertex
    """
    if not verbose:
        return
    shown = ", ".join(p.describe() for p in points[:20])
    if len(points) > 20:
        shown += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(points) - 20} more)"
    console.print(f"  {shown}")


def print_removed_points(points: list[Point]) -> None:
    """Print vertices merged away as colinear.

    Args:
        points: Dropped vertices
    """
    if not points:
        console.print("  No colinear points")
        return
    console.print(f"  [yellow]{len(points)}[/yellow] colinear points removed")
    console.print(f"  {', '.join(p.describe() for p in points)}")


def print_direction(direction: Curvature) -> None:
    """Print the winding direction.

    Args:
        direction: LEFT for counter-clockwise, RIGHT for clockwise
    """
    winding = "counter-clockwise" if direction is Curvature.LEFT else "clockwise"
    console.print(f"  Convex direction: [bold]{direction.value}[/bold] {SYM_DOT} {winding}")


def print_crossings(crossings: list[Segment]) -> None:
    """Print the edges found crossing or overlapping.

    Args:
        crossings: Offending edges in perimeter order
    """
    if not crossings:
        console.print(f"  [green]{SYM_OK}[/green] No crossings")
        return

    table = Table(show_header=True, header_style="bold red", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("From")
    table.add_column("To")
    for i, segment in enumerate(crossings, start=1):
        table.add_row(str(i), segment.a.describe(), segment.b.describe())
    console.print(f"  [red]{len(crossings)}[/red] crossing edges")
    console.print(table)


def print_pieces(pieces: list[list[Segment]], verbose: bool) -> None:
    """Print the convex pieces.

    Args:
        pieces: Convex pieces, each a closed list of edges
        verbose: Whether to list the vertices of every piece
    """
    plural = "piece" if len(pieces) == 1 else "pieces"
    console.print(f"  [green]{len(pieces)}[/green] convex {plural}")
    if verbose:
        for i, piece in enumerate(pieces, start=1):
            corners = ", ".join(s.a.describe() for s in piece)
            console.print(f"  {i:>3}  {corners}")


def print_steps(steps: list[DecompositionStep]) -> None:
    """Print decomposer events in the order they happened.

    Args:
        steps: Recorded decomposer events
    """
    for step in steps:
        style = _STEP_STYLES[step.kind]
        indent = "  " * (step.depth + 1)
        console.print(f"{indent}[{style}]{step.describe()}[/{style}]")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    centroid: Centroid,
    pieces: int,
    triangles: int,
    chords_rejected: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the analysis file
        total_time_s: Total analysis time in seconds
        centroid: Centroid and area of the polygon
        pieces: Number of convex pieces
        triangles: Number of fan triangles
        chords_rejected: Candidate chords that were turned down
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    console.print(f"  Centroid {centroid.point.describe()} {SYM_DOT} area {centroid.weight:.10g}")
    console.print(
        f"  {pieces} pieces {SYM_DOT} {triangles} triangles {SYM_DOT} "
        f"{chords_rejected} chords rejected"
    )


def print_malformed(output_path: str, crossing_count: int) -> None:
    """Print the outcome for a self-crossing polygon.

    Args:
        output_path: Path to the analysis file
        crossing_count: Number of offending edges
    """
    console.print(
        f"\n[bold red]{SYM_ERR} Malformed polygon[/bold red] {SYM_DOT} "
        f"{crossing_count} edges cross or overlap"
    )
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
