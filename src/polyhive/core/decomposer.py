"""Decomposition of a simple polygon into convex pieces.

The decomposer walks the boundary looking at the turn at every vertex. A
turn against the polygon's winding direction marks a concavity, which is
hived off: a chord is drawn from the concave vertex to the end of some
later edge, the skipped edges plus the reversed chord become a new, smaller
perimeter, and the chord takes their place in the original one. Hived-off
perimeters are reduced the same way until every piece is convex.

Pending perimeters live on an explicit work stack rather than the call
stack, and their nesting depth is bounded.

Key classes:
- ConvexDecomposer: Configurable decomposer with an optional step observer

Key functions:
- find_convexities: Decompose with default settings
"""

from collections.abc import Callable
from typing import ClassVar

from polyhive.core.intersection import intersect
from polyhive.core.perimeter import validate_perimeter
from polyhive.core.turns import determine_convex_direction, segment_curvature
from polyhive.domain.analysis import DecompositionStep, StepKind
from polyhive.domain.shapes import Curvature, Segment
from polyhive.exceptions import ChordSearchError, RecursionDepthExceededError
from polyhive.utils import get_logger

logger = get_logger(__name__)

StepObserver = Callable[[DecompositionStep], None]


def crosses_nothing(chord: Segment, segments: list[Segment]) -> bool:
    """Check that a prospective chord stays clear of every boundary edge.

    Edges sharing an endpoint with the chord may touch it there, but not
    run along it.

    Args:
        chord: Prospective splitting segment
        segments: Boundary edges

    Returns:
        True if the chord meets no edge except at shared endpoints
    """
    for segment in segments:
        hit = intersect(segment, chord)
        if hit is None:
            continue
        if segment.shares_endpoint(chord) and not isinstance(hit, Segment):
            continue
        return False
    return True


class ConvexDecomposer:
    """Splits a simple polygon into convex pieces by hiving off concavities.

    The decomposer holds only configuration and is safe to reuse.

    Example:
        decomposer = ConvexDecomposer(max_depth=100)
        pieces = decomposer.decompose(perimeter)
    """

    DEFAULT_MAX_DEPTH: ClassVar[int] = 256

    def __init__(
        self,
        max_depth: int = DEFAULT_MAX_DEPTH,
        on_step: StepObserver | None = None,
    ) -> None:
        """Initialize the decomposer.

        Args:
            max_depth: Deepest nesting of hived-off pieces allowed
            on_step: Optional callback receiving every decision taken
        """
        self.max_depth = max_depth
        self.on_step = on_step

    def decompose(self, perimeter: list[Segment]) -> list[list[Segment]]:
        """Decompose a simple polygon into convex pieces.

        The perimeter must already have passed the crossing screen.

        Args:
            perimeter: Closed cyclic list of chained edges

        Returns:
            Convex pieces, each a closed cyclic list of edges. The first
            piece is what remains of the input perimeter.

        Raises:
            InsufficientSegmentsError: If the perimeter has fewer than 3 edges
            RecursionDepthExceededError: If pieces nest beyond max_depth
            ChordSearchError: If a concavity cannot be hived off
        """
        validate_perimeter(perimeter)

        pieces: list[list[Segment]] = []
        pending: list[tuple[list[Segment], int]] = [(list(perimeter), 0)]

        while pending:
            segments, depth = pending.pop()
            if depth > self.max_depth:
                raise RecursionDepthExceededError(depth, self.max_depth)

            hived = self._reduce(segments, depth)
            pieces.append(segments)
            pending.extend((piece, depth + 1) for piece in reversed(hived))

        logger.debug("Decomposition complete", pieces=len(pieces))
        return pieces

    def _reduce(self, segments: list[Segment], depth: int) -> list[list[Segment]]:
        """Hive concavities off a perimeter until it is convex.

        Args:
            segments: Perimeter to reduce, modified in place
            depth: Nesting depth of this perimeter

        Returns:
            The hived-off perimeters, in the order they were cut
        """
        hived: list[list[Segment]] = []
        if len(segments) == 3:
            return hived

        direction = determine_convex_direction(segments)

        i = 0
        checked = 0
        while len(segments) > 3 and checked < len(segments):
            j = (i + 1) % len(segments)
            s1 = segments[i]
            s2 = segments[j]

            if segment_curvature(s1, s2) is direction:
                self._emit(StepKind.CONVEX_TURN, s1, s2, depth)
                checked += 1
                i = j
                continue

            self._emit(StepKind.CONCAVITY, s1, s2, depth)

            # rotate so the edge before the concave vertex comes first
            ring = segments[i:] + segments[:i]
            k, chord = self._find_chord(ring, direction, depth)

            hived.append(ring[1 : k + 1] + [chord.reverse()])
            segments[:] = [ring[0], chord] + ring[k + 1 :]

            logger.debug(
                "Concavity hived off",
                vertex=s1.b.describe(),
                chord=chord.describe(),
                skipped=k,
                remaining=len(segments),
                depth=depth,
            )

            i = 0
            checked = 0

        return hived

    def _find_chord(
        self, ring: list[Segment], direction: Curvature, depth: int
    ) -> tuple[int, Segment]:
        """Search forward for a chord that hives off the concavity after ring[0].

        Candidates run from the concave vertex to the end of each later
        edge in turn. A candidate is accepted when turning from ring[0]
        into it follows the winding direction and it crosses no edge.

        Args:
            ring: Perimeter rotated so the edge ending at the concave vertex is first
            direction: Winding direction of the perimeter
            depth: Nesting depth, for reporting

        Returns:
            Tuple of (index of the last skipped edge, chord)

        Raises:
            ChordSearchError: If the search comes all the way around without success
        """
        first = ring[0]
        for k in range(2, len(ring) - 1):
            chord = Segment(first.b, ring[k].b)
            if segment_curvature(first, chord) is direction and crosses_nothing(chord, ring):
                self._emit(StepKind.CHORD_ACCEPTED, first, chord, depth)
                return k, chord
            self._emit(StepKind.CHORD_REJECTED, first, chord, depth)

        raise ChordSearchError(first.b.describe())

    def _emit(self, kind: StepKind, edge: Segment, candidate: Segment, depth: int) -> None:
        if self.on_step is not None:
            self.on_step(DecompositionStep(kind=kind, edge=edge, candidate=candidate, depth=depth))


def find_convexities(
    perimeter: list[Segment],
    max_depth: int = ConvexDecomposer.DEFAULT_MAX_DEPTH,
    on_step: StepObserver | None = None,
) -> list[list[Segment]]:
    """Decompose a simple polygon into convex pieces.

    Args:
        perimeter: Closed cyclic list of chained edges that does not cross itself
        max_depth: Deepest nesting of hived-off pieces allowed
        on_step: Optional callback receiving every decision taken

    Returns:
        Convex pieces, each a closed cyclic list of edges
    """
    return ConvexDecomposer(max_depth=max_depth, on_step=on_step).decompose(perimeter)
