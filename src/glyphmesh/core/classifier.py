"""Contour classification into outer boundaries and holes.

Each loop is classified independently by the turn at its extremal vertex:
the vertex with minimum x (ties broken by minimum y) is always convex, so
the sign of the turn there gives the loop's winding. Because the y axis
points down, a positive turn marks an outer loop and a non-positive turn a
hole.

Holes are rotated so that their maximum-x vertex comes first; the hole
eliminator bridges from that vertex.
"""

from dataclasses import dataclass, field

from glyphmesh.core.geometry import orientation
from glyphmesh.domain import Loop, LoopKind, Point, VertexBuffer


def anchor_index(points: list[Point]) -> int:
    """Index of the point with minimum x, ties broken by minimum y."""
    best = 0
    for i, p in enumerate(points):
        q = points[best]
        if p.x < q.x or (p.x == q.x and p.y < q.y):
            best = i
    return best


def hole_anchor_index(points: list[Point]) -> int:
    """Index of the point with maximum x, ties broken by maximum y."""
    best = 0
    for i, p in enumerate(points):
        q = points[best]
        if p.x > q.x or (p.x == q.x and p.y > q.y):
            best = i
    return best


def is_outer(points: list[Point]) -> bool:
    """Check whether a loop bounds filled area.

    Args:
        points: Points of the loop in cyclic order (at least 3)

    Returns:
        True for an outer loop, False for a hole
    """
    n = len(points)
    j = anchor_index(points)
    return orientation(points[(j - 1) % n], points[j], points[(j + 1) % n]) > 0


def rotate_to_anchor(loop: Loop, vertices: VertexBuffer) -> Loop:
    """Rotate a hole loop so its maximum-x vertex is first."""
    k = hole_anchor_index(vertices.points(loop))
    return loop[k:] + loop[:k]


@dataclass
class ClassifiedLoops:
    """Loops of one shape split by kind.

    Attributes:
        outer_loops: Loops bounding filled regions
        holes: Hole loops, each rotated so its bridge anchor is first
    """

    outer_loops: list[Loop] = field(default_factory=list)
    holes: list[Loop] = field(default_factory=list)

    def has_holes(self) -> bool:
        return len(self.holes) > 0

    def kind_counts(self) -> dict[LoopKind, int]:
        return {LoopKind.OUTER: len(self.outer_loops), LoopKind.HOLE: len(self.holes)}


class ContourClassifier:
    """Classifies the loops of a shape as outer boundaries or holes.

    The classifier is stateless; a shape with several disjoint outer regions
    (the dot and stem of "i") yields several outer loops.
    """

    def classify_loop(self, loop: Loop, vertices: VertexBuffer) -> LoopKind:
        """Classify a single loop."""
        return LoopKind.OUTER if is_outer(vertices.points(loop)) else LoopKind.HOLE

    def classify(self, loops: list[Loop], vertices: VertexBuffer) -> ClassifiedLoops:
        """Split loops into outer loops and anchored holes.

        Args:
            loops: Loops of at least 3 vertices each
            vertices: Buffer the loops index into

        Returns:
            ClassifiedLoops with holes rotated to their bridge anchor
        """
        result = ClassifiedLoops()
        for loop in loops:
            if self.classify_loop(loop, vertices) is LoopKind.OUTER:
                result.outer_loops.append(list(loop))
            else:
                result.holes.append(rotate_to_anchor(loop, vertices))
        return result
