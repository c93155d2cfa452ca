"""Hole elimination by bridging holes into their enclosing outer loop.

Each hole is connected to the outer boundary around it by a bridge: two
duplicated vertices that turn the hole into a slit of the outer loop. After
all holes are merged every outer loop is a single hole-free simple polygon
that the ear clipper can consume.

Bridging a hole:
1. Cast a horizontal ray from the hole's anchor (maximum-x vertex) towards
   increasing x and find the nearest crossing with an outer edge.
2. Pick the outer vertex visible from the anchor: the crossing edge's
   endpoint, unless other outer vertices occlude it, in which case the
   occluding vertex nearest in angle to the ray.
3. Splice the hole plus duplicates of the two bridge endpoints into the
   outer loop right after the visible vertex.

Holes are processed rightmost first so that a bridge built earlier can never
be crossed by a bridge built later for a hole further left.
"""

import logging
from dataclasses import dataclass

from glyphmesh.core.geometry import orientation, point_in_triangle
from glyphmesh.domain import Loop, Point, VertexBuffer
from glyphmesh.exceptions import UnenclosedHoleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeCrossing:
    """Nearest crossing of a hole's ray with an outer edge.

    Attributes:
        loop_index: Index of the outer loop owning the edge
        position: Position of the edge's start vertex within that loop
        x: X coordinate where the ray meets the edge
    """

    loop_index: int
    position: int
    x: float


def find_edge_crossing(
    anchor: Point, outer_loops: list[Loop], vertices: VertexBuffer
) -> EdgeCrossing | None:
    """Find the nearest outer edge crossed by a ray from anchor towards +x.

    Only edges running towards increasing y that straddle the anchor's y are
    candidates; horizontal edges never are.

    Args:
        anchor: Start of the ray
        outer_loops: Current outer loops (including previously merged holes)
        vertices: Buffer the loops index into

    Returns:
        The nearest crossing strictly right of the anchor, or None
    """
    best: EdgeCrossing | None = None

    for loop_index, loop in enumerate(outer_loops):
        n = len(loop)
        for position in range(n):
            a = vertices[loop[position]]
            b = vertices[loop[(position + 1) % n]]
            if a.y == b.y or not (a.y <= anchor.y <= b.y):
                continue

            x = a.x + (b.x - a.x) * (anchor.y - a.y) / (b.y - a.y)
            if x > anchor.x and (best is None or x < best.x):
                best = EdgeCrossing(loop_index, position, x)

    return best


def _locally_inside(loop: Loop, position: int, q: Point, vertices: VertexBuffer) -> bool:
    """Check whether q lies in the interior wedge at a loop vertex."""
    n = len(loop)
    p = vertices[loop[(position - 1) % n]]
    v = vertices[loop[position]]
    nxt = vertices[loop[(position + 1) % n]]

    if orientation(p, v, nxt) >= 0:
        return orientation(p, v, q) >= 0 and orientation(v, nxt, q) >= 0
    return orientation(p, v, q) >= 0 or orientation(v, nxt, q) >= 0


def _nearest_occluder(
    anchor: Point, c: Point, position: int, loop: Loop, vertices: VertexBuffer
) -> int:
    """Pick the vertex nearest in angle to the ray inside triangle (anchor, a, c).

    Angles are measured from the anchor, so the candidate whose direction
    from the anchor has the largest x component wins; ties go to the closer
    vertex. With no vertex inside the triangle the edge start `a` is kept.
    """
    a = vertices[loop[position]]
    best = position
    offset = a - anchor
    best_direction = offset.normalize().x
    best_distance = offset.length()

    for k, index in enumerate(loop):
        p = vertices[index]
        if not point_in_triangle(anchor, a, c, p):
            continue

        offset = p - anchor
        direction = offset.normalize().x
        distance = offset.length()
        if direction > best_direction or (
            direction == best_direction and distance < best_distance
        ):
            best, best_direction, best_distance = k, direction, distance

    return best


def find_visible_vertex(
    anchor: Point, crossing: EdgeCrossing, loop: Loop, vertices: VertexBuffer
) -> int:
    """Find the position of an outer vertex the anchor can be bridged to.

    Args:
        anchor: Hole anchor the ray was cast from
        crossing: Nearest edge crossing of the ray
        loop: Outer loop owning the crossed edge
        vertices: Buffer the loop indexes into

    Returns:
        Position within `loop` of the visible vertex
    """
    n = len(loop)
    position = crossing.position
    a = vertices[loop[position]]
    b = vertices[loop[(position + 1) % n]]

    # The ray hits an edge endpoint exactly: that endpoint is visible.
    if a.y == anchor.y:
        best = position
    elif b.y == anchor.y:
        best = (position + 1) % n
    else:
        best = _nearest_occluder(anchor, Point(crossing.x, anchor.y), position, loop, vertices)

    # Earlier bridges leave coincident vertices in the loop; pick the copy
    # whose interior wedge faces the anchor.
    target = vertices[loop[best]]
    duplicates = [k for k, index in enumerate(loop) if vertices[index] == target]
    if len(duplicates) > 1:
        for k in duplicates:
            if _locally_inside(loop, k, anchor, vertices):
                return k

    return best


class HoleEliminator:
    """Merges holes into the outer loops that enclose them.

    Example:
        eliminator = HoleEliminator()
        bridges = eliminator.eliminate(vertices, outer_loops, holes)
        # outer_loops now hold hole-free polygons
    """

    def bridge_hole(self, hole: Loop, outer_loops: list[Loop], vertices: VertexBuffer) -> int:
        """Bridge a single hole into the outer loop around it.

        The owning outer loop is replaced in `outer_loops` by the spliced
        loop, and two bridge vertices are appended to `vertices`.

        Args:
            hole: Hole loop whose first vertex is its anchor
            outer_loops: Current outer loops, updated in place
            vertices: Shared vertex buffer, grows by two

        Returns:
            Index of the outer loop the hole was merged into

        Raises:
            UnenclosedHoleError: If no outer edge lies to the right of the hole
        """
        anchor = vertices[hole[0]]
        crossing = find_edge_crossing(anchor, outer_loops, vertices)
        if crossing is None:
            raise UnenclosedHoleError(anchor.to_tuple())

        loop = outer_loops[crossing.loop_index]
        visible = find_visible_vertex(anchor, crossing, loop, vertices)

        anchor_copy = vertices.append(anchor)
        visible_copy = vertices.append(vertices[loop[visible]])
        outer_loops[crossing.loop_index] = (
            loop[: visible + 1] + hole + [anchor_copy, visible_copy] + loop[visible + 1 :]
        )

        logger.debug(
            "Bridged hole at (%.2f, %.2f) to vertex %d of outer loop %d",
            anchor.x, anchor.y, loop[visible], crossing.loop_index
        )
        return crossing.loop_index

    def eliminate(
        self, vertices: VertexBuffer, outer_loops: list[Loop], holes: list[Loop]
    ) -> int:
        """Merge every hole into its enclosing outer loop.

        Args:
            vertices: Shared vertex buffer, grows by two per hole
            outer_loops: Outer loops, updated in place
            holes: Hole loops anchored at their maximum-x vertex

        Returns:
            Number of bridges built

        Raises:
            UnenclosedHoleError: If a hole is not enclosed by any outer loop
        """
        ordered = sorted(holes, key=lambda hole: vertices[hole[0]].x, reverse=True)
        for hole in ordered:
            self.bridge_hole(hole, outer_loops, vertices)
        return len(ordered)
