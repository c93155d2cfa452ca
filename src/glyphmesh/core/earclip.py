"""Ear-clipping triangulation of hole-free simple polygons.

A vertex is convex when the turn (predecessor, vertex, successor) is
non-negative, and an ear when it is convex and no other vertex of the polygon
lies inside that triangle or on its edges. Clipping an ear removes one vertex and
emits one triangle; only the two neighbours of the clipped vertex can change
ear status.

Bridged polygons contain coincident vertex pairs. Ears whose triangle has
zero area are clipped without emitting a triangle, so every emitted triangle
covers real area.
"""

import logging

from glyphmesh.core.geometry import orientation
from glyphmesh.domain import Loop, Triangle, VertexBuffer
from glyphmesh.exceptions import EarClippingError

logger = logging.getLogger(__name__)


def is_ear(loop: Loop, position: int, vertices: VertexBuffer) -> bool:
    """Check whether the vertex at `position` is an ear of the loop.

    Args:
        loop: Polygon as a cyclic list of vertex indices
        position: Position of the vertex within the loop
        vertices: Buffer the loop indexes into

    Returns:
        True if the vertex is convex and its triangle holds no other vertex
    """
    n = len(loop)
    prev = loop[(position - 1) % n]
    cur = loop[position]
    nxt = loop[(position + 1) % n]
    a, b, c = vertices[prev], vertices[cur], vertices[nxt]

    turn = orientation(a, b, c)
    if turn < 0:
        return False
    if turn == 0:
        return True

    for index in loop:
        q = vertices[index]
        if q == a or q == b or q == c:
            continue
        # Points on the triangle edges block the ear too.
        if orientation(a, b, q) >= 0 and orientation(b, c, q) >= 0 and orientation(c, a, q) >= 0:
            return False
    return True


def find_ears(loop: Loop, vertices: VertexBuffer) -> list[int]:
    """Vertex indices of every current ear of the loop."""
    return [index for position, index in enumerate(loop) if is_ear(loop, position, vertices)]


def clip_ears(vertices: VertexBuffer, loop: Loop) -> list[Triangle]:
    """Triangulate a hole-free simple polygon by ear clipping.

    Args:
        vertices: Buffer the loop indexes into
        loop: Polygon as a cyclic list of vertex indices (not modified)

    Returns:
        Index triples covering the polygon interior; at most len(loop) - 2

    Raises:
        EarClippingError: If no ear exists while more than 3 vertices remain
    """
    remaining = list(loop)
    if len(remaining) < 3:
        return []

    triangles: list[Triangle] = []
    ears = find_ears(remaining, vertices)

    while len(remaining) > 3:
        if not ears:
            # Clipping can turn a non-neighbour into an ear; rescan before failing.
            ears = find_ears(remaining, vertices)
            if not ears:
                raise EarClippingError(len(remaining))

        cur = ears.pop()
        position = remaining.index(cur)
        n = len(remaining)
        prev = remaining[(position - 1) % n]
        nxt = remaining[(position + 1) % n]

        if orientation(vertices[prev], vertices[cur], vertices[nxt]) != 0:
            triangles.append((prev, cur, nxt))

        del remaining[position]
        ears = [index for index in ears if index != prev and index != nxt]

        n -= 1
        if is_ear(remaining, (position - 1) % n, vertices):
            ears.append(prev)
        if is_ear(remaining, position % n, vertices):
            ears.append(nxt)

    a, b, c = remaining
    turn = orientation(vertices[a], vertices[b], vertices[c])
    if turn < 0:
        raise EarClippingError(3)
    if turn > 0:
        triangles.append((a, b, c))

    logger.debug("Clipped %d-vertex loop into %d triangles", len(loop), len(triangles))
    return triangles
