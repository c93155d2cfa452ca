"""Core triangulation algorithms for glyphmesh.

This module contains the core algorithms for:

- Geometry operations (orientation, point-in-triangle, areas)
- Curve flattening (Bezier sampling at a fixed resolution)
- Contour building (path commands to deduplicated loops)
- Contour classification (outer boundaries vs holes)
- Hole elimination (bridging holes into outer loops)
- Ear-clipping triangulation

All stages are:
- Single-threaded and synchronous
- Free of shared state between shapes
- Pure apart from growing the vertex buffer and splicing outer loops

Key functions:
- orientation: Signed turn of three points
- point_in_triangle: Strict barycentric containment test
- signed_area: Polygon area using the shoelace formula
- sample_bezier: Flatten a quadratic or cubic Bezier curve
- build_loops: Build closed loops from path commands
- clip_ears: Triangulate a hole-free polygon

Key classes:
- ContourBuilder: Incremental path command consumer
- ContourClassifier: Splits loops into outer loops and holes
- HoleEliminator: Bridges holes into outer loops
- Triangulator: Runs the whole pipeline for one shape
"""

from glyphmesh.core.bridge import HoleEliminator, find_edge_crossing, find_visible_vertex
from glyphmesh.core.builder import ContourBuilder, build_loops, dedupe
from glyphmesh.core.classifier import ClassifiedLoops, ContourClassifier, is_outer
from glyphmesh.core.earclip import clip_ears, is_ear
from glyphmesh.core.geometry import (
    orientation,
    point_in_triangle,
    sample_bezier,
    signed_area,
    triangle_area,
)
from glyphmesh.core.triangulator import Triangulator, triangulate

__all__ = [
    # Classifier classes
    "ClassifiedLoops",
    "ContourBuilder",
    "ContourClassifier",
    # Bridge classes
    "HoleEliminator",
    # Pipeline classes
    "Triangulator",
    # Builder functions
    "build_loops",
    # Ear clipping functions
    "clip_ears",
    "dedupe",
    "find_edge_crossing",
    "find_visible_vertex",
    "is_ear",
    "is_outer",
    # Geometry functions
    "orientation",
    "point_in_triangle",
    "sample_bezier",
    "signed_area",
    "triangle_area",
    "triangulate",
]
