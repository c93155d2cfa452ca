"""Glyphmesh - Triangulate vector outlines into triangle meshes.

Glyphmesh converts closed vector outlines (font glyph contours, Bezier-curved
shapes) into triangle meshes that any rasterizer can draw. Curves are
flattened, contours are classified as outer boundaries or holes, holes are
bridged into their enclosing boundary and the result is ear-clipped.

Example:
    $ glyphmesh text NotoSans-Regular.ttf "Hello" -o hello.json

This will write one triangle mesh per glyph to hello.json.
"""

__version__ = "0.1.0"
__author__ = "glyphmesh contributors"

__all__ = ["__author__", "__version__"]
