"""Exception hierarchy for Glyphmesh."""


class GlyphMeshError(Exception):
    """Base exception for all Glyphmesh errors."""

    pass


class FontError(GlyphMeshError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class GeometryError(GlyphMeshError):
    """Errors in geometric calculations."""

    pass


class ContourError(GeometryError):
    """Error with a path command stream or contour data."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MalformedTopologyError(GeometryError):
    """The outline cannot be triangulated because its topology is invalid."""

    pass


class UnenclosedHoleError(MalformedTopologyError):
    """A hole has no enclosing outer edge to bridge to."""

    def __init__(self, anchor: tuple[float, float]) -> None:
        self.anchor = anchor
        super().__init__(
            f"Hole anchored at ({anchor[0]:g}, {anchor[1]:g}) is not enclosed by any outer contour"
        )


class EarClippingError(MalformedTopologyError):
    """Ear clipping ran out of ears before the polygon was consumed."""

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(f"Ear clipping failed: no ear found with {remaining} vertices remaining")


class MeshWriteError(GlyphMeshError):
    """Error writing a mesh file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write mesh '{path}': {reason}")
