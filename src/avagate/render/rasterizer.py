"""SVG to PNG rasterizer for generated avatars.

Generated-avatar providers answer with SVG.  The document is parsed with
CairoSVG (no external resources), rendered with a single uniform scale so
it fits the square target without cropping, composited onto a transparent
Pillow canvas and encoded as PNG.
"""

from __future__ import annotations

import io
import logging
import math

import cairosvg
from cairosvg.helpers import node_format, size
from cairosvg.parser import Tree
from PIL import Image

from avagate.protocol.errors import EncodingError, ParseError, RenderError, SurfaceAllocationError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Intrinsic document size
# ---------------------------------------------------------------------------


class _SizingContext:
    """The surface attributes CairoSVG's length helpers read, without a canvas."""

    def __init__(self, dpi: float = 96) -> None:
        self.dpi = dpi
        self.context_width = None
        self.context_height = None
        # CairoSVG's default font size, so em/ex resolve as they render
        self.font_size = size(self, "12pt")


def document_size(document: bytes) -> tuple[float, float]:
    """Parse *document* and return its declared (width, height) in pixels.

    Sizing is CairoSVG's own: ``width``/``height`` attributes win, and a
    missing or percentage value falls back to the matching ``viewBox``
    dimension.

    Raises:
        ParseError: If the bytes are not an SVG document with a positive,
            finite intrinsic size.
    """
    try:
        tree = Tree(bytestring=document, unsafe=False)
    except Exception as exc:
        raise ParseError(f"Malformed SVG document: {exc}") from exc

    if tree.tag != "svg":
        raise ParseError(f"Root element is <{tree.tag}>, expected <svg>")

    try:
        width, height, _ = node_format(_SizingContext(), tree, reference=False)
    except (ValueError, IndexError) as exc:
        raise ParseError(f"Invalid SVG size attributes: {exc}") from exc

    if not (math.isfinite(width) and math.isfinite(height)):
        raise ParseError(f"SVG document has a non-finite size: {width}x{height}")
    if width <= 0 or height <= 0:
        raise ParseError(f"SVG document has a degenerate size: {width}x{height}")
    return float(width), float(height)


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------


def fit_scale(width: float, height: float, target_size: int) -> float:
    """Uniform scale that fits a *width* x *height* document in a square.

    The smaller axis ratio wins so the whole document stays visible.
    """
    return min(target_size / width, target_size / height)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def rasterize(document: bytes, target_size: int) -> bytes:
    """Render an SVG *document* to a ``target_size`` x ``target_size`` PNG.

    The document is scaled uniformly by :func:`fit_scale` and centered.
    Pixels the document does not cover stay fully transparent.

    Raises:
        ParseError: Malformed or unsupported document.
        SurfaceAllocationError: *target_size* is below 1 or too large to allocate.
        RenderError: CairoSVG failed while drawing.
        EncodingError: The canvas could not be written as PNG.
    """
    width, height = document_size(document)

    if target_size < 1:
        raise SurfaceAllocationError(f"Cannot allocate a {target_size}x{target_size} surface")
    try:
        canvas = Image.new("RGBA", (target_size, target_size), (0, 0, 0, 0))
    except (ValueError, MemoryError) as exc:
        raise SurfaceAllocationError(
            f"Cannot allocate a {target_size}x{target_size} surface: {exc}"
        ) from exc

    scale = fit_scale(width, height, target_size)
    tile_width = max(1, min(target_size, round(width * scale)))
    tile_height = max(1, min(target_size, round(height * scale)))

    try:
        png = cairosvg.svg2png(
            bytestring=document,
            output_width=tile_width,
            output_height=tile_height,
            unsafe=False,
        )
        tile = Image.open(io.BytesIO(png)).convert("RGBA")
    except Exception as exc:
        raise RenderError(f"Failed to render SVG document: {exc}") from exc

    offset = ((target_size - tile.width) // 2, (target_size - tile.height) // 2)
    canvas.paste(tile, offset)

    logger.debug(
        "Rasterized %gx%g SVG at scale %.4f onto %dx%d canvas",
        width, height, scale, target_size, target_size,
    )
    return _encode_png(canvas)


def _encode_png(canvas: Image.Image) -> bytes:
    """Encode *canvas* as PNG bytes."""
    buf = io.BytesIO()
    try:
        canvas.save(buf, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodingError(f"Failed to encode PNG: {exc}") from exc
    return buf.getvalue()
