"""avagate protocol package -- style vocabularies, request types and errors."""

from avagate.protocol.errors import (
    ConversionError,
    EncodingError,
    GatewayError,
    ParseError,
    RasterError,
    RenderError,
    SurfaceAllocationError,
    UnknownStyleError,
    UpstreamError,
)
from avagate.protocol.style import classify
from avagate.protocol.types import (
    DEFAULT_SIZE,
    DEFAULT_STYLE,
    GENERATED_FETCH_FLOOR,
    MAX_SIZE,
    RASTER_CONTENT_TYPE,
    DirectStyle,
    GeneratedStyle,
    RenderedImage,
    StyleDescriptor,
    StyleRequest,
    parse_size,
)

__all__ = [
    # errors
    "GatewayError",
    "UnknownStyleError",
    "UpstreamError",
    "ConversionError",
    "RasterError",
    "ParseError",
    "SurfaceAllocationError",
    "RenderError",
    "EncodingError",
    # style
    "classify",
    # types
    "DEFAULT_SIZE",
    "DEFAULT_STYLE",
    "GENERATED_FETCH_FLOOR",
    "MAX_SIZE",
    "RASTER_CONTENT_TYPE",
    "DirectStyle",
    "GeneratedStyle",
    "StyleDescriptor",
    "StyleRequest",
    "RenderedImage",
    "parse_size",
]
