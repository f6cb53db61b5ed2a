"""avagate exception hierarchy.

All gateway exceptions inherit from :class:`GatewayError`.  Each class
carries the HTTP status the gateway answers with when it escapes a request.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base exception for all avagate errors."""

    status_code: int = 500


class UnknownStyleError(GatewayError):
    """Raised when a style token is not in either style vocabulary."""

    status_code = 400

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown style: {token}")
        self.token = token


class UpstreamError(GatewayError):
    """Raised when a provider answers with an error status or cannot be reached."""

    status_code = 502

    def __init__(self, message: str, *, url: str = "", detail: str | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.detail = detail


class ConversionError(GatewayError):
    """Raised when a generated vector avatar cannot be turned into a raster."""


class RasterError(GatewayError):
    """Base class for rasterizer failures."""


class ParseError(RasterError):
    """Raised when a vector document is malformed or unsupported."""


class SurfaceAllocationError(RasterError):
    """Raised when the output surface cannot be allocated (e.g. zero size)."""


class RenderError(RasterError):
    """Raised when the vector renderer fails on a parsed document."""


class EncodingError(RasterError):
    """Raised when the raster surface cannot be encoded."""
