"""avagate render package -- vector to raster conversion."""

from avagate.render.rasterizer import document_size, fit_scale, rasterize

__all__ = [
    "document_size",
    "fit_scale",
    "rasterize",
]
