"""Avatar resolution with identity-first fallback.

Direct styles go straight to the direct provider.  Generated styles first
check the direct provider with the ``404`` placeholder: an identity image
always wins, and only an explicit "not found" falls back to the generated
provider, whose SVG is rasterized locally.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from avagate.protocol.errors import ConversionError, RasterError, UpstreamError
from avagate.protocol.types import (
    GENERATED_FETCH_FLOOR,
    RASTER_CONTENT_TYPE,
    DirectStyle,
    GeneratedStyle,
    RenderedImage,
    StyleDescriptor,
)
from avagate.providers.base import AvatarProvider, ProviderResponse, ProviderStatus
from avagate.render.rasterizer import rasterize

logger = logging.getLogger(__name__)

Rasterizer = Callable[[bytes, int], bytes]


class AvatarResolver:
    """Resolve a (hash, style, size) triple to a :class:`RenderedImage`.

    Parameters
    ----------
    provider:
        Upstream collaborator; the only source of I/O.
    rasterizer:
        ``(svg_bytes, size) -> png_bytes``.  Runs in a worker thread so
        it never blocks the event loop.
    """

    def __init__(
        self,
        provider: AvatarProvider,
        rasterizer: Rasterizer = rasterize,
    ) -> None:
        self._provider = provider
        self._rasterizer = rasterizer

    async def resolve(
        self, avatar_hash: str, descriptor: StyleDescriptor, size: int
    ) -> RenderedImage:
        """Resolve one avatar.

        Raises:
            UpstreamError: A provider call failed or returned an unusable status.
            ConversionError: The generated SVG could not be rasterized.
        """
        if isinstance(descriptor, DirectStyle):
            resp = await self._provider.fetch_direct(avatar_hash, descriptor, size)
            if not resp.ok:
                raise self._upstream_error(avatar_hash, resp)
            return self._relay(avatar_hash, resp)

        if isinstance(descriptor, GeneratedStyle):
            return await self._resolve_generated(avatar_hash, descriptor, size)

        raise TypeError(f"Unsupported style descriptor: {descriptor!r}")

    async def _resolve_generated(
        self, avatar_hash: str, variant: GeneratedStyle, size: int
    ) -> RenderedImage:
        identity = await self._provider.fetch_direct(avatar_hash, DirectStyle.NOT_FOUND, size)

        if identity.ok:
            # Identity image exists; the generated pattern is never used
            return self._relay(avatar_hash, identity)
        if identity.status is not ProviderStatus.NOT_FOUND:
            raise self._upstream_error(avatar_hash, identity)

        fetch_size = max(size, GENERATED_FETCH_FLOOR)
        resp = await self._provider.fetch_generated(avatar_hash, variant, fetch_size)
        if not resp.ok:
            raise self._upstream_error(avatar_hash, resp)

        try:
            png = await asyncio.to_thread(self._rasterizer, resp.payload, size)
        except RasterError as exc:
            logger.error(
                "Failed to rasterize %s avatar for hash %s from %s: %s",
                variant.value, avatar_hash, resp.url, exc,
            )
            raise ConversionError(f"Failed to convert {variant.value} avatar: {exc}") from exc

        logger.debug(
            "Resolved hash %s via generated %s (fetched %d, rendered %d)",
            avatar_hash, variant.value, fetch_size, size,
        )
        return RenderedImage(data=png, content_type=RASTER_CONTENT_TYPE)

    @staticmethod
    def _relay(avatar_hash: str, resp: ProviderResponse) -> RenderedImage:
        logger.debug("Relaying %s for hash %s", resp.url, avatar_hash)
        return RenderedImage(data=resp.payload, content_type=resp.content_type)

    @staticmethod
    def _upstream_error(avatar_hash: str, resp: ProviderResponse) -> UpstreamError:
        detail = resp.detail or resp.status.value
        logger.warning(
            "Upstream failure for hash %s at %s: %s", avatar_hash, resp.url, detail
        )
        return UpstreamError(
            f"Upstream failure for {avatar_hash}: {detail}",
            url=resp.url,
            detail=detail,
        )
