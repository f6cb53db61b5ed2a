"""HTTP avatar provider via httpx with connection pooling.

Talks to two upstreams:

- a Gravatar-compatible direct provider: ``GET {direct_url}/{hash}?d=..&s=..``
- a Boring-Avatars-compatible generated provider:
  ``GET {generated_url}?name=..&size=..&variant=..`` (answers with SVG)
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from avagate.protocol.types import RASTER_CONTENT_TYPE, DirectStyle, GeneratedStyle
from avagate.providers.base import AvatarProvider, ProviderResponse, ProviderStatus

logger = logging.getLogger(__name__)

GRAVATAR_URL = "https://www.gravatar.com/avatar"
BORING_AVATARS_URL = "https://boring-avatars-api.vercel.app/api/avatar"


class HTTPAvatarProvider(AvatarProvider):
    """Avatar provider backed by a shared ``httpx.AsyncClient``.

    The client is created once by the caller (the app lifespan or the CLI)
    and reused for every request; this class never closes it.  Timeouts
    come from the client configuration.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        direct_url: str = GRAVATAR_URL,
        generated_url: str = BORING_AVATARS_URL,
    ) -> None:
        self._client = client
        self._direct_url = direct_url.rstrip("/")
        self._generated_url = generated_url

    async def fetch_direct(
        self, avatar_hash: str, style: DirectStyle, size: int
    ) -> ProviderResponse:
        return await self._get(
            f"{self._direct_url}/{quote(avatar_hash, safe='')}",
            {"d": style.value, "s": size},
        )

    async def fetch_generated(
        self, avatar_hash: str, variant: GeneratedStyle, size: int
    ) -> ProviderResponse:
        return await self._get(
            self._generated_url,
            {"name": avatar_hash, "size": size, "variant": variant.value},
        )

    async def _get(self, url: str, params: dict[str, str | int]) -> ProviderResponse:
        """GET *url* and classify the outcome.  Never raises on HTTP errors."""
        full_url = str(httpx.URL(url, params=params))
        try:
            resp = await self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            return ProviderResponse(
                status=ProviderStatus.ERROR,
                url=full_url,
                detail=f"{type(exc).__name__}: {exc}",
            )

        if resp.status_code == 404:
            return ProviderResponse(status=ProviderStatus.NOT_FOUND, url=full_url)
        if not resp.is_success:
            return ProviderResponse(
                status=ProviderStatus.ERROR,
                url=full_url,
                detail=f"unexpected status {resp.status_code}",
            )

        logger.debug("Fetched %s (%d bytes)", full_url, len(resp.content))
        return ProviderResponse(
            status=ProviderStatus.SUCCESS,
            payload=resp.content,
            content_type=resp.headers.get("content-type", RASTER_CONTENT_TYPE),
            url=full_url,
        )
