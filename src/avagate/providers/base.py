"""Abstract provider interface for upstream avatar sources."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import Enum

from avagate.protocol.types import DirectStyle, GeneratedStyle


class ProviderStatus(str, Enum):
    """Outcome classification of a single provider call."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class ProviderResponse:
    """Result of one upstream fetch.

    ``url`` and ``detail`` only feed diagnostics; ``payload`` is empty for
    anything but a success.
    """

    status: ProviderStatus
    payload: bytes = b""
    content_type: str = ""
    url: str = ""
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ProviderStatus.SUCCESS


class AvatarProvider(abc.ABC):
    """Upstream avatar sources used by the resolver.

    One implementation talks HTTP (``HTTPAvatarProvider``); tests plug in
    in-memory fakes.  Implementations report transport failures as
    :attr:`ProviderStatus.ERROR` instead of raising.
    """

    @abc.abstractmethod
    async def fetch_direct(
        self, avatar_hash: str, style: DirectStyle, size: int
    ) -> ProviderResponse:
        """Fetch the identity image for *avatar_hash* with placeholder *style*."""

    @abc.abstractmethod
    async def fetch_generated(
        self, avatar_hash: str, variant: GeneratedStyle, size: int
    ) -> ProviderResponse:
        """Fetch a generated *variant* pattern (SVG) seeded by *avatar_hash*."""
