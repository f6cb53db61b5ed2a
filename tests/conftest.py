"""Shared test fixtures for avagate tests."""

from __future__ import annotations

import io

import pytest
from PIL import Image

from avagate.protocol.types import DirectStyle, GeneratedStyle
from avagate.providers.base import AvatarProvider, ProviderResponse, ProviderStatus


def make_svg(width: float = 100, height: float = 100, fill: str = "#ff0000") -> bytes:
    """A solid rectangle covering the whole document."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
        f'<rect x="0" y="0" width="{width}" height="{height}" fill="{fill}"/>'
        f"</svg>"
    ).encode()


def make_png(size: int = 80, color: tuple[int, int, int, int] = (100, 150, 200, 255)) -> bytes:
    """Create a minimal valid RGBA PNG."""
    img = Image.new("RGBA", (size, size), color)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def open_png(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


class FakeProvider(AvatarProvider):
    """In-memory provider that records every call.

    ``direct`` and ``generated`` are the responses returned for every call
    of the matching capability.
    """

    def __init__(
        self,
        direct: ProviderResponse | None = None,
        generated: ProviderResponse | None = None,
    ) -> None:
        self.direct = direct or ProviderResponse(status=ProviderStatus.NOT_FOUND)
        self.generated = generated or ProviderResponse(status=ProviderStatus.NOT_FOUND)
        self.direct_calls: list[tuple[str, DirectStyle, int]] = []
        self.generated_calls: list[tuple[str, GeneratedStyle, int]] = []

    async def fetch_direct(
        self, avatar_hash: str, style: DirectStyle, size: int
    ) -> ProviderResponse:
        self.direct_calls.append((avatar_hash, style, size))
        return self.direct

    async def fetch_generated(
        self, avatar_hash: str, variant: GeneratedStyle, size: int
    ) -> ProviderResponse:
        self.generated_calls.append((avatar_hash, variant, size))
        return self.generated


@pytest.fixture()
def sample_png() -> bytes:
    return make_png()


@pytest.fixture()
def sample_svg() -> bytes:
    return make_svg()


@pytest.fixture()
def fake_provider() -> FakeProvider:
    """A provider whose direct lookups all report "not found"."""
    return FakeProvider()
