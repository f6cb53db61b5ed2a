"""Core types and constants for avatar resolution."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


# Size bounds for the square output image (pixels)
DEFAULT_SIZE = 80
MAX_SIZE = 512

# Generated avatars are fetched at least this large before downscaling
GENERATED_FETCH_FLOOR = 128

DEFAULT_STYLE = "identicon"

RASTER_CONTENT_TYPE = "image/png"

_UNSIGNED_RE = re.compile(r"^\+?[0-9]+$")


class DirectStyle(str, Enum):
    """Placeholder behaviours understood by the direct (hash identity) provider.

    Using ``str, Enum`` so that ``DirectStyle.IDENTICON == "identicon"`` is True
    and the value can be sent upstream unchanged.
    """

    NOT_FOUND = "404"
    MYSTERY_PERSON = "mp"
    IDENTICON = "identicon"
    MONSTER = "monsterid"
    WAVATAR = "wavatar"
    RETRO = "retro"
    ROBOT = "robohash"
    BLANK = "blank"


class GeneratedStyle(str, Enum):
    """Pattern algorithms offered by the generated-avatar provider."""

    MARBLE = "marble"
    BEAM = "beam"
    PIXEL = "pixel"
    SUNSET = "sunset"
    RING = "ring"
    BAUHAUS = "bauhaus"


# Exactly one family is active for any classified style.
StyleDescriptor = DirectStyle | GeneratedStyle


def parse_size(raw: str | None) -> int:
    """Parse the ``s`` query value into a square pixel size.

    Anything that is not an unsigned decimal integer falls back to
    :data:`DEFAULT_SIZE`.  Values above :data:`MAX_SIZE` are clamped down
    and ``0`` is clamped up to 1.
    """
    if raw is None or not _UNSIGNED_RE.match(raw):
        return DEFAULT_SIZE
    digits = raw.lstrip("+").lstrip("0") or "0"
    # More digits than MAX_SIZE is always above it; int() caps string length
    if len(digits) > len(str(MAX_SIZE)):
        return MAX_SIZE
    return max(1, min(int(digits), MAX_SIZE))


@dataclass(frozen=True)
class StyleRequest:
    """A requested style token and output size, built once per request."""

    token: str
    size: int

    @classmethod
    def from_query(cls, d: str | None = None, s: str | None = None) -> StyleRequest:
        return cls(
            token=DEFAULT_STYLE if d is None else d,
            size=parse_size(s),
        )


@dataclass(frozen=True)
class RenderedImage:
    """Final image bytes and the content type to serve them with."""

    data: bytes
    content_type: str
