"""avagate -- avatar resolution gateway.

Top-level convenience re-exports::

    from avagate import AvatarResolver, classify
    from avagate.gateway import create_app
"""

__version__ = "0.1.0"

from avagate.protocol import DirectStyle, GeneratedStyle, RenderedImage, classify  # noqa: E402
from avagate.resolver import AvatarResolver  # noqa: E402

__all__ = [
    "__version__",
    "AvatarResolver",
    "DirectStyle",
    "GeneratedStyle",
    "RenderedImage",
    "classify",
]
