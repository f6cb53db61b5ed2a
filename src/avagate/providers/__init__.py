"""avagate provider layer."""

from avagate.providers.base import AvatarProvider, ProviderResponse, ProviderStatus
from avagate.providers.http import BORING_AVATARS_URL, GRAVATAR_URL, HTTPAvatarProvider

__all__ = [
    "AvatarProvider",
    "ProviderResponse",
    "ProviderStatus",
    "HTTPAvatarProvider",
    "GRAVATAR_URL",
    "BORING_AVATARS_URL",
]
