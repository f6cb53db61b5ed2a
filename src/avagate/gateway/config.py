"""Gateway configuration from environment variables."""

from __future__ import annotations

import os

from avagate.providers.http import BORING_AVATARS_URL, GRAVATAR_URL


class Settings:
    """Gateway settings, read from environment variables with defaults."""

    def __init__(self) -> None:
        self.host: str = os.getenv("AVAGATE_HOST", "0.0.0.0")
        self.port: int = int(os.getenv("AVAGATE_PORT", "8000"))
        self.direct_url: str = os.getenv("AVAGATE_DIRECT_URL", GRAVATAR_URL)
        self.generated_url: str = os.getenv("AVAGATE_GENERATED_URL", BORING_AVATARS_URL)
        # Seconds, applied to every outbound call
        self.upstream_timeout: float = float(
            os.getenv("AVAGATE_UPSTREAM_TIMEOUT", "10.0")
        )
        self.cors_origins: list[str] = [
            origin.strip()
            for origin in os.getenv("AVAGATE_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.log_level: str = os.getenv("AVAGATE_LOG_LEVEL", "INFO").upper()
        self.debug: bool = os.getenv("AVAGATE_DEBUG", "").lower() in ("1", "true", "yes")
