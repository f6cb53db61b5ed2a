"""avagate HTTP gateway -- FastAPI app, settings and routes."""

from avagate.gateway.app import create_app
from avagate.gateway.config import Settings

__all__ = ["create_app", "Settings"]
