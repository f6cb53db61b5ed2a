"""FastAPI application factory for the avagate gateway."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from avagate import __version__
from avagate.gateway.config import Settings
from avagate.protocol.errors import GatewayError
from avagate.providers.base import AvatarProvider
from avagate.providers.http import HTTPAvatarProvider
from avagate.resolver import AvatarResolver

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> httpx.AsyncClient:
    """Create the process-wide outbound client (one per app, pooled)."""
    return httpx.AsyncClient(
        timeout=settings.upstream_timeout,
        headers={"User-Agent": f"avagate/{__version__}"},
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Own the shared outbound client across the app lifetime."""
    settings = app.state.settings
    provider: AvatarProvider | None = app.state.provider
    client: httpx.AsyncClient | None = None

    if provider is None:
        client = build_client(settings)
        provider = HTTPAvatarProvider(
            client,
            direct_url=settings.direct_url,
            generated_url=settings.generated_url,
        )
        logger.info(
            "Upstreams: direct=%s generated=%s (timeout %.1fs)",
            settings.direct_url, settings.generated_url, settings.upstream_timeout,
        )

    app.state.resolver = AvatarResolver(provider)

    yield

    if client is not None:
        await client.aclose()


def create_app(
    settings: Settings | None = None,
    provider: AvatarProvider | None = None,
) -> FastAPI:
    """Create and configure the avagate FastAPI application.

    *provider* overrides the HTTP provider (and skips creating the outbound
    client), which is how tests run the gateway without network access.
    """
    settings = settings or Settings()

    # Configure logging from settings
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.debug:
        logging.getLogger("avagate").setLevel(logging.DEBUG)

    app = FastAPI(
        title="avagate",
        version=__version__,
        lifespan=lifespan,
    )

    # Store on app.state so lifespan and routes can access them
    app.state.settings = settings
    app.state.provider = provider

    @app.exception_handler(GatewayError)
    async def gateway_exception_handler(request: Request, exc: GatewayError) -> Response:
        # 4xx carry the message as plain text; 5xx bodies stay empty
        if exc.status_code < 500:
            logger.warning("Rejected %s: %s", request.url.path, exc)
            return PlainTextResponse(str(exc), status_code=exc.status_code)
        return Response(status_code=exc.status_code)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from avagate.gateway.routes.avatar import router as avatar_router
    from avagate.gateway.routes.health import router as health_router

    app.include_router(avatar_router)
    app.include_router(health_router)

    return app
