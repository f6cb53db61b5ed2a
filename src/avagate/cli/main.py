"""avagate CLI -- run the gateway or resolve a single avatar from the shell.

Thin wrapper around the gateway app and :class:`AvatarResolver` using click.
"""

from __future__ import annotations

import asyncio
import mimetypes
from pathlib import Path

import click
import httpx

from avagate import __version__
from avagate.gateway.config import Settings
from avagate.protocol import GatewayError, RenderedImage, StyleRequest, classify
from avagate.providers.http import HTTPAvatarProvider
from avagate.resolver import AvatarResolver


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


def _extension_for(content_type: str) -> str:
    """Map a content type to a file extension, defaulting to ``.png``."""
    media_type = content_type.split(";", 1)[0].strip()
    return mimetypes.guess_extension(media_type) or ".png"


async def _resolve_once(
    settings: Settings, avatar_hash: str, style_request: StyleRequest
) -> RenderedImage:
    """Resolve one avatar with a short-lived client."""
    descriptor = classify(style_request.token)
    async with httpx.AsyncClient(timeout=settings.upstream_timeout) as client:
        provider = HTTPAvatarProvider(
            client,
            direct_url=settings.direct_url,
            generated_url=settings.generated_url,
        )
        return await AvatarResolver(provider).resolve(
            avatar_hash, descriptor, style_request.size
        )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="avagate")
def cli() -> None:
    """avagate -- avatar resolution gateway."""


# ---------------------------------------------------------------------------
# avagate serve
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--host", default=None, help="Bind address (default: AVAGATE_HOST or 0.0.0.0).")
@click.option("--port", "-p", default=None, type=int, help="Bind port (default: AVAGATE_PORT or 8000).")
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP gateway with uvicorn."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "avagate.gateway.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# avagate fetch
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("avatar_hash")
@click.option("--style", "-d", default=None, help="Style token (default: identicon).")
@click.option("--size", "-s", default=None, help="Size in pixels (clamped to 512).")
@click.option(
    "--output",
    "-o",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: <hash>.<ext>).",
)
def fetch(avatar_hash: str, style: str | None, size: str | None, output: Path | None) -> None:
    """Resolve one avatar and write it to a file."""
    style_request = StyleRequest.from_query(style, size)

    try:
        image = asyncio.run(_resolve_once(Settings(), avatar_hash, style_request))
    except GatewayError as exc:
        _error(f"Error: {exc}")
        return

    path = output or Path(f"{avatar_hash}{_extension_for(image.content_type)}")
    path.write_bytes(image.data)
    click.echo(f"Wrote {len(image.data)} bytes ({image.content_type}) to {path}")
