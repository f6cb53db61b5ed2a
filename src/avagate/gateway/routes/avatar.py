"""Avatar endpoint: ``GET /avatar/{avatar_hash}?d=<style>&s=<size>``."""

from __future__ import annotations

from fastapi import APIRouter, Request
from starlette.responses import Response

from avagate.protocol.style import classify
from avagate.protocol.types import StyleRequest

router = APIRouter()


@router.get("/avatar/{avatar_hash}")
async def get_avatar(
    avatar_hash: str,
    request: Request,
    d: str | None = None,
    s: str | None = None,
) -> Response:
    """Resolve and return one avatar image.

    ``s`` is read as a raw string so that non-numeric sizes fall back to
    the default instead of failing validation.  Gateway errors propagate
    to the app's exception handler.
    """
    style_request = StyleRequest.from_query(d, s)
    descriptor = classify(style_request.token)

    resolver = request.app.state.resolver
    image = await resolver.resolve(avatar_hash, descriptor, style_request.size)
    return Response(content=image.data, media_type=image.content_type)
