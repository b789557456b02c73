"""
Permissive CORS decoration.

Starlette's CORSMiddleware only answers requests that carry an Origin header,
but every response from this gateway (assets, streams, errors, preflights)
has to carry the same three headers, so they are applied unconditionally.
"""

from typing import Mapping, Optional, Union

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def corsify(response: Response) -> Response:
    """Add the CORS headers to an existing response.

    Only the header list is touched; the body (streamed or not) is left alone.
    """
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


def corsify_response(
    body: Union[str, bytes, None] = None,
    status_code: int = 200,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Build a fresh response that already carries the CORS headers."""
    merged = dict(headers or {})
    merged.update(CORS_HEADERS)
    media_type = None if any(k.lower() == "content-type" for k in merged) else "text/plain"
    if body is None:
        media_type = None
    return Response(content=body, status_code=status_code, headers=merged, media_type=media_type)


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        return corsify(response)
