import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from oran_gateway.config import log


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        log.info(f"[START] {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = int((time.perf_counter() - start) * 1000)
            log.error(f"[ERROR] {request.method} {request.url.path} duration_ms={duration_ms} err={e!r}")
            raise

        # For streamed bodies this is time-to-headers, not time-to-last-byte.
        duration_ms = int((time.perf_counter() - start) * 1000)
        log.info(f"[END]   {request.method} {request.url.path} status={response.status_code} duration_ms={duration_ms}")
        return response
