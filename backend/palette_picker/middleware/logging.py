"""
Palette Picker Backend — Access Log Middleware
================================================

What:  Binds the request id and writes one access line per API call.
How:   The line names the matched route template rather than the raw path,
       so every GET /api/v1/palettes/{palette_id} groups together whatever
       the id. When the response is an {"error": ...} body, the message set
       by the exception handlers is appended as the outcome.

Example lines:
    GET /api/v1/projects 200 4.1ms [a1b2c3d4]
    GET /api/v1/palettes/{palette_id} 404 2.7ms [a1b2c3d4] error="Could not find palette with the id: 9"
    DELETE /api/v1/projects 500 6.0ms [a1b2c3d4] error="FOREIGN KEY constraint failed"

/health is served without an access line.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from palette_picker.middleware.request_id import REQUEST_ID_HEADER, bind_request_id

logger = logging.getLogger("palette_picker.access")

UNLOGGED_PATHS = frozenset({"/health"})


def route_template(request: Request) -> str:
    """Path pattern of the route that served the request, else the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def record_error(request: Request, message: str) -> None:
    """Called by the exception handlers with the text they put in {"error": ...}."""
    request.state.error = message


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class AccessLogMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = bind_request_id(request)
        if request.url.path in UNLOGGED_PATHS:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            # Unhandled errors become a 500 outside this middleware
            self._log(request, rid, 500, started, str(exc))
            raise

        self._log(request, rid, response.status_code, started, getattr(request.state, "error", None))
        response.headers[REQUEST_ID_HEADER] = rid
        return response

    @staticmethod
    def _log(
        request: Request, rid: str, status: int, started: float, error: Optional[str]
    ) -> None:
        duration_ms = (time.perf_counter() - started) * 1000
        route = route_template(request)
        message = "%s %s %d %.1fms [%s]"
        args = [request.method, route, status, duration_ms, rid]
        if error is not None:
            message += ' error="%s"'
            args.append(error)

        logger.log(
            _level_for(status),
            message,
            *args,
            extra={
                "request_id": rid,
                "route": route,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "error": error,
            },
        )
