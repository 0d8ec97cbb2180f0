"""
Palette Picker Backend — Request ID
=====================================

What:  The per-request id shared by the access line and the error handlers.
How:   bind_request_id() picks the id once per request; request_id_var makes
       it readable from any coroutine serving that request.
"""

import uuid
from contextvars import ContextVar

from starlette.requests import Request

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def bind_request_id(request: Request) -> str:
    """Adopt the caller's X-Request-ID, or mint an 8-character hex id."""
    rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
    request_id_var.set(rid)
    request.state.request_id = rid
    return rid
