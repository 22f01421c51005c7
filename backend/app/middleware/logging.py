"""
Client Records Backend: Access Log Middleware
================================================

What:  One line per /test request naming the record operation that ran.
How:   After the router has matched, the scope carries the endpoint and its
       path parameters, so the line reads e.g.
           replace_record id=7 → 200 in 4.1ms [1a2b3c4d]
       instead of a bare method and URL.

Log level follows the status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged (they carry client names).
"""

import logging
import time
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("client_records.access")


def _status_level(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def route_details(request: Request) -> Tuple[str, Optional[str]]:
    """
    Operation name and record id of a routed request.

    Unmatched paths (404 from the router itself) fall back to "METHOD path".
    """
    endpoint = request.scope.get("endpoint")
    if endpoint is None:
        return f"{request.method} {request.url.path}", None
    record_id = request.scope.get("path_params", {}).get("record_id")
    return endpoint.__name__, None if record_id is None else str(record_id)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs which record operation each request ran and how it ended."""

    QUIET_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        operation, record_id = route_details(request)
        target = f"{operation} id={record_id}" if record_id else operation
        rid = request_id_var.get("")

        logger.log(
            _status_level(response.status_code),
            "%s → %d in %.1fms [%s]",
            target,
            response.status_code,
            elapsed_ms,
            rid,
            extra={
                "request_id": rid,
                "operation": operation,
                "record_id": record_id,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
            },
        )
        return response
