"""
Client Records Backend: Unhandled Error Middleware
=====================================================

What:  Turns an exception no handler claimed into the generic JSON 500.
How:   Sits innermost among the middleware, inside CORS and request ID, so
       the 500 still passes back through them and carries
       Access-Control-Allow-Origin and X-Request-ID like any other response.
       Exceptions registered in main.register_exception_handlers never get
       here; FastAPI converts those further in.
"""

import logging

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Catch-all: stack trace goes to the log, a generic message to the client."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
            return JSONResponse(
                status_code=500,
                content={
                    "error": "internal_server_error",
                    "message": UNEXPECTED_ERROR_MESSAGE,
                    "request_id": rid,
                },
            )
