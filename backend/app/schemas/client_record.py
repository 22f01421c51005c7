"""
Client Records Backend: Pydantic Request/Response Schemas
============================================================

What:  Pydantic models defining the JSON contract of the API.
Why:   Automatic body parsing, type coercion, serialization and OpenAPI docs.
How:   FastAPI validates request bodies against the payload model and
       serializes ORM rows through the response model.

Design Decision:
    Schemas are separate from the SQLAlchemy model so the wire format can
    change independently of the table. There is no business validation:
    every field is optional and only its type is checked (a `deadline` that
    is not an ISO date is answered with FastAPI's 422 before any SQL runs).
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ClientRecordPayload(BaseModel):
    """
    What:  Body of POST /test and PUT /test/{id}.

    PUT is a full overwrite: a field left out of the body is stored as null.
    """
    username: Optional[str] = Field(default=None, description="Client's username")
    payment_status: Optional[str] = Field(default=None, description="Payment state")
    commission_status: Optional[str] = Field(default=None, description="Commission state")
    deadline: Optional[date] = Field(default=None, description="Due date (YYYY-MM-DD)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ClientRecordResponse(ClientRecordPayload):
    """A stored row, as returned by every successful read or write."""
    id: int = Field(description="Database-generated identifier")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every failing endpoint.

    Example:
        {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for container and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
