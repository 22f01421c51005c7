"""
Client Records Backend: /test Route Handlers
===============================================

What:  The CRUD surface over the `client_records` table.
How:   Each handler extracts path/body parameters, delegates to
       ClientRecordService and returns JSON with the matching status code.
       Errors are formatted by the global exception handlers in main.py.

Routes:
    GET    /test        → 200, every row
    GET    /test/{id}   → 200, one row
    POST   /test        → 201, the created row
    PUT    /test/{id}   → 200, the overwritten row
    DELETE /test/{id}   → 204, empty body
"""

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.client_record import (
    ClientRecordPayload,
    ClientRecordResponse,
    ErrorResponse,
)
from app.services.client_record_service import client_record_service

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/test", tags=["Client Records"])

_server_error = {500: {"description": "Query failed", "model": ErrorResponse}}
_not_found = {404: {"description": "No record with this id", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[ClientRecordResponse],
    responses=_server_error,
    summary="List every client record",
)
async def list_records(
    db: AsyncSession = Depends(get_db_session),
) -> List[ClientRecordResponse]:
    return await client_record_service.list_records(db)


@router.get(
    "/{record_id}",
    response_model=ClientRecordResponse,
    responses={**_not_found, **_server_error},
    summary="Get a single client record by id",
)
async def get_record(
    record_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ClientRecordResponse:
    return await client_record_service.get_record(db, record_id)


@router.post(
    "",
    status_code=201,
    response_model=ClientRecordResponse,
    responses=_server_error,
    summary="Create a client record",
)
async def create_record(
    payload: ClientRecordPayload,
    db: AsyncSession = Depends(get_db_session),
) -> ClientRecordResponse:
    """
    Insert a row from the JSON body.

    Body fields are all optional; omitted fields are stored as null.
    """
    return await client_record_service.create_record(db, payload)


@router.put(
    "/{record_id}",
    response_model=ClientRecordResponse,
    responses={**_not_found, **_server_error},
    summary="Overwrite a client record",
)
async def replace_record(
    record_id: int,
    payload: ClientRecordPayload,
    db: AsyncSession = Depends(get_db_session),
) -> ClientRecordResponse:
    """
    Replace every field of an existing row with the JSON body.

    Not a partial update: fields missing from the body become null.
    """
    return await client_record_service.replace_record(db, record_id, payload)


@router.delete(
    "/{record_id}",
    status_code=204,
    response_class=Response,
    responses={**_not_found, **_server_error},
    summary="Delete a client record",
)
async def delete_record(
    record_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await client_record_service.delete_record(db, record_id)
    return Response(status_code=204)
