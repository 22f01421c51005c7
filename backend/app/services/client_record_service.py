"""
Client Records Backend: Client Record Service
================================================

What:  The five operations on the `client_records` table.
Why:   Keeps SQL out of the route handlers, so it can be tested without HTTP.
How:   Each method builds exactly one parameterized statement, executes it
       on the request's session and maps the resulting rows to response models.
Who:   Called by the /test route handlers.

Statement per operation:
    list_records    SELECT ... ORDER BY id
    get_record      SELECT ... WHERE id = :id
    create_record   INSERT ... RETURNING *
    replace_record  UPDATE ... SET <every column> WHERE id = :id RETURNING *
    delete_record   DELETE ... WHERE id = :id RETURNING id

Error Handling:
    A statement that raises is logged and re-raised as DatabaseError (→ 500).
    An UPDATE/DELETE/SELECT that matches no row raises NotFoundError (→ 404).
    Writes commit inside the same try block, so a failed COMMIT is a 500 too.
    There are no retries. get_db_session() rolls back whatever is left open.
"""

import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.models.client_record import ClientRecord
from app.schemas.client_record import ClientRecordPayload, ClientRecordResponse

logger = logging.getLogger(__name__)


class ClientRecordService:
    """
    Stateless pass-through from API operations to SQL statements.

    Every method receives the session for the current request; the service
    itself holds nothing between calls.
    """

    async def list_records(self, db: AsyncSession) -> List[ClientRecordResponse]:
        """Return every row, oldest id first."""
        try:
            result = await db.execute(select(ClientRecord).order_by(ClientRecord.id))
            records = result.scalars().all()
        except Exception as e:
            logger.error("Database error listing client records: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "list", "error_type": type(e).__name__})

        return [ClientRecordResponse.model_validate(record) for record in records]

    async def get_record(self, db: AsyncSession, record_id: int) -> ClientRecordResponse:
        """
        Fetch a single row by primary key.

        Raises:
            NotFoundError: No row has this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(
                select(ClientRecord).where(ClientRecord.id == record_id)
            )
            record = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching client record %s: %s", record_id, str(e))
            raise DatabaseError(context={"operation": "get", "record_id": record_id})

        if record is None:
            raise NotFoundError(resource="client record", resource_id=str(record_id))

        return ClientRecordResponse.model_validate(record)

    async def create_record(
        self, db: AsyncSession, payload: ClientRecordPayload
    ) -> ClientRecordResponse:
        """
        Insert a new row and return it with its generated id.

        Fields missing from the payload are inserted as NULL.
        """
        try:
            result = await db.execute(
                insert(ClientRecord)
                .values(**payload.model_dump())
                .returning(ClientRecord)
            )
            record = result.scalar_one()
            await db.commit()
        except Exception as e:
            logger.error("Database error creating client record: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "create", "error_type": type(e).__name__})

        logger.info("Client record %s created", record.id)
        return ClientRecordResponse.model_validate(record)

    async def replace_record(
        self, db: AsyncSession, record_id: int, payload: ClientRecordPayload
    ) -> ClientRecordResponse:
        """
        Overwrite every writable column of an existing row.

        There is no partial-update mode: a field absent from the payload
        is written as NULL.

        Raises:
            NotFoundError: No row has this id (→ 404)
            DatabaseError: Statement execution failed (→ 500)
        """
        try:
            result = await db.execute(
                update(ClientRecord)
                .where(ClientRecord.id == record_id)
                .values(**payload.model_dump())
                .returning(ClientRecord)
            )
            record = result.scalar_one_or_none()
            await db.commit()
        except Exception as e:
            logger.error("Database error updating client record %s: %s", record_id, str(e))
            raise DatabaseError(context={"operation": "replace", "record_id": record_id})

        if record is None:
            raise NotFoundError(resource="client record", resource_id=str(record_id))

        logger.info("Client record %s replaced", record_id)
        return ClientRecordResponse.model_validate(record)

    async def delete_record(self, db: AsyncSession, record_id: int) -> None:
        """
        Remove a row.

        Raises:
            NotFoundError: No row has this id (→ 404)
            DatabaseError: Statement execution failed (→ 500)
        """
        try:
            result = await db.execute(
                delete(ClientRecord)
                .where(ClientRecord.id == record_id)
                .returning(ClientRecord.id)
            )
            deleted_id = result.scalar_one_or_none()
            await db.commit()
        except Exception as e:
            logger.error("Database error deleting client record %s: %s", record_id, str(e))
            raise DatabaseError(context={"operation": "delete", "record_id": record_id})

        if deleted_id is None:
            raise NotFoundError(resource="client record", resource_id=str(record_id))

        logger.info("Client record %s deleted", record_id)


# ── Singleton Instance ────────────────────────────────────────────────────
client_record_service = ClientRecordService()
