"""
Client Records Backend: Client Record Service Unit Tests
===========================================================

What:  Tests for ClientRecordService (list, get, create, replace, delete).
How:   Uses a mock AsyncSession; no database required.

What we test:
    ✅ Rows are mapped to ClientRecordResponse
    ✅ Missing rows raise NotFoundError
    ✅ Any statement or COMMIT failure is wrapped in DatabaseError
    ✅ Writes commit before returning
    ✅ Each operation executes exactly one statement
"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import OperationalError

from app.exceptions import DatabaseError, NotFoundError
from app.models.client_record import ClientRecord
from app.schemas.client_record import ClientRecordPayload
from app.services.client_record_service import ClientRecordService


def _result_with(record):
    """A mock Result whose single-row accessors return `record`."""
    result = MagicMock()
    result.scalar_one.return_value = record
    result.scalar_one_or_none.return_value = record
    return result


class TestListRecords:

    def setup_method(self):
        self.service = ClientRecordService()

    @pytest.mark.asyncio
    async def test_list_records_empty(self, mock_db_session):
        result = MagicMock()
        result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = result

        records = await self.service.list_records(mock_db_session)

        assert records == []
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_records_maps_rows(self, mock_db_session, sample_record_data):
        rows = [
            ClientRecord(**sample_record_data),
            ClientRecord(id=2, username="second", payment_status=None,
                         commission_status=None, deadline=None),
        ]
        result = MagicMock()
        result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = result

        records = await self.service.list_records(mock_db_session)

        assert [r.id for r in records] == [1, 2]
        assert records[0].deadline == date(2024, 3, 1)
        assert records[1].payment_status is None

    @pytest.mark.asyncio
    async def test_list_records_query_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
        )

        with pytest.raises(DatabaseError):
            await self.service.list_records(mock_db_session)


class TestGetRecord:

    def setup_method(self):
        self.service = ClientRecordService()

    @pytest.mark.asyncio
    async def test_get_record_found(self, mock_db_session, sample_record_data):
        mock_db_session.execute.return_value = _result_with(ClientRecord(**sample_record_data))

        record = await self.service.get_record(mock_db_session, 1)

        assert record.id == 1
        assert record.username == "inkwell_artist"

    @pytest.mark.asyncio
    async def test_get_record_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError, match="was not found"):
            await self.service.get_record(mock_db_session, 404)


class TestCreateRecord:

    def setup_method(self):
        self.service = ClientRecordService()

    @pytest.mark.asyncio
    async def test_create_record_returns_created_row(self, mock_db_session, sample_record_data):
        mock_db_session.execute.return_value = _result_with(ClientRecord(**sample_record_data))
        payload = ClientRecordPayload(
            username="inkwell_artist",
            payment_status="paid",
            commission_status="in progress",
            deadline=date(2024, 3, 1),
        )

        record = await self.service.create_record(mock_db_session, payload)

        assert record.id == 1
        assert record.commission_status == "in progress"
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_record_runs_single_insert(self, mock_db_session, sample_record_data):
        mock_db_session.execute.return_value = _result_with(ClientRecord(**sample_record_data))

        await self.service.create_record(
            mock_db_session, ClientRecordPayload(username="inkwell_artist")
        )

        statement = mock_db_session.execute.await_args.args[0]
        assert statement.is_insert
        assert statement.table.name == "client_records"

    @pytest.mark.asyncio
    async def test_create_record_failure_wrapped(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=RuntimeError("driver exploded"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_record(mock_db_session, ClientRecordPayload())

        assert exc_info.value.context["operation"] == "create"
        assert exc_info.value.context["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_create_record_commits(self, mock_db_session, sample_record_data):
        mock_db_session.execute.return_value = _result_with(ClientRecord(**sample_record_data))

        await self.service.create_record(mock_db_session, ClientRecordPayload())

        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_record_commit_failure_wrapped(self, mock_db_session, sample_record_data):
        mock_db_session.execute.return_value = _result_with(ClientRecord(**sample_record_data))
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_record(mock_db_session, ClientRecordPayload())

        assert exc_info.value.context["error_type"] == "OperationalError"


class TestReplaceRecord:

    def setup_method(self):
        self.service = ClientRecordService()

    @pytest.mark.asyncio
    async def test_replace_record_returns_updated_row(self, mock_db_session):
        updated = ClientRecord(id=7, username="renamed", payment_status=None,
                               commission_status=None, deadline=None)
        mock_db_session.execute.return_value = _result_with(updated)

        record = await self.service.replace_record(
            mock_db_session, 7, ClientRecordPayload(username="renamed")
        )

        assert record.id == 7
        assert record.username == "renamed"
        assert record.payment_status is None

    @pytest.mark.asyncio
    async def test_replace_record_runs_single_update(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(
            ClientRecord(id=7, username="renamed")
        )

        await self.service.replace_record(
            mock_db_session, 7, ClientRecordPayload(username="renamed")
        )

        mock_db_session.execute.assert_awaited_once()
        statement = mock_db_session.execute.await_args.args[0]
        assert statement.is_update

    @pytest.mark.asyncio
    async def test_replace_record_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.replace_record(mock_db_session, 99, ClientRecordPayload())

    @pytest.mark.asyncio
    async def test_replace_record_commit_failure_wrapped(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(ClientRecord(id=7))
        mock_db_session.commit = AsyncMock(side_effect=OSError("connection reset"))

        with pytest.raises(DatabaseError):
            await self.service.replace_record(mock_db_session, 7, ClientRecordPayload())


class TestDeleteRecord:

    def setup_method(self):
        self.service = ClientRecordService()

    @pytest.mark.asyncio
    async def test_delete_record_success(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(3)

        assert await self.service.delete_record(mock_db_session, 3) is None
        mock_db_session.execute.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_record_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.delete_record(mock_db_session, 3)

    @pytest.mark.asyncio
    async def test_delete_record_failure_wrapped(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=OSError("connection reset"))

        with pytest.raises(DatabaseError):
            await self.service.delete_record(mock_db_session, 3)
