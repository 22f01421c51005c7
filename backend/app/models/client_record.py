"""
Client Records Backend: ClientRecord SQLAlchemy Model
========================================================

What:  ORM model representing the `client_records` table.
Why:   Gives the service layer typed columns to build statements from.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by ClientRecordService for every statement, and by Alembic.

Table Design:
    - id: integer surrogate key generated by the database (SERIAL on PostgreSQL)
    - username, payment_status, commission_status: free text, nullable
    - deadline: calendar date, nullable

    No constraints beyond the primary key. PUT writes every column, so a
    missing field in the request body becomes NULL here.
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class ClientRecord(Base):
    """One client row: who they are, whether they paid, and when work is due."""

    __tablename__ = "client_records"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Surrogate key generated by the database",
    )

    username: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    payment_status: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Free-form payment state, e.g. 'paid' or 'pending'",
    )

    commission_status: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Free-form commission state, e.g. 'in progress' or 'delivered'",
    )

    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<ClientRecord(id={self.id}, username='{self.username}')>"
