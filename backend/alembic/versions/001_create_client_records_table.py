"""Create client_records table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `client_records` table served by the /test routes.
How:   Integer primary key generated by the database, four nullable data columns.

Rollback: downgrade() drops the table entirely.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the client_records table. Column docs live in app/models/client_record.py."""
    op.create_table(
        "client_records",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Surrogate key generated by the database",
        ),
        sa.Column("username", sa.Text(), nullable=True),
        sa.Column(
            "payment_status",
            sa.Text(),
            nullable=True,
            comment="Free-form payment state, e.g. 'paid' or 'pending'",
        ),
        sa.Column(
            "commission_status",
            sa.Text(),
            nullable=True,
            comment="Free-form commission state, e.g. 'in progress' or 'delivered'",
        ),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the client_records table. All rows are lost."""
    op.drop_table("client_records")
