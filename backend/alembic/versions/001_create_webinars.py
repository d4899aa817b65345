"""Create the webinars table.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "webinars",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("organizer_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("seats >= 1 AND seats <= 1000", name="check_webinar_seats_bounds"),
    )
    # "My webinars" lookups filter by organizer
    op.create_index("ix_webinars_organizer_id", "webinars", ["organizer_id"])
    op.create_index("ix_webinars_start_date", "webinars", ["start_date"])


def downgrade() -> None:
    op.drop_index("ix_webinars_start_date", table_name="webinars")
    op.drop_index("ix_webinars_organizer_id", table_name="webinars")
    op.drop_table("webinars")
