"""Initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "staff",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("appointment_number", sa.String(length=20), nullable=False),
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("gender", sa.String(length=16), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("nic_number", sa.String(length=12), nullable=False),
        sa.Column("marital_status", sa.String(length=16), server_default=sa.text("'Single'"), nullable=False),
        sa.Column("address_line1", sa.Text(), nullable=False),
        sa.Column("address_line2", sa.Text(), nullable=True),
        sa.Column("address_line3", sa.Text(), nullable=True),
        sa.Column("contact_number", sa.String(length=32), nullable=False),
        sa.Column("email", sa.String(length=254), nullable=True),
        sa.Column("designation", sa.String(length=64), nullable=False),
        sa.Column("date_of_first_appointment", sa.Date(), nullable=False),
        sa.Column("date_of_retirement", sa.Date(), nullable=False),
        sa.Column("increment_date", sa.String(length=5), nullable=False),
        sa.Column("salary_code", sa.String(length=8), nullable=False),
        sa.Column("basic_salary", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("increment_amount", sa.Float(), server_default=sa.text("0"), nullable=False),
        sa.Column("image_path", sa.String(length=1024), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("appointment_number"),
    )
    op.create_index("idx_staff_name", "staff", ["full_name"])
    op.create_index("idx_staff_nic", "staff", ["nic_number"])
    op.create_index("idx_staff_designation", "staff", ["designation"])


def downgrade() -> None:
    op.drop_index("idx_staff_designation", table_name="staff")
    op.drop_index("idx_staff_nic", table_name="staff")
    op.drop_index("idx_staff_name", table_name="staff")
    op.drop_table("staff")
