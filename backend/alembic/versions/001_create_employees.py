"""Create employees table with unique employee_id and email.

Revision ID: 001_create_employees
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_employees"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("employee_id", sa.String(10), nullable=False),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(10), nullable=False),
        sa.Column("department", sa.Text, nullable=False),
        sa.Column("date_of_joining", sa.Date, nullable=False),
        sa.Column("role", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("employee_id", name="uq_employees_employee_id"),
        sa.UniqueConstraint("email", name="uq_employees_email"),
    )


def downgrade() -> None:
    op.drop_table("employees")
