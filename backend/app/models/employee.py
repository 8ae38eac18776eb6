"""Employee ORM: persists one intake record.

Invariants:
    - id is UUID primary key, generated on insert
    - employee_id and email are each unique (named constraints)
    - date_of_joining is a calendar date, never a timestamp
    - Bounded columns match a validation rule bound (employee_id 10, phone 10,
      email 320 > email-validator's 254); free-text columns are unbounded Text

Design Decisions:
    - employee_id is client-supplied identity, kept separate from the surrogate id
    - created_at set by the application: same value on SQLite (tests) and PostgreSQL
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import String, Text, Date, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import Uuid

from app.db.base import Base


class Employee(Base):
    """Employee record entity."""
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("employee_id", name="uq_employees_employee_id"),
        UniqueConstraint("email", name="uq_employees_email"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    employee_id: Mapped[str] = mapped_column(String(10), nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(10), nullable=False)
    department: Mapped[str] = mapped_column(Text, nullable=False)
    date_of_joining: Mapped[date] = mapped_column(Date, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
