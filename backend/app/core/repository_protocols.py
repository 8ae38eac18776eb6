"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Storage accessed only through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
      (ADR: ExMA anti-pattern)
    - create() raises DuplicateEmployeeError / StorageError from core/errors.py,
      never driver exceptions: callers match on the error class, not on codes
"""

from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from app.core.employee_validation import NormalizedEmployee


class EmployeeLike(Protocol):
    """Structural contract for a persisted employee row."""
    id: UUID
    employee_id: str
    name: str
    email: str
    phone: str
    department: str
    date_of_joining: date
    role: str
    created_at: datetime


class EmployeeRepository(Protocol):
    """Contract for employee persistence: implemented by shell."""
    async def create(self, record: NormalizedEmployee) -> EmployeeLike: ...
