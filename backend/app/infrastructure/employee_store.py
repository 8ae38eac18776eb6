"""Employee Store: SQLAlchemy implementation of EmployeeRepository.

Invariants:
    - create() is a single INSERT + COMMIT; on any failure the session is rolled back
    - Unique violation (employee_id or email) -> DuplicateEmployeeError
    - Any other SQLAlchemy failure -> StorageError, logged here with traceback
    - Never returns a row that was not committed

Design Decisions:
    - Error mapping lives in the adapter, not the service: the service matches on
      error classes only (ADR: storage conflict is a distinct variant)
    - Which column collided is not reported; the database message is logged only
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.employee_validation import NormalizedEmployee
from app.core.errors import DuplicateEmployeeError, ErrorContext, StorageError
from app.infrastructure.database import is_unique_violation
from app.models.employee import Employee

logger = logging.getLogger(__name__)


class SqlEmployeeRepository:
    """Persists employees through an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, record: NormalizedEmployee) -> Employee:
        employee = Employee(
            employee_id=record.employee_id,
            name=record.name,
            email=record.email,
            phone=record.phone,
            department=record.department,
            date_of_joining=record.date_of_joining,
            role=record.role,
        )
        context = ErrorContext(employee_id=record.employee_id, operation="insert")
        try:
            self._db.add(employee)
            await self._db.commit()
            await self._db.refresh(employee)
        except IntegrityError as e:
            await self._db.rollback()
            if is_unique_violation(e):
                logger.warning(
                    f"Duplicate employee rejected: {e.orig}",
                    extra={"employee_id": record.employee_id},
                )
                raise DuplicateEmployeeError(context) from e
            logger.error(
                f"Integrity error inserting employee: {e}",
                exc_info=True, extra={"employee_id": record.employee_id},
            )
            raise StorageError("Integrity constraint violated", "insert", context) from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Failed to insert employee: {e}",
                exc_info=True, extra={"employee_id": record.employee_id},
            )
            raise StorageError("Insert failed", "insert", context) from e
        logger.info(
            "Employee created", extra={"employee_id": employee.employee_id},
        )
        return employee
