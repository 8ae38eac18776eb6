"""Employee Intake Service: validate, normalize, persist one employee record.

Invariants:
    - Validation runs with the SERVER tier before any storage call
    - Exactly one repository.create() per accepted request; none for rejected input
    - Outcomes: Employee returned, or EmployeeValidationError / DuplicateEmployeeError /
      StorageError raised: nothing else escapes except programming errors
    - No retries, no idempotency key

Design Decisions:
    - Clock injected (today callable): validation stays pure and the date boundary is testable
    - UTC calendar date as "today": server-side reference independent of host timezone
"""

from datetime import date, datetime, timezone
from typing import Any, Callable

from app.core.employee_validation import ValidationTier, validate_employee
from app.core.repository_protocols import EmployeeLike, EmployeeRepository


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class EmployeeIntakeService:
    """Creates employee records from raw request payloads."""

    def __init__(
        self,
        repository: EmployeeRepository,
        today: Callable[[], date] = utc_today,
    ):
        self._repository = repository
        self._today = today

    async def create_employee(self, raw: Any) -> EmployeeLike:
        record = validate_employee(raw, self._today(), ValidationTier.SERVER)
        return await self._repository.create(record)
