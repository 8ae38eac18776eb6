"""Employee Schemas: Pydantic response models for the employee endpoints.

Invariants:
    - Wire names are camelCase (employeeId, dateOfJoining, createdAt)
    - dateOfJoining serializes as YYYY-MM-DD
    - Request bodies are NOT modeled here: core/employee_validation.py owns input rules.
      A pydantic request model stops at the first failing validator per field and
      reports type errors and rule errors in separate passes; the rule table reports
      every violation of every field in one response

Design Decisions:
    - alias_generator=to_camel + populate_by_name: Python stays snake_case, JSON stays camelCase
    - from_attributes: built straight from the ORM row
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CREATED_MESSAGE = "Employee added successfully"


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )


class EmployeeResponse(CamelModel):
    """Persisted employee, including storage-assigned fields."""
    id: UUID
    employee_id: str
    name: str
    email: str
    phone: str
    department: str
    date_of_joining: date
    role: str
    created_at: datetime


class EmployeeCreatedResponse(CamelModel):
    """201 body for POST /api/employees."""
    message: str = CREATED_MESSAGE
    new_employee: EmployeeResponse


class ValidationRuleSchema(BaseModel):
    """One exported rule; extra keys carry rule parameters (pattern, maxLength, ...)."""
    model_config = ConfigDict(extra="allow")

    field: str
    code: str
    message: str


class ValidationSchemaResponse(BaseModel):
    """Rule set a tier should apply."""
    tier: str
    fields: list[str]
    rules: list[ValidationRuleSchema] = Field(default_factory=list)
