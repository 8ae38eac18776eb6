"""Employees: create-record endpoint and the exported client validation schema.

Invariants:
    - POST body is taken as raw JSON; the service validates every field
    - 201 body is {"message", "newEmployee"}; errors are rendered by api/error_handlers.py
    - Routes never contain business logic (delegate to EmployeeIntakeService)

Design Decisions:
    - Service built per request from the request-scoped AsyncSession
      (ADR: no shared mutable state beyond the engine pool)
    - Client schema served from the same rule table the server enforces
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.employee_validation import ValidationTier, export_schema
from app.infrastructure.database import get_db
from app.infrastructure.employee_store import SqlEmployeeRepository
from app.schemas.employee import (
    EmployeeCreatedResponse, EmployeeResponse, ValidationSchemaResponse,
)
from app.services.employee_intake import EmployeeIntakeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/employees", tags=["employees"])


def get_intake_service(
    db: AsyncSession = Depends(get_db),
) -> EmployeeIntakeService:
    return EmployeeIntakeService(SqlEmployeeRepository(db))


@router.post(
    "", response_model=EmployeeCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    payload: Any = Body(...),
    service: EmployeeIntakeService = Depends(get_intake_service),
):
    """Validate and store one employee."""
    employee = await service.create_employee(payload)
    return EmployeeCreatedResponse(
        new_employee=EmployeeResponse.model_validate(employee),
    )


@router.get("/validation-schema", response_model=ValidationSchemaResponse)
async def get_validation_schema():
    """Client-tier rules for the intake form."""
    return export_schema(ValidationTier.CLIENT)
