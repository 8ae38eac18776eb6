"""Employee Validation Schema: one declarative rule table serving both tiers.

Invariants:
    - All functions are PURE: no IO, no clock, no DB ("today" is always passed in)
    - Every field is evaluated independently and every violation is collected
    - A missing or non-string field yields exactly one violation; its other rules are skipped
    - Client-tier rules are a subset of server-tier rules (never stricter)
    - validate_employee never returns a partially validated record

Design Decisions:
    - Rules as data (FieldRule) over per-tier copies: the browser form receives
      export_schema(CLIENT) instead of maintaining its own duplicate
    - Client tier drops the date "must parse" rule: the date picker only emits valid dates,
      and the server tier stays authoritative regardless
    - email-validator with deliverability disabled: syntax only, no DNS lookups in a pure function
    - ASCII-only digit classes: \\d would accept non-ASCII digits
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Callable

from email_validator import EmailNotValidError, validate_email

from app.core.errors import EmployeeValidationError, FieldViolation


class ValidationTier(str, Enum):
    """Where a rule runs. SERVER is authoritative."""
    SERVER = "server"
    CLIENT = "client"


EMPLOYEE_FIELDS = (
    "employeeId", "name", "email", "phone",
    "department", "dateOfJoining", "role",
)

EMPLOYEE_ID_PATTERN = r"^[0-9]{2}[A-Z]{2}[0-9]{1,6}$"
EMPLOYEE_ID_MAX_LENGTH = 10
PHONE_PATTERN = r"^[0-9]{10}$"

# Offered by the form's select; advisory only, the server accepts any non-empty value
DEPARTMENTS = ("HR", "Engineering", "Marketing")

BOTH_TIERS = frozenset({ValidationTier.SERVER, ValidationTier.CLIENT})
SERVER_ONLY = frozenset({ValidationTier.SERVER})


@dataclass(frozen=True)
class NormalizedEmployee:
    """Validated input in storage representation."""
    employee_id: str
    name: str
    email: str
    phone: str
    department: str
    date_of_joining: date
    role: str


@dataclass(frozen=True)
class FieldRule:
    """A single check on a single string field."""
    field: str
    code: str
    message: str
    check: Callable[[str, date], bool]
    tiers: frozenset[ValidationTier] = BOTH_TIERS
    params: dict[str, Any] = field(default_factory=dict)

    def applies_to(self, tier: ValidationTier) -> bool:
        return tier in self.tiers

    def export(self) -> dict:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
            **self.params,
        }


# ─── Checks ──────────────────────────────────────────────────────

def parse_joining_date(value: str) -> date | None:
    """Parse an ISO-8601 date or datetime.

    Offset-aware datetimes are moved to UTC before taking the calendar date, so
    they compare against the UTC "today" as instants. Naive datetimes keep their date.
    """
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def _non_empty(value: str, today: date) -> bool:
    return len(value) >= 1


def _max_length(limit: int) -> Callable[[str, date], bool]:
    def check(value: str, today: date) -> bool:
        return len(value) <= limit
    return check


def _matches(pattern: str) -> Callable[[str, date], bool]:
    compiled = re.compile(pattern)

    def check(value: str, today: date) -> bool:
        return compiled.fullmatch(value) is not None
    return check


def _is_email(value: str, today: date) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_date(value: str, today: date) -> bool:
    return parse_joining_date(value) is not None


def _not_in_future(value: str, today: date) -> bool:
    # Unparseable values are the format rule's concern
    parsed = parse_joining_date(value)
    return parsed is None or parsed <= today


# ─── Rule Table ──────────────────────────────────────────────────

EMPLOYEE_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "employeeId", "too_small", "EmployeeId must not be empty",
        _non_empty, params={"minLength": 1},
    ),
    FieldRule(
        "employeeId", "too_big", f"Max {EMPLOYEE_ID_MAX_LENGTH} characters",
        _max_length(EMPLOYEE_ID_MAX_LENGTH),
        params={"maxLength": EMPLOYEE_ID_MAX_LENGTH},
    ),
    FieldRule(
        "employeeId", "invalid_format", "Invalid EmployeeId format",
        _matches(EMPLOYEE_ID_PATTERN), params={"pattern": EMPLOYEE_ID_PATTERN},
    ),
    FieldRule(
        "name", "too_small", "Name is required",
        _non_empty, params={"minLength": 1},
    ),
    FieldRule(
        "email", "invalid_email", "Invalid email format",
        _is_email, params={"format": "email"},
    ),
    FieldRule(
        "phone", "invalid_format", "Phone number must be 10 digits",
        _matches(PHONE_PATTERN), params={"pattern": PHONE_PATTERN},
    ),
    FieldRule(
        "department", "too_small", "Department is required",
        _non_empty, params={"minLength": 1, "choices": list(DEPARTMENTS)},
    ),
    FieldRule(
        "dateOfJoining", "invalid_date", "Date of joining must be a valid date",
        _is_date, tiers=SERVER_ONLY, params={"format": "date"},
    ),
    FieldRule(
        "dateOfJoining", "future_date", "Date of joining cannot be a future date",
        _not_in_future, params={"max": "today"},
    ),
    FieldRule(
        "role", "too_small", "Role is required",
        _non_empty, params={"minLength": 1},
    ),
)


def rules_for(tier: ValidationTier) -> list[FieldRule]:
    """Rules active in a tier, in table order."""
    return [rule for rule in EMPLOYEE_RULES if rule.applies_to(tier)]


# ─── Validation ──────────────────────────────────────────────────

def _check_field(
    name: str, raw: Mapping, today: date, rules: list[FieldRule],
) -> list[FieldViolation]:
    if name not in raw or raw[name] is None:
        return [FieldViolation(name, "required", "Required")]
    value = raw[name]
    if not isinstance(value, str):
        return [FieldViolation(
            name, "invalid_type",
            f"Expected string, received {type(value).__name__}",
        )]
    return [
        FieldViolation(name, rule.code, rule.message)
        for rule in rules
        if rule.field == name and not rule.check(value, today)
    ]


def collect_violations(
    raw: Any, today: date, tier: ValidationTier = ValidationTier.SERVER,
) -> list[FieldViolation]:
    """Every violation in raw, field order then rule order. Empty list = valid."""
    if not isinstance(raw, Mapping):
        return [FieldViolation("body", "invalid_type", "Expected an object")]
    rules = rules_for(tier)
    violations: list[FieldViolation] = []
    for name in EMPLOYEE_FIELDS:
        violations.extend(_check_field(name, raw, today, rules))
    return violations


def validate_employee(
    raw: Any, today: date, tier: ValidationTier = ValidationTier.SERVER,
) -> NormalizedEmployee:
    """Validate raw input and normalize it, or raise EmployeeValidationError."""
    violations = collect_violations(raw, today, tier)
    if violations:
        raise EmployeeValidationError(violations)
    joined = parse_joining_date(raw["dateOfJoining"])
    if joined is None:
        # Client tier skips the parse rule; a record still needs a real date
        raise EmployeeValidationError([FieldViolation(
            "dateOfJoining", "invalid_date", "Date of joining must be a valid date",
        )])
    return NormalizedEmployee(
        employee_id=raw["employeeId"],
        name=raw["name"],
        email=raw["email"],
        phone=raw["phone"],
        department=raw["department"],
        date_of_joining=joined,
        role=raw["role"],
    )


def export_schema(tier: ValidationTier = ValidationTier.CLIENT) -> dict:
    """JSON-serializable rule set for a tier, consumed by the browser form."""
    return {
        "tier": tier.value,
        "fields": list(EMPLOYEE_FIELDS),
        "rules": [rule.export() for rule in rules_for(tier)],
    }
