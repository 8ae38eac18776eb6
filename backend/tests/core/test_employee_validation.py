"""Employee Validation: tests for the shared rule table and both tiers.

Tests cover:
    - A fully valid payload normalizes with values passed through unchanged
    - Each field's rules fire independently and are all collected
    - dateOfJoining boundary is inclusive of today
    - Missing / non-string / non-object input
    - Client tier is a strict subset and skips the date parse rule
"""

import json
from datetime import date, timedelta

import pytest

from app.core.employee_validation import (
    EMPLOYEE_FIELDS,
    EMPLOYEE_RULES,
    NormalizedEmployee,
    ValidationTier,
    collect_violations,
    export_schema,
    parse_joining_date,
    rules_for,
    validate_employee,
)
from app.core.errors import EmployeeValidationError
from tests.payloads import make_payload

TODAY = date(2026, 3, 15)


def _codes_for(violations, field: str) -> list[str]:
    return [v.code for v in violations if v.field == field]


# ─── Valid input ─────────────────────────────────────────────────

def test_valid_payload_normalizes():
    record = validate_employee(make_payload(), TODAY)
    assert record == NormalizedEmployee(
        employee_id="23AB5",
        name="A",
        email="a@b.com",
        phone="1234567890",
        department="HR",
        date_of_joining=date(2023, 1, 1),
        role="Engineer",
    )


def test_valid_payload_passes_strings_through_unchanged():
    payload = make_payload(
        employeeId="99ZZ123456", name="  Jane Doe ", email="Jane.Doe@Acme.com",
        department="Finance", role="Lead",
    )
    record = validate_employee(payload, TODAY)
    assert record.employee_id == "99ZZ123456"
    assert record.name == "  Jane Doe "
    assert record.email == "Jane.Doe@Acme.com"
    assert record.department == "Finance"


def test_unknown_keys_are_ignored():
    record = validate_employee(make_payload(salary="1000"), TODAY)
    assert record.employee_id == "23AB5"


def test_valid_payload_has_no_violations():
    assert collect_violations(make_payload(), TODAY) == []


# ─── employeeId ──────────────────────────────────────────────────

def test_employee_id_bad_format():
    violations = collect_violations(make_payload(employeeId="abc"), TODAY)
    assert _codes_for(violations, "employeeId") == ["invalid_format"]


def test_employee_id_empty_reports_empty_and_format():
    violations = collect_violations(make_payload(employeeId=""), TODAY)
    assert _codes_for(violations, "employeeId") == ["too_small", "invalid_format"]


def test_employee_id_too_long_reports_length_and_format():
    violations = collect_violations(make_payload(employeeId="12AB1234567"), TODAY)
    assert _codes_for(violations, "employeeId") == ["too_big", "invalid_format"]


@pytest.mark.parametrize("employee_id", ["23ab5", "2AB5", "23AB", "23AB5\n", "٢٣AB5"])
def test_employee_id_rejects_near_misses(employee_id):
    violations = collect_violations(make_payload(employeeId=employee_id), TODAY)
    assert "invalid_format" in _codes_for(violations, "employeeId")


@pytest.mark.parametrize("employee_id", ["00AA0", "12XY123456"])
def test_employee_id_accepts_bounds(employee_id):
    assert collect_violations(make_payload(employeeId=employee_id), TODAY) == []


# ─── Other string fields ─────────────────────────────────────────

@pytest.mark.parametrize("field", ["name", "department", "role"])
def test_required_text_fields_reject_empty(field):
    violations = collect_violations(make_payload(**{field: ""}), TODAY)
    assert _codes_for(violations, field) == ["too_small"]


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "@b.com", "a b@c.com"])
def test_email_rejects_bad_syntax(email):
    violations = collect_violations(make_payload(email=email), TODAY)
    assert _codes_for(violations, "email") == ["invalid_email"]


@pytest.mark.parametrize("phone", ["12345", "12345678901", "123456789a", "１２３４５６７８９０"])
def test_phone_requires_ten_ascii_digits(phone):
    violations = collect_violations(make_payload(phone=phone), TODAY)
    assert _codes_for(violations, "phone") == ["invalid_format"]


# ─── dateOfJoining ───────────────────────────────────────────────

def test_date_tomorrow_is_rejected():
    tomorrow = (TODAY + timedelta(days=1)).isoformat()
    violations = collect_violations(make_payload(dateOfJoining=tomorrow), TODAY)
    assert _codes_for(violations, "dateOfJoining") == ["future_date"]


def test_date_today_is_accepted():
    record = validate_employee(make_payload(dateOfJoining=TODAY.isoformat()), TODAY)
    assert record.date_of_joining == TODAY


@pytest.mark.parametrize("value", ["not-a-date", "2023-02-30", "01/02/2023", ""])
def test_unparseable_date_reports_only_format(value):
    violations = collect_violations(make_payload(dateOfJoining=value), TODAY)
    assert _codes_for(violations, "dateOfJoining") == ["invalid_date"]


def test_datetime_collapses_to_calendar_date():
    assert parse_joining_date("2023-01-01T10:00:00Z") == date(2023, 1, 1)
    assert parse_joining_date("2023-01-01T10:00:00") == date(2023, 1, 1)


def test_offset_datetime_is_moved_to_utc_before_taking_the_date():
    assert parse_joining_date("2023-01-01T23:30:00-05:00") == date(2023, 1, 2)
    assert parse_joining_date("2023-01-02T01:00:00+05:00") == date(2023, 1, 1)


def test_offset_datetime_after_utc_today_is_rejected():
    # 23:00 at -05:00 is 04:00Z the next day
    today = date(2026, 10, 19)
    payload = make_payload(dateOfJoining="2026-10-19T23:00:00-05:00")
    violations = collect_violations(payload, today)
    assert _codes_for(violations, "dateOfJoining") == ["future_date"]


def test_offset_datetime_before_utc_today_is_accepted():
    # 01:00 at +05:00 is 20:00Z the previous day
    today = date(2026, 10, 19)
    record = validate_employee(
        make_payload(dateOfJoining="2026-10-20T01:00:00+05:00"), today,
    )
    assert record.date_of_joining == today


def test_parse_joining_date_returns_none_for_garbage():
    assert parse_joining_date("yesterday") is None


# ─── Shape errors ────────────────────────────────────────────────

def test_missing_field_reports_required():
    payload = make_payload()
    del payload["phone"]
    violations = collect_violations(payload, TODAY)
    assert [(v.field, v.code) for v in violations] == [("phone", "required")]


def test_null_field_reports_required():
    violations = collect_violations(make_payload(role=None), TODAY)
    assert _codes_for(violations, "role") == ["required"]


def test_non_string_field_reports_type_only():
    violations = collect_violations(make_payload(phone=1234567890), TODAY)
    assert [(v.field, v.code) for v in violations] == [("phone", "invalid_type")]
    assert "int" in violations[0].message


def test_empty_object_reports_every_field():
    violations = collect_violations({}, TODAY)
    assert [v.field for v in violations] == list(EMPLOYEE_FIELDS)
    assert {v.code for v in violations} == {"required"}


@pytest.mark.parametrize("raw", [None, [], "employee", 42])
def test_non_object_reports_body(raw):
    violations = collect_violations(raw, TODAY)
    assert [(v.field, v.code) for v in violations] == [("body", "invalid_type")]


def test_violations_across_fields_are_all_collected():
    payload = make_payload(employeeId="abc", email="nope", phone="1", role="")
    violations = collect_violations(payload, TODAY)
    assert [v.field for v in violations] == ["employeeId", "email", "phone", "role"]


def test_validate_employee_raises_with_all_violations():
    with pytest.raises(EmployeeValidationError) as exc_info:
        validate_employee(make_payload(employeeId="abc", name=""), TODAY)
    fields = [v.field for v in exc_info.value.violations]
    assert fields == ["employeeId", "name"]
    assert exc_info.value.http_status == 400


# ─── Tiers ───────────────────────────────────────────────────────

def test_client_rules_are_subset_of_server_rules():
    server = rules_for(ValidationTier.SERVER)
    client = rules_for(ValidationTier.CLIENT)
    assert all(rule in server for rule in client)
    assert len(client) < len(server)


def test_server_tier_runs_every_rule():
    assert rules_for(ValidationTier.SERVER) == list(EMPLOYEE_RULES)


def test_client_tier_skips_date_parse_rule():
    payload = make_payload(dateOfJoining="not-a-date")
    assert collect_violations(payload, TODAY, ValidationTier.CLIENT) == []
    server = collect_violations(payload, TODAY, ValidationTier.SERVER)
    assert _codes_for(server, "dateOfJoining") == ["invalid_date"]


def test_client_tier_still_rejects_future_date():
    future = (TODAY + timedelta(days=30)).isoformat()
    violations = collect_violations(
        make_payload(dateOfJoining=future), TODAY, ValidationTier.CLIENT,
    )
    assert _codes_for(violations, "dateOfJoining") == ["future_date"]


def test_client_tier_never_builds_record_without_date():
    with pytest.raises(EmployeeValidationError) as exc_info:
        validate_employee(
            make_payload(dateOfJoining="soon"), TODAY, ValidationTier.CLIENT,
        )
    assert exc_info.value.violations[0].code == "invalid_date"


# ─── Export ──────────────────────────────────────────────────────

def test_export_schema_is_json_serializable():
    exported = export_schema(ValidationTier.CLIENT)
    assert json.loads(json.dumps(exported)) == exported


def test_export_schema_carries_rule_parameters():
    exported = export_schema(ValidationTier.CLIENT)
    by_code = {(r["field"], r["code"]): r for r in exported["rules"]}
    assert by_code[("employeeId", "invalid_format")]["pattern"] == r"^[0-9]{2}[A-Z]{2}[0-9]{1,6}$"
    assert by_code[("employeeId", "too_big")]["maxLength"] == 10
    assert by_code[("department", "too_small")]["choices"] == ["HR", "Engineering", "Marketing"]
    assert ("dateOfJoining", "invalid_date") not in by_code
    assert exported["tier"] == "client"
    assert exported["fields"] == list(EMPLOYEE_FIELDS)
