import pytest
from datetime import date

from leavedesk.core.exceptions import ConflictError, ValidationError

def _register(registry, **overrides):
    fields = {
        "name": "Ravi Kumar",
        "email": "ravi@example.com",
        "department": "Finance",
        "joining_date": "2023-06-15",
    }
    fields.update(overrides)
    return registry.register(**fields)

def test_register_returns_employee(registry):
    employee = _register(registry)
    assert employee.id == 1
    assert employee.name == "Ravi Kumar"
    assert employee.joining_date == date(2023, 6, 15)

def test_ids_are_strictly_increasing(registry):
    ids = [_register(registry, email=f"user{i}@example.com").id for i in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5

def test_failed_registration_does_not_consume_an_id(registry):
    first = _register(registry)
    with pytest.raises(ValidationError):
        _register(registry, email="other@example.com", joining_date="not-a-date")
    second = _register(registry, email="third@example.com")
    assert second.id == first.id + 1

@pytest.mark.parametrize("field", ["name", "email", "department", "joining_date"])
def test_missing_field_is_rejected(registry, field):
    with pytest.raises(ValidationError):
        _register(registry, **{field: None})

def test_blank_field_is_rejected(registry):
    with pytest.raises(ValidationError):
        _register(registry, name="   ")

def test_duplicate_email_conflicts_and_keeps_first(registry):
    first = _register(registry)
    with pytest.raises(ConflictError):
        _register(registry, name="Someone Else", department="Sales")
    assert registry.find(first.id) == first
    assert len(registry.list()) == 1

def test_emails_differing_only_in_case_are_distinct(registry):
    first = _register(registry)
    second = _register(registry, email="Ravi@example.com")
    assert second.id == first.id + 1
    assert [e.email for e in registry.list()] == ["ravi@example.com", "Ravi@example.com"]

def test_duplicate_email_ignores_surrounding_whitespace(registry):
    _register(registry)
    with pytest.raises(ConflictError):
        _register(registry, email="  ravi@example.com ")

def test_duplicate_email_checked_before_date(registry):
    _register(registry)
    with pytest.raises(ConflictError):
        _register(registry, joining_date="garbage")

def test_invalid_joining_date(registry):
    with pytest.raises(ValidationError):
        _register(registry, joining_date="2023-13-45")

def test_joining_datetime_is_truncated(registry):
    employee = _register(registry, joining_date="2023-06-15T17:30:00Z")
    assert employee.joining_date == date(2023, 6, 15)

def test_find_unknown_returns_none(registry):
    assert registry.find(99) is None

def test_list_is_ordered_by_id(registry):
    _register(registry, email="a@example.com")
    _register(registry, email="b@example.com")
    assert [e.email for e in registry.list()] == ["a@example.com", "b@example.com"]
