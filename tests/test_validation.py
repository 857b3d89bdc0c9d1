import pytest

from user_api.errors import ApiError, ClientInputError
from user_api.models.schemas import UserCreate, UserUpdate
from user_api.services.validation import ensure_json_object, validate_create, validate_id, validate_update


@pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), (" 7 ", 7), ("-3", -3), ("007", 7)])
def test_validate_id_parses_integers(raw: str, expected: int) -> None:
    assert validate_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "1.5", "12abc", "1e3", " "])
def test_validate_id_rejects_non_integers(raw: str) -> None:
    result = validate_id(raw)
    assert isinstance(result, ClientInputError)
    assert result.status_code == 400
    assert result.message == "Invalid ID format"


def test_validate_id_rejects_ids_too_long_to_convert() -> None:
    result = validate_id("1" * 5000)
    assert isinstance(result, ClientInputError)
    assert result.message == "Invalid ID format"


def test_create_with_empty_body_reports_both_required_fields() -> None:
    result = validate_create({})
    assert isinstance(result, ClientInputError)
    assert result.message == "Name is required; Email is required"


def test_update_with_empty_body_requires_one_field() -> None:
    result = validate_update({})
    assert isinstance(result, ClientInputError)
    assert result.message == "At least one field (name or email) is required for update"


def test_short_name_and_bad_email_are_reported_together() -> None:
    result = validate_create({"name": "A", "email": "x"})
    assert isinstance(result, ApiError)
    assert result.message == "Name must have at least 2 characters; Invalid email format"


def test_name_is_measured_after_trimming() -> None:
    result = validate_create({"name": "  B  ", "email": "b@example.com"})
    assert isinstance(result, ClientInputError)
    assert "Name must have at least 2 characters" in result.message


def test_wrong_types_are_reported() -> None:
    result = validate_create({"name": 123, "email": ["a@b.c"]})
    assert isinstance(result, ClientInputError)
    assert result.message == "Name must be a string; Email must be a string"


@pytest.mark.parametrize(
    "email",
    ["invalid-email", "user@domain", "user @example.com", "@example.com", "a@b@c.com", "user@example.com\n"],
)
def test_invalid_email_formats(email: str) -> None:
    result = validate_update({"email": email})
    assert isinstance(result, ClientInputError)
    assert result.message == "Invalid email format"


def test_missing_field_on_create_still_validates_present_one() -> None:
    result = validate_create({"email": "bad"})
    assert result.message == "Name is required; Invalid email format"


def test_null_field_on_create_is_missing_and_not_a_string() -> None:
    result = validate_create({"name": None, "email": "a@b.co"})
    assert isinstance(result, ClientInputError)
    assert result.message == "Name is required; Name must be a string"


def test_empty_strings_on_create_are_missing_and_invalid() -> None:
    result = validate_create({"name": "", "email": ""})
    assert isinstance(result, ClientInputError)
    assert result.message == (
        "Name is required; Email is required; Name must have at least 2 characters; Invalid email format"
    )


def test_empty_name_on_update_counts_as_no_field() -> None:
    result = validate_update({"name": ""})
    assert isinstance(result, ClientInputError)
    assert result.message == (
        "At least one field (name or email) is required for update; Name must have at least 2 characters"
    )


def test_null_fields_on_update() -> None:
    result = validate_update({"name": None, "email": None})
    assert result.message == (
        "At least one field (name or email) is required for update; "
        "Name must be a string; Email must be a string"
    )


def test_zero_and_false_count_as_missing() -> None:
    result = validate_create({"name": 0, "email": False})
    assert result.message == "Name is required; Email is required; Name must be a string; Email must be a string"


def test_valid_create_returns_typed_payload() -> None:
    result = validate_create({"name": "New User", "email": "new@example.com", "id": 99})
    assert result == UserCreate(name="New User", email="new@example.com")


def test_valid_update_only_carries_provided_fields() -> None:
    result = validate_update({"email": "new@example.com"})
    assert isinstance(result, UserUpdate)
    assert result.changes() == {"email": "new@example.com"}


def test_ensure_json_object() -> None:
    assert ensure_json_object(None) == {}
    assert ensure_json_object({"name": "Ann"}) == {"name": "Ann"}

    for payload in ([1, 2], "text", 3, b"raw bytes"):
        result = ensure_json_object(payload)
        assert isinstance(result, ClientInputError)
        assert result.message == "Request body must be a JSON object"
