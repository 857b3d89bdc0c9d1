from __future__ import annotations

import re
from typing import Any, Literal

from user_api.errors import ClientInputError, Result
from user_api.models.schemas import UserCreate, UserUpdate

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_ID_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_MIN_NAME_LENGTH = 2
_FIELDS = ("name", "email")

Operation = Literal["create", "update"]


def validate_id(raw: str) -> Result[int]:
    """Parse a path identifier. Empty, non-numeric and fractional values are rejected."""
    candidate = raw.strip() if isinstance(raw, str) else ""
    if not _ID_PATTERN.match(candidate):
        return ClientInputError("Invalid ID format")
    try:
        return int(candidate)
    except ValueError:
        # Past the interpreter's int/str conversion digit limit.
        return ClientInputError("Invalid ID format")


def ensure_json_object(payload: Any) -> Result[dict[str, Any]]:
    """An absent body reads as ``{}``; any other non-object payload is rejected."""
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        return ClientInputError("Request body must be a JSON object")
    return payload


def _is_blank(value: Any) -> bool:
    """Missing, null, empty string, zero or false: none of these satisfy "required"."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def _name_errors(name: Any) -> list[str]:
    if not isinstance(name, str):
        return ["Name must be a string"]
    if len(name.strip()) < _MIN_NAME_LENGTH:
        return [f"Name must have at least {_MIN_NAME_LENGTH} characters"]
    return []


def _email_errors(email: Any) -> list[str]:
    if not isinstance(email, str):
        return ["Email must be a string"]
    if not EMAIL_PATTERN.fullmatch(email):
        return ["Invalid email format"]
    return []


def collect_user_errors(body: dict[str, Any], operation: Operation) -> list[str]:
    """Every rule violated by ``body``, in a stable order.

    Required-field rules look at the value (blank counts as missing); the type
    and format rules run for every key that was sent, null included.
    """
    name_blank = _is_blank(body.get("name"))
    email_blank = _is_blank(body.get("email"))
    errors: list[str] = []

    if operation == "create":
        if name_blank:
            errors.append("Name is required")
        if email_blank:
            errors.append("Email is required")
    elif name_blank and email_blank:
        errors.append("At least one field (name or email) is required for update")

    if "name" in body:
        errors.extend(_name_errors(body["name"]))
    if "email" in body:
        errors.extend(_email_errors(body["email"]))
    return errors


def _sent_fields(body: dict[str, Any]) -> dict[str, Any]:
    return {key: body[key] for key in _FIELDS if key in body}


def validate_create(body: dict[str, Any]) -> Result[UserCreate]:
    errors = collect_user_errors(body, "create")
    if errors:
        return ClientInputError("; ".join(errors))
    return UserCreate(**_sent_fields(body))


def validate_update(body: dict[str, Any]) -> Result[UserUpdate]:
    errors = collect_user_errors(body, "update")
    if errors:
        return ClientInputError("; ".join(errors))
    return UserUpdate(**_sent_fields(body))
