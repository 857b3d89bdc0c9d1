from __future__ import annotations

from typing import Any

import structlog

from user_api.db.user_store import UserStore
from user_api.errors import ApiError, NotFoundError, Result
from user_api.models.schemas import User
from user_api.services.validation import ensure_json_object, validate_create, validate_id, validate_update

USER_NOT_FOUND = "User not found"

logger = structlog.get_logger(__name__)


def list_users(store: UserStore) -> list[User]:
    return store.list()


def get_user(store: UserStore, raw_id: str) -> Result[User]:
    user_id = validate_id(raw_id)
    if isinstance(user_id, ApiError):
        return user_id

    user = store.get_by_id(user_id)
    if user is None:
        return NotFoundError(USER_NOT_FOUND)
    return user


def create_user(store: UserStore, payload: Any) -> Result[User]:
    body = ensure_json_object(payload)
    if isinstance(body, ApiError):
        return body

    data = validate_create(body)
    if isinstance(data, ApiError):
        return data

    user = store.create(data)
    logger.info("user.created", user_id=user.id)
    return user


def update_user(store: UserStore, raw_id: str, payload: Any) -> Result[User]:
    """Validate the id, then the body, then merge the provided fields."""
    user_id = validate_id(raw_id)
    if isinstance(user_id, ApiError):
        return user_id

    body = ensure_json_object(payload)
    if isinstance(body, ApiError):
        return body

    data = validate_update(body)
    if isinstance(data, ApiError):
        return data

    user = store.update(user_id, data)
    if user is None:
        return NotFoundError(USER_NOT_FOUND)
    logger.info("user.updated", user_id=user.id, fields=sorted(data.changes()))
    return user


def delete_user(store: UserStore, raw_id: str) -> Result[None]:
    user_id = validate_id(raw_id)
    if isinstance(user_id, ApiError):
        return user_id

    if not store.delete(user_id):
        return NotFoundError(USER_NOT_FOUND)
    logger.info("user.deleted", user_id=user_id)
    return None
