from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from user_api.db.user_store import UserStore
from user_api.errors import ApiError, error_response
from user_api.models.schemas import ErrorResponse, User
from user_api.services import user_service

router = APIRouter(tags=["users"])

_INVALID_INPUT = {400: {"model": ErrorResponse, "description": "Invalid ID format or input data"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


@router.get("", response_model=list[User], summary="Returns a list of all users")
async def list_users(store: UserStore = Depends(get_user_store)) -> list[User]:
    return user_service.list_users(store)


@router.get("/{user_id}", response_model=User, responses={**_INVALID_INPUT, **_NOT_FOUND}, summary="Gets a user by ID")
async def get_user(user_id: str, request: Request, store: UserStore = Depends(get_user_store)) -> Any:
    result = user_service.get_user(store, user_id)
    if isinstance(result, ApiError):
        return error_response(request, result)
    return result


@router.post("", status_code=201, response_model=User, responses=_INVALID_INPUT, summary="Creates a new user")
async def create_user(
    request: Request,
    payload: Any = Body(default=None),
    store: UserStore = Depends(get_user_store),
) -> Any:
    result = user_service.create_user(store, payload)
    if isinstance(result, ApiError):
        return error_response(request, result)
    return result


@router.put(
    "/{user_id}",
    response_model=User,
    responses={**_INVALID_INPUT, **_NOT_FOUND},
    summary="Updates an existing user",
)
async def update_user(
    user_id: str,
    request: Request,
    payload: Any = Body(default=None),
    store: UserStore = Depends(get_user_store),
) -> Any:
    result = user_service.update_user(store, user_id, payload)
    if isinstance(result, ApiError):
        return error_response(request, result)
    return result


@router.delete(
    "/{user_id}",
    status_code=204,
    response_class=Response,
    responses={**_INVALID_INPUT, **_NOT_FOUND},
    summary="Removes a user",
)
async def delete_user(user_id: str, request: Request, store: UserStore = Depends(get_user_store)) -> Response:
    result = user_service.delete_user(store, user_id)
    if isinstance(result, ApiError):
        return error_response(request, result)
    return Response(status_code=204)
