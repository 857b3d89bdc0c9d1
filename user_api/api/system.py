from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["system"])


@router.get("/")
async def index() -> dict[str, str]:
    return {"message": "User Management API working!"}


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
