from __future__ import annotations

from pydantic import BaseModel, Field


class User(BaseModel):
    id: int = Field(description="Unique user ID assigned by the store")
    name: str
    email: str

    model_config = {
        "json_schema_extra": {"examples": [{"id": 1, "name": "John Smith", "email": "john@example.com"}]},
    }


class UserCreate(BaseModel):
    name: str
    email: str


class UserUpdate(BaseModel):
    """Partial update. Only explicitly set fields are applied."""

    name: str | None = None
    email: str | None = None

    def changes(self) -> dict[str, str]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ErrorResponse(BaseModel):
    error: str
    message: str
    requestId: str
