"""Pydantic schemas for the users feature."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """A user record as returned to clients.

    Users are paginated by ``id``, which is assigned in ascending order and
    never reused.
    """

    id: int = Field(ge=1, description="Unique, ascending user identifier")
    name: str = Field(description="Display name")
    email: str = Field(description="Contact email address")
    avatar: str = Field(description="Avatar image reference")

    model_config = {"frozen": True}
