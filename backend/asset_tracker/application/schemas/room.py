"""Pydantic DTOs (Data Transfer Objects) for the Room feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class RoomCreate(BaseModel):
    """Schema for creating a new room. Length rules are enforced by RoomService."""

    name: str = Field(..., max_length=255, examples=["Meeting Room A"])
    manager: str = Field(..., max_length=255, examples=["Jane Doe"])


class RoomUpdate(BaseModel):
    """Schema for replacing a room's editable fields."""

    name: str = Field(..., max_length=255)
    manager: str = Field(..., max_length=255)


class RoomResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    manager: str
    asset_count: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
