"""Pydantic DTOs for assets, status changes, moves and scans."""

from datetime import date

from pydantic import BaseModel, Field

from asset_tracker.domain.entities import AssetStatus


class AssetAllocate(BaseModel):
    """Schema for adding a batch of identical assets to a room."""

    name: str = Field(..., max_length=255, examples=["office chair"])
    quantity: int = Field(..., examples=[3])


class AssetStatusUpdate(BaseModel):
    """Schema for a status change. Free text is rejected by AssetMutationService."""

    status: str = Field(..., examples=["broken"])


class AssetMove(BaseModel):
    """Schema for moving an asset to another room."""

    room_id: str = Field(..., examples=["5f0c3b1e-7d1a-4b8e-9a55-2f6f4f0a9c11"])


class ScanRequest(BaseModel):
    """A decoded QR payload: asset URL, asset id or asset code."""

    payload: str = Field(..., max_length=2048)


class HistoryEntryResponse(BaseModel):
    status: AssetStatus
    date: date

    model_config = {"from_attributes": True}


class AssetResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    code: str
    name: str
    sequence: int
    room_id: str
    status: AssetStatus
    date_added: date
    history: list[HistoryEntryResponse]

    model_config = {"from_attributes": True}
