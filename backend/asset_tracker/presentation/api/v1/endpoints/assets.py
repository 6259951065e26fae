"""Asset lookup, QR scan resolution, status changes, moves and AI suggestions."""

from fastapi import APIRouter, Depends, Query

from asset_tracker.application.schemas import (
    AssetMove,
    AssetResponse,
    AssetStatusUpdate,
    ScanRequest,
    StatusSuggestionRequest,
    StatusSuggestionResponse,
)
from asset_tracker.application.services import AssetQueryService, InventoryActions
from asset_tracker.domain.entities import AssetStatus
from asset_tracker.domain.exceptions import InventoryError
from asset_tracker.infrastructure.dependencies import (
    get_asset_query_service,
    get_inventory_actions,
)
from asset_tracker.presentation.api.v1.endpoints.errors import http_error_for, unwrap

router = APIRouter(prefix="/assets", tags=["Assets"])


@router.get("", response_model=list[AssetResponse])
async def list_assets(
    room_id: str | None = Query(None, description="Filter by room ID"),
    name: str | None = Query(None, description="Filter by asset name"),
    status: AssetStatus | None = Query(None, description="Filter by status"),
    service: AssetQueryService = Depends(get_asset_query_service),
) -> list[AssetResponse]:
    assets = await service.list_assets(room_id=room_id, name=name, status=status)
    return [AssetResponse.model_validate(a, from_attributes=True) for a in assets]


@router.get("/by-code/{code}", response_model=AssetResponse)
async def get_asset_by_code(
    code: str,
    service: AssetQueryService = Depends(get_asset_query_service),
) -> AssetResponse:
    """Look an asset up by its human-readable code, e.g. ``CHAIR-0003``."""
    try:
        asset = await service.get_asset_by_code(code)
    except InventoryError as e:
        raise http_error_for(e)
    return AssetResponse.model_validate(asset, from_attributes=True)


@router.post("/scan", response_model=AssetResponse)
async def resolve_scan(
    data: ScanRequest,
    service: AssetQueryService = Depends(get_asset_query_service),
) -> AssetResponse:
    """Resolve a decoded QR payload to the asset it identifies."""
    try:
        asset = await service.resolve_scan(data.payload)
    except InventoryError as e:
        raise http_error_for(e)
    return AssetResponse.model_validate(asset, from_attributes=True)


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: str,
    service: AssetQueryService = Depends(get_asset_query_service),
) -> AssetResponse:
    try:
        asset = await service.get_asset(asset_id)
    except InventoryError as e:
        raise http_error_for(e)
    return AssetResponse.model_validate(asset, from_attributes=True)


@router.put("/{asset_id}/status", response_model=AssetResponse)
async def update_status(
    asset_id: str,
    data: AssetStatusUpdate,
    actions: InventoryActions = Depends(get_inventory_actions),
) -> AssetResponse:
    """Set a new status and append it to the asset's history."""
    asset = unwrap(await actions.update_asset_status(asset_id, data.status))
    return AssetResponse.model_validate(asset, from_attributes=True)


@router.put("/{asset_id}/room", response_model=AssetResponse)
async def move_asset(
    asset_id: str,
    data: AssetMove,
    actions: InventoryActions = Depends(get_inventory_actions),
) -> AssetResponse:
    """Move an asset to another existing room."""
    asset = unwrap(await actions.move_asset(asset_id, data.room_id))
    return AssetResponse.model_validate(asset, from_attributes=True)


@router.post("/{asset_id}/status-suggestion", response_model=StatusSuggestionResponse)
async def suggest_status(
    asset_id: str,
    data: StatusSuggestionRequest | None = None,
    actions: InventoryActions = Depends(get_inventory_actions),
) -> StatusSuggestionResponse:
    """Ask the language model for the asset's next status. Nothing is applied."""
    notes = data.user_notes if data else None
    suggestion = unwrap(await actions.suggest_status(asset_id, notes))
    return StatusSuggestionResponse.from_suggestion(suggestion)
