"""Room CRUD endpoints and batch asset allocation."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from asset_tracker.application.schemas import (
    AssetAllocate,
    AssetResponse,
    RoomCreate,
    RoomResponse,
    RoomUpdate,
)
from asset_tracker.application.services import AssetQueryService, InventoryActions, RoomService
from asset_tracker.domain.entities import AssetStatus
from asset_tracker.infrastructure.dependencies import (
    get_asset_query_service,
    get_inventory_actions,
    get_room_service,
)
from asset_tracker.presentation.api.v1.endpoints.errors import unwrap

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.get("", response_model=list[RoomResponse])
async def list_rooms(
    service: RoomService = Depends(get_room_service),
) -> list[RoomResponse]:
    """List all rooms with their current asset counts."""
    rooms = await service.list_rooms()
    return [RoomResponse.model_validate(r, from_attributes=True) for r in rooms]


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: str,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    room = await service.get_room(room_id)
    if room is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": f"Room with id '{room_id}' not found", "error_code": "not_found"},
        )
    return RoomResponse.model_validate(room, from_attributes=True)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    data: RoomCreate,
    actions: InventoryActions = Depends(get_inventory_actions),
) -> RoomResponse:
    """Create a new room."""
    room = unwrap(await actions.add_room(data.name, data.manager))
    return RoomResponse.model_validate(room, from_attributes=True)


@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: str,
    data: RoomUpdate,
    actions: InventoryActions = Depends(get_inventory_actions),
) -> RoomResponse:
    """Replace a room's name and manager."""
    room = unwrap(await actions.update_room(room_id, data.name, data.manager))
    return RoomResponse.model_validate(room, from_attributes=True)


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(
    room_id: str,
    actions: InventoryActions = Depends(get_inventory_actions),
) -> None:
    """Delete a room together with every asset it holds."""
    unwrap(await actions.delete_room(room_id))


@router.get("/{room_id}/assets", response_model=list[AssetResponse])
async def list_room_assets(
    room_id: str,
    status_filter: AssetStatus | None = Query(None, alias="status"),
    rooms: RoomService = Depends(get_room_service),
    assets: AssetQueryService = Depends(get_asset_query_service),
) -> list[AssetResponse]:
    """List the assets currently held by a room."""
    if await rooms.get_room(room_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": f"Room with id '{room_id}' not found", "error_code": "not_found"},
        )
    items = await assets.list_assets(room_id=room_id, status=status_filter)
    return [AssetResponse.model_validate(a, from_attributes=True) for a in items]


@router.post(
    "/{room_id}/assets",
    response_model=list[AssetResponse],
    status_code=status.HTTP_201_CREATED,
)
async def allocate_assets(
    room_id: str,
    data: AssetAllocate,
    actions: InventoryActions = Depends(get_inventory_actions),
) -> list[AssetResponse]:
    """Add ``quantity`` new in-use assets named ``name`` to the room."""
    created = unwrap(await actions.add_assets(room_id, data.name, data.quantity))
    return [AssetResponse.model_validate(a, from_attributes=True) for a in created]
