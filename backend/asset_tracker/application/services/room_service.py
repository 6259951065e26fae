"""Application service (use case) for Room operations."""

import logging

from asset_tracker.application.interfaces import (
    AssetRepository,
    RoomRepository,
    TransactionRunner,
)
from asset_tracker.domain.entities import Room
from asset_tracker.domain.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MIN_FIELD_LENGTH = 3


def _validated(field: str, value: str) -> str:
    cleaned = (value or "").strip()
    if len(cleaned) < MIN_FIELD_LENGTH:
        raise ValidationError(
            f"Room {field} must be at least {MIN_FIELD_LENGTH} characters long"
        )
    return cleaned


class RoomService:
    """Orchestrates room CRUD, including the cascade to a room's assets."""

    def __init__(
        self,
        room_repository: RoomRepository,
        asset_repository: AssetRepository,
        transaction_runner: TransactionRunner,
    ):
        self._rooms = room_repository
        self._assets = asset_repository
        self._transactions = transaction_runner

    async def list_rooms(self) -> list[Room]:
        return await self._rooms.get_all()

    async def get_room(self, room_id: str) -> Room | None:
        """Return the room, or None when it does not exist."""
        if not room_id:
            return None
        return await self._rooms.get_by_id(room_id)

    async def require_room(self, room_id: str, *, for_update: bool = False) -> Room:
        room = await self._rooms.get_by_id(room_id, for_update=for_update) if room_id else None
        if room is None:
            raise NotFoundError("Room", room_id)
        return room

    async def create_room(self, name: str, manager: str) -> Room:
        room = Room(name=_validated("name", name), manager=_validated("manager", manager))

        async def work() -> Room:
            return await self._rooms.create(room)

        created = await self._transactions.run(work)
        logger.info("Created room %s (%s)", created.id, created.name)
        return created

    async def update_room(self, room_id: str, name: str, manager: str) -> Room:
        name = _validated("name", name)
        manager = _validated("manager", manager)

        async def work() -> Room:
            room = await self.require_room(room_id)
            room.update(name=name, manager=manager)
            return await self._rooms.update(room)

        return await self._transactions.run(work)

    async def delete_room(self, room_id: str) -> int:
        """Delete a room and every asset in it as one unit.

        Returns the number of assets removed. A room that is already gone
        raises NotFoundError and nothing else is touched.
        """

        async def work() -> int:
            await self.require_room(room_id, for_update=True)
            # Assets first: asset rows reference the room.
            removed = await self._assets.delete_by_room(room_id)
            await self._rooms.delete(room_id)
            return removed

        removed = await self._transactions.run(work)
        logger.info("Deleted room %s and %d asset(s)", room_id, removed)
        return removed
