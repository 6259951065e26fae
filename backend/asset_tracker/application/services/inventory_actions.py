"""Action wrapper: the uniform success/failure boundary in front of the services.

Every user-facing action returns an ActionResult instead of raising, so
callers handle failures the same way regardless of where they came from.
"""

import logging
from collections.abc import Awaitable
from typing import TypeVar

from asset_tracker.application.services.asset_allocation_service import AssetAllocationService
from asset_tracker.application.services.asset_mutation_service import AssetMutationService
from asset_tracker.application.services.room_service import RoomService
from asset_tracker.application.services.status_suggestion_service import StatusSuggestionService
from asset_tracker.domain.entities import ActionResult, Asset, AssetStatus, Room, StatusSuggestion
from asset_tracker.domain.exceptions import InventoryError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _execute(action: str, call: Awaitable[T], success_message: str | None = None) -> ActionResult[T]:
    try:
        data = await call
    except InventoryError as exc:
        logger.info("%s failed (%s): %s", action, exc.error_code, exc.message)
        return ActionResult.fail(exc.message, exc.error_code)
    except Exception:
        logger.exception("%s failed unexpectedly", action)
        return ActionResult.fail(f"{action} failed.")
    return ActionResult.ok(data, success_message)


class InventoryActions:
    """Facade used by the presentation layer for every mutating action."""

    def __init__(
        self,
        room_service: RoomService,
        allocation_service: AssetAllocationService,
        mutation_service: AssetMutationService,
        suggestion_service: StatusSuggestionService | None = None,
    ):
        self._rooms = room_service
        self._allocation = allocation_service
        self._mutation = mutation_service
        self._suggestion = suggestion_service

    async def add_room(self, name: str, manager: str) -> ActionResult[Room]:
        return await _execute(
            "Adding room", self._rooms.create_room(name, manager), "Room added."
        )

    async def update_room(self, room_id: str, name: str, manager: str) -> ActionResult[Room]:
        return await _execute(
            "Updating room", self._rooms.update_room(room_id, name, manager), "Room updated."
        )

    async def delete_room(self, room_id: str) -> ActionResult[int]:
        return await _execute(
            "Deleting room", self._rooms.delete_room(room_id), "Room deleted."
        )

    async def add_assets(self, room_id: str, asset_name: str, quantity: int) -> ActionResult[list[Asset]]:
        return await _execute(
            "Adding assets",
            self._allocation.allocate_assets(room_id, asset_name, quantity),
            f"Added {quantity} asset(s).",
        )

    async def update_asset_status(self, asset_id: str, new_status: AssetStatus | str) -> ActionResult[Asset]:
        return await _execute(
            "Updating asset status",
            self._mutation.update_status(asset_id, new_status),
            "Asset status updated.",
        )

    async def move_asset(self, asset_id: str, new_room_id: str) -> ActionResult[Asset]:
        return await _execute(
            "Moving asset", self._mutation.move_asset(asset_id, new_room_id), "Asset moved."
        )

    async def suggest_status(self, asset_id: str, user_notes: str | None = None) -> ActionResult[StatusSuggestion]:
        if self._suggestion is None:
            return ActionResult.fail("AI suggestion unavailable", "service_unavailable")
        result = await _execute(
            "Suggesting status", self._suggestion.suggest_for_asset(asset_id, user_notes)
        )
        if result.success and result.data is not None and not result.data.available:
            return ActionResult.fail(
                result.data.message or "AI suggestion unavailable", "service_unavailable"
            )
        return result
