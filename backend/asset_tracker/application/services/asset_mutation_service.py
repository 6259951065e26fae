"""Status changes and room moves for existing assets."""

import logging
from collections.abc import Callable
from datetime import date

from asset_tracker.application.interfaces import (
    AssetRepository,
    RoomRepository,
    TransactionRunner,
)
from asset_tracker.application.services.transaction_retry import run_with_retry
from asset_tracker.domain.entities import Asset, AssetStatus, utc_today
from asset_tracker.domain.exceptions import (
    InvalidTargetError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _coerce_status(value: AssetStatus | str) -> AssetStatus:
    if isinstance(value, AssetStatus):
        return value
    try:
        return AssetStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in AssetStatus)
        raise ValidationError(f"Unknown status '{value}'. Expected one of: {allowed}") from None


class AssetMutationService:
    """Appends status history and reassigns rooms.

    Every status change is a read-modify-write of the asset's history run
    in a single transaction. Two concurrent changes to the same asset are
    serialised by the store; the loser is retried so both entries land.
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        asset_repository: AssetRepository,
        transaction_runner: TransactionRunner,
        *,
        max_retries: int = 2,
        backoff_seconds: float = 0.05,
        today: Callable[[], date] = utc_today,
    ):
        self._rooms = room_repository
        self._assets = asset_repository
        self._transactions = transaction_runner
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds
        self._today = today

    async def update_status(self, asset_id: str, new_status: AssetStatus | str) -> Asset:
        status = _coerce_status(new_status)

        async def work() -> Asset:
            asset = await self._assets.get_by_id(asset_id, for_update=True)
            if asset is None:
                raise NotFoundError("Asset", asset_id)
            previous = asset.status
            asset.record_status(status, self._today())
            updated = await self._assets.update(asset)
            logger.info(
                "Asset %s status %s -> %s", updated.code, previous.value, status.value
            )
            return updated

        return await run_with_retry(
            self._transactions,
            work,
            operation=f"Status update of asset {asset_id}",
            max_retries=self._max_retries,
            backoff_seconds=self._backoff_seconds,
        )

    async def move_asset(self, asset_id: str, new_room_id: str) -> Asset:
        """Move an asset to another room without touching its history."""

        async def work() -> Asset:
            asset = await self._assets.get_by_id(asset_id, for_update=True)
            if asset is None:
                raise NotFoundError("Asset", asset_id)
            target = (
                await self._rooms.get_by_id(new_room_id, for_update=True) if new_room_id else None
            )
            if target is None:
                raise InvalidTargetError(new_room_id)
            if asset.room_id == new_room_id:
                return asset
            previous_room = asset.room_id
            asset.move_to(new_room_id)
            updated = await self._assets.update(asset)
            logger.info(
                "Moved asset %s from room %s to %s", updated.code, previous_room, new_room_id
            )
            return updated

        return await run_with_retry(
            self._transactions,
            work,
            operation=f"Move of asset {asset_id}",
            max_retries=self._max_retries,
            backoff_seconds=self._backoff_seconds,
        )
