"""Batch allocation of new assets with sequential human-readable codes."""

import logging
from collections.abc import Callable
from datetime import date

from asset_tracker.application.interfaces import (
    AssetRepository,
    RoomRepository,
    TransactionRunner,
)
from asset_tracker.application.services.transaction_retry import run_with_retry
from asset_tracker.domain.entities import Asset, code_prefix_for, utc_today
from asset_tracker.domain.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MIN_ASSET_NAME_LENGTH = 2


class AssetAllocationService:
    """Creates batches of assets under a room.

    Sequence numbers are counted per code prefix across all rooms, so
    ``CHAIR-0003`` is unique in the whole inventory. Reading the current
    high-water mark and inserting the batch happen in one transaction;
    a concurrent allocator that took the same numbers makes the insert
    violate the unique code constraint, the batch rolls back and is retried
    against the new high-water mark.
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        asset_repository: AssetRepository,
        transaction_runner: TransactionRunner,
        *,
        max_batch: int = 500,
        max_retries: int = 2,
        backoff_seconds: float = 0.05,
        today: Callable[[], date] = utc_today,
    ):
        self._rooms = room_repository
        self._assets = asset_repository
        self._transactions = transaction_runner
        self._max_batch = max_batch
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds
        self._today = today

    async def allocate_assets(self, room_id: str, asset_name: str, quantity: int) -> list[Asset]:
        """Create ``quantity`` in-use assets named ``asset_name`` in a room.

        Returns the new assets in ascending sequence order. The room is
        checked again inside the transaction that inserts the batch.
        """
        if not room_id or await self._rooms.get_by_id(room_id) is None:
            raise NotFoundError("Room", room_id)

        name = (asset_name or "").strip()
        if len(name) < MIN_ASSET_NAME_LENGTH:
            raise ValidationError(
                f"Asset name must be at least {MIN_ASSET_NAME_LENGTH} characters long"
            )
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError("Quantity must be a whole number of at least 1")
        if quantity > self._max_batch:
            raise ValidationError(f"Quantity must not exceed {self._max_batch}")

        prefix = code_prefix_for(name)
        if not prefix:
            raise ValidationError("Asset name must contain at least one letter or digit")

        async def work() -> list[Asset]:
            # Re-read under the row lock: a concurrent delete_room waits for this batch.
            if await self._rooms.get_by_id(room_id, for_update=True) is None:
                raise NotFoundError("Room", room_id)
            today = self._today()
            start = await self._assets.get_max_sequence(prefix)
            batch = [
                Asset.allocate(name=name, room_id=room_id, sequence=start + offset, on=today)
                for offset in range(1, quantity + 1)
            ]
            return await self._assets.create_many(batch)

        created = await run_with_retry(
            self._transactions,
            work,
            operation=f"Allocating {quantity} x '{name}'",
            max_retries=self._max_retries,
            backoff_seconds=self._backoff_seconds,
        )
        logger.info(
            "Allocated %s..%s in room %s",
            created[0].code,
            created[-1].code,
            room_id,
        )
        return created
