"""Port for asset persistence."""

from abc import ABC, abstractmethod

from asset_tracker.domain.entities import Asset, AssetStatus


class AssetRepository(ABC):
    """Port for asset persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, asset_id: str, *, for_update: bool = False) -> Asset | None:
        """Retrieve a single asset by ID.

        ``for_update`` asks the store to lock the row for the rest of the
        current transaction where the backend supports it.
        """
        ...

    @abstractmethod
    async def get_by_code(self, code: str) -> Asset | None:
        """Retrieve a single asset by its human-readable code."""
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        room_id: str | None = None,
        name: str | None = None,
        status: AssetStatus | None = None,
    ) -> list[Asset]:
        """Retrieve assets matching the given equality filters, ordered by code."""
        ...

    @abstractmethod
    async def get_max_sequence(self, code_prefix: str) -> int:
        """Return the highest sequence issued for a code prefix, 0 if none."""
        ...

    @abstractmethod
    async def create_many(self, assets: list[Asset]) -> list[Asset]:
        """Persist a batch of new assets."""
        ...

    @abstractmethod
    async def update(self, asset: Asset) -> Asset:
        """Write back status, history and room of an existing asset.

        Raises TransactionConflictError when another writer changed the
        asset since it was read.
        """
        ...

    @abstractmethod
    async def delete_by_room(self, room_id: str) -> int:
        """Delete every asset in a room. Returns the number deleted."""
        ...
