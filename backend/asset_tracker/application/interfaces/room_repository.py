"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from asset_tracker.domain.entities import Room


class RoomRepository(ABC):
    """Port for room persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, room_id: str, *, for_update: bool = False) -> Room | None:
        """Retrieve a single room by its ID, or None when it does not exist.

        ``for_update`` locks the row for the rest of the current transaction
        where the backend supports it, so allocations, moves and the delete
        of the same room run one after another.
        """
        ...

    @abstractmethod
    async def get_all(self) -> list[Room]:
        """Retrieve every room with its asset count populated."""
        ...

    @abstractmethod
    async def create(self, room: Room) -> Room:
        """Persist a new room and return it."""
        ...

    @abstractmethod
    async def update(self, room: Room) -> Room:
        """Update an existing room."""
        ...

    @abstractmethod
    async def delete(self, room_id: str) -> bool:
        """Delete a room. Returns True if deleted, False if not found."""
        ...
