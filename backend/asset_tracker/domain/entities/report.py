"""Read models for the inventory report."""

from dataclasses import dataclass, field

from .asset import Asset, AssetStatus
from .room import Room


def _empty_counts() -> dict[AssetStatus, int]:
    return {status: 0 for status in AssetStatus}


@dataclass
class RoomReport:
    """One room with its assets and per-status counts."""

    room: Room
    assets: list[Asset] = field(default_factory=list)
    status_counts: dict[AssetStatus, int] = field(default_factory=_empty_counts)


@dataclass
class InventoryReport:
    """All rooms plus overall status totals."""

    rooms: list[RoomReport] = field(default_factory=list)
    totals: dict[AssetStatus, int] = field(default_factory=_empty_counts)

    @property
    def asset_count(self) -> int:
        return sum(self.totals.values())
