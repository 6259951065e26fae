"""Domain entities for tracked assets and their status history."""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4

SEQUENCE_WIDTH = 4
_PREFIX_SEPARATORS = re.compile(r"[\W_]+")


class AssetStatus(str, Enum):
    """Lifecycle states of an asset. Any state may follow any other."""

    IN_USE = "in-use"
    BROKEN = "broken"
    REPAIRING = "repairing"
    DISPOSED = "disposed"

    @classmethod
    def parse(cls, raw: str | None) -> "AssetStatus | None":
        """Map loosely formatted text ("In use", "in_use", "Broken.") to a member.

        Returns None when the text does not name one of the four statuses.
        """
        if not raw:
            return None
        normalized = _PREFIX_SEPARATORS.sub("-", raw.strip().lower()).strip("-")
        for status in cls:
            if normalized == status.value:
                return status
        return None


@dataclass(frozen=True)
class HistoryEntry:
    """One immutable status-change record."""

    status: AssetStatus
    date: date

    def to_dict(self) -> dict[str, str]:
        return {"status": self.status.value, "date": self.date.isoformat()}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "HistoryEntry":
        return cls(status=AssetStatus(data["status"]), date=date.fromisoformat(data["date"]))


def code_prefix_for(name: str) -> str:
    """Derive the code prefix from an asset name: ``office chair`` → ``OFFICE-CHAIR``.

    Names that normalise to the same prefix share one sequence counter.
    Returns an empty string when the name has no letters or digits.
    """
    return _PREFIX_SEPARATORS.sub("-", name.strip().upper()).strip("-")


def format_asset_code(prefix: str, sequence: int) -> str:
    return f"{prefix}-{sequence:0{SEQUENCE_WIDTH}d}"


def utc_today() -> date:
    """Calendar date used for ``date_added`` and history entries."""
    return datetime.now(timezone.utc).date()


@dataclass
class Asset:
    """A tracked physical item.

    ``history`` is append-only and never empty; its last entry always
    carries the live ``status``.
    """

    name: str
    room_id: str
    code_prefix: str
    sequence: int
    date_added: date
    status: AssetStatus = AssetStatus.IN_USE
    history: list[HistoryEntry] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))
    version: int = 0

    @classmethod
    def allocate(cls, name: str, room_id: str, sequence: int, on: date) -> "Asset":
        """Build a fresh in-use asset with its initial history entry."""
        return cls(
            name=name,
            room_id=room_id,
            code_prefix=code_prefix_for(name),
            sequence=sequence,
            date_added=on,
            status=AssetStatus.IN_USE,
            history=[HistoryEntry(status=AssetStatus.IN_USE, date=on)],
        )

    @property
    def code(self) -> str:
        return format_asset_code(self.code_prefix, self.sequence)

    def record_status(self, new_status: AssetStatus, on: date) -> HistoryEntry:
        """Append a history entry and make it the live status."""
        entry = HistoryEntry(status=new_status, date=on)
        self.history = [*self.history, entry]
        self.status = new_status
        return entry

    def move_to(self, room_id: str) -> None:
        """Reassign the asset to another room. History is left untouched."""
        self.room_id = room_id
