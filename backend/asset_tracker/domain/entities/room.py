"""Domain entity — a physical location that owns zero or more assets."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Room:
    """Core domain entity representing a room."""

    name: str
    manager: str
    id: str = field(default_factory=lambda: str(uuid4()))
    asset_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, name: str | None = None, manager: str | None = None) -> None:
        """Update room fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if manager is not None:
            self.manager = manager
        self.updated_at = datetime.now(timezone.utc)
