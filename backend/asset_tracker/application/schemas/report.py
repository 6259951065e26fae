"""Pydantic DTOs for the inventory report."""

from pydantic import BaseModel

from asset_tracker.application.schemas.asset import AssetResponse
from asset_tracker.application.schemas.room import RoomResponse
from asset_tracker.domain.entities import InventoryReport


class RoomReportResponse(BaseModel):
    room: RoomResponse
    assets: list[AssetResponse]
    status_counts: dict[str, int]


class InventoryReportResponse(BaseModel):
    rooms: list[RoomReportResponse]
    totals: dict[str, int]
    asset_count: int

    @classmethod
    def from_report(cls, report: InventoryReport) -> "InventoryReportResponse":
        return cls(
            rooms=[
                RoomReportResponse(
                    room=RoomResponse.model_validate(entry.room, from_attributes=True),
                    assets=[
                        AssetResponse.model_validate(a, from_attributes=True)
                        for a in entry.assets
                    ],
                    status_counts={s.value: n for s, n in entry.status_counts.items()},
                )
                for entry in report.rooms
            ],
            totals={s.value: n for s, n in report.totals.items()},
            asset_count=report.asset_count,
        )
