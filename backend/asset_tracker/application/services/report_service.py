"""Inventory report: rooms with their assets, status tallies and CSV export."""

import csv
import io

from asset_tracker.application.interfaces import AssetRepository, RoomRepository
from asset_tracker.domain.entities import InventoryReport, RoomReport

CSV_COLUMNS = (
    "room_id",
    "room_name",
    "manager",
    "asset_id",
    "code",
    "name",
    "status",
    "date_added",
)


class ReportService:
    """Builds the per-room inventory report."""

    def __init__(self, room_repository: RoomRepository, asset_repository: AssetRepository):
        self._rooms = room_repository
        self._assets = asset_repository

    async def build_report(self) -> InventoryReport:
        rooms = sorted(await self._rooms.get_all(), key=lambda r: r.name.lower())
        assets = await self._assets.get_all()

        report = InventoryReport(rooms=[RoomReport(room=room) for room in rooms])
        by_room = {entry.room.id: entry for entry in report.rooms}
        for asset in sorted(assets, key=lambda a: (a.code_prefix, a.sequence)):
            entry = by_room.get(asset.room_id)
            # Assets pointing at a deleted room are left out of the report.
            if entry is None:
                continue
            entry.assets.append(asset)
            entry.status_counts[asset.status] += 1
            report.totals[asset.status] += 1
        return report

    async def export_report_csv(self) -> str:
        report = await self.build_report()
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_COLUMNS)
        for entry in report.rooms:
            for asset in entry.assets:
                writer.writerow(
                    (
                        entry.room.id,
                        entry.room.name,
                        entry.room.manager,
                        asset.id,
                        asset.code,
                        asset.name,
                        asset.status.value,
                        asset.date_added.isoformat(),
                    )
                )
        return buffer.getvalue()
