"""Inventory report endpoints (JSON and CSV)."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from asset_tracker.application.schemas import InventoryReportResponse
from asset_tracker.application.services import ReportService
from asset_tracker.infrastructure.dependencies import get_report_service

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("", response_model=InventoryReportResponse)
async def get_report(
    service: ReportService = Depends(get_report_service),
) -> InventoryReportResponse:
    """Every room with its assets and per-status counts."""
    return InventoryReportResponse.from_report(await service.build_report())


@router.get("/assets.csv")
async def export_report_csv(
    service: ReportService = Depends(get_report_service),
) -> Response:
    """The same report flattened to one CSV row per asset."""
    return Response(
        content=await service.export_report_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="assets.csv"'},
    )
