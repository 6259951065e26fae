from .asset_allocation_service import AssetAllocationService
from .asset_mutation_service import AssetMutationService
from .asset_query_service import AssetQueryService
from .inventory_actions import InventoryActions
from .report_service import ReportService
from .room_service import RoomService
from .status_suggestion_service import StatusSuggestionService
from .transaction_retry import run_with_retry

__all__ = [
    "AssetAllocationService",
    "AssetMutationService",
    "AssetQueryService",
    "InventoryActions",
    "ReportService",
    "RoomService",
    "StatusSuggestionService",
    "run_with_retry",
]
