from .asset_repository import SQLAlchemyAssetRepository
from .room_repository import SQLAlchemyRoomRepository
from .transaction_runner import SQLAlchemyTransactionRunner

__all__ = [
    "SQLAlchemyAssetRepository",
    "SQLAlchemyRoomRepository",
    "SQLAlchemyTransactionRunner",
]
