from .asset_repository import AssetRepository
from .chat_provider import ChatProvider
from .room_repository import RoomRepository
from .transaction_runner import TransactionRunner

__all__ = [
    "AssetRepository",
    "ChatProvider",
    "RoomRepository",
    "TransactionRunner",
]
