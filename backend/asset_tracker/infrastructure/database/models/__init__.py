from .asset import AssetModel
from .room import RoomModel

__all__ = [
    "AssetModel",
    "RoomModel",
]
