"""Read-side use cases for assets, including QR scan resolution."""

from urllib.parse import unquote, urlparse

from asset_tracker.application.interfaces import AssetRepository
from asset_tracker.domain.entities import Asset, AssetStatus
from asset_tracker.domain.exceptions import NotFoundError, ValidationError


def _asset_id_from_url(payload: str) -> str | None:
    """Pull ``<id>`` out of ``https://host/.../assets/<id>``; None if absent."""
    segments = [unquote(s) for s in urlparse(payload).path.split("/") if s]
    for index, segment in enumerate(segments[:-1]):
        if segment == "assets":
            return segments[index + 1]
    return None


class AssetQueryService:
    """Lookups used by asset pages, the room view and the QR scanner."""

    def __init__(self, asset_repository: AssetRepository):
        self._assets = asset_repository

    async def get_asset(self, asset_id: str) -> Asset:
        asset = await self._assets.get_by_id(asset_id) if asset_id else None
        if asset is None:
            raise NotFoundError("Asset", asset_id)
        return asset

    async def get_asset_by_code(self, code: str) -> Asset:
        cleaned = (code or "").strip()
        asset = await self._assets.get_by_code(cleaned.upper()) if cleaned else None
        if asset is None:
            raise NotFoundError("Asset", code)
        return asset

    async def list_assets(
        self,
        *,
        room_id: str | None = None,
        name: str | None = None,
        status: AssetStatus | None = None,
    ) -> list[Asset]:
        return await self._assets.get_all(room_id=room_id, name=name, status=status)

    async def resolve_scan(self, payload: str) -> Asset:
        """Find the asset a scanned QR payload refers to.

        Accepts an asset page URL, a bare asset id or an asset code.
        """
        text = (payload or "").strip()
        if not text:
            raise ValidationError("Scanned code is empty")

        if urlparse(text).scheme in ("http", "https"):
            asset_id = _asset_id_from_url(text)
            if asset_id is None:
                raise ValidationError("Scanned URL does not point to an asset")
            return await self.get_asset(asset_id)

        asset = await self._assets.get_by_id(text)
        if asset is None:
            asset = await self._assets.get_by_code(text.upper())
        if asset is None:
            raise NotFoundError("Asset", text)
        return asset
