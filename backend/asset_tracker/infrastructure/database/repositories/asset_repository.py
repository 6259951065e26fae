"""Concrete asset repository backed by SQLAlchemy."""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from asset_tracker.application.interfaces import AssetRepository
from asset_tracker.domain.entities import Asset, AssetStatus, HistoryEntry
from asset_tracker.domain.exceptions import TransactionConflictError
from asset_tracker.infrastructure.database.models import AssetModel


class SQLAlchemyAssetRepository(AssetRepository):
    """Implements the AssetRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, asset_id: str, *, for_update: bool = False) -> Asset | None:
        stmt = select(AssetModel).where(AssetModel.id == asset_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_by_code(self, code: str) -> Asset | None:
        result = await self._session.execute(
            select(AssetModel).where(AssetModel.code == code)
        )
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_all(
        self,
        *,
        room_id: str | None = None,
        name: str | None = None,
        status: AssetStatus | None = None,
    ) -> list[Asset]:
        stmt = select(AssetModel)
        if room_id is not None:
            stmt = stmt.where(AssetModel.room_id == room_id)
        if name is not None:
            stmt = stmt.where(AssetModel.name == name)
        if status is not None:
            stmt = stmt.where(AssetModel.status == status.value)
        stmt = stmt.order_by(AssetModel.code_prefix.asc(), AssetModel.sequence.asc())
        result = await self._session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def get_max_sequence(self, code_prefix: str) -> int:
        result = await self._session.execute(
            select(func.max(AssetModel.sequence)).where(AssetModel.code_prefix == code_prefix)
        )
        return int(result.scalar_one_or_none() or 0)

    async def create_many(self, assets: list[Asset]) -> list[Asset]:
        models = [
            AssetModel(
                id=asset.id,
                code=asset.code,
                name=asset.name,
                code_prefix=asset.code_prefix,
                sequence=asset.sequence,
                room_id=asset.room_id,
                status=asset.status.value,
                date_added=asset.date_added,
                history=[entry.to_dict() for entry in asset.history],
            )
            for asset in assets
        ]
        self._session.add_all(models)
        await self._session.flush()
        return [self._to_domain(m) for m in models]

    async def update(self, asset: Asset) -> Asset:
        model = await self._session.get(AssetModel, asset.id)
        if model is None:
            raise TransactionConflictError(f"Asset {asset.id} disappeared during update")
        if model.version != asset.version:
            raise TransactionConflictError(f"Asset {asset.id} was changed by another request")

        model.status = asset.status.value
        model.history = [entry.to_dict() for entry in asset.history]
        model.room_id = asset.room_id
        await self._session.flush()
        return self._to_domain(model)

    async def delete_by_room(self, room_id: str) -> int:
        result = await self._session.execute(
            delete(AssetModel).where(AssetModel.room_id == room_id)
        )
        await self._session.flush()
        return result.rowcount

    # ── Mapping ──────────────────────────────────────────────────────

    @staticmethod
    def _to_domain(model: AssetModel) -> Asset:
        return Asset(
            id=model.id,
            name=model.name,
            room_id=model.room_id,
            code_prefix=model.code_prefix,
            sequence=model.sequence,
            date_added=model.date_added,
            status=AssetStatus(model.status),
            history=[HistoryEntry.from_dict(entry) for entry in model.history],
            version=model.version,
        )
