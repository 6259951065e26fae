"""Concrete room repository backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from asset_tracker.application.interfaces import RoomRepository
from asset_tracker.domain.entities import Room
from asset_tracker.infrastructure.database.models import AssetModel, RoomModel


class SQLAlchemyRoomRepository(RoomRepository):
    """Implements the RoomRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RoomModel, asset_count: int = 0) -> Room:
        """Map ORM model → domain entity."""
        return Room(
            id=model.id,
            name=model.name,
            manager=model.manager,
            asset_count=asset_count,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def _count_assets(self, room_id: str) -> int:
        stmt = select(func.count(AssetModel.id)).where(AssetModel.room_id == room_id)
        return int((await self._session.execute(stmt)).scalar_one())

    async def get_by_id(self, room_id: str, *, for_update: bool = False) -> Room | None:
        stmt = select(RoomModel).where(RoomModel.id == room_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        if model is None:
            return None
        return self._to_entity(model, await self._count_assets(room_id))

    async def get_all(self) -> list[Room]:
        stmt = (
            select(RoomModel, func.count(AssetModel.id))
            .outerjoin(AssetModel, AssetModel.room_id == RoomModel.id)
            .group_by(RoomModel.id)
            .order_by(RoomModel.created_at.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model, int(count)) for model, count in result.all()]

    async def create(self, room: Room) -> Room:
        model = RoomModel(
            id=room.id,
            name=room.name,
            manager=room.manager,
            created_at=room.created_at,
            updated_at=room.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, room: Room) -> Room:
        model = await self._session.get(RoomModel, room.id)
        if model is None:
            raise ValueError(f"Room {room.id} not found in database")
        model.name = room.name
        model.manager = room.manager
        model.updated_at = room.updated_at
        await self._session.flush()
        return self._to_entity(model, room.asset_count)

    async def delete(self, room_id: str) -> bool:
        model = await self._session.get(RoomModel, room_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
