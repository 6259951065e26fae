"""SQLAlchemy ORM model for the Asset entity."""

from datetime import date, datetime, timezone

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from asset_tracker.infrastructure.database.base import Base


class AssetModel(Base):
    """ORM model — maps to the 'assets' table.

    ``history`` is stored on the row as a JSON list of ``{status, date}``.
    ``version`` is SQLAlchemy's optimistic version counter: an UPDATE whose
    version no longer matches raises StaleDataError.
    """

    __tablename__ = "assets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    code: Mapped[str] = mapped_column(String(300), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    code_prefix: Mapped[str] = mapped_column(String(255), nullable=False)
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    room_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("rooms.id"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    date_added: Mapped[date] = mapped_column(Date, nullable=False)
    history: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("code_prefix", "sequence", name="uq_assets_prefix_sequence"),
        Index("ix_assets_room_status", "room_id", "status"),
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<AssetModel(id={self.id}, code='{self.code}', status='{self.status}')>"
