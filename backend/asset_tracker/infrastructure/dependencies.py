"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from asset_tracker.application.interfaces import ChatProvider
from asset_tracker.application.services import (
    AssetAllocationService,
    AssetMutationService,
    AssetQueryService,
    InventoryActions,
    ReportService,
    RoomService,
    StatusSuggestionService,
)
from asset_tracker.config import get_settings
from asset_tracker.infrastructure.database.repositories import (
    SQLAlchemyAssetRepository,
    SQLAlchemyRoomRepository,
    SQLAlchemyTransactionRunner,
)
from asset_tracker.infrastructure.database.session import get_db_session
from asset_tracker.infrastructure.openrouter import OpenRouterClient


def _build_chat_provider() -> ChatProvider | None:
    """OpenRouter client when an API key is configured, otherwise None."""
    settings = get_settings()
    if not settings.openrouter_api_key.strip():
        return None
    return OpenRouterClient(
        api_key=settings.openrouter_api_key,
        base_url=settings.openrouter_base_url,
        app_name=settings.openrouter_app_name,
    )


async def get_room_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RoomService, None]:
    """Provides a RoomService with its repositories wired up."""
    yield RoomService(
        SQLAlchemyRoomRepository(session),
        SQLAlchemyAssetRepository(session),
        SQLAlchemyTransactionRunner(session),
    )


async def get_asset_query_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AssetQueryService, None]:
    yield AssetQueryService(SQLAlchemyAssetRepository(session))


async def get_report_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ReportService, None]:
    yield ReportService(SQLAlchemyRoomRepository(session), SQLAlchemyAssetRepository(session))


async def get_inventory_actions(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[InventoryActions, None]:
    """Provides the action facade used by every mutating endpoint."""
    settings = get_settings()

    room_repository = SQLAlchemyRoomRepository(session)
    asset_repository = SQLAlchemyAssetRepository(session)
    runner = SQLAlchemyTransactionRunner(session)

    yield InventoryActions(
        room_service=RoomService(room_repository, asset_repository, runner),
        allocation_service=AssetAllocationService(
            room_repository,
            asset_repository,
            runner,
            max_batch=settings.max_allocation_batch,
            max_retries=settings.transaction_max_retries,
            backoff_seconds=settings.transaction_retry_backoff_seconds,
        ),
        mutation_service=AssetMutationService(
            room_repository,
            asset_repository,
            runner,
            max_retries=settings.transaction_max_retries,
            backoff_seconds=settings.transaction_retry_backoff_seconds,
        ),
        suggestion_service=StatusSuggestionService(
            asset_repository,
            chat_provider=_build_chat_provider(),
            model=settings.status_suggestion_model,
        ),
    )
