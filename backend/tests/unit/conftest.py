"""In-memory fakes of the persistence and provider ports, shared by the unit tests."""

import asyncio
import copy
from collections.abc import Awaitable, Callable
from datetime import date
from typing import TypeVar

import pytest
import pytest_asyncio

from asset_tracker.application.interfaces import (
    AssetRepository,
    ChatProvider,
    RoomRepository,
    TransactionRunner,
)
from asset_tracker.application.services import (
    AssetAllocationService,
    AssetMutationService,
    AssetQueryService,
    InventoryActions,
    ReportService,
    RoomService,
    StatusSuggestionService,
)
from asset_tracker.domain.entities import (
    Asset,
    AssetStatus,
    ChatCompletionResult,
    ChatMessage,
    Room,
    TokenUsage,
)
from asset_tracker.domain.exceptions import TransactionConflictError

T = TypeVar("T")


# ── Fakes ────────────────────────────────────────────────────────────


class InMemoryStore:
    """Shared backing dicts for the fake repositories."""

    def __init__(self):
        self.rooms: dict[str, Room] = {}
        self.assets: dict[str, Asset] = {}


class FakeRoomRepository(RoomRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store
        self.locked_reads: list[str] = []

    def _count(self, room_id: str) -> int:
        return sum(1 for a in self._store.assets.values() if a.room_id == room_id)

    async def get_by_id(self, room_id: str, *, for_update: bool = False) -> Room | None:
        if for_update:
            self.locked_reads.append(room_id)
        room = self._store.rooms.get(room_id)
        if room is None:
            return None
        found = copy.deepcopy(room)
        found.asset_count = self._count(room_id)
        return found

    async def get_all(self) -> list[Room]:
        rooms = []
        for room in self._store.rooms.values():
            found = copy.deepcopy(room)
            found.asset_count = self._count(room.id)
            rooms.append(found)
        return rooms

    async def create(self, room: Room) -> Room:
        self._store.rooms[room.id] = copy.deepcopy(room)
        return room

    async def update(self, room: Room) -> Room:
        if room.id not in self._store.rooms:
            raise ValueError(f"Room {room.id} not found")
        self._store.rooms[room.id] = copy.deepcopy(room)
        return room

    async def delete(self, room_id: str) -> bool:
        return self._store.rooms.pop(room_id, None) is not None


class FakeAssetRepository(AssetRepository):
    """Asset store with the unique-code and version checks of the real tables.

    ``yield_on_read`` suspends after get_by_id and get_max_sequence read the
    store, so concurrent allocations and status updates interleave the way
    two requests would.
    """

    def __init__(self, store: InMemoryStore, yield_on_read: bool = False):
        self._store = store
        self.yield_on_read = yield_on_read
        self.conflicts = 0

    async def get_by_id(self, asset_id: str, *, for_update: bool = False) -> Asset | None:
        asset = self._store.assets.get(asset_id)
        found = copy.deepcopy(asset) if asset else None
        if self.yield_on_read:
            await asyncio.sleep(0)
        return found

    async def get_by_code(self, code: str) -> Asset | None:
        for asset in self._store.assets.values():
            if asset.code == code:
                return copy.deepcopy(asset)
        return None

    async def get_all(self, *, room_id=None, name=None, status=None) -> list[Asset]:
        assets = [
            a
            for a in self._store.assets.values()
            if (room_id is None or a.room_id == room_id)
            and (name is None or a.name == name)
            and (status is None or a.status == status)
        ]
        assets.sort(key=lambda a: (a.code_prefix, a.sequence))
        return [copy.deepcopy(a) for a in assets]

    async def get_max_sequence(self, code_prefix: str) -> int:
        current = max(
            (a.sequence for a in self._store.assets.values() if a.code_prefix == code_prefix),
            default=0,
        )
        if self.yield_on_read:
            await asyncio.sleep(0)
        return current

    async def create_many(self, assets: list[Asset]) -> list[Asset]:
        taken = {a.code for a in self._store.assets.values()}
        if any(a.code in taken for a in assets):
            self.conflicts += 1
            raise TransactionConflictError("duplicate asset code")
        for asset in assets:
            asset.version = 1
            self._store.assets[asset.id] = copy.deepcopy(asset)
        return assets

    async def update(self, asset: Asset) -> Asset:
        stored = self._store.assets.get(asset.id)
        if stored is None or stored.version != asset.version:
            self.conflicts += 1
            raise TransactionConflictError("stale asset")
        asset.version += 1
        self._store.assets[asset.id] = copy.deepcopy(asset)
        return asset

    async def delete_by_room(self, room_id: str) -> int:
        doomed = [a.id for a in self._store.assets.values() if a.room_id == room_id]
        for asset_id in doomed:
            del self._store.assets[asset_id]
        return len(doomed)


class FakeTransactionRunner(TransactionRunner):
    """Counts commits and rollbacks; the fake repositories write atomically per call."""

    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    async def run(self, work: Callable[[], Awaitable[T]]) -> T:
        try:
            result = await work()
        except Exception:
            self.rollbacks += 1
            raise
        self.commits += 1
        return result


class FakeChatProvider(ChatProvider):
    """Returns a canned completion, or raises ``error`` when set."""

    def __init__(self, content: str = "broken", error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: list[dict] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> ChatCompletionResult:
        self.calls.append(
            {"messages": messages, "model": model, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return ChatCompletionResult(
            model=model,
            content=self.content,
            finish_reason="stop",
            usage=TokenUsage(prompt_tokens=40, completion_tokens=2, total_tokens=42),
            provider=self.provider_name,
        )


class FakeClock:
    """Injectable ``today`` callable that tests can advance."""

    def __init__(self, today: date):
        self.today = today

    def __call__(self) -> date:
        return self.today


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def room_repo(store: InMemoryStore) -> FakeRoomRepository:
    return FakeRoomRepository(store)


@pytest.fixture
def asset_repo(store: InMemoryStore) -> FakeAssetRepository:
    return FakeAssetRepository(store)


@pytest.fixture
def runner() -> FakeTransactionRunner:
    return FakeTransactionRunner()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(date(2024, 3, 1))


@pytest.fixture
def chat_provider() -> FakeChatProvider:
    return FakeChatProvider()


@pytest.fixture
def room_service(room_repo, asset_repo, runner) -> RoomService:
    return RoomService(room_repo, asset_repo, runner)


@pytest.fixture
def allocation_service(room_repo, asset_repo, runner, clock) -> AssetAllocationService:
    return AssetAllocationService(
        room_repo, asset_repo, runner, max_batch=50, backoff_seconds=0, today=clock
    )


@pytest.fixture
def mutation_service(room_repo, asset_repo, runner, clock) -> AssetMutationService:
    return AssetMutationService(room_repo, asset_repo, runner, backoff_seconds=0, today=clock)


@pytest.fixture
def query_service(asset_repo) -> AssetQueryService:
    return AssetQueryService(asset_repo)


@pytest.fixture
def report_service(room_repo, asset_repo) -> ReportService:
    return ReportService(room_repo, asset_repo)


@pytest.fixture
def suggestion_service(asset_repo, chat_provider) -> StatusSuggestionService:
    return StatusSuggestionService(asset_repo, chat_provider=chat_provider, model="test/model")


@pytest.fixture
def actions(room_service, allocation_service, mutation_service, suggestion_service) -> InventoryActions:
    return InventoryActions(
        room_service=room_service,
        allocation_service=allocation_service,
        mutation_service=mutation_service,
        suggestion_service=suggestion_service,
    )


@pytest_asyncio.fixture
async def office(room_service: RoomService) -> Room:
    return await room_service.create_room("Office", "Alice Smith")


@pytest_asyncio.fixture
async def lab(room_service: RoomService) -> Room:
    return await room_service.create_room("Laboratory", "Bob Jones")
