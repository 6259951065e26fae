"""API tests for asset lookup, status changes, moves, scans and suggestions."""

import pytest

from asset_tracker.domain.entities import ChatCompletionResult
from asset_tracker.infrastructure import dependencies


async def _setup(client) -> tuple[dict, dict, dict]:
    office = (await client.post("/api/v1/rooms", json={"name": "Office", "manager": "Alice"})).json()
    lab = (await client.post("/api/v1/rooms", json={"name": "Laboratory", "manager": "Bob"})).json()
    assets = await client.post(
        f"/api/v1/rooms/{office['id']}/assets", json={"name": "printer", "quantity": 1}
    )
    return office, lab, assets.json()[0]


@pytest.mark.asyncio
async def test_status_update_appends_history(client):
    _, _, asset = await _setup(client)
    url = f"/api/v1/assets/{asset['id']}/status"

    await client.put(url, json={"status": "broken"})
    response = await client.put(url, json={"status": "repairing"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "repairing"
    assert [h["status"] for h in body["history"]] == ["in-use", "broken", "repairing"]


@pytest.mark.asyncio
async def test_unknown_status_is_422(client):
    _, _, asset = await _setup(client)

    response = await client.put(f"/api/v1/assets/{asset['id']}/status", json={"status": "lost"})

    assert response.status_code == 422
    assert (await client.get(f"/api/v1/assets/{asset['id']}")).json()["status"] == "in-use"


@pytest.mark.asyncio
async def test_move_asset(client):
    office, lab, asset = await _setup(client)
    await client.put(f"/api/v1/assets/{asset['id']}/status", json={"status": "broken"})

    moved = await client.put(f"/api/v1/assets/{asset['id']}/room", json={"room_id": lab["id"]})

    assert moved.status_code == 200
    assert moved.json()["room_id"] == lab["id"]
    assert moved.json()["status"] == "broken"
    assert len(moved.json()["history"]) == 2
    assert (await client.get(f"/api/v1/rooms/{office['id']}/assets")).json() == []


@pytest.mark.asyncio
async def test_move_to_missing_room(client):
    office, _, asset = await _setup(client)

    response = await client.put(f"/api/v1/assets/{asset['id']}/room", json={"room_id": "missing"})

    assert response.status_code == 422
    assert response.json()["detail"]["error_code"] == "invalid_target"
    assert (await client.get(f"/api/v1/assets/{asset['id']}")).json()["room_id"] == office["id"]


@pytest.mark.asyncio
async def test_lookup_by_code_and_scan(client):
    _, _, asset = await _setup(client)

    by_code = await client.get("/api/v1/assets/by-code/printer-0001")
    assert by_code.json()["id"] == asset["id"]

    scanned = await client.post(
        "/api/v1/assets/scan", json={"payload": f"https://tracker.example/assets/{asset['id']}"}
    )
    assert scanned.json()["code"] == "PRINTER-0001"

    assert (await client.post("/api/v1/assets/scan", json={"payload": ""})).status_code == 422
    assert (await client.post("/api/v1/assets/scan", json={"payload": "NOPE-0001"})).status_code == 404


@pytest.mark.asyncio
async def test_list_assets_filter_by_status(client):
    _, _, asset = await _setup(client)
    await client.put(f"/api/v1/assets/{asset['id']}/status", json={"status": "disposed"})

    disposed = (await client.get("/api/v1/assets", params={"status": "disposed"})).json()
    in_use = (await client.get("/api/v1/assets", params={"status": "in-use"})).json()

    assert [a["id"] for a in disposed] == [asset["id"]]
    assert in_use == []


class _StubProvider:
    provider_name = "stub"

    def __init__(self, content: str):
        self.content = content

    async def complete(self, messages, model, *, temperature=None, max_tokens=None):
        return ChatCompletionResult(model=model, content=self.content, finish_reason="stop")


@pytest.mark.asyncio
async def test_status_suggestion(client, monkeypatch):
    _, _, asset = await _setup(client)
    monkeypatch.setattr(dependencies, "_build_chat_provider", lambda: _StubProvider("Repairing"))

    response = await client.post(
        f"/api/v1/assets/{asset['id']}/status-suggestion", json={"user_notes": "paper jam"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["available"] is True
    assert body["suggested_status"] == "Repairing"
    assert body["parsed_status"] == "repairing"
    # suggestions are never applied
    assert (await client.get(f"/api/v1/assets/{asset['id']}")).json()["status"] == "in-use"


@pytest.mark.asyncio
async def test_status_suggestion_unavailable(client, monkeypatch):
    _, _, asset = await _setup(client)
    monkeypatch.setattr(dependencies, "_build_chat_provider", lambda: None)

    response = await client.post(f"/api/v1/assets/{asset['id']}/status-suggestion")

    assert response.status_code == 503
    assert response.json()["detail"]["error_code"] == "service_unavailable"
