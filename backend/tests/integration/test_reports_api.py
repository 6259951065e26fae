"""API tests for the inventory report."""

import pytest


@pytest.mark.asyncio
async def test_report_json_and_csv(client):
    room = (await client.post("/api/v1/rooms", json={"name": "Office", "manager": "Alice"})).json()
    assets = (
        await client.post(f"/api/v1/rooms/{room['id']}/assets", json={"name": "chair", "quantity": 2})
    ).json()
    await client.put(f"/api/v1/assets/{assets[1]['id']}/status", json={"status": "broken"})

    report = (await client.get("/api/v1/reports")).json()

    assert report["asset_count"] == 2
    assert report["totals"] == {"in-use": 1, "broken": 1, "repairing": 0, "disposed": 0}
    assert report["rooms"][0]["room"]["id"] == room["id"]
    assert [a["code"] for a in report["rooms"][0]["assets"]] == ["CHAIR-0001", "CHAIR-0002"]

    response = await client.get("/api/v1/reports/assets.csv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0] == "room_id,room_name,manager,asset_id,code,name,status,date_added"
    assert len(lines) == 3
