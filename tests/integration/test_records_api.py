"""API tests for the warranty and follow-up note endpoints (SQLite-backed)."""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

NOTE = {
    "title": "T",
    "description": "D",
    "client_id": "c1",
    "created_by_user_id": "u1",
    "created_by_user_name": "Ann",
}

WARRANTY = {
    "customer_id": "cust-1",
    "customer_name": "Jane Doe",
    "customer_identification": 1020304050,
    "seller_id": "seller-1",
    "seller_name": "Sam",
    "status": "pending",
    "user_created_name": "Admin",
    "user_created_id": "u-1",
}


# ── Warranties ──


@pytest.mark.asyncio
async def test_create_and_get_warranty(client):
    created = await client.post("/api/v1/warranties", json=WARRANTY)

    assert created.status_code == 201
    body = created.json()
    assert body["success"] is True
    assert "error" not in body
    assert body["data"]["is_active"] is True
    assert body["data"]["customer_identification"] == "1020304050"

    fetched = await client.get(f"/api/v1/warranties/{body['data']['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["customer_name"] == "Jane Doe"


@pytest.mark.asyncio
async def test_missing_required_field_is_400(client):
    payload = {k: v for k, v in WARRANTY.items() if k != "seller_id"}

    response = await client.post("/api/v1/warranties", json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "seller_id" in body["message"]


@pytest.mark.asyncio
async def test_patch_status_and_soft_delete(client):
    warranty_id = (await client.post("/api/v1/warranties", json=WARRANTY)).json()["data"]["id"]

    patched = await client.patch(
        f"/api/v1/warranties/{warranty_id}",
        json={"status": "approved", "user_updated_name": "Agent", "user_updated_id": "u-2"},
    )
    assert patched.status_code == 200
    data = patched.json()["data"]
    assert data["status"] == "approved"
    assert data["user_updated_status_id"] == "u-2"

    deleted = await client.delete(f"/api/v1/warranties/{warranty_id}")
    assert deleted.status_code == 200
    assert deleted.json()["data"]["is_active"] is False

    again = await client.delete(f"/api/v1/warranties/{warranty_id}")
    assert again.status_code == 200

    inactive = await client.get("/api/v1/warranties", params={"is_active": "false"})
    assert inactive.json()["data_items"] == 1


@pytest.mark.asyncio
async def test_unknown_warranty_is_404_envelope(client):
    response = await client.get("/api/v1/warranties/12345")

    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_list_clamps_oversized_limit(client):
    for n in range(25):
        payload = {**WARRANTY, "customer_id": f"cust-{n}"}
        assert (await client.post("/api/v1/warranties", json=payload)).status_code == 201

    response = await client.get("/api/v1/warranties", params={"page": 1, "limit": 101})

    assert response.status_code == 200
    body = response.json()
    assert len(body["data"]) == 20
    assert body["data_items"] == 25
    assert body["page_total"] == 2
    assert body["have_next_page"] is True
    assert body["have_previus_page"] is False


@pytest.mark.asyncio
async def test_failed_commit_is_500_and_nothing_is_saved(client, monkeypatch):
    async def failing_commit(self):
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    monkeypatch.setattr(AsyncSession, "commit", failing_commit)

    response = await client.post("/api/v1/warranties", json=WARRANTY)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Internal Server Error",
        "message": "Database error",
    }

    monkeypatch.undo()
    listed = await client.get("/api/v1/warranties")
    assert listed.json()["data_items"] == 0


@pytest.mark.asyncio
async def test_zero_page_is_400(client):
    response = await client.get("/api/v1/warranties", params={"page": 0})

    assert response.status_code == 400


# ── Follow-up notes ──


@pytest.mark.asyncio
async def test_create_note_then_list_by_client(client):
    created = await client.post("/api/v1/client-followup-notes?ref=tenant1", json=NOTE)

    assert created.status_code == 201
    data = created.json()["data"]
    assert data["updated_by_user_id"] == "u1"
    assert data["updated_by_user_name"] == "Ann"

    listed = await client.get(
        "/api/v1/client-followup-notes", params={"ref": "tenant1", "client_id": "c1"}
    )
    body = listed.json()
    assert body["data_items"] == 1
    assert body["data"][0]["id"] == data["id"]


@pytest.mark.asyncio
async def test_notes_without_ref_are_not_found(client):
    response = await client.get("/api/v1/client-followup-notes")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found", "message": "Not Found"}


@pytest.mark.asyncio
async def test_clients_ids_accepts_comma_separated_and_repeated(client):
    for client_id in ("c1", "c2", "c3"):
        await client.post("/api/v1/client-followup-notes?ref=t", json={**NOTE, "client_id": client_id})

    comma = await client.get("/api/v1/client-followup-notes?ref=t&clients_ids=c1,c2")
    repeated = await client.get("/api/v1/client-followup-notes?ref=t&clients_ids=c1&clients_ids=c3")

    assert comma.json()["data_items"] == 2
    assert sorted(n["client_id"] for n in repeated.json()["data"]) == ["c1", "c3"]


@pytest.mark.asyncio
async def test_note_update_and_soft_delete(client):
    note_id = (await client.post("/api/v1/client-followup-notes?ref=t", json=NOTE)).json()["data"]["id"]

    updated = await client.put(
        f"/api/v1/client-followup-notes/{note_id}?ref=t",
        json={"tag": "urgent", "updated_by_user_id": "u2", "updated_by_user_name": "Bob"},
    )
    assert updated.json()["data"]["tag"] == "urgent"
    assert updated.json()["data"]["updated_by_user_id"] == "u2"

    deleted = await client.request(
        "DELETE",
        f"/api/v1/client-followup-notes/{note_id}?ref=t",
        json={"updated_by_user_name": "Cleo"},
    )
    assert deleted.status_code == 200
    assert deleted.json()["data"]["updated_by_user_name"] == "Cleo"
    assert deleted.json()["data"]["updated_by_user_id"] == "u2"

    still_there = await client.get(f"/api/v1/client-followup-notes/{note_id}?ref=t")
    assert still_there.status_code == 200


@pytest.mark.asyncio
async def test_stats_counts_todays_notes(client):
    for _ in range(2):
        await client.post("/api/v1/client-followup-notes?ref=t", json=NOTE)

    response = await client.get("/api/v1/client-followup-notes/stats", params={"ref": "t"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["daily"]) == 30
    assert list(data["daily"])[0] == "Today"
    assert data["daily"]["Today"] == 2
    assert len(data["monthly"]) == 12
    assert sum(data["monthly"].values()) == 2
