"""HTTP routes — status codes and envelopes for every operation.

Invariants:
    - Error values map to 400 / 404 / 403 with the ledger error envelope
    - Schema violations map to 400 with field details
    - DELETE returns the removed record
    - Write bodies are strict: booleans and numeric strings are 400, not coerced
    - A ledger error produces one log line at INFO or above
"""

import logging

import pytest


async def _seed(client):
    await client.post("/api/v1/users", json={"name": "A", "contact_info": "a@x"})
    await client.post("/api/v1/users", json={"name": "B", "contact_info": "b@x"})
    res = await client.post(
        "/api/v1/properties",
        json={"address": "1 Main St", "owner_id": 0, "tokenized_shares": 1000},
    )
    return res.json()


async def test_health(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_add_user_returns_201(client):
    res = await client.post(
        "/api/v1/users",
        json={"name": "A", "contact_info": "a@x"},
        headers={"X-Caller-Principal": "admin"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["id"] == 0
    assert body["created_by"] == "admin"


async def test_add_user_blank_name_is_400(client, state):
    res = await client.post("/api/v1/users", json={"name": " ", "contact_info": "a"})
    assert res.status_code == 400
    assert res.json()["error"]["kind"] == "invalid_input"
    assert state.user_count == 0


async def test_missing_field_is_400_with_details(client):
    res = await client.post("/api/v1/users", json={"name": "A"})
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.contact_info" in fields


async def test_get_missing_user_is_404(client):
    res = await client.get("/api/v1/users/9")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "user id 9 not found"


async def test_update_and_delete_user(client):
    await client.post("/api/v1/users", json={"name": "A", "contact_info": "a@x"})
    res = await client.put("/api/v1/users/0", json={"name": "Z", "contact_info": "z@x"})
    assert res.status_code == 200
    assert res.json()["name"] == "Z"
    res = await client.delete("/api/v1/users/0")
    assert res.status_code == 200
    assert res.json()["name"] == "Z"
    assert (await client.get("/api/v1/users/0")).status_code == 404


async def test_list_users_paginates(client):
    for i in range(3):
        await client.post("/api/v1/users", json={"name": f"U{i}", "contact_info": "c"})
    res = await client.get("/api/v1/users", params={"page": 1, "page_size": 2})
    assert res.status_code == 200
    assert [u["id"] for u in res.json()] == [2]
    bad = await client.get("/api/v1/users", params={"page_size": 0})
    assert bad.status_code == 400


async def test_property_lifecycle(client):
    created = await _seed(client)
    assert created["history"][0]["event"] == "Created"

    res = await client.post(
        "/api/v1/properties/0/transfer",
        json={"from_user_id": 0, "to_user_id": 1, "shares": 300},
    )
    assert res.status_code == 200
    moved = res.json()
    assert moved["owner_id"] == 1
    assert [h["event"] for h in moved["history"]] == [
        "Created", "Transferred 300 shares from 0 to 1",
    ]

    res = await client.delete("/api/v1/properties/0")
    assert res.status_code == 200
    assert res.json() == moved
    assert (await client.get("/api/v1/properties/0")).status_code == 404


async def test_transfer_by_non_owner_is_403(client):
    await _seed(client)
    res = await client.post(
        "/api/v1/properties/0/transfer",
        json={"from_user_id": 1, "to_user_id": 0, "shares": 1},
    )
    assert res.status_code == 403
    assert res.json()["error"]["message"] == "caller does not own this property"
    prop = (await client.get("/api/v1/properties/0")).json()
    assert prop["owner_id"] == 0
    assert len(prop["history"]) == 1


async def test_transfer_too_many_shares_is_400(client):
    await _seed(client)
    res = await client.post(
        "/api/v1/properties/0/transfer",
        json={"from_user_id": 0, "to_user_id": 1, "shares": 5000},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "invalid share amount"


async def test_update_property_with_unknown_owner_is_404(client):
    await _seed(client)
    res = await client.put(
        "/api/v1/properties/0",
        json={"address": "2 High St", "owner_id": 50, "tokenized_shares": 10},
    )
    assert res.status_code == 404


async def test_list_properties(client):
    await _seed(client)
    res = await client.get("/api/v1/properties")
    assert res.status_code == 200
    assert len(res.json()) == 1


@pytest.mark.parametrize("body", [
    {"address": "1 Main St", "owner_id": True, "tokenized_shares": 5},
    {"address": "1 Main St", "owner_id": 0, "tokenized_shares": "5"},
    {"address": "1 Main St", "owner_id": "0", "tokenized_shares": 5},
])
async def test_add_property_rejects_coercible_ints(client, state, body):
    await client.post("/api/v1/users", json={"name": "A", "contact_info": "a@x"})
    await client.post("/api/v1/users", json={"name": "B", "contact_info": "b@x"})
    res = await client.post("/api/v1/properties", json=body)
    assert res.status_code == 400
    assert res.json()["error"]["kind"] == "invalid_input"
    assert state.property_count == 0


@pytest.mark.parametrize("body", [
    {"from_user_id": 0, "to_user_id": 1, "shares": True},
    {"from_user_id": 0, "to_user_id": 1, "shares": "300"},
    {"from_user_id": False, "to_user_id": 1, "shares": 300},
])
async def test_transfer_rejects_coercible_ints(client, body):
    await _seed(client)
    res = await client.post("/api/v1/properties/0/transfer", json=body)
    assert res.status_code == 400
    prop = (await client.get("/api/v1/properties/0")).json()
    assert prop["owner_id"] == 0
    assert len(prop["history"]) == 1


async def test_add_user_rejects_non_string_fields(client, state):
    res = await client.post("/api/v1/users", json={"name": 5, "contact_info": "a@x"})
    assert res.status_code == 400
    assert state.user_count == 0


async def test_oversized_shares_is_400(client):
    await client.post("/api/v1/users", json={"name": "A", "contact_info": "a@x"})
    res = await client.post(
        "/api/v1/properties",
        json={"address": "1 Main St", "owner_id": 0, "tokenized_shares": 2**64},
    )
    assert res.status_code == 400
    assert "tokenized_shares" in res.json()["error"]["message"]


async def test_ledger_error_logged_once(client, caplog):
    with caplog.at_level(logging.DEBUG):
        res = await client.get("/api/v1/users/9")
    assert res.status_code == 404
    notable = [
        r for r in caplog.records
        if r.name.startswith("estate_ledger") and r.levelno >= logging.INFO
    ]
    assert len(notable) == 1
    assert notable[0].levelno == logging.WARNING
    assert notable[0].error_kind == "not_found"
