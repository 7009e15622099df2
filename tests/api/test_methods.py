"""Method Echo — verifies /api for every registered HTTP method.

Invariants:
    - GET/DELETE return fixed messages
    - POST/PUT/PATCH echo the JSON object body unchanged under "data"
    - Non-object or malformed bodies → 400 {"error": "Invalid request body"}
"""

import pytest

WRITE_METHODS = ["POST", "PUT", "PATCH"]


async def test_get_returns_fixed_message(client):
    res = await client.get("/api")
    assert res.status_code == 200
    assert res.json() == {"message": "GET request successful"}


async def test_delete_returns_fixed_message(client):
    res = await client.delete("/api")
    assert res.status_code == 200
    assert res.json() == {"message": "DELETE request successful"}


@pytest.mark.parametrize("method", WRITE_METHODS)
async def test_write_methods_echo_body(client, method):
    body = {"name": "widget", "tags": ["a", "b"], "nested": {"n": 1.5, "ok": True}}
    res = await client.request(method, "/api", json=body)
    assert res.status_code == 200
    assert res.json() == {
        "message": f"{method} request successful",
        "data": body,
    }


async def test_echo_preserves_key_order(client):
    res = await client.post(
        "/api", content=b'{"z": 1, "a": 2, "m": 3}',
        headers={"Content-Type": "application/json"},
    )
    assert list(res.json()["data"]) == ["z", "a", "m"]


async def test_empty_object_is_valid(client):
    res = await client.put("/api", json={})
    assert res.status_code == 200
    assert res.json()["data"] == {}


@pytest.mark.parametrize("method", WRITE_METHODS)
@pytest.mark.parametrize("raw", [
    b"not json",
    b"",
    b"[1, 2, 3]",
    b'"just a string"',
    b"42",
    b'{"unterminated": ',
])
async def test_write_methods_reject_non_object_bodies(client, method, raw):
    res = await client.request(
        method, "/api", content=raw,
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request body"}


async def test_unregistered_method_is_rejected_by_router(client):
    res = await client.post("/api/query", json={})
    assert res.status_code == 405


@pytest.mark.parametrize("method", WRITE_METHODS)
@pytest.mark.parametrize("content_type", [
    "text/plain",
    None,
    "application/x-www-form-urlencoded",
    "multipart/form-data; boundary=xyz",
    "application/xml",
])
async def test_write_methods_reject_non_json_content_types(client, method, content_type):
    headers = {"Content-Type": content_type} if content_type else {}
    res = await client.request(method, "/api", content=b'{"a": 1}', headers=headers)
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request body"}


@pytest.mark.parametrize("content_type", [
    "application/json; charset=utf-8",
    "application/vnd.api+json",
])
async def test_json_media_type_variants_accepted(client, content_type):
    res = await client.post(
        "/api", content=b'{"a": 1}', headers={"Content-Type": content_type},
    )
    assert res.status_code == 200
    assert res.json()["data"] == {"a": 1}


async def test_trailing_slash_served_without_redirect(client):
    res = await client.get("/api/")
    assert res.status_code == 200
    assert res.json() == {"message": "GET request successful"}


async def test_trailing_slash_keeps_query_string(client):
    res = await client.get("/api/query/?a=1")
    assert res.status_code == 200
    assert res.json()["query"] == {"a": "1"}
