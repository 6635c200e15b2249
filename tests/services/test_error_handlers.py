"""Global Error Handlers — every failure reaches the client in the RosterError envelope.

Invariants:
    - RosterError keeps its own status and code
    - Request validation failures are 400 INVALID_INPUT with field details
    - Unexpected exceptions are 500 INTERNAL_ERROR without internal details
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from roster.api.error_handlers import register_error_handlers
from roster.core.errors import ConflictError


@pytest.fixture
async def error_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/conflict")
    async def conflict():
        raise ConflictError(7)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret connection string")

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"id": item_id}

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_roster_error_keeps_status_and_code(error_client):
    res = await error_client.get("/conflict")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "USER_ALREADY_EXISTS"


async def test_validation_error_uses_invalid_input_envelope(error_client):
    res = await error_client.get("/items/abc")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert error["severity"] == "warning"
    assert error["context"]["field"] == "item_id"
    assert error["details"][0]["field"] == "item_id"


async def test_unexpected_error_is_opaque_500(error_client):
    res = await error_client.get("/boom")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == "internal"
    assert "secret" not in res.text
