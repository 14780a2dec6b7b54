"""Error Handlers — global handlers keep the {"error": message} envelope.

Tests cover:
    - ClassifiedError raised outside the pipeline -> mapped status
    - Unhandled exception -> 500 "internal error"
"""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from model_api.api.error_handlers import register_error_handlers
from model_api.core.errors import UnauthorizedError


def _make_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/classified")
    async def classified():
        raise UnauthorizedError("token missing")

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    @app.get("/typed/{n}")
    async def typed(n: int):
        return {"n": n}

    return app


async def test_classified_error_outside_pipeline():
    async with AsyncClient(
        transport=ASGITransport(app=_make_app()), base_url="http://test",
    ) as c:
        res = await c.get("/classified")
    assert res.status_code == 401
    assert res.json() == {"error": "token missing"}


async def test_request_validation_error_is_400():
    async with AsyncClient(
        transport=ASGITransport(app=_make_app()), base_url="http://test",
    ) as c:
        res = await c.get("/typed/abc")
    assert res.status_code == 400
    assert res.json() == {"error": "invalid request body"}


async def test_unhandled_exception_is_500_without_details():
    async with AsyncClient(
        transport=ASGITransport(app=_make_app(), raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/boom")
    assert res.status_code == 500
    assert res.json() == {"error": "internal error"}
    assert "secret" not in res.text
