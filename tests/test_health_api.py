from dependency_injector import providers

from retailpos.main import create_app
from retailpos.storage.database import Database
from httpx import AsyncClient, ASGITransport


async def test_ready(client):
    res = await client.get("/ready")
    assert res.status_code == 200
    assert res.json()["message"] == "ready"


async def test_health_db(client):
    res = await client.get("/health/db")
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Database connection OK."
    assert body["server_time"]


async def test_health_db_unreachable(container, tmp_path):
    broken = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nope.db'}")
    container.database.override(providers.Object(broken))
    app = create_app(container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        res = await ac.get("/health/db")
    await broken.dispose()
    assert res.status_code == 503
    assert res.json() == {"error": "Database unreachable."}
