import pytest
from sqlalchemy.engine import URL

from src.config.database import build_engine, postgresql


def test_missing_database_url(monkeypatch):
    monkeypatch.setattr(postgresql, "DATABASE_URL", None)

    with pytest.raises(ValueError, match="PG_DATABASE_URL"):
        build_engine()


@pytest.mark.asyncio
async def test_database_url_creation():
    expected_url = URL.create(
        drivername="postgresql+asyncpg",
        username="user",
        password="password",
        host="localhost",
        port=5432,
        database="streamimage",
    )

    engine = build_engine(expected_url.render_as_string(hide_password=False))

    assert engine.url.drivername == "postgresql+asyncpg"
    assert engine.url.username == "user"
    assert engine.url.host == "localhost"
    assert engine.url.port == 5432
    assert engine.url.database == "streamimage"
    await engine.dispose()
