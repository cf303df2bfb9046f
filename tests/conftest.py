import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.app.v1.image.repository.image_repository import ImageRepository
from src.config.database import build_engine, build_session_factory, create_tables


@pytest_asyncio.fixture
async def engine(tmp_path):
    """테스트마다 새 SQLite 파일 DB를 사용합니다."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def image_repository(session_factory):
    return ImageRepository(session_factory)


@pytest_asyncio.fixture
async def client(engine):
    from src.main import create_app

    app = create_app(engine)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
