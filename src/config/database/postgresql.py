import logging
import os

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.environ.get("PG_DATABASE_URL")
DB_ECHO = os.environ.get("DB_ECHO", "false").lower() == "true"

Base = declarative_base()


def build_engine(database_url: str | None = None, echo: bool = DB_ECHO) -> AsyncEngine:
    database_url = database_url or DATABASE_URL

    # DATABASE_URL이 None인 경우 처리
    if database_url is None:
        raise ValueError("PG_DATABASE_URL environment variable is not set")

    return create_async_engine(database_url, echo=echo)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,  # 트랜잭션 커밋 후에도 객체가 만료되지 않는 설정 값
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    # metadata에 모델이 등록되도록 import
    from src.config.database import database_models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Tables ready: {sorted(Base.metadata.tables)}")
