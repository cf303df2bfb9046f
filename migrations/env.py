# type: ignore

import asyncio
from logging.config import fileConfig

from alembic import context

# 모델 import
from src.config.database import Base, build_engine, database_models
from src.config.database.postgresql import DATABASE_URL

config = context.config

# alembic -x db_url=... 로 덮어쓸 수 있음, 없으면 PG_DATABASE_URL
database_url = context.get_x_argument(as_dictionary=True).get("db_url", DATABASE_URL)
if database_url is None:
    raise ValueError("PG_DATABASE_URL environment variable is not set")
config.set_main_option("sqlalchemy.url", database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def configure_options(url: str) -> dict:
    # mime의 server_default까지 autogenerate 비교 대상에 포함
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "compare_server_default": True,
        "render_as_batch": url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **configure_options(url),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):
    context.configure(connection=connection, **configure_options(str(connection.engine.url)))

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    # 애플리케이션과 같은 engine 설정 사용
    connectable = build_engine(config.get_main_option("sqlalchemy.url"))

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
