from src.config.database.postgresql import (
    Base,
    build_engine,
    build_session_factory,
    create_tables,
)
