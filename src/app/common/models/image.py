from sqlalchemy import BigInteger, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column
from src.config.database import Base


class PersistedImage(Base):
    __tablename__ = "persisted_images"

    # SQLite는 INTEGER PRIMARY KEY만 자동 증가
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True, nullable=False
    )
    # Large Object Binary, 파일 없이 저장될 수 있음
    data: Mapped[bytes | None] = mapped_column("bytes", LargeBinary, nullable=True)
    mime: Mapped[str] = mapped_column(String(255), nullable=False, default="", server_default="")
