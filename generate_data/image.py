import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import asyncio
from pathlib import Path
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError

from src.app.common.utils.image import to_image_record
from src.app.v1.image.repository.image_repository import ImageRepository
from src.app.v1.image.schema.image import ImageRecord
from src.config.database import build_engine, build_session_factory, create_tables

# 확장자 -> content-type
EXT_TO_CONTENT_TYPE = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
}


# 디렉토리의 이미지 파일을 레코드로 변환하는 제너레이터
async def generate_image_data(directory: Path) -> AsyncIterator[ImageRecord]:
    for path in sorted(directory.iterdir()):
        ext = path.suffix.lower().lstrip(".")
        if not path.is_file() or ext not in EXT_TO_CONTENT_TYPE:
            continue
        yield to_image_record(path.read_bytes(), EXT_TO_CONTENT_TYPE[ext])


# 데이터 삽입 함수
async def insert_images_async(repository: ImageRepository, directory: Path) -> int:
    count = 0
    async for record in generate_image_data(directory):
        try:
            await repository.save(record)
        except SQLAlchemyError as e:
            print(f"데이터 삽입 중 오류 발생: {e}")
            raise
        count += 1

    print(f"{count}개의 이미지 데이터가 성공적으로 생성되었습니다.")
    return count


async def main(directory: str):
    engine = build_engine()
    try:
        await create_tables(engine)
        await insert_images_async(ImageRepository(build_session_factory(engine)), Path(directory))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python generate_data/image.py <image-directory>")
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
