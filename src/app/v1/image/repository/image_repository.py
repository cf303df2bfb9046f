import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from src.app.common.models.image import PersistedImage
from src.app.v1.image.schema.image import ImageRecord

logger = logging.getLogger(__name__)


class ImageRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def save(self, record: ImageRecord) -> ImageRecord:
        """
        이미지 레코드 저장

        id가 없으면 insert, 있으면 저장소에 이미 있는 row만 update 한다.
        id는 저장소만 부여하므로 없는 id로는 row를 만들지 않는다.
        payload와 mime은 검증 없이 그대로 저장된다.

        :param record: 저장할 레코드
        :return: 저장소가 부여한 id를 담은 새 레코드
        :raises ValueError: 저장소에 없는 id가 주어진 경우
        """
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    if record.id is None:
                        entity = PersistedImage(data=record.data, mime=record.mime)
                        session.add(entity)
                    else:
                        entity = await session.get(PersistedImage, record.id)
                        if entity is None:
                            logger.warning(f"No image found for id={record.id}")
                            raise ValueError(f"Image {record.id} not found")
                        entity.data = record.data
                        entity.mime = record.mime
                    await session.flush()
                    saved = ImageRecord.model_validate(entity)

        except SQLAlchemyError as e:
            logger.error(f"Failed to save image (mime={record.mime!r}): {e}")
            raise

        logger.info(f"Saved image id={saved.id} mime={saved.mime!r} size={len(saved.data or b'')}")
        return saved

    async def load_all(self) -> list[ImageRecord]:
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    result = await session.execute(select(PersistedImage).order_by(PersistedImage.id))
                    records = [ImageRecord.model_validate(entity) for entity in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Failed to load images: {e}")
            raise

        logger.debug(f"Loaded {len(records)} images")
        return records
