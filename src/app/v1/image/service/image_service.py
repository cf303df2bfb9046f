from src.app.v1.image.repository.image_repository import ImageRepository
from src.app.v1.image.schema.image import ImageRecord


class ImageService:

    def __init__(self, image_repository: ImageRepository):
        self.image_repository = image_repository

    async def save(self, record: ImageRecord) -> ImageRecord:
        return await self.image_repository.save(record)

    async def load_all(self) -> list[ImageRecord]:
        return await self.image_repository.load_all()

    async def upload_and_list(self, record: ImageRecord) -> list[ImageRecord]:
        # 저장과 조회는 각각 별도 트랜잭션
        await self.save(record)
        return await self.load_all()
