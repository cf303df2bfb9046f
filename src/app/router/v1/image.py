from fastapi import APIRouter, Depends, File, UploadFile, status

from src.app.common.utils.consts import IMAGE_FORM_FIELD
from src.app.common.utils.dependency import get_image_renderer, get_image_service
from src.app.common.utils.image import ImageRenderer
from src.app.v1.image.schema.image import ImageListResponse, ImageUploadResponse
from src.app.v1.image.service.image_service import ImageService

router = APIRouter(prefix="/images", tags=["Images"])


@router.get("", response_model=ImageListResponse)
async def get_images(
    image_service: ImageService = Depends(get_image_service),
    image_renderer: ImageRenderer = Depends(get_image_renderer),
):
    images = await image_service.load_all()
    return ImageListResponse(images=image_renderer.render_all(images))


@router.post("", response_model=ImageUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    image: UploadFile = File(..., alias=IMAGE_FORM_FIELD),
    image_service: ImageService = Depends(get_image_service),
    image_renderer: ImageRenderer = Depends(get_image_renderer),
):
    record = await image_renderer.ingest_upload(image)
    saved = await image_service.save(record)
    return ImageUploadResponse(id=saved.id, uri=image_renderer.render(saved))  # type: ignore
