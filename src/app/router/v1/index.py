from pathlib import Path

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.app.common.utils.consts import IMAGE_FORM_FIELD, TemplateName
from src.app.common.utils.dependency import get_image_renderer, get_image_service
from src.app.common.utils.image import ImageRenderer
from src.app.v1.image.service.image_service import ImageService

TEMPLATES_DIR = Path(__file__).resolve().parents[3] / "templates"

router = APIRouter(tags=["Index"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse)
async def do_get(
    request: Request,
    image_service: ImageService = Depends(get_image_service),
    image_renderer: ImageRenderer = Depends(get_image_renderer),
):
    images = await image_service.load_all()
    return templates.TemplateResponse(request, TemplateName.INDEX.value, {"images": image_renderer.render_all(images)})


@router.post("/", response_class=HTMLResponse)
async def do_post(
    request: Request,
    image: UploadFile = File(..., alias=IMAGE_FORM_FIELD),
    image_service: ImageService = Depends(get_image_service),
    image_renderer: ImageRenderer = Depends(get_image_renderer),
):
    # 업로드된 이미지 저장 후 전체 목록 다시 렌더링
    record = await image_renderer.ingest_upload(image)
    images = await image_service.upload_and_list(record)
    return templates.TemplateResponse(request, TemplateName.INDEX.value, {"images": image_renderer.render_all(images)})
