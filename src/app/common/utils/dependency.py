from fastapi import Request

from src.app.common.utils.image import ImageRenderer
from src.app.v1.image.service.image_service import ImageService


# create_app()에서 구성한 객체를 요청 계층에 전달
def get_image_service(request: Request) -> ImageService:
    return request.app.state.image_service


def get_image_renderer(request: Request) -> ImageRenderer:
    return request.app.state.image_renderer
