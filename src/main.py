import logging
import os
import sys
from pathlib import Path

# 프로젝트 루트 디렉토리를 sys.path에 추가
# 상단에 위치 필수 !
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

load_dotenv()

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


# 여기부터 router 추가
from src.app.common.utils.image import ImageRenderer
from src.app.router import image_router, index_router
from src.app.v1.image.repository.image_repository import ImageRepository
from src.app.v1.image.service.image_service import ImageService
from src.config.database import build_engine, build_session_factory, create_tables


def create_app(engine: AsyncEngine | None = None) -> FastAPI:
    engine = engine or build_engine()

    # 요청 계층에서 사용할 객체는 프로세스 시작 시 한 번만 생성
    session_factory = build_session_factory(engine)
    image_service = ImageService(ImageRepository(session_factory))
    image_renderer = ImageRenderer()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await create_tables(engine)
        yield
        await engine.dispose()

    app = FastAPI(title="Stream Image DB", lifespan=lifespan)
    app.state.image_service = image_service
    app.state.image_renderer = image_renderer

    main_router = APIRouter(prefix="/api/v1")
    main_router.include_router(image_router)

    app.include_router(index_router)
    app.include_router(main_router)

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Database error"})

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:create_app",
        factory=True,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
    )
