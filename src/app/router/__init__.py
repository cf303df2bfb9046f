from src.app.router.v1.image import router as image_router
from src.app.router.v1.index import router as index_router
