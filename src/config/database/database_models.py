from src.app.common.models.image import PersistedImage

from sqlalchemy.orm import configure_mappers

# 모든 모델이 import된 후에 configure_mappers 호출
configure_mappers()
# alembic이 인식 가능하게 model import
