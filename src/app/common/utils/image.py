import base64
import logging
from typing import Iterable

from fastapi import UploadFile

from src.app.common.utils.consts import BASE64_MARKER, DATA_URI_SCHEME
from src.app.v1.image.schema.image import ImageRecord

logger = logging.getLogger(__name__)


def to_image_record(data: bytes | bytearray | memoryview | None, content_type: str | None) -> ImageRecord:
    """
    업로드된 파일을 저장 가능한 레코드로 변환

    :param data: 업로드 파일의 원본 바이트 (복사해서 사용)
    :param content_type: 업로드 시 선언된 content-type, 검증하지 않음
    :return: id가 없는 레코드
    """
    return ImageRecord(data=bytes(data) if data is not None else None, mime=content_type or "")


def to_streaming_uri(record: ImageRecord) -> str:
    """
    레코드를 브라우저가 표시할 수 있는 data URI로 변환

    :param record: 저장된 레코드
    :return: data:<mime>;base64,<payload>
    """
    # payload가 없으면 빈 문자열로 인코딩
    encoded = base64.b64encode(record.data or b"").decode("ascii")
    return f"{DATA_URI_SCHEME}{record.mime}{BASE64_MARKER}{encoded}"


class ImageRenderer:
    def ingest(self, data: bytes | bytearray | memoryview | None, content_type: str | None) -> ImageRecord:
        record = to_image_record(data, content_type)
        logger.debug(f"Ingested upload mime={record.mime!r} size={len(record.data or b'')}")
        return record

    async def ingest_upload(self, file: UploadFile) -> ImageRecord:
        data = await file.read()
        return self.ingest(data, file.content_type)

    def render(self, record: ImageRecord) -> str:
        return to_streaming_uri(record)

    def render_all(self, records: Iterable[ImageRecord]) -> list[str]:
        return [self.render(record) for record in records]
