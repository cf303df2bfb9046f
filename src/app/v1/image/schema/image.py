from pydantic import BaseModel, ConfigDict


class ImageRecord(BaseModel):
    """
    저장 계층과 주고받는 이미지 레코드

    id는 저장소가 insert 시점에 한 번만 부여한다. 저장 전에는 None.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    data: bytes | None = None
    mime: str = ""


class ImageListResponse(BaseModel):
    images: list[str]


class ImageUploadResponse(BaseModel):
    id: int
    uri: str
