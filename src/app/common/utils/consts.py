from enum import Enum

# 업로드 폼의 multipart 필드명
IMAGE_FORM_FIELD = "image"

DATA_URI_SCHEME = "data:"
BASE64_MARKER = ";base64,"


class TemplateName(str, Enum):
    INDEX = "index.html"
