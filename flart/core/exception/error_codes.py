from enum import Enum


class ErrorCode(Enum):
    DOCUMENT_REQUIRED = "document 또는 figma_url 중 하나가 필요합니다"
    INVALID_FIGMA_URL = "잘못된 Figma URL입니다. 올바른 Figma 디자인 URL을 제공해주세요."
    INVALID_DOCUMENT = "문서 스냅샷 형식이 올바르지 않습니다"
    UNKNOWN_GENERATOR = "지원하지 않는 generator 입니다"
    MODE_IDS_REQUIRED = "mode_ids 가 비어 있습니다"
    FIGMA_TOKEN_REQUIRED = "Figma API 토큰이 필요합니다"
