from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class GenerateRequestDTO:
    """
    document: 플러그인 API 형태의 문서 스냅샷 (textStyles, paintStyles, ...)
    figma_url: document 가 없을 때 Figma REST API 로 조회할 파일 URL
    """

    document: Optional[Dict[str, Any]] = None
    figma_url: Optional[str] = None
    token: Optional[str] = None
    use_theme_extensions: bool = False
    include_font_name: bool = False


@dataclass(frozen=True)
class GenerateWithModeRequestDTO:
    generator: str
    mode_ids: List[str] = field(default_factory=list)
    document: Optional[Dict[str, Any]] = None
    figma_url: Optional[str] = None
    token: Optional[str] = None
    use_theme_extensions: bool = False
    include_font_name: bool = False


@dataclass(frozen=True)
class ModeOptionDTO:
    mode_id: str
    name: str
    collection: str


@dataclass(frozen=True)
class DartCodeResponseDTO:
    code: str
    status: str
    error: Optional[str] = None
    type: str = "dart-code"


@dataclass(frozen=True)
class SelectModeResponseDTO:
    generator: str
    modes: List[ModeOptionDTO]
    use_theme_extensions: bool = False
    include_font_name: bool = False
    type: str = "select-mode"
