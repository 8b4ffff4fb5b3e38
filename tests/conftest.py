from datetime import datetime
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from flart.figma2dart.common.document.document_source import InMemoryDocumentSource
from flart.figma2dart.common.document.snapshot_parser import parse_document_snapshot
from flart.figma2dart.generate_code.service.generate_code_service import (
    GenerateCodeService,
    get_generate_code_service,
)
from flart.main import app

FIXED_NOW = datetime(2026, 10, 19, 15, 4, 5)


def fixed_now() -> datetime:
    return FIXED_NOW


def make_source(data: Dict[str, Any]) -> InMemoryDocumentSource:
    return InMemoryDocumentSource(parse_document_snapshot(data))


@pytest.fixture
def now() -> Callable[[], datetime]:
    return fixed_now


@pytest.fixture
def source_of() -> Callable[[Dict[str, Any]], InMemoryDocumentSource]:
    return make_source


@pytest.fixture(scope="session")
def client() -> TestClient:
    app.dependency_overrides[get_generate_code_service] = lambda: GenerateCodeService(
        now=fixed_now
    )
    return TestClient(app)


@pytest.fixture
def text_styles_document() -> Dict[str, Any]:
    return {
        "textStyles": [
            {
                "id": "S:1",
                "name": "Heading/Large",
                "fontSize": 32,
                "fontName": {"family": "Inter", "style": "Bold"},
                "letterSpacing": {"unit": "PERCENT", "value": -2},
                "lineHeight": {"unit": "PIXELS", "value": 40},
                "textDecoration": "NONE",
            },
            {
                "id": "S:2",
                "name": "Body",
                "fontSize": 16,
                "fontName": {"family": "Inter", "style": "Italic"},
                "letterSpacing": {"unit": "PIXELS", "value": 0},
                "lineHeight": {"unit": "AUTO"},
                "textDecoration": "UNDERLINE",
            },
        ]
    }


@pytest.fixture
def colors_document() -> Dict[str, Any]:
    return {
        "paintStyles": [
            {
                "id": "P:1",
                "name": "Primary/500",
                "paints": [
                    {"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0}, "opacity": 1}
                ],
            }
        ]
    }


@pytest.fixture
def radius_document() -> Dict[str, Any]:
    """Light/Dark 두 모드를 가진 Radius 컬렉션"""
    return {
        "variableCollections": [
            {
                "id": "VC:1",
                "name": "Radius",
                "modes": [
                    {"modeId": "1:0", "name": "Light"},
                    {"modeId": "1:1", "name": "Dark"},
                ],
                "variableIds": ["V:1"],
            }
        ],
        "variables": [
            {
                "id": "V:1",
                "name": "Radius/Small",
                "resolvedType": "FLOAT",
                "valuesByMode": {"1:0": 4, "1:1": 8},
                "variableCollectionId": "VC:1",
            }
        ],
    }


@pytest.fixture
def themed_colors_document() -> Dict[str, Any]:
    """색상 채널이 Light/Dark 변수에 바인딩된 페인트 스타일"""
    return {
        "paintStyles": [
            {
                "id": "P:1",
                "name": "Surface",
                "paints": [
                    {
                        "type": "SOLID",
                        "color": {"r": 0.5, "g": 0.5, "b": 0.5},
                        "boundVariables": {
                            "color": {"type": "VARIABLE_ALIAS", "id": "V:10"}
                        },
                    }
                ],
            }
        ],
        "variableCollections": [
            {
                "id": "VC:2",
                "name": "Theme",
                "modes": [
                    {"modeId": "1:0", "name": "Light"},
                    {"modeId": "1:1", "name": "Dark"},
                ],
                "variableIds": ["V:10"],
            }
        ],
        "variables": [
            {
                "id": "V:10",
                "name": "Surface",
                "resolvedType": "COLOR",
                "valuesByMode": {
                    "1:0": {"r": 1, "g": 1, "b": 1, "a": 1},
                    "1:1": {"r": 0, "g": 0, "b": 0, "a": 1},
                },
                "variableCollectionId": "VC:2",
            }
        ],
    }
