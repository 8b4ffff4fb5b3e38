"""
Figma REST Document Source
REST API 응답(스타일 노드, 로컬 변수)을 문서 모델로 변환하여 제공
"""

import logging
from typing import Any, Dict, List, Optional

from .document_source import DocumentSourceABC
from .figma_api_client import FigmaApiClient
from .models import (
    AliasValue,
    EffectStyle,
    FontName,
    PaintStyle,
    TextStyle,
    UnitValue,
    Variable,
    VariableCollection,
)
from .snapshot_parser import (
    parse_alias,
    parse_effect,
    parse_paint,
    parse_variable,
    parse_variable_collection,
)

_LINE_HEIGHT_UNITS = {
    "PIXELS": "PIXELS",
    "FONT_SIZE_%": "PERCENT",
    "INTRINSIC_%": "AUTO",
}


class FigmaApiError(Exception):
    """Figma API 호출 실패"""


def _first_alias(raw: Any) -> Optional[AliasValue]:
    # 텍스트 노드의 boundVariables 는 범위별 배열로 내려오기도 한다
    if isinstance(raw, list):
        raw = raw[0] if raw else None
    return parse_alias(raw)


def convert_text_node(node_id: str, name: str, node: Dict[str, Any]) -> TextStyle:
    style = node.get("style") or {}
    font_size = float(style.get("fontSize", 0))

    font_style = style.get("fontStyle")
    if not font_style:
        font_style = "Italic" if style.get("italic") else "Regular"

    letter_spacing = None
    if style.get("letterSpacing") is not None:
        letter_spacing = UnitValue(unit="PIXELS", value=float(style["letterSpacing"]))

    unit = _LINE_HEIGHT_UNITS.get(style.get("lineHeightUnit", "INTRINSIC_%"), "AUTO")
    if unit == "PIXELS":
        line_height = UnitValue(unit=unit, value=float(style.get("lineHeightPx", 0)))
    elif unit == "PERCENT":
        line_height = UnitValue(
            unit=unit, value=float(style.get("lineHeightPercentFontSize", 100))
        )
    else:
        line_height = UnitValue(unit="AUTO")

    bound: Dict[str, AliasValue] = {}
    for key, value in (node.get("boundVariables") or {}).items():
        alias = _first_alias(value)
        if alias is not None:
            bound[key] = alias

    font_weight = style.get("fontWeight")
    return TextStyle(
        id=node_id,
        name=name,
        font_size=font_size,
        font_name=FontName(family=style.get("fontFamily") or "", style=font_style),
        text_decoration=style.get("textDecoration") or "NONE",
        letter_spacing=letter_spacing,
        line_height=line_height,
        font_weight=None if font_weight is None else int(font_weight),
        bound_variables=bound,
    )


def convert_paint_node(node_id: str, name: str, node: Dict[str, Any]) -> PaintStyle:
    return PaintStyle(
        id=node_id,
        name=name,
        paints=[parse_paint(p) for p in node.get("fills") or []],
    )


def convert_effect_node(node_id: str, name: str, node: Dict[str, Any]) -> EffectStyle:
    return EffectStyle(
        id=node_id,
        name=name,
        effects=[parse_effect(e) for e in node.get("effects") or []],
    )


class FigmaRestDocumentSource(DocumentSourceABC):
    """Figma REST API 기반 문서 소스. 요청마다 한 번만 조회한다."""

    def __init__(self, api_client: FigmaApiClient, file_key: str):
        self.api_client = api_client
        self.file_key = file_key
        self._text_styles: Optional[List[TextStyle]] = None
        self._paint_styles: Optional[List[PaintStyle]] = None
        self._effect_styles: Optional[List[EffectStyle]] = None
        self._variables: Optional[Dict[str, Variable]] = None
        self._collections: Optional[Dict[str, VariableCollection]] = None

    def _load_styles(self) -> None:
        if self._text_styles is not None:
            return

        file_data = self.api_client.get_file(self.file_key)
        if file_data is None:
            raise FigmaApiError(f"Figma 파일을 가져오지 못했습니다: {self.file_key}")

        local_styles = {
            node_id: meta
            for node_id, meta in (file_data.get("styles") or {}).items()
            if not meta.get("remote", False)
        }
        nodes = self.api_client.get_file_nodes(self.file_key, list(local_styles))
        if nodes is None:
            raise FigmaApiError(f"스타일 노드를 가져오지 못했습니다: {self.file_key}")

        text_styles: List[TextStyle] = []
        paint_styles: List[PaintStyle] = []
        effect_styles: List[EffectStyle] = []
        for node_id, meta in local_styles.items():
            node = nodes.get(node_id)
            if node is None:
                logging.warning(f"스타일 노드 누락: {node_id}")
                continue
            name = meta.get("name") or node.get("name", "")
            style_type = meta.get("styleType")
            if style_type == "TEXT":
                text_styles.append(convert_text_node(node_id, name, node))
            elif style_type == "FILL":
                paint_styles.append(convert_paint_node(node_id, name, node))
            elif style_type == "EFFECT":
                effect_styles.append(convert_effect_node(node_id, name, node))

        logging.info(
            f"스타일 조회 완료 - text: {len(text_styles)}, paint: {len(paint_styles)}, effect: {len(effect_styles)}"
        )
        self._text_styles = text_styles
        self._paint_styles = paint_styles
        self._effect_styles = effect_styles

    def _load_variables(self) -> None:
        if self._variables is not None:
            return

        meta = self.api_client.get_local_variables(self.file_key)
        if meta is None:
            raise FigmaApiError(f"로컬 변수를 가져오지 못했습니다: {self.file_key}")

        self._variables = {
            var_id: parse_variable({"id": var_id, **raw})
            for var_id, raw in (meta.get("variables") or {}).items()
        }
        self._collections = {
            col_id: parse_variable_collection({"id": col_id, **raw})
            for col_id, raw in (meta.get("variableCollections") or {}).items()
            if not raw.get("remote", False)
        }

    async def get_local_text_styles(self) -> List[TextStyle]:
        self._load_styles()
        return list(self._text_styles or [])

    async def get_local_paint_styles(self) -> List[PaintStyle]:
        self._load_styles()
        return list(self._paint_styles or [])

    async def get_local_effect_styles(self) -> List[EffectStyle]:
        self._load_styles()
        return list(self._effect_styles or [])

    async def get_local_variable_collections(self) -> List[VariableCollection]:
        self._load_variables()
        return list((self._collections or {}).values())

    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        self._load_variables()
        return (self._variables or {}).get(variable_id)

    async def get_variable_collection_by_id(
        self, collection_id: str
    ) -> Optional[VariableCollection]:
        self._load_variables()
        return (self._collections or {}).get(collection_id)
