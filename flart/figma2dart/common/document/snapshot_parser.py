"""
Document Snapshot Parser
플러그인 API 형태의 JSON 스냅샷을 문서 모델로 변환
"""

from typing import Any, Dict, List, Optional

from .models import (
    AliasValue,
    ColorStop,
    ColorValue,
    DocumentSnapshot,
    Effect,
    EffectStyle,
    FontName,
    LiteralValue,
    Mode,
    Paint,
    PaintStyle,
    TextStyle,
    UnitValue,
    Variable,
    VariableCollection,
    VariableValue,
    Vector,
)


def parse_alias(raw: Any) -> Optional[AliasValue]:
    if isinstance(raw, dict) and raw.get("type") == "VARIABLE_ALIAS" and raw.get("id"):
        return AliasValue(variable_id=str(raw["id"]))
    return None


def parse_color(raw: Any) -> ColorValue:
    if not isinstance(raw, dict) or not all(k in raw for k in ("r", "g", "b")):
        raise ValueError(f"color 값이 올바르지 않습니다: {raw!r}")
    a = raw.get("a")
    return ColorValue(
        r=float(raw["r"]),
        g=float(raw["g"]),
        b=float(raw["b"]),
        a=1.0 if a is None else float(a),
    )


def parse_variable_value(raw: Any) -> VariableValue:
    """Literal / Color / Alias 중 하나로 한 번만 판별한다."""
    alias = parse_alias(raw)
    if alias is not None:
        return alias
    if isinstance(raw, dict):
        return parse_color(raw)
    if isinstance(raw, (bool, int, float, str)):
        return LiteralValue(value=raw)
    raise ValueError(f"지원하지 않는 변수 값입니다: {raw!r}")


def parse_bound_variables(raw: Any) -> Dict[str, AliasValue]:
    bound: Dict[str, AliasValue] = {}
    if not isinstance(raw, dict):
        return bound
    for key, value in raw.items():
        alias = parse_alias(value)
        if alias is not None:
            bound[key] = alias
    return bound


def _parse_unit_value(raw: Any) -> Optional[UnitValue]:
    if not isinstance(raw, dict) or "unit" not in raw:
        return None
    value = raw.get("value")
    return UnitValue(
        unit=str(raw["unit"]).upper(),
        value=None if value is None else float(value),
    )


def parse_text_style(raw: Dict[str, Any], index: int) -> TextStyle:
    font_name = raw.get("fontName") or {}
    font_weight = raw.get("fontWeight")
    return TextStyle(
        id=str(raw.get("id", f"text-style-{index}")),
        name=raw.get("name") or "",
        font_size=float(raw["fontSize"]),
        font_name=FontName(
            family=font_name.get("family") or "",
            style=font_name.get("style") or "Regular",
        ),
        text_decoration=raw.get("textDecoration") or "NONE",
        letter_spacing=_parse_unit_value(raw.get("letterSpacing")),
        line_height=_parse_unit_value(raw.get("lineHeight")),
        font_weight=None if font_weight is None else int(font_weight),
        bound_variables=parse_bound_variables(raw.get("boundVariables")),
    )


def parse_paint(raw: Dict[str, Any]) -> Paint:
    paint_type = raw.get("type", "")
    stops: List[ColorStop] = []
    for stop in raw.get("gradientStops") or []:
        stops.append(
            ColorStop(
                color=parse_color(stop.get("color")),
                position=float(stop.get("position", 0.0)),
                bound_variables=parse_bound_variables(stop.get("boundVariables")),
            )
        )
    opacity = raw.get("opacity")
    return Paint(
        type=paint_type,
        color=parse_color(raw["color"]) if "color" in raw else None,
        opacity=None if opacity is None else float(opacity),
        gradient_stops=stops,
        bound_variables=parse_bound_variables(raw.get("boundVariables")),
    )


def parse_paint_style(raw: Dict[str, Any], index: int) -> PaintStyle:
    return PaintStyle(
        id=str(raw.get("id", f"paint-style-{index}")),
        name=raw.get("name") or "",
        paints=[parse_paint(p) for p in raw.get("paints") or []],
    )


def parse_effect(raw: Dict[str, Any]) -> Effect:
    offset = raw.get("offset")
    spread = raw.get("spread")
    return Effect(
        type=raw.get("type", ""),
        color=parse_color(raw["color"]) if "color" in raw else None,
        offset=Vector(x=float(offset.get("x", 0)), y=float(offset.get("y", 0)))
        if isinstance(offset, dict)
        else None,
        radius=float(raw.get("radius", 0)),
        spread=None if spread is None else float(spread),
        bound_variables=parse_bound_variables(raw.get("boundVariables")),
    )


def parse_effect_style(raw: Dict[str, Any], index: int) -> EffectStyle:
    return EffectStyle(
        id=str(raw.get("id", f"effect-style-{index}")),
        name=raw.get("name") or "",
        effects=[parse_effect(e) for e in raw.get("effects") or []],
    )


def parse_variable(raw: Dict[str, Any]) -> Variable:
    values = raw.get("valuesByMode") or {}
    return Variable(
        id=str(raw["id"]),
        name=raw.get("name") or "",
        resolved_type=str(raw.get("resolvedType", "")).upper(),
        values_by_mode={
            str(mode_id): parse_variable_value(value)
            for mode_id, value in values.items()
        },
        variable_collection_id=raw.get("variableCollectionId"),
    )


def parse_variable_collection(raw: Dict[str, Any]) -> VariableCollection:
    modes = [
        Mode(mode_id=str(m["modeId"]), name=m.get("name", ""))
        for m in raw.get("modes") or []
    ]
    return VariableCollection(
        id=str(raw["id"]),
        name=raw.get("name") or "",
        modes=modes,
        variable_ids=[str(v) for v in raw.get("variableIds") or []],
        default_mode_id=raw.get("defaultModeId"),
    )


def parse_document_snapshot(data: Dict[str, Any]) -> DocumentSnapshot:
    """
    플러그인 API 형태의 스냅샷 JSON을 DocumentSnapshot 으로 변환

    Raises:
        ValueError: 필수 필드가 없거나 값의 형식이 잘못된 경우
    """
    if not isinstance(data, dict):
        raise ValueError("스냅샷은 JSON 객체여야 합니다")
    try:
        return DocumentSnapshot(
            text_styles=[
                parse_text_style(s, i) for i, s in enumerate(data.get("textStyles") or [])
            ],
            paint_styles=[
                parse_paint_style(s, i)
                for i, s in enumerate(data.get("paintStyles") or [])
            ],
            effect_styles=[
                parse_effect_style(s, i)
                for i, s in enumerate(data.get("effectStyles") or [])
            ],
            variable_collections=[
                parse_variable_collection(c)
                for c in data.get("variableCollections") or []
            ],
            variables=[parse_variable(v) for v in data.get("variables") or []],
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"스냅샷 파싱 실패: {e!r}") from e
