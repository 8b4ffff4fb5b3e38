"""
Dart formatting helpers
이름 변환, 색상 인코딩, 폰트 추론 등 상태 없는 순수 함수 모음
"""

import math
import re
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Union

from flart.figma2dart.common.document.models import ColorValue

DART_IMPORTS = (
    "import 'dart:ui';\n",
    "import 'package:flutter/material.dart';\n",
)

_FONT_WEIGHTS = {
    "black": 900,
    "extrabold": 800,
    "heavy": 800,
    "bold": 700,
    "semibold": 600,
    "demibold": 600,
    "medium": 500,
    "regular": 400,
    "normal": 400,
    "light": 300,
    "extralight": 200,
    "ultralight": 200,
    "thin": 100,
    "hairline": 100,
}

_TEXT_DECORATIONS = {
    "none": "TextDecoration.none",
    "underline": "TextDecoration.underline",
    "overline": "TextDecoration.overline",
    "line-through": "TextDecoration.lineThrough",
}


def capitalize_first_letter(text: str) -> str:
    return text[:1].upper() + text[1:]


def format_token_name(name: str, index: int, kind: str) -> str:
    """
    스타일 이름을 camelCase 식별자로 변환

    영숫자가 아닌 문자는 공백으로 바꾼 뒤 단어 단위로 합친다.
    남는 단어가 없으면 "<kind><index>" 를 사용한다. (예: color3)
    """
    words = re.sub(r"[^a-zA-Z0-9 ]", " ", name or "").split()
    if not words:
        return f"{kind}{index}"
    formatted = words[0].lower() + "".join(capitalize_first_letter(w) for w in words[1:])
    # Dart 식별자는 숫자로 시작할 수 없다 (500 Primary -> color500Primary)
    if formatted[0].isdigit():
        return f"{kind}{formatted}"
    return formatted


def format_variable_name(name: str) -> str:
    """Radius/Small -> radiusSmall"""
    formatted = re.sub(
        r"[^a-zA-Z0-9]+(.)", lambda m: m.group(1).upper(), name or ""
    )
    formatted = re.sub(r"[^a-zA-Z0-9]+$", "", formatted)
    return formatted[:1].lower() + formatted[1:]


def remove_spaces_and_digits(text: str) -> str:
    return re.sub(r"[0-9\s]", "", text)


def format_mode_prefix(mode_name: str) -> str:
    """Light Mode -> lightmode (숫자, 공백, 기호 제거)"""
    return re.sub(r"[^a-z]", "", (mode_name or "").lower())


def format_variable_name_with_mode(
    mode_name: str, has_modes: bool, name: str, prefix: Optional[str] = None
) -> str:
    """
    모드가 여러 개이면 모드 prefix 를 붙인다. (Light, Radius/Small -> lightRadiusSmall)
    prefix 를 넘기면 mode_name 대신 그대로 사용한다.
    """
    if not has_modes:
        return format_variable_name(name)
    camel = re.sub(r"[^a-zA-Z0-9]+(.)", lambda m: m.group(1).upper(), name or "")
    camel = re.sub(r"[^a-zA-Z0-9]+$", "", camel)
    if prefix is None:
        prefix = format_mode_prefix(mode_name)
    return prefix + remove_spaces_and_digits(capitalize_first_letter(camel))


def disambiguate_mode_labels(labels: Sequence[str], fallback: str) -> List[str]:
    """
    모드 이름에서 만든 식별자 조각이 비었거나 겹치면 모드 index 를 붙인다.

    ["mode", "mode"] -> ["mode0", "mode1"], ["", "dark"] -> ["mode0", "dark"]
    정제된 이름에는 숫자가 남지 않으므로 결과는 항상 서로 다르다.
    """
    counts: Dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1

    result: List[str] = []
    for index, label in enumerate(labels):
        if not label:
            result.append(f"{fallback}{index}")
        elif counts[label] > 1:
            result.append(f"{label}{index}")
        else:
            result.append(label)
    return result


def format_class_name(name: str) -> str:
    formatted = re.sub(
        r"[^a-zA-Z0-9]+(.)", lambda m: m.group(1).upper(), name or ""
    )
    formatted = re.sub(r"[^a-zA-Z0-9]", "", formatted)
    return remove_spaces_and_digits(capitalize_first_letter(formatted))


def to_hex(channel: float) -> str:
    value = min(255, max(0, math.floor(channel * 255)))
    return f"{value:02x}"


def color_literal(color: ColorValue, alpha: Optional[float] = None) -> str:
    """Color(0xAARRGGBB). alpha 를 지정하면 color.a 대신 사용한다."""
    a = color.a if alpha is None else alpha
    return f"Color(0x{to_hex(a)}{to_hex(color.r)}{to_hex(color.g)}{to_hex(color.b)})"


def infer_font_weight(font_style: str) -> int:
    # Italic/Oblique 표기는 굵기 판단에서 제외
    key = re.sub(r"italic|oblique", "", (font_style or "").lower())
    key = re.sub(r"[\s_-]", "", key)
    return _FONT_WEIGHTS.get(key, 400)


def infer_font_style(font_style: str) -> str:
    if "Italic" in font_style or "Oblique" in font_style:
        return "FontStyle.italic"
    return "FontStyle.normal"


def map_text_decoration(decoration: str) -> str:
    return _TEXT_DECORATIONS.get((decoration or "").lower(), "TextDecoration.none")


def format_number(value: Union[int, float]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def round_half_up(value: float, digits: int = 2) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def dart_literal(value: Union[bool, int, float, str]) -> str:
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")
        return f"'{escaped}'"
    return format_number(value)


def format_timestamp(now: datetime) -> str:
    """en-US 로케일 형식: 10/19/2026, 3:04:05 PM"""
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return (
        f"{now.month}/{now.day}/{now.year}, "
        f"{hour}:{now.minute:02d}:{now.second:02d} {meridiem}"
    )


def file_header(now: datetime, banner_name: str = "Flart") -> str:
    code = (
        f"// This file is generated by {banner_name} plugin.\n"
        "// Please, do not edit this file.\n"
    )
    code += "// ignore_for_file: unnecessary_import\n"
    code += f"// Last updated: {format_timestamp(now)}\n\n"
    code += "".join(DART_IMPORTS)
    code += "\n"
    return code
