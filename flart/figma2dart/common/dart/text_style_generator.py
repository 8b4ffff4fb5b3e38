"""
Text style generator
텍스트 스타일을 Flutter TextStyle 상수 또는 ThemeExtension 클래스로 변환
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from flart.figma2dart.common.document.models import LiteralValue, TextStyle

from .base_generator import StyleCodeGenerator
from .formatting import (
    dart_literal,
    format_number,
    format_token_name,
    infer_font_style,
    infer_font_weight,
    map_text_decoration,
    round_half_up,
)
from .resolver import ModeOption, ResolvedValue


@dataclass(frozen=True)
class TextStyleProperties:
    font_size: float
    font_weight: int
    font_style: str
    decoration: str
    letter_spacing: float
    font_family: str
    height: Optional[float]


def _as_number(resolved: Optional[ResolvedValue]) -> Optional[float]:
    if resolved is None or not isinstance(resolved.value, LiteralValue):
        return None
    value = resolved.value.value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _as_string(resolved: Optional[ResolvedValue]) -> Optional[str]:
    if resolved is None or not isinstance(resolved.value, LiteralValue):
        return None
    value = resolved.value.value
    return value if isinstance(value, str) else None


class TextStyleGenerator(StyleCodeGenerator):
    name = "textstyles"
    empty_message = "No defined textstyles"

    def __init__(
        self,
        source: Any,
        use_theme_extensions: bool = False,
        include_font_name: bool = False,
        **kwargs: Any,
    ):
        super().__init__(source, **kwargs)
        self.use_theme_extensions = use_theme_extensions
        self.include_font_name = include_font_name

    async def fetch(self) -> List[TextStyle]:
        return await self.source.get_local_text_styles()

    async def available_modes(self) -> List[ModeOption]:
        styles = await self.fetch()
        bindings = [
            alias for style in styles for alias in style.bound_variables.values()
        ]
        return await self.resolver.collect_binding_modes(bindings)

    async def resolve_properties(
        self, style: TextStyle, mode_id: Optional[str] = None
    ) -> TextStyleProperties:
        bound = style.bound_variables

        font_size = _as_number(
            await self.resolver.resolve_binding(bound.get("fontSize"), mode_id)
        )
        if font_size is None:
            font_size = style.font_size

        letter_spacing = _as_number(
            await self.resolver.resolve_binding(bound.get("letterSpacing"), mode_id)
        )
        if letter_spacing is None:
            letter_spacing = 0.0
            spacing = style.letter_spacing
            if spacing is not None and spacing.value is not None:
                if spacing.unit == "PIXELS":
                    letter_spacing = spacing.value
                elif spacing.unit == "PERCENT":
                    letter_spacing = spacing.value * font_size / 100

        height: Optional[float] = None
        line_height_px = _as_number(
            await self.resolver.resolve_binding(bound.get("lineHeight"), mode_id)
        )
        line_height = style.line_height
        if line_height_px is not None:
            height = line_height_px / font_size if font_size else None
        elif line_height is not None and line_height.unit != "AUTO":
            if line_height.value is not None:
                if line_height.unit == "PERCENT":
                    height = line_height.value / 100
                elif font_size:
                    height = line_height.value / font_size
        if height is not None:
            height = round_half_up(height, 2)

        font_family = _as_string(
            await self.resolver.resolve_binding(bound.get("fontFamily"), mode_id)
        )
        if font_family is None:
            font_family = style.font_name.family

        font_weight = style.font_weight or infer_font_weight(style.font_name.style)

        return TextStyleProperties(
            font_size=font_size,
            font_weight=font_weight,
            font_style=infer_font_style(style.font_name.style),
            decoration=map_text_decoration(style.text_decoration),
            letter_spacing=letter_spacing,
            font_family=font_family,
            height=height,
        )

    def text_style_body(self, props: TextStyleProperties, indent: str) -> str:
        code = f"{indent}fontSize: {format_number(props.font_size)},\n"
        code += f"{indent}fontWeight: FontWeight.w{props.font_weight},\n"
        if self.include_font_name:
            code += f"{indent}fontFamily: {dart_literal(props.font_family)},\n"
        if props.height is not None:
            code += f"{indent}height: {format_number(props.height)},\n"
        if props.letter_spacing:
            code += f"{indent}letterSpacing: {format_number(props.letter_spacing)},\n"
        code += f"{indent}fontStyle: {props.font_style},\n"
        code += f"{indent}decoration: {props.decoration},\n"
        return code

    async def render_class(
        self, styles: List[TextStyle], mode_id: Optional[str], suffix: str
    ) -> str:
        names = [format_token_name(s.name, i, "textStyle") for i, s in enumerate(styles)]
        props = [await self.resolve_properties(s, mode_id) for s in styles]
        if self.use_theme_extensions:
            return self._render_theme_extension(f"AppTextTheme{suffix}", names, props)
        return self._render_plain(f"AppTextStyles{suffix}", names, props)

    def _render_theme_extension(
        self, class_name: str, names: List[str], props: List[TextStyleProperties]
    ) -> str:
        code = (
            f"@immutable\nclass {class_name} extends ThemeExtension<{class_name}> {{\n"
        )

        for name in names:
            code += f"  final TextStyle? {name};\n"

        code += f"\n  const {class_name}({{\n"
        for name in names:
            code += f"    this.{name},\n"
        code += "  });\n\n"

        # fallback 생성자
        code += f"  const {class_name}.fallback()\n      : this(\n"
        for name, prop in zip(names, props):
            code += f"        {name}: const TextStyle(\n"
            code += self.text_style_body(prop, "          ")
            code += "        ),\n"
        code += "      );\n\n"

        code += f"  @override\n  {class_name} copyWith({{\n"
        for name in names:
            code += f"    TextStyle? {name},\n"
        code += f"  }}) {{\n    return {class_name}(\n"
        for name in names:
            code += f"      {name}: {name} ?? this.{name},\n"
        code += "    );\n  }\n\n"

        code += (
            f"  @override\n  {class_name} lerp({class_name}? other, double t) {{\n"
        )
        code += f"    if (other is! {class_name}) return this;\n"
        code += f"    return {class_name}(\n"
        for name in names:
            code += f"      {name}: TextStyle.lerp({name}, other.{name}, t),\n"
        code += "    );\n  }\n"
        code += "}\n"
        return code

    def _render_plain(
        self, class_name: str, names: List[str], props: List[TextStyleProperties]
    ) -> str:
        code = f"abstract class {class_name} {{\n"
        for name, prop in zip(names, props):
            code += f"  static const TextStyle {name} = TextStyle(\n"
            code += self.text_style_body(prop, "    ")
            code += "  );\n\n"

        code += "  static List<Map<String, dynamic>> get map => [\n"
        for name in names:
            code += f"    {{'{name}': {name}}},\n"
        code += "  ];\n"
        code += "}\n"
        return code
