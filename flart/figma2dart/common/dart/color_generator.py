"""
Color style generator
페인트 스타일(단색, 선형 그라디언트)을 Color / LinearGradient 상수로 변환
"""

from typing import List, Optional

from flart.figma2dart.common.document.models import (
    AliasValue,
    ColorValue,
    Paint,
    PaintStyle,
)

from .base_generator import StyleCodeGenerator
from .formatting import color_literal, format_token_name
from .resolver import ModeOption


class ColorGenerator(StyleCodeGenerator):
    name = "colors"
    empty_message = "No defined colors"

    async def fetch(self) -> List[PaintStyle]:
        return await self.source.get_local_paint_styles()

    async def available_modes(self) -> List[ModeOption]:
        bindings: List[AliasValue] = []
        for style in await self.fetch():
            if not style.paints:
                continue
            paint = style.paints[0]
            bindings.extend(paint.bound_variables.values())
            for stop in paint.gradient_stops:
                bindings.extend(stop.bound_variables.values())
        return await self.resolver.collect_binding_modes(bindings)

    async def _bound_color(
        self, alias: Optional[AliasValue], mode_id: Optional[str]
    ) -> Optional[ColorValue]:
        resolved = await self.resolver.resolve_binding(alias, mode_id)
        if resolved is not None and isinstance(resolved.value, ColorValue):
            return resolved.value
        return None

    async def declaration(
        self, style: PaintStyle, index: int, mode_id: Optional[str] = None
    ) -> str:
        """첫 번째 paint 만 사용한다. SOLID / GRADIENT_LINEAR 외에는 빈 문자열."""
        if not style.paints:
            return ""
        paint: Paint = style.paints[0]
        name = format_token_name(style.name, index, "color")

        if paint.type == "SOLID":
            bound = await self._bound_color(paint.bound_variables.get("color"), mode_id)
            if bound is not None:
                literal = color_literal(bound)
            else:
                color = paint.color or ColorValue(0, 0, 0)
                opacity = 1.0 if paint.opacity is None else paint.opacity
                literal = color_literal(color, alpha=opacity)
            return f"  static const Color {name} = {literal};\n\n"

        if paint.type == "GRADIENT_LINEAR":
            stops = []
            for stop in paint.gradient_stops:
                color = await self._bound_color(
                    stop.bound_variables.get("color"), mode_id
                )
                # 그라디언트 stop 의 alpha 는 항상 1
                stops.append(color_literal(color or stop.color, alpha=1))
            return (
                f"  static const LinearGradient {name} = "
                f"LinearGradient(colors: [{', '.join(stops)}]);\n\n"
            )

        return ""

    async def render_class(
        self, styles: List[PaintStyle], mode_id: Optional[str], suffix: str
    ) -> str:
        code = f"abstract class AppColors{suffix} {{\n"
        for index, style in enumerate(styles):
            code += await self.declaration(style, index, mode_id)
        code += "}\n"
        return code
