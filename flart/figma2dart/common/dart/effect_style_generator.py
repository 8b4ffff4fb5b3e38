"""
Effect style generator
그림자(DROP_SHADOW / INNER_SHADOW)는 BoxShadow, 블러는 double 상수로 변환
"""

from typing import List, Optional

from flart.figma2dart.common.document.models import (
    AliasValue,
    ColorValue,
    Effect,
    EffectStyle,
    LiteralValue,
)

from .base_generator import StyleCodeGenerator
from .formatting import color_literal, format_number, format_token_name
from .resolver import ModeOption

SHADOW_TYPES = ("DROP_SHADOW", "INNER_SHADOW")
BLUR_TYPES = ("LAYER_BLUR", "BACKGROUND_BLUR")


class EffectStyleGenerator(StyleCodeGenerator):
    name = "effects"
    empty_message = "No defined effect styles"

    async def fetch(self) -> List[EffectStyle]:
        return await self.source.get_local_effect_styles()

    async def available_modes(self) -> List[ModeOption]:
        bindings: List[AliasValue] = []
        for style in await self.fetch():
            for effect in style.effects:
                bindings.extend(effect.bound_variables.values())
        return await self.resolver.collect_binding_modes(bindings)

    async def _bound_number(
        self, effect: Effect, field: str, mode_id: Optional[str], default: float
    ) -> float:
        resolved = await self.resolver.resolve_binding(
            effect.bound_variables.get(field), mode_id
        )
        if resolved is None or not isinstance(resolved.value, LiteralValue):
            return default
        value = resolved.value.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        return value

    async def _bound_color(
        self, effect: Effect, mode_id: Optional[str]
    ) -> ColorValue:
        resolved = await self.resolver.resolve_binding(
            effect.bound_variables.get("color"), mode_id
        )
        if resolved is not None and isinstance(resolved.value, ColorValue):
            return resolved.value
        return effect.color or ColorValue(0, 0, 0)

    async def declaration(
        self, effect: Effect, effect_name: str, mode_id: Optional[str] = None
    ) -> str:
        if effect.type in SHADOW_TYPES:
            color = await self._bound_color(effect, mode_id)
            offset_x = effect.offset.x if effect.offset else 0
            offset_y = effect.offset.y if effect.offset else 0
            offset_x = await self._bound_number(effect, "offsetX", mode_id, offset_x)
            offset_y = await self._bound_number(effect, "offsetY", mode_id, offset_y)
            radius = await self._bound_number(effect, "radius", mode_id, effect.radius)
            spread = await self._bound_number(
                effect, "spread", mode_id, effect.spread or 0
            )

            code = f"  static const BoxShadow {effect_name} = BoxShadow(\n"
            code += f"    color: {color_literal(color)},\n"
            code += (
                f"    offset: Offset({format_number(offset_x)}, "
                f"{format_number(offset_y)}),\n"
            )
            code += f"    blurRadius: {format_number(radius)},\n"
            code += f"    spreadRadius: {format_number(spread)},\n"
            code += "  );\n\n"
            return code

        if effect.type in BLUR_TYPES:
            radius = await self._bound_number(effect, "radius", mode_id, effect.radius)
            return (
                f"  static const double {effect_name}BlurRadius = "
                f"{format_number(radius)};\n\n"
            )

        # 그 외 효과는 무시
        return ""

    async def render_class(
        self, styles: List[EffectStyle], mode_id: Optional[str], suffix: str
    ) -> str:
        code = f"abstract class AppEffectStyles{suffix} {{\n"
        for index, style in enumerate(styles):
            style_name = format_token_name(style.name, index, "effectStyle")
            for effect_index, effect in enumerate(style.effects):
                code += await self.declaration(
                    effect, f"{style_name}Effect{effect_index}", mode_id
                )
        code += "}\n"
        return code
