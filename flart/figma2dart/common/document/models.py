"""
Document Model
디자인 문서에서 읽어 온 스타일/변수 스냅샷 (읽기 전용)
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

DEFAULT_ALIAS_MODE_ID = "1:0"


@dataclass(frozen=True)
class ColorValue:
    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class AliasValue:
    variable_id: str


@dataclass(frozen=True)
class LiteralValue:
    value: Union[bool, int, float, str]


VariableValue = Union[LiteralValue, ColorValue, AliasValue]


@dataclass(frozen=True)
class Mode:
    mode_id: str
    name: str


@dataclass(frozen=True)
class Variable:
    id: str
    name: str
    resolved_type: str
    values_by_mode: Dict[str, VariableValue] = field(default_factory=dict)
    variable_collection_id: Optional[str] = None


@dataclass(frozen=True)
class VariableCollection:
    id: str
    name: str
    modes: List[Mode] = field(default_factory=list)
    variable_ids: List[str] = field(default_factory=list)
    default_mode_id: Optional[str] = None

    @property
    def has_modes(self) -> bool:
        return len(self.modes) > 1


@dataclass(frozen=True)
class FontName:
    family: str
    style: str = "Regular"


@dataclass(frozen=True)
class UnitValue:
    """letterSpacing / lineHeight 값. unit 은 PIXELS, PERCENT, AUTO 중 하나"""

    unit: str
    value: Optional[float] = None


@dataclass(frozen=True)
class TextStyle:
    id: str
    name: str
    font_size: float
    font_name: FontName
    text_decoration: str = "NONE"
    letter_spacing: Optional[UnitValue] = None
    line_height: Optional[UnitValue] = None
    font_weight: Optional[int] = None
    bound_variables: Dict[str, AliasValue] = field(default_factory=dict)


@dataclass(frozen=True)
class ColorStop:
    color: ColorValue
    position: float = 0.0
    bound_variables: Dict[str, AliasValue] = field(default_factory=dict)


@dataclass(frozen=True)
class Paint:
    type: str
    color: Optional[ColorValue] = None
    opacity: Optional[float] = None
    gradient_stops: List[ColorStop] = field(default_factory=list)
    bound_variables: Dict[str, AliasValue] = field(default_factory=dict)


@dataclass(frozen=True)
class PaintStyle:
    id: str
    name: str
    paints: List[Paint] = field(default_factory=list)


@dataclass(frozen=True)
class Vector:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Effect:
    type: str
    color: Optional[ColorValue] = None
    offset: Optional[Vector] = None
    radius: float = 0.0
    spread: Optional[float] = None
    bound_variables: Dict[str, AliasValue] = field(default_factory=dict)


@dataclass(frozen=True)
class EffectStyle:
    id: str
    name: str
    effects: List[Effect] = field(default_factory=list)


@dataclass(frozen=True)
class DocumentSnapshot:
    text_styles: List[TextStyle] = field(default_factory=list)
    paint_styles: List[PaintStyle] = field(default_factory=list)
    effect_styles: List[EffectStyle] = field(default_factory=list)
    variable_collections: List[VariableCollection] = field(default_factory=list)
    variables: List[Variable] = field(default_factory=list)
