"""
Variable resolver
변수 값(Literal / Color / Alias)을 모드별 구체 값으로 해석한다.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Union

from flart.figma2dart.common.document.document_source import DocumentSourceABC
from flart.figma2dart.common.document.models import (
    DEFAULT_ALIAS_MODE_ID,
    AliasValue,
    ColorValue,
    LiteralValue,
    Variable,
    VariableCollection,
    VariableValue,
)

from .formatting import color_literal, dart_literal


class AliasResolutionError(Exception):
    """Alias 를 구체 값으로 해석하지 못함"""


class CircularAliasError(AliasResolutionError):
    def __init__(self, chain: List[str]):
        super().__init__(f"circular reference: {' -> '.join(chain)}")
        self.chain = chain


class UnresolvedAliasError(AliasResolutionError):
    def __init__(self, variable_id: str):
        super().__init__(f"unresolved variable reference: {variable_id}")
        self.variable_id = variable_id


@dataclass(frozen=True)
class ResolvedValue:
    value: Union[ColorValue, LiteralValue]
    resolved_type: str

    def to_dart(self) -> str:
        if isinstance(self.value, ColorValue):
            return color_literal(self.value)
        return dart_literal(self.value.value)


@dataclass(frozen=True)
class ModeOption:
    mode_id: str
    name: str
    collection: str


class VariableResolver:
    def __init__(
        self,
        source: DocumentSourceABC,
        alias_mode_id: str = DEFAULT_ALIAS_MODE_ID,
    ):
        self.source = source
        self.alias_mode_id = alias_mode_id

    async def get_variable(self, variable_id: str) -> Optional[Variable]:
        return await self.source.get_variable_by_id(variable_id)

    def _alias_target_value(self, variable: Variable) -> VariableValue:
        # alias 는 항상 기본 모드("1:0") 값을 읽는다. 없으면 첫 번째 모드 값.
        value = variable.values_by_mode.get(self.alias_mode_id)
        if value is None and variable.values_by_mode:
            value = next(iter(variable.values_by_mode.values()))
        if value is None:
            raise UnresolvedAliasError(variable.id)
        return value

    async def resolve(
        self,
        value: VariableValue,
        resolved_type: str,
        origin_id: Optional[str] = None,
    ) -> ResolvedValue:
        chain: List[str] = [origin_id] if origin_id else []
        visited: Set[str] = set(chain)

        while isinstance(value, AliasValue):
            target_id = value.variable_id
            chain.append(target_id)
            if target_id in visited:
                raise CircularAliasError(chain)
            visited.add(target_id)

            target = await self.source.get_variable_by_id(target_id)
            if target is None:
                raise UnresolvedAliasError(target_id)
            value = self._alias_target_value(target)
            resolved_type = target.resolved_type

        return ResolvedValue(value=value, resolved_type=resolved_type)

    async def resolve_for_mode(
        self, variable: Variable, mode_id: str
    ) -> Optional[ResolvedValue]:
        raw = variable.values_by_mode.get(mode_id)
        if raw is None:
            return None
        return await self.resolve(raw, variable.resolved_type, origin_id=variable.id)

    async def resolve_binding(
        self, alias: Optional[AliasValue], mode_id: Optional[str]
    ) -> Optional[ResolvedValue]:
        """
        스타일 필드에 바인딩된 변수의 모드 값을 해석한다.

        바인딩이 없거나, 모드가 지정되지 않았거나, 해당 변수에 그 모드 값이
        없으면 None 을 반환하고 호출자는 스타일의 정적 값을 사용한다.
        """
        if alias is None or mode_id is None:
            return None
        variable = await self.source.get_variable_by_id(alias.variable_id)
        if variable is None:
            raise UnresolvedAliasError(alias.variable_id)
        return await self.resolve_for_mode(variable, mode_id)

    async def find_collection(self, variable: Variable) -> Optional[VariableCollection]:
        if variable.variable_collection_id:
            collection = await self.source.get_variable_collection_by_id(
                variable.variable_collection_id
            )
            if collection is not None:
                return collection
        for collection in await self.source.get_local_variable_collections():
            if variable.id in collection.variable_ids:
                return collection
        return None

    async def collect_binding_modes(
        self, bindings: Iterable[AliasValue]
    ) -> List[ModeOption]:
        """바인딩된 변수들이 속한 컬렉션의 모드 목록 (중복 제거, 순서 유지)"""
        modes: List[ModeOption] = []
        seen: Set[str] = set()
        for alias in bindings:
            variable = await self.source.get_variable_by_id(alias.variable_id)
            if variable is None:
                continue
            collection = await self.find_collection(variable)
            if collection is None:
                continue
            for mode in collection.modes:
                if mode.mode_id not in seen:
                    seen.add(mode.mode_id)
                    modes.append(
                        ModeOption(
                            mode_id=mode.mode_id,
                            name=mode.name,
                            collection=collection.name,
                        )
                    )
        return modes


def mode_options_for_collections(
    collections: Iterable[VariableCollection],
) -> List[ModeOption]:
    return [
        ModeOption(mode_id=mode.mode_id, name=mode.name, collection=collection.name)
        for collection in collections
        for mode in collection.modes
    ]
