"""
Variable generator

변수 컬렉션마다 Dart 클래스를 만든다.

- plain: `final class App<C>` 에 (모드 x 변수) 상수와 map
- theme extension (요청 + 선택된 모드 2개 이상 + 변수 1개 이상):
  `IApp<C>` 인터페이스, `App<C>` 구현 클래스, 모드별 `App<Mode><C>` 상수 클래스
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from flart.figma2dart.common.document.models import (
    Mode,
    Variable,
    VariableCollection,
)

from .base_generator import DartCodeGenerator
from .formatting import (
    capitalize_first_letter,
    disambiguate_mode_labels,
    format_class_name,
    format_mode_prefix,
    format_variable_name,
    format_variable_name_with_mode,
)
from .resolver import ModeOption, ResolvedValue, mode_options_for_collections

DART_TYPES = {"COLOR": "Color", "FLOAT": "double"}


def dart_type(resolved_type: str) -> str:
    return DART_TYPES.get(resolved_type, "dynamic")


@dataclass(frozen=True)
class VariableEntry:
    variable: Variable
    name: str

    @property
    def dart_type(self) -> str:
        return dart_type(self.variable.resolved_type)


class VariableGenerator(DartCodeGenerator):
    name = "variables"
    empty_message = "No defined variables"

    def __init__(self, source: Any, use_theme_extensions: bool = False, **kwargs: Any):
        super().__init__(source, **kwargs)
        self.use_theme_extensions = use_theme_extensions

    async def fetch(self) -> List[VariableCollection]:
        return await self.source.get_local_variable_collections()

    async def available_modes(self) -> List[ModeOption]:
        collections = await self.fetch()
        return mode_options_for_collections(c for c in collections if c.has_modes)

    async def entries(self, collection: VariableCollection) -> List[VariableEntry]:
        result: List[VariableEntry] = []
        for index, variable_id in enumerate(collection.variable_ids):
            variable = await self.resolver.get_variable(variable_id)
            if variable is None:
                continue
            name = format_variable_name(variable.name) or f"variable{index}"
            if name[0].isdigit():
                name = f"variable{capitalize_first_letter(name)}"
            result.append(VariableEntry(variable=variable, name=name))
        return result

    @staticmethod
    def selected_modes(
        collection: VariableCollection, mode_ids: Sequence[str]
    ) -> List[Mode]:
        # 선택된 모드가 이 컬렉션에 하나도 없으면 전체 모드를 사용
        if not mode_ids:
            return list(collection.modes)
        selected = [m for m in collection.modes if m.mode_id in mode_ids]
        return selected or list(collection.modes)

    async def resolve_value(self, variable: Variable, mode: Mode) -> ResolvedValue:
        resolved = await self.resolver.resolve_for_mode(variable, mode.mode_id)
        if resolved is None:
            raise ValueError(
                f"variable '{variable.name}' has no value for mode '{mode.name}'"
            )
        return resolved

    async def render(
        self, collections: List[VariableCollection], mode_ids: List[str]
    ) -> str:
        code = ""
        for index, collection in enumerate(collections):
            class_name = format_class_name(collection.name) or f"Collection{index}"
            modes = self.selected_modes(collection, mode_ids)
            entries = await self.entries(collection)

            if self.use_theme_extensions and len(modes) > 1 and entries:
                mode_classes = self.mode_class_names(class_name, modes)
                code += self.render_interface(class_name, entries)
                code += self.render_implementation(
                    class_name, modes, mode_classes, entries
                )
                for mode, mode_class in zip(modes, mode_classes):
                    code += await self.render_mode_class(mode_class, mode, entries)
            else:
                code += await self.render_plain(class_name, modes, entries)
        return code

    async def render_plain(
        self, class_name: str, modes: List[Mode], entries: List[VariableEntry]
    ) -> str:
        has_modes = len(modes) > 1
        code = f"final class App{class_name} {{\n"
        code += f"  const App{class_name}._();\n\n"

        prefixes = self.mode_prefixes(modes)
        names: List[str] = []
        for mode, prefix in zip(modes, prefixes):
            for entry in entries:
                name = entry.name
                if has_modes:
                    name = format_variable_name_with_mode(
                        mode.name, True, entry.variable.name, prefix=prefix
                    )
                    if name == prefix:
                        name = f"{prefix}{capitalize_first_letter(entry.name)}"
                resolved = await self.resolve_value(entry.variable, mode)
                code += self._comment(
                    entry.variable, resolved, mode if has_modes else None
                )
                code += (
                    f"  static const {dart_type(resolved.resolved_type)} {name} = "
                    f"{resolved.to_dart()};\n"
                )
                names.append(name)

        code += self._map_getter(names, static=True)
        code += "}\n\n"
        return code

    @staticmethod
    def _comment(
        variable: Variable, resolved: ResolvedValue, mode: Optional[Mode]
    ) -> str:
        comment = f"  /// Name: {variable.name}, value: {resolved.to_dart()}"
        if mode is not None:
            comment += f", mode: {mode.name}"
        return comment + "\n"

    @staticmethod
    def _map_getter(names: List[str], static: bool) -> str:
        if static:
            code = "\n  static List<Map<String, dynamic>> get map => [\n"
        else:
            code = "  @override\n  List<Map<String, dynamic>> get map => [\n"
        for name in names:
            code += f"    {{'{name}': {name}}},\n"
        code += "  ];\n"
        return code

    def render_interface(self, class_name: str, entries: List[VariableEntry]) -> str:
        interface = f"IApp{class_name}"
        code = (
            f"abstract interface class {interface} "
            f"extends ThemeExtension<{interface}> {{\n"
        )
        for entry in entries:
            code += f"  abstract final {entry.dart_type} {entry.name};\n"
        code += "  List<Map<String, dynamic>> get map;\n"
        code += "}\n\n"
        return code

    def render_implementation(
        self,
        class_name: str,
        modes: List[Mode],
        mode_classes: List[str],
        entries: List[VariableEntry],
    ) -> str:
        impl = f"App{class_name}"
        interface = f"IApp{class_name}"

        code = f"@immutable\nfinal class {impl} implements {interface} {{\n"

        code += f"  const {impl}({{\n"
        for entry in entries:
            code += f"    required this.{entry.name},\n"
        code += "  });\n\n"

        for entry in entries:
            code += f"  @override\n  final {entry.dart_type} {entry.name};\n"

        # copyWith
        code += f"\n  @override\n  {impl} copyWith({{\n"
        for entry in entries:
            code += f"    {entry.dart_type}? {entry.name},\n"
        code += f"  }}) => {impl}(\n"
        for entry in entries:
            code += f"    {entry.name}: {entry.name} ?? this.{entry.name},\n"
        code += "  );\n\n"

        # lerp
        code += (
            f"  @override\n  {impl} lerp("
            f"covariant ThemeExtension<{interface}>? other, double t) {{\n"
        )
        code += f"    if (other is! {impl}) return this;\n"
        code += f"    return {impl}(\n"
        for entry in entries:
            name = entry.name
            if entry.dart_type == "Color":
                code += f"      {name}: Color.lerp({name}, other.{name}, t)!,\n"
            elif entry.dart_type == "double":
                code += f"      {name}: lerpDouble({name}, other.{name}, t)!,\n"
            else:
                code += f"      {name}: other.{name} ?? {name},\n"
        code += "    );\n  }\n"

        # ==
        code += "\n  @override\n  bool operator ==(Object other) {\n"
        code += "    if (identical(this, other)) return true;\n"
        conditions = [f"      other.{e.name} == {e.name}" for e in entries]
        code += f"    return other is {impl} &&\n"
        code += " &&\n".join(conditions) + ";\n  }\n"

        # hashCode
        code += "\n  @override\n  int get hashCode =>\n    Object.hashAll([\n"
        for entry in entries:
            code += f"      {entry.name},\n"
        code += "    ]);\n\n"

        code += "  @override\n  Object get type => runtimeType;\n\n"

        accessors = self.mode_prefixes(modes)
        for accessor, mode_class in zip(accessors, mode_classes):
            code += (
                f"  static {interface} get {accessor}{class_name} => const {impl}(\n"
            )
            for entry in entries:
                code += f"    {entry.name}: {mode_class}.{entry.name},\n"
            code += "  );\n\n"

        code += self._map_getter([e.name for e in entries], static=False)
        code += "}\n\n"
        return code

    @staticmethod
    def mode_prefixes(modes: List[Mode]) -> List[str]:
        """Light -> light, 이름이 겹치는 모드(Mode 1, Mode 2)는 mode0, mode1"""
        return disambiguate_mode_labels(
            [format_mode_prefix(m.name) for m in modes], "mode"
        )

    @staticmethod
    def mode_class_names(class_name: str, modes: List[Mode]) -> List[str]:
        suffixes = disambiguate_mode_labels(
            [format_class_name(m.name) for m in modes], "Mode"
        )
        return [f"App{suffix}{class_name}" for suffix in suffixes]

    async def render_mode_class(
        self, mode_class: str, mode: Mode, entries: List[VariableEntry]
    ) -> str:
        code = f"final class {mode_class} {{\n"
        code += f"  const {mode_class}._();\n\n"
        for entry in entries:
            resolved = await self.resolve_value(entry.variable, mode)
            code += self._comment(entry.variable, resolved, mode)
            code += (
                f"  static const {entry.dart_type} {entry.name} = "
                f"{resolved.to_dart()};\n"
            )
        code += self._map_getter([e.name for e in entries], static=True)
        code += "}\n\n"
        return code
