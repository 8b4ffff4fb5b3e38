from typing import Any, Dict, List

import pytest

from flart.figma2dart.common.dart.resolver import (
    CircularAliasError,
    ModeOption,
    UnresolvedAliasError,
    VariableResolver,
)
from flart.figma2dart.common.document.models import (
    AliasValue,
    ColorValue,
    LiteralValue,
)


def alias(variable_id: str) -> Dict[str, str]:
    return {"type": "VARIABLE_ALIAS", "id": variable_id}


def variables_document(variables: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "variableCollections": [
            {
                "id": "VC:1",
                "name": "Brand",
                "modes": [{"modeId": "2:0", "name": "Value"}],
                "variableIds": [v["id"] for v in variables],
            }
        ],
        "variables": [{"variableCollectionId": "VC:1", **v} for v in variables],
    }


class TestVariableResolver:
    async def test_literal_resolves_to_itself(self, source_of) -> None:
        # Given
        resolver = VariableResolver(source_of({}))

        # When
        resolved = await resolver.resolve(LiteralValue(4), "FLOAT")

        # Then
        assert resolved.value == LiteralValue(4)
        assert resolved.to_dart() == "4"

    async def test_alias_chain_falls_back_to_first_mode(self, source_of) -> None:
        # Given
        source = source_of(
            variables_document(
                [
                    {
                        "id": "V:red",
                        "name": "Brand/Red",
                        "resolvedType": "COLOR",
                        "valuesByMode": {"2:0": {"r": 1, "g": 0, "b": 0}},
                    },
                    {
                        "id": "V:primary",
                        "name": "Brand/Primary",
                        "resolvedType": "COLOR",
                        "valuesByMode": {"2:0": alias("V:red")},
                    },
                ]
            )
        )
        resolver = VariableResolver(source)

        # When
        resolved = await resolver.resolve(AliasValue("V:primary"), "COLOR")

        # Then
        assert resolved.value == ColorValue(1, 0, 0, 1)
        assert resolved.to_dart() == "Color(0xffff0000)"

    async def test_alias_reads_default_mode_key(self, source_of) -> None:
        # Given
        source = source_of(
            {
                "variables": [
                    {
                        "id": "V:1",
                        "name": "Size",
                        "resolvedType": "FLOAT",
                        "valuesByMode": {"1:1": 99, "1:0": 12},
                    }
                ]
            }
        )
        resolver = VariableResolver(source)

        # When
        resolved = await resolver.resolve(AliasValue("V:1"), "FLOAT")

        # Then
        assert resolved.value == LiteralValue(12)

    async def test_circular_alias_raises(self, source_of) -> None:
        # Given
        source = source_of(
            variables_document(
                [
                    {
                        "id": "V:a",
                        "name": "A",
                        "resolvedType": "FLOAT",
                        "valuesByMode": {"2:0": alias("V:b")},
                    },
                    {
                        "id": "V:b",
                        "name": "B",
                        "resolvedType": "FLOAT",
                        "valuesByMode": {"2:0": alias("V:a")},
                    },
                ]
            )
        )
        resolver = VariableResolver(source)
        variable = await resolver.get_variable("V:a")

        # When / Then
        with pytest.raises(CircularAliasError) as exc_info:
            await resolver.resolve_for_mode(variable, "2:0")
        assert exc_info.value.chain == ["V:a", "V:b", "V:a"]

    async def test_missing_alias_target_raises(self, source_of) -> None:
        # Given
        resolver = VariableResolver(source_of({}))

        # When / Then
        with pytest.raises(UnresolvedAliasError) as exc_info:
            await resolver.resolve(AliasValue("V:missing"), "FLOAT")
        assert exc_info.value.variable_id == "V:missing"

    async def test_resolve_binding_without_mode_returns_none(self, source_of) -> None:
        resolver = VariableResolver(source_of({}))

        assert await resolver.resolve_binding(AliasValue("V:1"), None) is None
        assert await resolver.resolve_binding(None, "1:0") is None

    async def test_collect_binding_modes(
        self, source_of, themed_colors_document
    ) -> None:
        # Given
        resolver = VariableResolver(source_of(themed_colors_document))

        # When
        modes = await resolver.collect_binding_modes(
            [AliasValue("V:10"), AliasValue("V:10"), AliasValue("V:unknown")]
        )

        # Then
        assert modes == [
            ModeOption(mode_id="1:0", name="Light", collection="Theme"),
            ModeOption(mode_id="1:1", name="Dark", collection="Theme"),
        ]
