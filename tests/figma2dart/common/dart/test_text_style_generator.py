from flart.figma2dart.common.dart.result import GenerationStatus
from flart.figma2dart.common.dart.text_style_generator import TextStyleGenerator


class TestTextStyleGenerator:
    async def test_empty_document_returns_sentinel(self, source_of, now) -> None:
        # Given
        generator = TextStyleGenerator(source_of({}), now=now)

        # When
        result = await generator.generate()

        # Then
        assert result.status is GenerationStatus.EMPTY
        assert result.code == "No defined textstyles"

    async def test_plain_shape(self, source_of, now, text_styles_document) -> None:
        # Given
        generator = TextStyleGenerator(source_of(text_styles_document), now=now)

        # When
        result = await generator.generate()

        # Then
        assert result.success
        assert result.code.startswith("// This file is generated by Flart plugin.\n")
        assert result.code.endswith(
            "abstract class AppTextStyles {\n"
            "  static const TextStyle headingLarge = TextStyle(\n"
            "    fontSize: 32,\n"
            "    fontWeight: FontWeight.w700,\n"
            "    height: 1.25,\n"
            "    letterSpacing: -0.64,\n"
            "    fontStyle: FontStyle.normal,\n"
            "    decoration: TextDecoration.none,\n"
            "  );\n\n"
            "  static const TextStyle body = TextStyle(\n"
            "    fontSize: 16,\n"
            "    fontWeight: FontWeight.w400,\n"
            "    fontStyle: FontStyle.italic,\n"
            "    decoration: TextDecoration.underline,\n"
            "  );\n\n"
            "  static List<Map<String, dynamic>> get map => [\n"
            "    {'headingLarge': headingLarge},\n"
            "    {'body': body},\n"
            "  ];\n"
            "}\n"
        )

    async def test_plain_shape_emits_one_constant_per_token(
        self, source_of, now, text_styles_document
    ) -> None:
        # Given
        generator = TextStyleGenerator(source_of(text_styles_document), now=now)

        # When
        result = await generator.generate()

        # Then
        assert result.code.count("static const TextStyle") == 2
        assert result.code.count("{'") == 2

    async def test_include_font_name(self, source_of, now, text_styles_document) -> None:
        generator = TextStyleGenerator(
            source_of(text_styles_document), include_font_name=True, now=now
        )

        result = await generator.generate()

        assert "    fontFamily: 'Inter',\n" in result.code

    async def test_theme_extension_shape(
        self, source_of, now, text_styles_document
    ) -> None:
        # Given
        generator = TextStyleGenerator(
            source_of(text_styles_document), use_theme_extensions=True, now=now
        )

        # When
        result = await generator.generate()

        # Then
        code = result.code
        assert "@immutable\nclass AppTextTheme extends ThemeExtension<AppTextTheme> {\n" in code
        assert "  final TextStyle? headingLarge;\n" in code
        assert "  const AppTextTheme.fallback()\n      : this(\n" in code
        assert "        headingLarge: const TextStyle(\n" in code
        assert "          fontWeight: FontWeight.w700,\n" in code
        assert "  AppTextTheme copyWith({\n" in code
        assert "      body: body ?? this.body,\n" in code
        assert "    if (other is! AppTextTheme) return this;\n" in code
        assert "      body: TextStyle.lerp(body, other.body, t),\n" in code

    async def test_percent_line_height(self, source_of, now) -> None:
        # Given
        document = {
            "textStyles": [
                {
                    "name": "Caption",
                    "fontSize": 12,
                    "fontName": {"family": "Inter", "style": "Medium"},
                    "lineHeight": {"unit": "PERCENT", "value": 150},
                }
            ]
        }
        generator = TextStyleGenerator(source_of(document), now=now)

        # When
        result = await generator.generate()

        # Then
        assert "    height: 1.5,\n" in result.code
        assert "    fontWeight: FontWeight.w500,\n" in result.code

    async def test_bound_font_size_per_mode(self, source_of, now) -> None:
        # Given
        document = {
            "textStyles": [
                {
                    "name": "Body",
                    "fontSize": 16,
                    "fontName": {"family": "Inter", "style": "Regular"},
                    "boundVariables": {
                        "fontSize": {"type": "VARIABLE_ALIAS", "id": "V:fs"}
                    },
                }
            ],
            "variableCollections": [
                {
                    "id": "VC:1",
                    "name": "Density",
                    "modes": [
                        {"modeId": "1:0", "name": "Compact"},
                        {"modeId": "1:1", "name": "Comfortable"},
                    ],
                    "variableIds": ["V:fs"],
                }
            ],
            "variables": [
                {
                    "id": "V:fs",
                    "name": "Font/Body",
                    "resolvedType": "FLOAT",
                    "valuesByMode": {"1:0": 14, "1:1": 18},
                    "variableCollectionId": "VC:1",
                }
            ],
        }
        generator = TextStyleGenerator(source_of(document), now=now)

        # When
        modes = await generator.available_modes()
        result = await generator.generate(["1:0", "1:1"])

        # Then
        assert [m.name for m in modes] == ["Compact", "Comfortable"]
        compact, comfortable = result.code.split("abstract class ")[1:]
        assert compact.startswith("AppTextStylesCompact {")
        assert "    fontSize: 14,\n" in compact
        assert comfortable.startswith("AppTextStylesComfortable {")
        assert "    fontSize: 18,\n" in comfortable

    async def test_single_mode_has_no_suffix(self, source_of, now) -> None:
        document = {
            "textStyles": [
                {"name": "Body", "fontSize": 16, "fontName": {"family": "Inter"}}
            ]
        }
        generator = TextStyleGenerator(source_of(document), now=now)

        result = await generator.generate(["1:0"])

        assert "abstract class AppTextStyles {\n" in result.code

    async def test_generation_is_idempotent(
        self, source_of, now, text_styles_document
    ) -> None:
        source = source_of(text_styles_document)

        first = await TextStyleGenerator(source, now=now).generate()
        second = await TextStyleGenerator(source, now=now).generate()

        assert first.code == second.code

    async def test_null_font_style_uses_regular(self, source_of, now) -> None:
        # Given
        document = {
            "textStyles": [
                {
                    "name": "Body",
                    "fontSize": 16,
                    "fontName": {"family": "Inter", "style": None},
                }
            ]
        }
        generator = TextStyleGenerator(source_of(document), now=now)

        # When
        result = await generator.generate()

        # Then
        assert result.success
        assert "    fontWeight: FontWeight.w400,\n" in result.code
        assert "    fontStyle: FontStyle.normal,\n" in result.code

    async def test_default_mode_names_get_distinct_suffixes(self, source_of, now) -> None:
        # Given
        document = {
            "textStyles": [
                {
                    "name": "Body",
                    "fontSize": 16,
                    "fontName": {"family": "Inter", "style": "Regular"},
                    "boundVariables": {
                        "fontSize": {"type": "VARIABLE_ALIAS", "id": "V:fs"}
                    },
                }
            ],
            "variableCollections": [
                {
                    "id": "VC:1",
                    "name": "Density",
                    "modes": [
                        {"modeId": "1:0", "name": "Mode 1"},
                        {"modeId": "1:1", "name": "Mode 2"},
                    ],
                    "variableIds": ["V:fs"],
                }
            ],
            "variables": [
                {
                    "id": "V:fs",
                    "name": "Font/Body",
                    "resolvedType": "FLOAT",
                    "valuesByMode": {"1:0": 14, "1:1": 18},
                    "variableCollectionId": "VC:1",
                }
            ],
        }
        generator = TextStyleGenerator(source_of(document), now=now)

        # When
        result = await generator.generate(["1:0", "1:1"])

        # Then
        assert result.success
        assert "abstract class AppTextStylesMode0 {\n" in result.code
        assert "abstract class AppTextStylesMode1 {\n" in result.code
