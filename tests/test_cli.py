import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from flart.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_document(tmp_path: Path, data) -> str:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestCli:
    def test_colors_to_stdout(self, runner: CliRunner, tmp_path: Path, colors_document) -> None:
        # Given
        document = write_document(tmp_path, colors_document)

        # When
        result = runner.invoke(cli, ["colors", "--document", document])

        # Then
        assert result.exit_code == 0
        assert "static const Color primary500 = Color(0xffff0000);" in result.output

    def test_textstyles_to_file(
        self, runner: CliRunner, tmp_path: Path, text_styles_document
    ) -> None:
        # Given
        document = write_document(tmp_path, text_styles_document)
        output = tmp_path / "lib" / "text_styles.dart"

        # When
        result = runner.invoke(
            cli,
            [
                "textstyles",
                "-d",
                document,
                "--theme-extensions",
                "--include-font-name",
                "-o",
                str(output),
            ],
        )

        # Then
        assert result.exit_code == 0
        code = output.read_text(encoding="utf-8")
        assert "class AppTextTheme extends ThemeExtension<AppTextTheme>" in code
        assert "fontFamily: 'Inter'," in code

    def test_variables_need_mode_selection(
        self, runner: CliRunner, tmp_path: Path, radius_document
    ) -> None:
        document = write_document(tmp_path, radius_document)

        result = runner.invoke(cli, ["variables", "-d", document])

        assert result.exit_code == 2
        assert "1:0\tLight\tRadius" in result.output

    def test_variables_with_modes(
        self, runner: CliRunner, tmp_path: Path, radius_document
    ) -> None:
        document = write_document(tmp_path, radius_document)

        result = runner.invoke(
            cli,
            ["variables", "-d", document, "--theme-extensions", "-m", "1:0", "-m", "1:1"],
        )

        assert result.exit_code == 0
        assert "static IAppRadius get lightRadius" in result.output
        assert "static IAppRadius get darkRadius" in result.output

    def test_modes(self, runner: CliRunner, tmp_path: Path, themed_colors_document) -> None:
        document = write_document(tmp_path, themed_colors_document)

        result = runner.invoke(cli, ["modes", "colors", "-d", document])

        assert result.exit_code == 0
        assert "1:0\tLight\tTheme" in result.output
        assert "1:1\tDark\tTheme" in result.output

    def test_missing_source_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["effects"])

        assert result.exit_code == 1

    def test_theme_extensions_option_not_available_for_colors(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["colors", "--theme-extensions"])

        assert result.exit_code == 2
