"""
Flart CLI
Figma 디자인 토큰(텍스트/색상/효과 스타일, 변수)을 Flutter Dart 코드로 변환
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click
from colorama import Fore, Style, init

from flart.core.exception.exceptions import ServiceException
from flart.figma2dart.generate_code.controller.dto.generate_code_dto import (
    GenerateRequestDTO,
    GenerateWithModeRequestDTO,
    SelectModeResponseDTO,
)
from flart.figma2dart.generate_code.service.generate_code_service import (
    GENERATORS,
    GenerateCodeService,
)

# 컬러 출력 초기화
init()


def _load_document(document: Optional[str]) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    with open(document, "rt", encoding="utf-8") as f:
        return json.load(f)


def _write_code(code: str, output: Optional[str]) -> None:
    if output is None:
        click.echo(code, nl=False)
        return
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(code, encoding="utf-8")
    logging.info(f"{Fore.GREEN}✅ 저장 완료: {path}{Style.RESET_ALL}")


def source_options(func):
    func = click.option(
        "--token", "-t", help="Figma API 토큰 (또는 FIGMA_API_TOKEN 환경변수 설정)"
    )(func)
    func = click.option("--figma-url", "-u", help="Figma 파일 URL")(func)
    func = click.option(
        "--document",
        "-d",
        type=click.Path(exists=True, dir_okay=False),
        help="문서 스냅샷 JSON 파일 경로",
    )(func)
    return func


def run_generator(
    generator: str,
    document: Optional[str],
    figma_url: Optional[str],
    token: Optional[str],
    theme_extensions: bool,
    include_font_name: bool,
    modes: Tuple[str, ...],
    output: Optional[str],
) -> None:
    service = GenerateCodeService()
    try:
        snapshot = _load_document(document)
        if modes:
            response = asyncio.run(
                service.generate_with_mode(
                    GenerateWithModeRequestDTO(
                        generator=generator,
                        mode_ids=list(modes),
                        document=snapshot,
                        figma_url=figma_url,
                        token=token,
                        use_theme_extensions=theme_extensions,
                        include_font_name=include_font_name,
                    )
                )
            )
        else:
            response = asyncio.run(
                service.generate(
                    generator,
                    GenerateRequestDTO(
                        document=snapshot,
                        figma_url=figma_url,
                        token=token,
                        use_theme_extensions=theme_extensions,
                        include_font_name=include_font_name,
                    ),
                )
            )
    except ServiceException as e:
        logging.error(f"{Fore.RED}❌ {e.message}{Style.RESET_ALL}")
        sys.exit(1)
    except (OSError, json.JSONDecodeError) as e:
        logging.error(f"{Fore.RED}❌ 스냅샷 파일을 읽을 수 없습니다: {e}{Style.RESET_ALL}")
        sys.exit(1)

    if isinstance(response, SelectModeResponseDTO):
        logging.warning(
            f"{Fore.YELLOW}⚠️  모드가 {len(response.modes)}개 있습니다. "
            f"--mode 옵션으로 선택하세요{Style.RESET_ALL}"
        )
        for mode in response.modes:
            click.echo(f"{mode.mode_id}\t{mode.name}\t{mode.collection}", err=True)
        sys.exit(2)

    if response.status == "failure":
        logging.error(f"{Fore.RED}❌ 생성 실패: {response.error}{Style.RESET_ALL}")
        sys.exit(1)

    if response.status == "empty":
        logging.warning(f"{Fore.YELLOW}ℹ️  {response.code}{Style.RESET_ALL}")

    _write_code(response.code, output)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="디버그 로그 출력")
def cli(verbose: bool) -> None:
    """Flart - Figma 디자인 토큰을 Flutter Dart 코드로 변환"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


def _generator_command(generator: str, help_text: str, theme: bool, font_name: bool):
    @source_options
    @click.option(
        "--mode",
        "-m",
        "modes",
        multiple=True,
        help="생성할 모드 ID (여러 번 지정 가능)",
    )
    @click.option("--output", "-o", help="출력 파일 경로 (미지정 시 표준 출력)")
    def command(
        document: Optional[str],
        figma_url: Optional[str],
        token: Optional[str],
        modes: Tuple[str, ...],
        output: Optional[str],
        theme_extensions: bool = False,
        include_font_name: bool = False,
    ) -> None:
        run_generator(
            generator,
            document,
            figma_url,
            token,
            theme_extensions,
            include_font_name,
            modes,
            output,
        )

    command.__doc__ = help_text
    if font_name:
        command = click.option(
            "--include-font-name",
            is_flag=True,
            default=False,
            help="fontFamily 포함",
        )(command)
    if theme:
        command = click.option(
            "--theme-extensions",
            is_flag=True,
            default=False,
            help="ThemeExtension 클래스로 생성",
        )(command)
    return cli.command(name=generator)(command)


textstyles = _generator_command(
    "textstyles", "텍스트 스타일 -> TextStyle", theme=True, font_name=True
)
colors = _generator_command(
    "colors", "페인트 스타일 -> Color / LinearGradient", theme=False, font_name=False
)
effects = _generator_command(
    "effects", "효과 스타일 -> BoxShadow / blur radius", theme=False, font_name=False
)
variables = _generator_command(
    "variables", "변수 컬렉션 -> 모드별 상수 클래스", theme=True, font_name=False
)


@cli.command()
@click.argument("generator", type=click.Choice(GENERATORS))
@source_options
def modes(
    generator: str,
    document: Optional[str],
    figma_url: Optional[str],
    token: Optional[str],
) -> None:
    """generator 가 선택할 수 있는 모드 목록"""
    service = GenerateCodeService()
    try:
        options = asyncio.run(
            service.list_modes(
                generator,
                GenerateRequestDTO(
                    document=_load_document(document),
                    figma_url=figma_url,
                    token=token,
                ),
            )
        )
    except ServiceException as e:
        logging.error(f"{Fore.RED}❌ {e.message}{Style.RESET_ALL}")
        sys.exit(1)
    except Exception as e:
        logging.error(f"{Fore.RED}❌ 모드 조회 실패: {e}{Style.RESET_ALL}")
        sys.exit(1)

    if not options:
        logging.warning(f"{Fore.YELLOW}ℹ️  선택할 모드가 없습니다{Style.RESET_ALL}")
        return
    for option in options:
        click.echo(f"{option.mode_id}\t{option.name}\t{option.collection}")


if __name__ == "__main__":
    cli()
