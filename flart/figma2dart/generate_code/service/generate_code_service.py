import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union

from flart.core.config import get_setting
from flart.core.exception.error_codes import ErrorCode
from flart.core.exception.exceptions import ServiceException
from flart.figma2dart.common.dart.base_generator import DartCodeGenerator
from flart.figma2dart.common.dart.color_generator import ColorGenerator
from flart.figma2dart.common.dart.effect_style_generator import EffectStyleGenerator
from flart.figma2dart.common.dart.result import GenerationResult, GenerationStatus
from flart.figma2dart.common.dart.text_style_generator import TextStyleGenerator
from flart.figma2dart.common.dart.variable_generator import VariableGenerator
from flart.figma2dart.common.document.document_source import (
    DocumentSourceABC,
    InMemoryDocumentSource,
)
from flart.figma2dart.common.document.figma_api_client import FigmaApiClient
from flart.figma2dart.common.document.figma_url_parser import parse_figma_file_key
from flart.figma2dart.common.document.rest_document_source import (
    FigmaRestDocumentSource,
)
from flart.figma2dart.common.document.snapshot_parser import parse_document_snapshot
from flart.figma2dart.generate_code.controller.dto.generate_code_dto import (
    DartCodeResponseDTO,
    GenerateRequestDTO,
    GenerateWithModeRequestDTO,
    ModeOptionDTO,
    SelectModeResponseDTO,
)
from flart.figma2dart.generate_code.service.generate_code_service_abc import (
    GenerateCodeServiceABC,
)

settings = get_setting()

GENERATORS = ("textstyles", "colors", "effects", "variables")


def to_response(result: GenerationResult) -> DartCodeResponseDTO:
    return DartCodeResponseDTO(
        code=result.code,
        status=result.status.value,
        error=result.error,
    )


class GenerateCodeService(GenerateCodeServiceABC):
    def __init__(
        self,
        now: Optional[Callable[[], datetime]] = None,
        banner_name: Optional[str] = None,
    ):
        self.now = now
        self.banner_name = banner_name or settings.DART_BANNER_NAME

    def create_document_source(
        self,
        document: Optional[Dict[str, Any]] = None,
        figma_url: Optional[str] = None,
        token: Optional[str] = None,
    ) -> DocumentSourceABC:
        """스냅샷이 있으면 그것을, 없으면 Figma REST API 를 문서 소스로 사용"""
        if document is not None:
            try:
                return InMemoryDocumentSource(parse_document_snapshot(document))
            except ValueError as e:
                raise ServiceException(ErrorCode.INVALID_DOCUMENT, str(e)) from e

        if not figma_url:
            raise ServiceException(ErrorCode.DOCUMENT_REQUIRED)

        file_key = parse_figma_file_key(figma_url)
        if not file_key:
            raise ServiceException(ErrorCode.INVALID_FIGMA_URL)

        try:
            api_client = FigmaApiClient(token)
        except ValueError as e:
            raise ServiceException(ErrorCode.FIGMA_TOKEN_REQUIRED) from e

        logging.info(f"Figma 파일에서 토큰 조회: {file_key}")
        return FigmaRestDocumentSource(api_client, file_key)

    def create_generator(
        self,
        generator: str,
        source: DocumentSourceABC,
        use_theme_extensions: bool = False,
        include_font_name: bool = False,
    ) -> DartCodeGenerator:
        common = {"now": self.now, "banner_name": self.banner_name}
        if generator == "textstyles":
            return TextStyleGenerator(
                source,
                use_theme_extensions=use_theme_extensions,
                include_font_name=include_font_name,
                **common,
            )
        if generator == "colors":
            return ColorGenerator(source, **common)
        if generator == "effects":
            return EffectStyleGenerator(source, **common)
        if generator == "variables":
            return VariableGenerator(
                source, use_theme_extensions=use_theme_extensions, **common
            )
        raise ServiceException(ErrorCode.UNKNOWN_GENERATOR, generator)

    def _build(
        self,
        generator: str,
        request: Union[GenerateRequestDTO, GenerateWithModeRequestDTO],
    ) -> DartCodeGenerator:
        if generator not in GENERATORS:
            raise ServiceException(ErrorCode.UNKNOWN_GENERATOR, generator)
        source = self.create_document_source(
            document=request.document,
            figma_url=request.figma_url,
            token=request.token,
        )
        return self.create_generator(
            generator,
            source,
            use_theme_extensions=request.use_theme_extensions,
            include_font_name=request.include_font_name,
        )

    async def generate(
        self,
        generator: str,
        request: GenerateRequestDTO,
    ) -> Union[DartCodeResponseDTO, SelectModeResponseDTO]:
        code_generator = self._build(generator, request)

        try:
            modes = await code_generator.available_modes()
        except Exception as e:
            logging.exception(f"{generator} 모드 조회 중 오류: {e}")
            return to_response(GenerationResult.failure(str(e)))

        if len(modes) > 1:
            logging.info(f"{generator}: 모드 {len(modes)}개, 모드 선택 요청")
            return SelectModeResponseDTO(
                generator=generator,
                modes=[
                    ModeOptionDTO(
                        mode_id=m.mode_id, name=m.name, collection=m.collection
                    )
                    for m in modes
                ],
                use_theme_extensions=request.use_theme_extensions,
                include_font_name=request.include_font_name,
            )

        result = await code_generator.generate()
        return to_response(result)

    async def generate_with_mode(
        self,
        request: GenerateWithModeRequestDTO,
    ) -> DartCodeResponseDTO:
        if not request.mode_ids:
            raise ServiceException(ErrorCode.MODE_IDS_REQUIRED)

        code_generator = self._build(request.generator, request)
        result = await code_generator.generate(request.mode_ids)
        if result.status is GenerationStatus.FAILURE:
            logging.error(f"{request.generator} 생성 실패: {result.error}")
        return to_response(result)

    async def list_modes(
        self,
        generator: str,
        request: GenerateRequestDTO,
    ) -> List[ModeOptionDTO]:
        code_generator = self._build(generator, request)
        modes = await code_generator.available_modes()
        return [
            ModeOptionDTO(mode_id=m.mode_id, name=m.name, collection=m.collection)
            for m in modes
        ]


def get_generate_code_service() -> GenerateCodeService:
    return GenerateCodeService()
