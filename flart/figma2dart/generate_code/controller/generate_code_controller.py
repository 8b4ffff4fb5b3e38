from typing import Union

from fastapi import APIRouter, Depends

from flart.figma2dart.generate_code.controller.dto.generate_code_dto import (
    DartCodeResponseDTO,
    GenerateRequestDTO,
    GenerateWithModeRequestDTO,
    SelectModeResponseDTO,
)
from flart.figma2dart.generate_code.service.generate_code_service import (
    GenerateCodeService,
    get_generate_code_service,
)

router = APIRouter(prefix="/generate", tags=["generate"])

GenerateResponse = Union[DartCodeResponseDTO, SelectModeResponseDTO]


@router.post("/textstyles", response_model=GenerateResponse)
async def generate_textstyles(
    body: GenerateRequestDTO,
    generate_code_service: GenerateCodeService = Depends(get_generate_code_service),
) -> GenerateResponse:
    """텍스트 스타일 -> TextStyle 상수 / ThemeExtension"""
    return await generate_code_service.generate("textstyles", body)


@router.post("/colors", response_model=GenerateResponse)
async def generate_colors(
    body: GenerateRequestDTO,
    generate_code_service: GenerateCodeService = Depends(get_generate_code_service),
) -> GenerateResponse:
    return await generate_code_service.generate("colors", body)


@router.post("/effects", response_model=GenerateResponse)
async def generate_effects(
    body: GenerateRequestDTO,
    generate_code_service: GenerateCodeService = Depends(get_generate_code_service),
) -> GenerateResponse:
    return await generate_code_service.generate("effects", body)


@router.post("/variables", response_model=GenerateResponse)
async def generate_variables(
    body: GenerateRequestDTO,
    generate_code_service: GenerateCodeService = Depends(get_generate_code_service),
) -> GenerateResponse:
    return await generate_code_service.generate("variables", body)


@router.post("/with-mode", response_model=DartCodeResponseDTO)
async def generate_with_mode(
    body: GenerateWithModeRequestDTO,
    generate_code_service: GenerateCodeService = Depends(get_generate_code_service),
) -> DartCodeResponseDTO:
    """모드 선택 응답 이후, 선택한 mode_ids 로 다시 요청"""
    return await generate_code_service.generate_with_mode(body)
