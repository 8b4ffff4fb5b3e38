from abc import ABC, abstractmethod
from typing import List, Union

from flart.figma2dart.generate_code.controller.dto.generate_code_dto import (
    DartCodeResponseDTO,
    GenerateRequestDTO,
    GenerateWithModeRequestDTO,
    ModeOptionDTO,
    SelectModeResponseDTO,
)


class GenerateCodeServiceABC(ABC):
    @abstractmethod
    def __init__(self):
        pass

    @abstractmethod
    async def generate(
        self,
        generator: str,
        request: GenerateRequestDTO,
    ) -> Union[DartCodeResponseDTO, SelectModeResponseDTO]:
        """
        Dart 코드를 생성합니다.

        mode_ids 없이 요청했는데 토큰/변수에 모드가 2개 이상이면
        코드 대신 모드 선택 응답을 돌려줍니다.

        Args:
            generator: textstyles | colors | effects | variables
            request: 문서 소스와 생성 옵션

        Returns:
            dart-code 응답 또는 select-mode 응답
        """
        pass

    @abstractmethod
    async def generate_with_mode(
        self,
        request: GenerateWithModeRequestDTO,
    ) -> DartCodeResponseDTO:
        """
        선택된 모드로 Dart 코드를 생성합니다.
        """
        pass

    @abstractmethod
    async def list_modes(
        self,
        generator: str,
        request: GenerateRequestDTO,
    ) -> List[ModeOptionDTO]:
        pass
