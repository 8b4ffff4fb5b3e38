"""
Base class for the Dart code generators.

Every generator follows the same recipe:
- fetch entities from the document source
- return the "No defined ..." message when there is nothing to generate
- emit the file header, then one declaration per entity (or entity x mode)
- log and report failure on any error, discarding partial output
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from flart.figma2dart.common.document.document_source import DocumentSourceABC

from .formatting import disambiguate_mode_labels, file_header, format_class_name
from .resolver import ModeOption, VariableResolver
from .result import GenerationResult


class DartCodeGenerator(ABC):
    name: str = ""
    empty_message: str = ""

    def __init__(
        self,
        source: DocumentSourceABC,
        now: Optional[Callable[[], datetime]] = None,
        banner_name: str = "Flart",
    ):
        self.source = source
        self.resolver = VariableResolver(source)
        self.now = now or datetime.now
        self.banner_name = banner_name

    @abstractmethod
    async def fetch(self) -> List[Any]:
        pass

    @abstractmethod
    async def render(self, entities: List[Any], mode_ids: List[str]) -> str:
        pass

    @abstractmethod
    async def available_modes(self) -> List[ModeOption]:
        """선택 가능한 모드 목록. 2개 이상이면 호출자가 모드 선택을 요청한다."""
        pass

    async def generate(
        self, mode_ids: Optional[Sequence[str]] = None
    ) -> GenerationResult:
        try:
            entities = await self.fetch()
            if not entities:
                return GenerationResult.empty(self.empty_message)

            code = file_header(self.now(), self.banner_name)
            code += await self.render(entities, list(mode_ids or []))
            logging.info(f"{self.name} 생성 완료: {len(entities)}개")
            return GenerationResult.of_code(code)
        except Exception as e:
            logging.exception(f"{self.name} 생성 중 오류: {e}")
            return GenerationResult.failure(str(e))

    async def mode_suffixes(self, mode_ids: List[str]) -> Dict[str, str]:
        """
        모드 ID -> 클래스 이름 접미사.
        모드가 하나 이하이면 접미사를 붙이지 않는다.
        """
        if len(mode_ids) <= 1:
            return {mode_id: "" for mode_id in mode_ids}

        names: Dict[str, str] = {}
        for collection in await self.source.get_local_variable_collections():
            for mode in collection.modes:
                names.setdefault(mode.mode_id, mode.name)

        suffixes = disambiguate_mode_labels(
            [format_class_name(names.get(mode_id, "")) for mode_id in mode_ids], "Mode"
        )
        return dict(zip(mode_ids, suffixes))


class StyleCodeGenerator(DartCodeGenerator):
    """스타일 생성기 공통: 모드가 없으면 클래스 하나, 있으면 모드마다 클래스 하나"""

    @abstractmethod
    async def render_class(
        self, entities: List[Any], mode_id: Optional[str], suffix: str
    ) -> str:
        pass

    async def render(self, entities: List[Any], mode_ids: List[str]) -> str:
        if not mode_ids:
            return await self.render_class(entities, None, "")

        suffixes = await self.mode_suffixes(mode_ids)
        blocks = [
            await self.render_class(entities, mode_id, suffixes[mode_id])
            for mode_id in mode_ids
        ]
        return "\n".join(blocks)
