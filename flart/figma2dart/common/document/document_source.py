from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .models import (
    DocumentSnapshot,
    EffectStyle,
    PaintStyle,
    TextStyle,
    Variable,
    VariableCollection,
)


class DocumentSourceABC(ABC):
    """생성기가 읽는 읽기 전용 문서 접근 인터페이스"""

    @abstractmethod
    async def get_local_text_styles(self) -> List[TextStyle]:
        pass

    @abstractmethod
    async def get_local_paint_styles(self) -> List[PaintStyle]:
        pass

    @abstractmethod
    async def get_local_effect_styles(self) -> List[EffectStyle]:
        pass

    @abstractmethod
    async def get_local_variable_collections(self) -> List[VariableCollection]:
        pass

    @abstractmethod
    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        pass

    @abstractmethod
    async def get_variable_collection_by_id(
        self, collection_id: str
    ) -> Optional[VariableCollection]:
        pass


class InMemoryDocumentSource(DocumentSourceABC):
    """이미 읽어 둔 DocumentSnapshot 을 그대로 제공"""

    def __init__(self, snapshot: DocumentSnapshot):
        self.snapshot = snapshot
        self._variables: Dict[str, Variable] = {v.id: v for v in snapshot.variables}
        self._collections: Dict[str, VariableCollection] = {
            c.id: c for c in snapshot.variable_collections
        }

    async def get_local_text_styles(self) -> List[TextStyle]:
        return list(self.snapshot.text_styles)

    async def get_local_paint_styles(self) -> List[PaintStyle]:
        return list(self.snapshot.paint_styles)

    async def get_local_effect_styles(self) -> List[EffectStyle]:
        return list(self.snapshot.effect_styles)

    async def get_local_variable_collections(self) -> List[VariableCollection]:
        return list(self.snapshot.variable_collections)

    async def get_variable_by_id(self, variable_id: str) -> Optional[Variable]:
        return self._variables.get(variable_id)

    async def get_variable_collection_by_id(
        self, collection_id: str
    ) -> Optional[VariableCollection]:
        return self._collections.get(collection_id)
