from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GenerationStatus(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    FAILURE = "failure"


@dataclass(frozen=True)
class GenerationResult:
    """
    Result from a generator execution.

    Attributes:
        status: success | empty | failure
        code: generated Dart source, the "No defined ..." message for empty
            input, or "" on failure
        error: failure cause, when status is failure
    """

    status: GenerationStatus
    code: str
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status is GenerationStatus.SUCCESS

    @classmethod
    def of_code(cls, code: str) -> "GenerationResult":
        return cls(status=GenerationStatus.SUCCESS, code=code)

    @classmethod
    def empty(cls, message: str) -> "GenerationResult":
        return cls(status=GenerationStatus.EMPTY, code=message)

    @classmethod
    def failure(cls, error: str) -> "GenerationResult":
        return cls(status=GenerationStatus.FAILURE, code="", error=error)
