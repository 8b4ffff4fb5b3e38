from typing import Optional

from flart.core.exception.error_codes import ErrorCode


class ServiceException(Exception):
    def __init__(
        self,
        error_code: ErrorCode,
        detail: Optional[str] = None,
    ):
        message = error_code.value if not detail else f"{error_code.value}: {detail}"
        super().__init__(message)
        self.error_code = error_code
        self.message = message
