from __future__ import annotations

from typing import Optional


class EnhancementError(RuntimeError):
    """Base class for every failure while enhancing a prompt."""


class ConfigurationError(EnhancementError):
    """Missing credential or an unknown variant/store name."""


class UpstreamError(EnhancementError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyCompletionError(EnhancementError):
    pass


class CompletionParseError(EnhancementError):
    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw
