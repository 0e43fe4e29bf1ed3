from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple
from uuid import uuid4

from enhancer.errors import ConfigurationError
from storage.models import PromptRecord


DEFAULT_LIST_LIMIT = 10


def _new_record(raw_prompt: str, enhanced_prompt: Any) -> PromptRecord:
    return PromptRecord(
        id=str(uuid4()),
        raw_prompt=raw_prompt,
        enhanced_prompt=enhanced_prompt,
        created_at=datetime.now(timezone.utc),
    )


class PromptStore(ABC):
    @abstractmethod
    def create(self, raw_prompt: str, enhanced_prompt: Any) -> PromptRecord:
        ...

    @abstractmethod
    def list(self, limit: int = DEFAULT_LIST_LIMIT) -> List[PromptRecord]:
        ...


class InMemoryPromptStore(PromptStore):
    """Process-lifetime store. Insert-only; nothing is evicted."""

    def __init__(self) -> None:
        self._prompts: Dict[str, Tuple[int, PromptRecord]] = {}
        self._sequence = itertools.count()

    def create(self, raw_prompt: str, enhanced_prompt: Any) -> PromptRecord:
        record = _new_record(raw_prompt, enhanced_prompt)
        self._prompts[record.id] = (next(self._sequence), record)
        return record

    def list(self, limit: int = DEFAULT_LIST_LIMIT) -> List[PromptRecord]:
        if limit <= 0:
            return []
        entries = list(self._prompts.values())
        entries.sort(key=lambda entry: (entry[1].created_at, entry[0]), reverse=True)
        return [record for _, record in entries[:limit]]


class NullPromptStore(PromptStore):
    """Stateless variant: records are handed back but never kept."""

    def create(self, raw_prompt: str, enhanced_prompt: Any) -> PromptRecord:
        return _new_record(raw_prompt, enhanced_prompt)

    def list(self, limit: int = DEFAULT_LIST_LIMIT) -> List[PromptRecord]:
        return []


def create_store(kind: str) -> PromptStore:
    normalized = (kind or "").strip().lower()
    if normalized == "memory":
        return InMemoryPromptStore()
    if normalized in {"none", "null"}:
        return NullPromptStore()
    raise ConfigurationError(f"Unknown prompt store '{kind}'. Expected 'memory' or 'none'")
