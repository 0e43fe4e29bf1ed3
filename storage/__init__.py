from storage.models import PromptRecord
from storage.store import (
    InMemoryPromptStore,
    NullPromptStore,
    PromptStore,
    create_store,
)

__all__ = [
    "InMemoryPromptStore",
    "NullPromptStore",
    "PromptRecord",
    "PromptStore",
    "create_store",
]
