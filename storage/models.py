from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PromptRecord(BaseModel):
    """A stored raw/enhanced prompt pair. Never updated once created."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(..., description="Opaque unique identifier")
    raw_prompt: str
    enhanced_prompt: Any
    created_at: datetime
