from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from config.settings import Settings, get_settings
from enhancer.client import call_chat_completion
from enhancer.core.prompt import TEMPLATE_OUTPUT, PromptVariant, get_variant
from enhancer.parsing import parse_json_completion, parse_template_completion


logger = logging.getLogger("promptcraft.enhancer")

_ROLES = {"system": "system", "human": "user", "ai": "assistant"}


def build_prompt(variant: PromptVariant) -> ChatPromptTemplate:
    return ChatPromptTemplate.from_messages(
        [
            ("system", variant.system_prompt),
            ("human", variant.user_template),
        ]
    )


def to_chat_messages(messages: List[BaseMessage]) -> List[Dict[str, str]]:
    """Convert langchain messages to the OpenAI ``{role, content}`` shape."""
    converted: List[Dict[str, str]] = []
    for message in messages:
        role = _ROLES.get(message.type, "user")
        converted.append({"role": role, "content": str(message.content)})
    return converted


class PromptEnhancer:
    """Turns a raw prompt into an enhanced prompt with one model call."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        variant: Optional[PromptVariant] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.variant = variant or get_variant(self.settings.enhancer_variant)
        self.transport = transport
        self._prompt = build_prompt(self.variant)

    @property
    def temperature(self) -> float:
        if self.settings.temperature is not None:
            return self.settings.temperature
        return self.variant.temperature

    def build_messages(self, raw_prompt: str) -> List[Dict[str, str]]:
        return to_chat_messages(self._prompt.format_messages(raw_prompt=raw_prompt))

    def parse(self, content: str) -> Any:
        if self.variant.output == TEMPLATE_OUTPUT:
            return parse_template_completion(content, self.variant.sections)
        return parse_json_completion(content)

    def enhance(self, raw_prompt: str) -> Any:
        logger.info(
            "Enhancing prompt: variant=%s model=%s raw_len=%s",
            self.variant.name,
            self.settings.groq_model,
            len(raw_prompt),
        )
        content = call_chat_completion(
            self.settings,
            self.build_messages(raw_prompt),
            temperature=self.temperature,
            transport=self.transport,
        )
        logger.info("Completion received: %s chars", len(content))
        return self.parse(content)
