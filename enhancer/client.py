from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from config.settings import Settings
from enhancer.errors import ConfigurationError, EmptyCompletionError, UpstreamError


def _first_choice_content(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None


def call_chat_completion(
    settings: Settings,
    messages: List[Dict[str, str]],
    temperature: float,
    transport: Optional[httpx.BaseTransport] = None,
) -> str:
    """POST one chat-completion request and return the first choice's text."""
    if not settings.groq_api_key:
        raise ConfigurationError("GROQ_API_KEY environment variable is not set")

    payload = {
        "model": settings.groq_model,
        "messages": messages,
        "temperature": temperature,
        "max_tokens": settings.max_tokens,
    }
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {settings.groq_api_key}",
    }

    try:
        with httpx.Client(timeout=settings.timeout_seconds, transport=transport) as client:
            response = client.post(settings.groq_api_url, json=payload, headers=headers)
            if response.is_error:
                raise UpstreamError(
                    f"Groq API error: {response.status_code} - {response.text}",
                    status_code=response.status_code,
                )
            data = response.json()
    except httpx.HTTPError as exc:
        raise UpstreamError(f"Groq API call failed: {exc}") from exc
    except ValueError as exc:
        # body was not JSON
        raise UpstreamError(f"Groq API returned an invalid response: {exc}") from exc

    content = _first_choice_content(data)
    if not content:
        raise EmptyCompletionError("No content received from Groq API")
    return content
