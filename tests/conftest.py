import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app, get_enhancer, get_store
from config.settings import Settings
from enhancer import PromptEnhancer
from storage import InMemoryPromptStore


def completion_body(content):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


class FakeGroq:
    """Records outgoing requests and answers with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.content = json.dumps({"subject": "a cat"})
        self.body = None

    def reply(self, content=None, status_code=200, body=None):
        self.content = content
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=completion_body(self.content))

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)

    def sent_json(self, index=-1):
        return json.loads(self.requests[index].content)


@pytest.fixture
def settings():
    s = Settings()
    s.groq_api_key = "test-key"
    s.groq_api_url = "https://groq.test/openai/v1/chat/completions"
    s.groq_model = "llama-3.3-70b-versatile"
    s.enhancer_variant = "structured"
    s.temperature = None
    s.max_tokens = 2048
    s.timeout_seconds = 5.0
    s.prompt_store = "memory"
    return s


@pytest.fixture
def fake_groq():
    return FakeGroq()


@pytest.fixture
def store():
    return InMemoryPromptStore()


@pytest.fixture
def client(settings, fake_groq, store):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_enhancer] = lambda: PromptEnhancer(
        settings, transport=fake_groq.transport
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
