import json

import httpx
import pytest
from fastapi.testclient import TestClient

from newsletter_titles.api import get_transport
from newsletter_titles.config import Settings, get_settings
from newsletter_titles.main import app


def completion(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}],
    }


class FakeOpenAI:
    """Stands in for the chat-completion endpoint; records every request it gets."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = completion("1. Foo\n2. Bar\n\n3.Baz")
        self.exc = None

    def reply(self, status_code: int, body) -> None:
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


def make_settings(**overrides) -> Settings:
    """Settings with explicit values, whatever the environment says."""
    settings = Settings()
    settings.OPENAI_API_KEY = "sk-test"
    settings.OPENAI_MODEL = "gpt-4o-mini"
    settings.OPENAI_BASE_URL = "https://llm.test/v1"
    for key, value in overrides.items():
        setattr(settings, key, value)
    return settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def fake_openai():
    return FakeOpenAI()


@pytest.fixture
def api(settings, fake_openai):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_transport] = lambda: httpx.MockTransport(fake_openai.handler)
    yield TestClient(app)
    app.dependency_overrides.clear()
