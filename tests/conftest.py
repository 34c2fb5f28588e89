# File: tests/conftest.py
import asyncio
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.main import create_app


def make_response(text, sources=(), annotations=()):
    output = []
    if sources:
        output.append(SimpleNamespace(
            type="web_search_call",
            action=SimpleNamespace(type="search", sources=list(sources)),
        ))
    output.append(SimpleNamespace(
        type="message",
        content=[SimpleNamespace(type="output_text", text=text, annotations=list(annotations))],
    ))
    return SimpleNamespace(output_text=text, output=output)


class FakeResponses:
    """Stands in for client.responses; echoes the input back as the answer."""

    def __init__(self, delay=0.0, error=None):
        self.delay = delay
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return make_response(f"Answer for: {kwargs['input']}")


class FakeResearchClient:
    def __init__(self, **kwargs):
        self.responses = FakeResponses(**kwargs)


@pytest.fixture
def make_fake_client():
    return FakeResearchClient


@pytest.fixture
def fake_client():
    return FakeResearchClient()


@pytest.fixture
def app(fake_client):
    return create_app(research_client=fake_client, settings=Settings())


@pytest.fixture
def client(app):
    return TestClient(app)
