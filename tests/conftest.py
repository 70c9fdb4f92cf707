"""Shared fixtures for the relay tests.

Providers are built with a zero pacing delay so the streams finish
immediately; the real pacing values are covered by the factory tests.
"""

import json

import pytest
from fastapi.testclient import TestClient

from backend.src.core.config import Settings
from backend.src.main import create_app
from backend.src.services.llm.providers import ReplyProvider, SimulatedReplyProvider


class FakeProvider(ReplyProvider):
    """Returns a fixed text (or raises) and records every prompt it sees."""

    name = "fake"

    def __init__(self, text="", error=None, chunk_size=120):
        super().__init__(chunk_size, 0)
        self.text = text
        self.error = error
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def parse_sse(body: str):
    """Split an SSE body into (event, data) tuples; event is None for plain data frames."""
    frames = []
    for raw in body.split("\n\n"):
        if not raw.strip():
            continue
        event = None
        data = None
        for line in raw.split("\n"):
            if line.startswith("event: "):
                event = line[len("event: "):]
            elif line.startswith("data: "):
                data = json.loads(line[len("data: "):])
        frames.append((event, data))
    return frames


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, GEMINI_API_KEY=None)


@pytest.fixture
def simulated_provider():
    return SimulatedReplyProvider(chunk_delay=0)


@pytest.fixture
def make_client(test_settings):
    def _make(provider):
        return TestClient(create_app(settings=test_settings, provider=provider))
    return _make
