"""
Shared fixtures for the lesson API.
The completion service is replaced by a stub; zero network calls.
"""
import asyncio

import pytest
from fastapi.testclient import TestClient

from main import app
from services.claude import get_completion_client


class StubCompletionClient:
    """Stands in for CompletionClient; `responder(system, user)` returns text or raises."""

    def __init__(self, responder=None, delays=None):
        self.responder = responder or (lambda system, user: "")
        self.delays = delays or {}
        self.calls = []
        self.finished = []

    async def complete(self, system_prompt, user_message):
        index = len(self.calls)
        self.calls.append((system_prompt, user_message))
        await asyncio.sleep(self.delays.get(index, 0))
        result = self.responder(system_prompt, user_message)
        self.finished.append(index)
        return result


@pytest.fixture
def stub():
    return StubCompletionClient()


@pytest.fixture
def client(stub):
    app.dependency_overrides[get_completion_client] = lambda: stub
    yield TestClient(app)
    app.dependency_overrides.clear()
