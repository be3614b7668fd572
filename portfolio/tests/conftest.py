"""Shared fixtures: knowledge context and scripted provider adapters."""

import threading

import pytest

from portfolio.common.config import ProviderConfig
from portfolio.common.content import default_content
from portfolio.common.llm_client import ProviderAdapter


class StubProvider(ProviderAdapter):
    """Adapter with scripted behaviour instead of a network SDK."""

    def __init__(self, name="stub", reply="stub answer", error=None, hang=None,
                 api_key="test-key", timeout=1.0):
        self.name = name
        self.reply = reply
        self.error = error
        self.hang = hang
        self.calls = []
        super().__init__(ProviderConfig(name=name, api_key=api_key, model="stub-model", timeout=timeout))

    def _create_client(self):
        return object()

    def _complete(self, prompt):
        self.calls.append(prompt)
        if self.hang is not None:
            self.hang.wait(10)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def content():
    return default_content()


@pytest.fixture
def knowledge(content):
    return content.knowledge


@pytest.fixture
def make_provider():
    return StubProvider


@pytest.fixture
def hang_event():
    """Event a hanging provider waits on; released at teardown."""
    event = threading.Event()
    yield event
    event.set()
