"""Shared pytest fixtures for Ollama Performance Chat tests."""

import pytest
from unittest.mock import Mock, AsyncMock

from ollama_perf_chat.config.settings import ChatSettings
from ollama_perf_chat.providers.base import ProviderError
from tests.helpers.fakes import CapturedOutput


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end tests across components")


@pytest.fixture
def settings():
    """Settings with a fixed model list."""
    return ChatSettings(models=["llama3.2:latest", "phi3:latest"])


@pytest.fixture
def output():
    """Captured console output."""
    return CapturedOutput()


@pytest.fixture
def mock_openai_client():
    """Mock AsyncOpenAI client answering chat completions."""
    client = AsyncMock()

    completion = Mock()
    completion.choices = [Mock(message=Mock(content="Test response"), finish_reason="stop")]
    usage_mock = Mock()
    usage_mock.model_dump.return_value = {
        "prompt_tokens": 10,
        "completion_tokens": 5,
        "total_tokens": 15
    }
    completion.usage = usage_mock

    client.chat.completions.create = AsyncMock(return_value=completion)
    return client


@pytest.fixture
def connection_refused():
    """ProviderError as produced for an unreachable server."""
    return ProviderError("Cannot reach Ollama server: Connection error.", provider="ollama")
