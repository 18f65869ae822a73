"""Unit tests for provider error mapping."""

import httpx
import pytest

from ollama_perf_chat.providers.base import ProviderError
from ollama_perf_chat.providers.errors import ErrorCategory, ErrorMapper
from tests.helpers.mock_exceptions import (
    MockHTTPError,
    make_connection_error,
    make_status_error,
    make_timeout_error,
)


class TestCategorize:

    @pytest.mark.parametrize("error,expected", [
        (make_connection_error(), ErrorCategory.CONNECTION),
        (make_timeout_error(), ErrorCategory.TIMEOUT),
        (make_status_error(404), ErrorCategory.NOT_FOUND),
        (make_status_error(500), ErrorCategory.SERVER_ERROR),
        (make_status_error(400), ErrorCategory.CLIENT_ERROR),
        (MockHTTPError("bad gateway", 502), ErrorCategory.SERVER_ERROR),
        (httpx.ConnectError("refused"), ErrorCategory.CONNECTION),
        (httpx.ReadTimeout("slow"), ErrorCategory.TIMEOUT),
        (RuntimeError("read timed out"), ErrorCategory.TIMEOUT),
        (RuntimeError("network unreachable"), ErrorCategory.CONNECTION),
        (ValueError("something odd"), ErrorCategory.UNKNOWN),
    ])
    def test_categories(self, error, expected):
        assert ErrorMapper.categorize(error) == expected


class TestMapOllamaError:

    def test_connection(self):
        original = make_connection_error()
        error = ErrorMapper.map_ollama_error(original, "phi3:latest")

        assert isinstance(error, ProviderError)
        assert error.message == "Cannot reach Ollama server: Connection error."
        assert error.error_category == ErrorCategory.CONNECTION
        assert error.original_error is original

    def test_not_found_mentions_pull(self):
        error = ErrorMapper.map_ollama_error(make_status_error(404, "model 'x' not found"), "x")

        assert error.status_code == 404
        assert "ollama pull x" in error.message

    def test_timeout(self):
        error = ErrorMapper.map_ollama_error(make_timeout_error())

        assert error.error_category == ErrorCategory.TIMEOUT
        assert error.message.startswith("Ollama request timed out")

    def test_generic(self):
        error = ErrorMapper.map_ollama_error(ValueError("unexpected payload"))

        assert error.message == "Ollama API error: unexpected payload"
        assert error.error_category == ErrorCategory.UNKNOWN

    def test_empty_message_uses_type_name(self):
        error = ErrorMapper.map_ollama_error(KeyError())

        assert error.message == "Ollama API error: KeyError"

    def test_provider_error_passes_through(self):
        original = ProviderError("already mapped", provider="ollama")

        assert ErrorMapper.map_ollama_error(original) is original
