"""Unit tests for the Ollama provider."""

import pytest
from unittest.mock import Mock, AsyncMock, patch

from ollama_perf_chat.config.settings import ChatSettings
from ollama_perf_chat.providers.base import ProviderError
from ollama_perf_chat.providers.errors import ErrorCategory
from ollama_perf_chat.providers.ollama import OllamaProvider
from tests.helpers.mock_exceptions import make_connection_error, make_status_error


class TestOllamaProvider:
    """Test Ollama provider."""

    @pytest.fixture
    def provider(self, mock_openai_client):
        return OllamaProvider(model="llama3.2:latest", client=mock_openai_client)

    @pytest.mark.asyncio
    async def test_complete(self, provider, mock_openai_client):
        result = await provider.complete("Test prompt")

        assert result.succeeded is True
        assert result.text == "Test response"

        call_args = mock_openai_client.chat.completions.create.call_args
        assert call_args.kwargs["model"] == "llama3.2:latest"
        assert call_args.kwargs["messages"] == [{"role": "user", "content": "Test prompt"}]
        assert "temperature" not in call_args.kwargs

    @pytest.mark.asyncio
    async def test_complete_connection_error(self, provider, mock_openai_client):
        mock_openai_client.chat.completions.create.side_effect = make_connection_error()

        result = await provider.complete("Test prompt")

        assert result.succeeded is False
        assert result.error.startswith("Error: Cannot reach Ollama server")

    @pytest.mark.asyncio
    async def test_complete_unknown_model(self, provider, mock_openai_client):
        mock_openai_client.chat.completions.create.side_effect = make_status_error(404, "model not found")

        result = await provider.complete("Test prompt")

        assert result.succeeded is False
        assert "ollama pull llama3.2:latest" in result.error

    @pytest.mark.asyncio
    async def test_complete_no_choices(self, provider, mock_openai_client):
        mock_openai_client.chat.completions.create.return_value = Mock(choices=[], usage=None)

        result = await provider.complete("Test prompt")

        assert result.succeeded is False
        assert "no choices" in result.error

    @pytest.mark.asyncio
    async def test_complete_null_content(self, provider, mock_openai_client):
        completion = Mock(usage=None)
        completion.choices = [Mock(message=Mock(content=None))]
        mock_openai_client.chat.completions.create.return_value = completion

        result = await provider.complete("Test prompt")

        assert result.succeeded is True
        assert result.text == ""

    @pytest.mark.asyncio
    async def test_ping(self, provider, mock_openai_client):
        await provider.ping()

        call_args = mock_openai_client.chat.completions.create.call_args
        assert call_args.kwargs["messages"][0]["content"] == "Say 'Ready!'"

    @pytest.mark.asyncio
    async def test_ping_raises_provider_error(self, provider, mock_openai_client):
        mock_openai_client.chat.completions.create.side_effect = make_connection_error()

        with pytest.raises(ProviderError) as exc_info:
            await provider.ping()

        assert exc_info.value.error_category == ErrorCategory.CONNECTION
        assert exc_info.value.provider == "ollama"

    @pytest.mark.asyncio
    async def test_close(self, provider, mock_openai_client):
        await provider.close()

        mock_openai_client.close.assert_awaited_once()
        assert provider._client is None

    def test_lazy_client_uses_settings(self):
        settings = ChatSettings(base_url="http://gpu-box:11434/v1", timeout=30)
        provider = OllamaProvider.from_settings("phi3:latest", settings)

        with patch("ollama_perf_chat.providers.ollama.adapter.AsyncOpenAI") as client_cls:
            client = provider.client

        client_cls.assert_called_once_with(
            base_url="http://gpu-box:11434/v1",
            api_key="not-needed",
            timeout=30.0,
            max_retries=0
        )
        assert client is client_cls.return_value

    def test_provider_name(self, provider):
        assert provider.get_provider_name() == "ollama"
