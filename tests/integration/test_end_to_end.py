"""End-to-end integration tests for Ollama Performance Chat."""

import pytest
from datetime import datetime, timedelta
from unittest.mock import Mock

from ollama_perf_chat import ChatSession, ChatSettings, MetricsRecorder, OllamaProvider
from tests.helpers.fakes import CapturedOutput, FakeClock, FakeStopwatch, ScriptedInput
from tests.helpers.mock_exceptions import make_connection_error


def completion(text):
    response = Mock(usage=None)
    response.choices = [Mock(message=Mock(content=text), finish_reason="stop")]
    return response


@pytest.mark.integration
class TestEndToEnd:
    """Chat session wired to the real provider over a mocked OpenAI client."""

    @pytest.mark.asyncio
    async def test_session_statistics(self, mock_openai_client):
        mock_openai_client.chat.completions.create.side_effect = [
            completion("Ready!"),
            completion("a" * 160),
            make_connection_error(),
            completion("b" * 160),
            completion("c" * 360),
        ]

        start = datetime(2025, 3, 1, 8, 0, 0)
        stopwatch = FakeStopwatch([0.0, 1.0, 10.0, 10.25, 20.0, 22.0, 30.0, 33.0])
        clock = FakeClock([
            start, start + timedelta(seconds=1),
            start + timedelta(seconds=10), start + timedelta(seconds=10.25),
            start + timedelta(seconds=20), start + timedelta(seconds=22),
            start + timedelta(seconds=30), start + timedelta(seconds=33),
        ])

        settings = ChatSettings(models=["llama3.2:latest"])
        output = CapturedOutput()
        session = ChatSession(
            settings=settings,
            provider_factory=lambda model, s: OllamaProvider(model, client=mock_openai_client),
            recorder=MetricsRecorder(stopwatch=stopwatch, clock=clock),
            input_fn=ScriptedInput(["1", "one", "two", "three", "four", "stats", "quit"]),
            output_fn=output
        )

        stats = await session.run()

        assert stats.total_requests == 4
        assert stats.successful_requests == 3
        assert stats.failed_requests == 1
        assert stats.average_response_seconds == pytest.approx(2.0)
        assert stats.fastest_response_seconds == pytest.approx(1.0)
        assert stats.slowest_response_seconds == pytest.approx(3.0)
        assert stats.average_tokens_per_second == pytest.approx(30.0)
        assert stats.total_session_seconds == pytest.approx(33.0)

        assert "AI: Error: Cannot reach Ollama server: Connection error." in output.text
        assert "   Average Speed: ~30.0 tokens/sec" in output.lines
        mock_openai_client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unreachable_server_at_startup(self, mock_openai_client):
        mock_openai_client.chat.completions.create.side_effect = make_connection_error()
        output = CapturedOutput()
        session = ChatSession(
            settings=ChatSettings(models=["llama3.2:latest"]),
            provider_factory=lambda model, s: OllamaProvider(model, client=mock_openai_client),
            input_fn=ScriptedInput(["1"]),
            output_fn=output
        )

        with pytest.raises(SystemExit) as exc_info:
            await session.run()

        assert exc_info.value.code == 1
        assert any(line.startswith("Make sure Ollama is running") for line in output.lines)
