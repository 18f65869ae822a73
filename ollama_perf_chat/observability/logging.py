"""
Per-exchange log lines for provider adapters.

Lines look like ``[provider=ollama model=phi3:latest request_id=1a2b3c4d] ...``
so that one exchange can be followed through a session log. Failed exchanges
are logged at INFO: the chat already shows the error as the reply, and the
recorder logs the failed measurement.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from .tokens import estimate_tokens


class ProviderLogger:
    """Structured logger bound to one provider."""

    def __init__(self, provider_name: str):
        self.provider = provider_name
        self.logger = logging.getLogger(f"ollama_perf_chat.providers.{provider_name}")

    def _line(self, message: str, fields: Dict[str, Any]) -> str:
        parts = [f"provider={self.provider}"]
        parts += [f"{key}={value}" for key, value in fields.items() if value is not None]
        return f"[{' '.join(parts)}] {message}"

    def debug(self, message: str, **fields):
        self.logger.debug(self._line(message, fields))

    def info(self, message: str, **fields):
        self.logger.info(self._line(message, fields))

    @contextmanager
    def track_request(self, method: str, model: str,
                      request_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """
        Time one request and log how it ended.

        Args:
            method: Adapter method ("complete" or "ping")
            model: Model the request is sent to
            request_id: Short id; generated when not given

        Yields:
            Dict with ``request_id``, ``model`` and ``method``. A
            ``response_chars`` entry set by the caller is included in the
            completion line.
        """
        exchange = {
            "request_id": request_id or uuid.uuid4().hex[:8],
            "model": model,
            "method": method,
        }
        started = time.perf_counter()
        self.debug(f"Sending {method} request", **exchange)

        try:
            yield exchange
        except Exception as e:
            self.info(
                f"{method} request failed",
                **exchange,
                duration_ms=int((time.perf_counter() - started) * 1000),
                error_type=type(e).__name__,
                error_category=getattr(getattr(e, "error_category", None), "value", None)
            )
            raise

        self.info(
            f"{method} request answered",
            **exchange,
            duration_ms=int((time.perf_counter() - started) * 1000)
        )

    def log_usage(self, usage: Dict[str, Any], response_text: str, exchange: Dict[str, Any]):
        """
        Compare the local token estimate with the server's count.

        Ollama reports ``completion_tokens`` for the reply; the estimate is the
        character-based one that the session statistics use.
        """
        fields = {
            **exchange,
            "response_chars": len(response_text),
            "estimated_tokens": estimate_tokens(response_text),
            "completion_tokens": usage.get('completion_tokens'),
            "prompt_tokens": usage.get('prompt_tokens'),
        }
        self.debug("Token usage", **fields)
