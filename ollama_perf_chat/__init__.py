"""
Ollama Performance Chat - interactive client that measures local LLM response performance.

This package provides:
- A chat loop against an Ollama server's OpenAI-compatible API
- Per-exchange timing with estimated token throughput
- Running session statistics (latency min/mean/max, success rate, session span)
"""

__version__ = "0.1.0"

from .config.settings import ChatSettings
from .models.measurement import ExchangeResult, Measurement, SessionStatistics
from .observability import MetricsRecorder, SessionAggregator, estimate_tokens
from .providers import OllamaProvider, ProviderAdapter, ProviderError
from .session import ChatSession

__all__ = [
    # Session
    "ChatSession",
    "ChatSettings",

    # Measurement
    "MetricsRecorder",
    "SessionAggregator",
    "estimate_tokens",
    "ExchangeResult",
    "Measurement",
    "SessionStatistics",

    # Providers
    "ProviderAdapter",
    "ProviderError",
    "OllamaProvider",
]
