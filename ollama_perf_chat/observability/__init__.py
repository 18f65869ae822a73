"""Observability layer for exchange timing and session statistics.

This layer handles:
- Timing of individual exchanges
- Token estimation for throughput figures
- Session-wide aggregation
- Structured provider logging
"""

from .aggregator import SessionAggregator
from .logging import ProviderLogger
from .recorder import MetricsRecorder
from .tokens import CHARS_PER_TOKEN, estimate_tokens

__all__ = [
    "MetricsRecorder",
    "SessionAggregator",
    "estimate_tokens",
    "CHARS_PER_TOKEN",
    "ProviderLogger",
]
