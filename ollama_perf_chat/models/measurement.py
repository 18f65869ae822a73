"""
Measurement models for timed exchanges and session statistics.

This module defines the immutable record produced for every prompt/response
exchange, the statistics snapshot derived from a session, and the explicit
result type returned by providers.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class ExchangeResult:
    """Outcome of a single provider call: either response text or a failure description."""
    succeeded: bool
    text: str = ""
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> ExchangeResult:
        return cls(succeeded=True, text=text or "")

    @classmethod
    def failure(cls, description: str) -> ExchangeResult:
        return cls(succeeded=False, error=description)

    @classmethod
    def from_exception(cls, error: BaseException) -> ExchangeResult:
        """Build a failure carrying a readable description of ``error``."""
        return cls.failure(describe_error(error))


def describe_error(error: BaseException) -> str:
    """Human-readable, never empty, description of an exception."""
    message = str(error).strip()
    if not message:
        message = type(error).__name__
    return f"Error: {message}"


@dataclass(frozen=True)
class Measurement:
    """Timing and outcome of one exchange. Created once, never mutated."""
    response_text: str
    elapsed_ms: int
    start_time: datetime
    end_time: datetime
    estimated_tokens: int
    succeeded: bool

    def __post_init__(self):
        if self.elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must be non-negative, got {self.elapsed_ms}")
        if self.estimated_tokens < 0:
            raise ValueError(f"estimated_tokens must be non-negative, got {self.estimated_tokens}")
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be earlier than start_time")

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ms / 1000.0

    @property
    def tokens_per_second(self) -> Optional[float]:
        """Estimated throughput, or None when it cannot be computed."""
        if not self.succeeded or self.estimated_tokens <= 0 or self.elapsed_ms <= 0:
            return None
        return self.estimated_tokens / self.elapsed_seconds


@dataclass(frozen=True)
class SessionStatistics:
    """Snapshot of the running aggregates for a session."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    average_response_seconds: float = 0.0
    fastest_response_seconds: float = 0.0
    slowest_response_seconds: float = 0.0
    average_tokens_per_second: float = 0.0
    total_session_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary format."""
        return asdict(self)
