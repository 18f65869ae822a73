"""Data models for exchanges, measurements and configuration."""

from .generation import GenerationParams, ModelConfig
from .measurement import ExchangeResult, Measurement, SessionStatistics, describe_error

__all__ = [
    "GenerationParams",
    "ModelConfig",
    "ExchangeResult",
    "Measurement",
    "SessionStatistics",
    "describe_error",
]
