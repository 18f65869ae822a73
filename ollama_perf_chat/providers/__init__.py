"""Provider adapters for inference backends.

Available providers:
- Ollama (OpenAI-compatible endpoint)
"""

from .base import ProviderAdapter, ProviderError
from .errors import ErrorCategory, ErrorMapper
from .ollama import OllamaProvider

__all__ = [
    "ProviderAdapter",
    "ProviderError",
    "ErrorCategory",
    "ErrorMapper",
    "OllamaProvider",
]
