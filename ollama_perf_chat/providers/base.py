"""
Base Provider Adapter Interface

This module defines the abstract base class for inference provider adapters.
The chat session only talks to providers through this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.measurement import ExchangeResult


class ProviderAdapter(ABC):
    """
    Abstract base class for inference provider adapters.

    The adapter is responsible for:
    - Making the completion call to the provider
    - Converting provider errors to a failed ``ExchangeResult``
    - Checking that the provider is reachable before a session starts

    Provider adapters should NOT contain:
    - Timing or statistics logic
    - Console output
    """

    def __init__(self, model: str):
        self.model = model

    @abstractmethod
    async def complete(self, prompt: str) -> ExchangeResult:
        """
        Complete a single prompt.

        Args:
            prompt: The user prompt

        Returns:
            ExchangeResult holding either the response text or a failure
            description. Provider errors are reported here, not raised.
        """
        pass

    @abstractmethod
    async def ping(self) -> None:
        """
        Send a short handshake prompt to confirm the model is reachable.

        Raises:
            ProviderError: If the provider cannot be reached or rejects the model
        """
        pass

    async def close(self) -> None:
        """Release any client resources. No-op by default."""
        pass

    def get_provider_name(self) -> str:
        """
        Get the name of this provider.

        By default, returns the class name without 'Provider' suffix.
        """
        class_name = self.__class__.__name__
        if class_name.endswith("Provider"):
            return class_name[:-8].lower()
        return class_name.lower()


class ProviderError(Exception):
    """
    Base exception for provider-related errors.

    Attributes:
        message: Error message
        provider: Provider name
        status_code: HTTP status code if applicable
        error_category: ErrorCategory assigned by the error mapper
        original_error: The original exception if wrapped
    """

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code
        self.error_category = None  # Set by error mapper
        self.original_error = None  # Will be set by error mapper if wrapping
