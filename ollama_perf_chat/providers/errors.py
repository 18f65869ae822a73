"""
Error mapping utilities for provider adapters.

Converts transport and API exceptions raised by the ``openai`` client (and
the ``httpx`` layer beneath it) into ``ProviderError`` instances with a
category and a message a user can act on.
"""

from enum import Enum

import httpx
import openai

from .base import ProviderError


class ErrorCategory(Enum):
    """Error categories for failed exchanges."""
    CONNECTION = "connection"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    CLIENT_ERROR = "client_error"
    UNKNOWN = "unknown"


class ErrorMapper:
    """Maps provider-specific errors to standardized ProviderError."""

    @staticmethod
    def categorize(error: Exception) -> ErrorCategory:
        """
        Categorize an exception raised while talking to the provider.

        Args:
            error: The exception to check

        Returns:
            ErrorCategory for the exception
        """
        # Timeout subclasses connection error in openai, check it first
        if isinstance(error, (openai.APITimeoutError, httpx.TimeoutException)):
            return ErrorCategory.TIMEOUT
        if isinstance(error, (openai.APIConnectionError, httpx.ConnectError, httpx.NetworkError)):
            return ErrorCategory.CONNECTION

        status_code = getattr(error, 'status_code', None)
        if status_code is not None:
            if status_code == 404:
                return ErrorCategory.NOT_FOUND
            elif status_code >= 500:
                return ErrorCategory.SERVER_ERROR
            elif status_code >= 400:
                return ErrorCategory.CLIENT_ERROR

        error_msg = str(error).lower()
        if 'timeout' in error_msg or 'timed out' in error_msg:
            return ErrorCategory.TIMEOUT
        elif 'connection' in error_msg or 'network' in error_msg:
            return ErrorCategory.CONNECTION

        return ErrorCategory.UNKNOWN

    @staticmethod
    def map_ollama_error(error: Exception, model: str = None) -> ProviderError:
        """
        Map an exception from the Ollama endpoint to ProviderError.

        Args:
            error: The exception raised by the client
            model: Model the request was made for, used in not-found messages

        Returns:
            ProviderError with appropriate metadata
        """
        if isinstance(error, ProviderError):
            return error

        category = ErrorMapper.categorize(error)
        status_code = getattr(error, 'status_code', None)
        detail = getattr(error, 'message', None) or str(error) or type(error).__name__

        if category == ErrorCategory.CONNECTION:
            message = f"Cannot reach Ollama server: {detail}"
        elif category == ErrorCategory.TIMEOUT:
            message = f"Ollama request timed out: {detail}"
        elif category == ErrorCategory.NOT_FOUND and model:
            message = f"Model '{model}' not found on Ollama server (try 'ollama pull {model}'): {detail}"
        else:
            message = f"Ollama API error: {detail}"

        provider_error = ProviderError(
            message=message,
            provider="ollama",
            status_code=status_code
        )
        provider_error.error_category = category
        provider_error.original_error = error

        return provider_error
