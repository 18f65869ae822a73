import logging
import os
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..models.generation import ModelConfig
from .constants import (
    API_KEY_ENV_VAR,
    BASE_URL_ENV_VAR,
    DEFAULT_API_KEY,
    DEFAULT_BASE_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    LOG_LEVEL_ENV_VAR,
    MODELS_ENV_VAR,
    RESET_STATS_ENV_VAR,
    TIMEOUT_ENV_VAR,
)
from .models import MODEL_CONFIGS as RAW_MODEL_CONFIGS

logger = logging.getLogger(__name__)

# Convert raw configs to Pydantic models
MODEL_CONFIGS: Dict[str, ModelConfig] = {
    k: ModelConfig(**v) for k, v in RAW_MODEL_CONFIGS.items()
}

_TRUTHY = {"1", "true", "yes", "on"}


def get_available_models() -> List[str]:
    """Names of all models in the default catalogue."""
    return list(MODEL_CONFIGS)


def get_model_description(name: str) -> Optional[str]:
    config = MODEL_CONFIGS.get(name)
    return config.description if config and config.description else None


class ChatSettings(BaseModel):
    """Runtime configuration for a chat session."""
    base_url: str = Field(default=DEFAULT_BASE_URL, description="OpenAI-compatible endpoint of the Ollama server")
    api_key: str = Field(default=DEFAULT_API_KEY, description="API key sent to the server")
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="HTTP timeout in seconds")
    models: List[str] = Field(default_factory=get_available_models, description="Models offered in the selection menu")
    reset_stats_on_switch: bool = Field(default=False, description="Clear session statistics when the model changes")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")

    @field_validator('base_url')
    def validate_base_url(cls, v):
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        return v

    @field_validator('models')
    def validate_models(cls, v):
        models = [m.strip() for m in v if m and m.strip()]
        if not models:
            raise ValueError("at least one model must be configured")
        return models

    @field_validator('log_level')
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls, **overrides) -> "ChatSettings":
        """
        Build settings from environment variables.

        Args:
            **overrides: Values that take precedence over the environment
                (``None`` values are ignored)

        Returns:
            ChatSettings instance
        """
        values = {}

        base_url = os.getenv(BASE_URL_ENV_VAR)
        if base_url:
            values["base_url"] = base_url

        api_key = os.getenv(API_KEY_ENV_VAR)
        if api_key:
            values["api_key"] = api_key

        timeout = os.getenv(TIMEOUT_ENV_VAR)
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid {TIMEOUT_ENV_VAR}={timeout!r}")

        models = os.getenv(MODELS_ENV_VAR)
        if models and models.strip(","):
            values["models"] = models.split(",")

        reset = os.getenv(RESET_STATS_ENV_VAR)
        if reset is not None:
            values["reset_stats_on_switch"] = reset.strip().lower() in _TRUTHY

        log_level = os.getenv(LOG_LEVEL_ENV_VAR)
        if log_level:
            values["log_level"] = log_level

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
