"""Configuration module for the chat client."""

from .settings import ChatSettings, MODEL_CONFIGS, get_available_models, get_model_description

# Import all constants
from .constants import *

__all__ = [
    "ChatSettings",
    "MODEL_CONFIGS",
    "get_available_models",
    "get_model_description",
]
