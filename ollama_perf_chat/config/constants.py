"""
Connection defaults and environment variable names.

Values here are fallbacks; ``ChatSettings.from_env`` reads the environment
(including a ``.env`` file loaded at startup) and CLI flags override both.
"""

# Ollama serves an OpenAI-compatible API under /v1
DEFAULT_BASE_URL = "http://localhost:11434/v1"

# Ollama ignores the key but the OpenAI client requires one
DEFAULT_API_KEY = "not-needed"

DEFAULT_TIMEOUT_SECONDS = 120.0

DEFAULT_LOG_LEVEL = "WARNING"

# Prompt sent when connecting to a model
HANDSHAKE_PROMPT = "Say 'Ready!'"

# Environment variables
BASE_URL_ENV_VAR = "OLLAMA_BASE_URL"
API_KEY_ENV_VAR = "OLLAMA_API_KEY"
TIMEOUT_ENV_VAR = "OLLAMA_TIMEOUT"
MODELS_ENV_VAR = "OLLAMA_MODELS"
RESET_STATS_ENV_VAR = "OLLAMA_RESET_STATS_ON_SWITCH"
LOG_LEVEL_ENV_VAR = "OLLAMA_PERF_LOG_LEVEL"
