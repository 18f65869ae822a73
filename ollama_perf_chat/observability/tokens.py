"""Heuristic token estimation used for throughput figures."""

# Roughly four characters per token for English text
CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Approximate token count from the character length of ``text``."""
    if not text:
        return 0
    return len(text) // CHARS_PER_TOKEN
