"""Helpers for routing doc generation to a local Ollama server."""
import os
import re
from typing import Optional

DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"

# ollama:, ollama://, ollama/ or ollama- in front of the served model name
OLLAMA_PREFIX_RE = re.compile(r"^ollama(?::/*|/+|-)\s*", re.IGNORECASE)


def is_ollama_model_name(model_name: Optional[str]) -> bool:
    """Return True when the configured model should be served by Ollama.

    Ollama models need no API key, so the CLI skips its key check for them.
    """
    return isinstance(model_name, str) and OLLAMA_PREFIX_RE.match(model_name) is not None


def normalize_ollama_model_name(model_name: str) -> str:
    """``ollama:qwen2.5-coder`` -> ``qwen2.5-coder``; other names pass through."""
    if not model_name:
        return model_name
    return OLLAMA_PREFIX_RE.sub("", model_name, count=1)


def ollama_base_url() -> str:
    return os.getenv("OLLAMA_BASE_URL", DEFAULT_OLLAMA_BASE_URL).rstrip("/")
