from typing import Any, Optional, Tuple
import os
import anthropic
import openai
import requests
from .ollama_utils import is_ollama_model_name, normalize_ollama_model_name, ollama_base_url
from .models.pricing import (
    CLAUDE_MODELS,
    OPENAI_MODELS,
    DEEPSEEK_MODELS,
    GEMINI_MODELS,
)


def get_client_llm(model_name: str, api_key: Optional[str] = None) -> Tuple[Any, str]:
    """Get the client and model for the given model name.

    Args:
        model_name (str): The name of the model to get the client.
        api_key (str, optional): Key for the selected provider. When omitted the
            provider SDK falls back to its usual environment variable.

    Raises:
        ValueError: If the model is not supported.

    Returns:
        The client and model for the given model name.
    """
    if model_name in CLAUDE_MODELS.keys():
        client = anthropic.Anthropic(api_key=api_key)
    elif model_name in OPENAI_MODELS.keys():
        client = openai.OpenAI(api_key=api_key)
    elif model_name.startswith("azure-"):
        # get rid of the azure- prefix
        model_name = model_name.split("azure-")[-1]
        client = openai.AzureOpenAI(
            api_key=api_key or os.getenv("AZURE_OPENAI_API_KEY"),
            api_version=os.getenv("AZURE_API_VERSION"),
            azure_endpoint=os.getenv("AZURE_API_ENDPOINT"),
        )
    elif model_name in DEEPSEEK_MODELS.keys():
        client = openai.OpenAI(
            api_key=api_key or os.environ["DEEPSEEK_API_KEY"],
            base_url="https://api.deepseek.com",
        )
    elif model_name in GEMINI_MODELS.keys():
        client = openai.OpenAI(
            api_key=api_key or os.environ["GEMINI_API_KEY"],
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )
    elif is_ollama_model_name(model_name):
        model_name = normalize_ollama_model_name(model_name)
        client = requests.Session()
        # Attach base URL on the session for downstream query handling.
        client.base_url = ollama_base_url()
    else:
        raise ValueError(f"Model {model_name} not supported.")

    return client, model_name
