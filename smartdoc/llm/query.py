import logging
from typing import Dict, List, Optional
import anthropic
import requests
from .client import get_client_llm
from .models.anthropic import query_anthropic
from .models.ollama import query_ollama
from .models.openai import query_openai
from .models.result import QueryResult

logger = logging.getLogger(__name__)


def query(
    model_name: str,
    msg: str,
    system_msg: str,
    msg_history: Optional[List[Dict]] = None,
    api_key: Optional[str] = None,
    **kwargs,
) -> QueryResult:
    """Send a single prompt to ``model_name`` and return the parsed result."""
    client, model = get_client_llm(model_name, api_key=api_key)
    history = list(msg_history or [])

    if isinstance(client, anthropic.Anthropic):
        query_fn = query_anthropic
    elif isinstance(client, requests.Session):
        query_fn = query_ollama
    else:
        query_fn = query_openai

    result = query_fn(
        client,
        model,
        msg,
        system_msg,
        history,
        **kwargs,
    )
    logger.debug(
        f"{model}: {result.input_tokens} in / {result.output_tokens} out, cost ${result.cost:.6f}"
    )
    return result
