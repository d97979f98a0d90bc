import logging
from typing import Dict, List
import requests
from ..ollama_utils import ollama_base_url
from .result import QueryResult

logger = logging.getLogger(__name__)


def _build_messages(system_msg: str, msg_history: List[Dict], msg: str) -> List[Dict]:
    messages: List[Dict] = []
    if system_msg:
        messages.append({"role": "system", "content": system_msg})
    messages.extend(msg_history)
    messages.append({"role": "user", "content": msg})
    return messages


def _prepare_options(kwargs: Dict) -> Dict:
    options = {}
    temperature = kwargs.get("temperature")
    if temperature is not None:
        options["temperature"] = temperature

    max_tokens = kwargs.get("max_tokens")
    if max_tokens is not None:
        options["num_predict"] = max_tokens
    return options


def query_ollama(
    client: requests.Session,
    model: str,
    msg: str,
    system_msg: str,
    msg_history: List[Dict],
    **kwargs,
) -> QueryResult:
    """Query an Ollama server via the /api/chat endpoint.

    The client should be a requests.Session with a base_url attribute pointing to the
    Ollama server (default: http://localhost:11434). Responses are requested
    non-streaming so the whole doc comment arrives in one payload.
    """

    base_url = getattr(client, "base_url", None) or ollama_base_url()
    payload = {
        "model": model,
        "messages": _build_messages(system_msg, msg_history, msg),
        "stream": False,
        "options": _prepare_options(kwargs),
    }

    logger.debug(f"POST {base_url}/api/chat model={model}")
    response = client.post(
        f"{base_url}/api/chat",
        json=payload,
        timeout=kwargs.get("timeout", 600),
    )
    response.raise_for_status()
    data = response.json()

    content = data.get("message", {}).get("content", "")
    new_msg_history = msg_history + [
        {"role": "user", "content": msg},
        {"role": "assistant", "content": content},
    ]

    return QueryResult(
        content=content,
        msg=msg,
        system_msg=system_msg,
        new_msg_history=new_msg_history,
        model_name=model,
        kwargs=kwargs,
        input_tokens=data.get("prompt_eval_count", 0) or 0,
        output_tokens=data.get("eval_count", 0) or 0,
    )
