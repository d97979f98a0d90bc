import logging
from typing import Dict, List
from .pricing import get_model_prices
from .result import QueryResult

logger = logging.getLogger(__name__)


def query_openai(
    client,
    model: str,
    msg: str,
    system_msg: str,
    msg_history: List[Dict],
    **kwargs,
) -> QueryResult:
    """Query an OpenAI-compatible chat completions endpoint.

    Also used for Azure, DeepSeek and Gemini, which expose the same API.
    """
    messages = []
    if system_msg:
        messages.append({"role": "system", "content": system_msg})
    messages.extend(msg_history)
    messages.append({"role": "user", "content": msg})

    request = {"model": model, "messages": messages, "n": 1}
    if kwargs.get("temperature") is not None:
        request["temperature"] = kwargs["temperature"]
    if kwargs.get("max_tokens") is not None:
        request["max_tokens"] = kwargs["max_tokens"]

    logger.debug(f"chat.completions.create model={model}")
    response = client.chat.completions.create(**request)
    content = response.choices[0].message.content or ""

    input_tokens = getattr(response.usage, "prompt_tokens", 0) or 0
    output_tokens = getattr(response.usage, "completion_tokens", 0) or 0
    prices = get_model_prices(model)
    input_cost = input_tokens * prices["input_price"]
    output_cost = output_tokens * prices["output_price"]

    return QueryResult(
        content=content,
        msg=msg,
        system_msg=system_msg,
        new_msg_history=msg_history
        + [
            {"role": "user", "content": msg},
            {"role": "assistant", "content": content},
        ],
        model_name=model,
        kwargs=kwargs,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cost=input_cost + output_cost,
        input_cost=input_cost,
        output_cost=output_cost,
    )
