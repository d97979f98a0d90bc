import logging
from typing import Dict, List
from .pricing import get_model_prices
from .result import QueryResult

logger = logging.getLogger(__name__)

# The messages API requires max_tokens.
DEFAULT_MAX_TOKENS = 1024


def query_anthropic(
    client,
    model: str,
    msg: str,
    system_msg: str,
    msg_history: List[Dict],
    **kwargs,
) -> QueryResult:
    messages = list(msg_history) + [{"role": "user", "content": msg}]
    request = {
        "model": model,
        "messages": messages,
        "max_tokens": kwargs.get("max_tokens") or DEFAULT_MAX_TOKENS,
    }
    if system_msg:
        request["system"] = system_msg
    if kwargs.get("temperature") is not None:
        request["temperature"] = kwargs["temperature"]

    logger.debug(f"messages.create model={model}")
    response = client.messages.create(**request)
    content = "".join(
        block.text for block in response.content if getattr(block, "type", "") == "text"
    )

    input_tokens = response.usage.input_tokens
    output_tokens = response.usage.output_tokens
    prices = get_model_prices(model)
    input_cost = input_tokens * prices["input_price"]
    output_cost = output_tokens * prices["output_price"]

    return QueryResult(
        content=content,
        msg=msg,
        system_msg=system_msg,
        new_msg_history=messages + [{"role": "assistant", "content": content}],
        model_name=model,
        kwargs=kwargs,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cost=input_cost + output_cost,
        input_cost=input_cost,
        output_cost=output_cost,
    )
