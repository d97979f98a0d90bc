# USD per token, (input, output)
CLAUDE_MODELS = {
    "claude-3-5-haiku-20241022": {
        "input_price": 0.8 / 1_000_000,
        "output_price": 4.0 / 1_000_000,
    },
    "claude-3-7-sonnet-20250219": {
        "input_price": 3.0 / 1_000_000,
        "output_price": 15.0 / 1_000_000,
    },
    "claude-sonnet-4-20250514": {
        "input_price": 3.0 / 1_000_000,
        "output_price": 15.0 / 1_000_000,
    },
}

OPENAI_MODELS = {
    "gpt-4o-mini": {
        "input_price": 0.15 / 1_000_000,
        "output_price": 0.6 / 1_000_000,
    },
    "gpt-4o": {
        "input_price": 2.5 / 1_000_000,
        "output_price": 10.0 / 1_000_000,
    },
    "gpt-4.1-mini": {
        "input_price": 0.4 / 1_000_000,
        "output_price": 1.6 / 1_000_000,
    },
    "gpt-4.1": {
        "input_price": 2.0 / 1_000_000,
        "output_price": 8.0 / 1_000_000,
    },
}

DEEPSEEK_MODELS = {
    "deepseek-chat": {
        "input_price": 0.27 / 1_000_000,
        "output_price": 1.1 / 1_000_000,
    },
    "deepseek-coder": {
        "input_price": 0.14 / 1_000_000,
        "output_price": 0.28 / 1_000_000,
    },
}

GEMINI_MODELS = {
    "gemini-2.0-flash": {
        "input_price": 0.1 / 1_000_000,
        "output_price": 0.4 / 1_000_000,
    },
    "gemini-2.5-flash": {
        "input_price": 0.3 / 1_000_000,
        "output_price": 2.5 / 1_000_000,
    },
}


def get_model_prices(model_name: str) -> dict:
    """Return the price entry for ``model_name`` or zero prices when unknown."""
    for table in (CLAUDE_MODELS, OPENAI_MODELS, DEEPSEEK_MODELS, GEMINI_MODELS):
        if model_name in table:
            return table[model_name]
    return {"input_price": 0.0, "output_price": 0.0}
