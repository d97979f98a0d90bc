import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

DEFAULT_MODEL = "gpt-4o-mini"


@dataclass
class SmartDocConfig:
    api_key: Optional[str] = None
    model_name: str = DEFAULT_MODEL
    services_folder: str = "services"
    extension: str = "js"
    max_tokens: int = 150
    temperature: float = 0.5


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a {cast.__name__}, got {raw!r}") from None


def load_config(workspace: Optional[Union[str, Path]] = None) -> SmartDocConfig:
    """Build a config from the environment and ``<workspace>/.env``.

    Variables already set in the process environment win over the .env file.
    """
    env_path = Path(workspace or os.getcwd()) / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

    defaults = SmartDocConfig()
    return SmartDocConfig(
        api_key=os.getenv("SMARTDOC_API_KEY") or os.getenv("OPENAI_API_KEY") or None,
        model_name=os.getenv("SMARTDOC_MODEL") or defaults.model_name,
        services_folder=os.getenv("SMARTDOC_SERVICES_FOLDER") or defaults.services_folder,
        extension=(os.getenv("SMARTDOC_EXTENSION") or defaults.extension).lstrip("."),
        max_tokens=_env_number("SMARTDOC_MAX_TOKENS", defaults.max_tokens, int),
        temperature=_env_number("SMARTDOC_TEMPERATURE", defaults.temperature, float),
    )
