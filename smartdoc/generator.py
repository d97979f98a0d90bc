import logging
from typing import Any, Protocol, Tuple

from .prompts import CANNED_SWAGGER_DOC, SWAGGER_PROMPT_TEMPLATE, SYSTEM_MESSAGE
from .resolver import Resolution, resolve_snippet

logger = logging.getLogger(__name__)


class DocGenerator(Protocol):
    def generate(self, route_code: str) -> str:
        ...


class LLMDocGenerator:
    """Ask a language model for Swagger jsDoc covering ``route_code``."""

    def __init__(self, client: Any, system_msg: str = SYSTEM_MESSAGE):
        self.client = client
        self.system_msg = system_msg

    def generate(self, route_code: str) -> str:
        prompt = SWAGGER_PROMPT_TEMPLATE.format(route_code=route_code)
        kwargs = self.client.get_kwargs()
        res = self.client.query(msg=prompt, system_msg=self.system_msg, llm_kwargs=kwargs)
        return (getattr(res, "content", "") or "").strip()


class CannedDocGenerator:
    """Offline generator that always answers with the sample comment."""

    def generate(self, route_code: str) -> str:
        logger.debug(f"Returning canned doc for {len(route_code)} chars of route code")
        return CANNED_SWAGGER_DOC


def generate_smart_doc(
    snippet: str,
    services_dir: str,
    generator: DocGenerator,
    extension: str = "js",
) -> Tuple[Resolution, str]:
    """Resolve ``snippet`` against the services folder and document the result.

    The generator runs whatever the resolution status, on the combined text.
    """
    resolution = resolve_snippet(snippet, services_dir, extension)
    doc = generator.generate(resolution.combined_text)
    return resolution, doc


__all__ = [
    "DocGenerator",
    "LLMDocGenerator",
    "CannedDocGenerator",
    "generate_smart_doc",
]
