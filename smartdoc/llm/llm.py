import logging
from typing import Dict, Optional
from .models.result import QueryResult
from .query import query

logger = logging.getLogger(__name__)


class LLMClient:
    """Thin stateful wrapper holding the model and sampling settings.

    Callers fetch the sampling kwargs with ``get_kwargs`` and pass them back to
    ``query`` so a single request can override them.
    """

    def __init__(
        self,
        model_name: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        api_key: Optional[str] = None,
        verbose: bool = False,
    ):
        self.model_name = model_name
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.api_key = api_key
        self.verbose = verbose

    def get_kwargs(self) -> Dict:
        kwargs = {}
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature
        if self.max_tokens is not None:
            kwargs["max_tokens"] = self.max_tokens
        return kwargs

    def query(
        self,
        msg: str,
        system_msg: str = "",
        llm_kwargs: Optional[Dict] = None,
    ) -> QueryResult:
        kwargs = self.get_kwargs() if llm_kwargs is None else llm_kwargs
        if self.verbose:
            logger.info(f"Querying {self.model_name} ({len(msg)} chars)")
        return query(
            self.model_name,
            msg,
            system_msg,
            api_key=self.api_key,
            **kwargs,
        )
