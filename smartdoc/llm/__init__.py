from .client import get_client_llm
from .llm import LLMClient
from .models.result import QueryResult
from .query import query

__all__ = ["LLMClient", "QueryResult", "get_client_llm", "query"]
