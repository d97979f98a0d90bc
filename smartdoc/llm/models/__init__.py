from .anthropic import query_anthropic
from .ollama import query_ollama
from .openai import query_openai
from .result import QueryResult

__all__ = ["QueryResult", "query_anthropic", "query_ollama", "query_openai"]
