from .config import SmartDocConfig, load_config
from .generator import CannedDocGenerator, DocGenerator, LLMDocGenerator, generate_smart_doc
from .resolver import (
    Resolution,
    ResolutionStatus,
    ServiceReference,
    extract_service_reference,
    get_method_code,
    resolve_snippet,
)

__version__ = "0.1.0"

__all__ = [
    "CannedDocGenerator",
    "DocGenerator",
    "LLMDocGenerator",
    "Resolution",
    "ResolutionStatus",
    "ServiceReference",
    "SmartDocConfig",
    "extract_service_reference",
    "generate_smart_doc",
    "get_method_code",
    "load_config",
    "resolve_snippet",
]
