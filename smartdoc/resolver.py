"""Resolve a route snippet to the source of the service method it calls.

Route handlers reach backend services through ``req.<service>.<method>(...)``.
The service lives in ``<services_dir>/<service>.<ext>`` and the method is
declared there as ``async <method>(...) { ... }``.

Method bodies are located with a regex, not a parser: the match ends at the
first line holding nothing but ``}``. A nested block whose closing brace sits
alone on its own line therefore cuts the method short. Callers rely on this
exact span, so keep the heuristic as is.
"""
import enum
import logging
import os
import re
from dataclasses import dataclass
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

SERVICE_CALL_RE = re.compile(r"req\.(\w+)\.(\w+)\(")


class ServiceReference(NamedTuple):
    service_file_name: str
    method_name: str


class ResolutionStatus(enum.Enum):
    FOUND = "found"
    NO_REFERENCE = "no_reference"
    SERVICE_FILE_MISSING = "service_file_missing"
    METHOD_NOT_EXPOSED = "method_not_exposed"


@dataclass(frozen=True)
class Resolution:
    status: ResolutionStatus
    message: str
    combined_text: str
    reference: Optional[ServiceReference] = None
    service_file_path: Optional[str] = None
    method_code: Optional[str] = None


def extract_service_reference(snippet: str) -> Optional[ServiceReference]:
    """Return the first ``req.<service>.<method>(`` call in ``snippet``, if any."""
    m = SERVICE_CALL_RE.search(snippet)
    if m and m.group(1) and m.group(2):
        return ServiceReference(m.group(1), m.group(2))
    return None


def method_pattern(method_name: str) -> "re.Pattern[str]":
    return re.compile(
        rf"async {re.escape(method_name)}\([\s\S]*?\n[ \t]*\}}[ \t]*$",
        re.MULTILINE,
    )


def get_method_code(service_file_path: str, method_name: str) -> Optional[str]:
    """Return the source of ``async <method_name>(`` in the given file.

    The file is read on every call. A missing or unreadable file raises
    ``OSError``; check existence first if that is an expected case.
    """
    with open(service_file_path, "r", encoding="utf-8") as fh:
        content = fh.read()
    m = method_pattern(method_name).search(content)
    if m:
        return m.group(0)
    return None


def service_file_path(services_dir: str, reference: ServiceReference, extension: str = "js") -> str:
    return os.path.join(services_dir, f"{reference.service_file_name}.{extension}")


def resolve_snippet(snippet: str, services_dir: str, extension: str = "js") -> Resolution:
    """Find the service method referenced by ``snippet`` and build the combined text.

    Every non-fatal outcome comes back as a ``Resolution`` whose
    ``combined_text`` is the snippet, followed by the method source when one
    was found. Read errors on an existing service file propagate.
    """
    reference = extract_service_reference(snippet)
    if reference is None:
        message = "Service file reference not found in the code snippet."
        logger.warning(message)
        return Resolution(ResolutionStatus.NO_REFERENCE, message, snippet)

    path = service_file_path(services_dir, reference, extension)
    if not os.path.exists(path):
        message = f"Service file not found: {path}"
        logger.warning(message)
        return Resolution(
            ResolutionStatus.SERVICE_FILE_MISSING,
            message,
            snippet,
            reference=reference,
            service_file_path=path,
        )

    file_name = f"{reference.service_file_name}.{extension}"
    method_code = get_method_code(path, reference.method_name)
    if method_code is None:
        message = (
            f"{snippet.strip()}\n\nThe method '{reference.method_name}' "
            f"is NOT exposed in {file_name}"
        )
        logger.info(f"Method {reference.method_name} not exposed in {path}")
        return Resolution(
            ResolutionStatus.METHOD_NOT_EXPOSED,
            message,
            snippet,
            reference=reference,
            service_file_path=path,
        )

    logger.info(f"Found method {reference.method_name} in {path}")
    return Resolution(
        ResolutionStatus.FOUND,
        f"{snippet.strip()}\n\nFound method in {file_name}:\n\n{method_code}",
        f"{snippet} \n {method_code}",
        reference=reference,
        service_file_path=path,
        method_code=method_code,
    )
