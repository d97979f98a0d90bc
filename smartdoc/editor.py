"""File-backed editor host: read a line selection and insert text above it."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """Lines ``start_line``..``end_line`` of ``path``, 1-based and inclusive.

    ``end_line=None`` extends the selection to the end of the file.
    """

    path: Path
    start_line: int = 1
    end_line: Optional[int] = None


def parse_line_range(spec: Optional[str]) -> Tuple[int, Optional[int]]:
    """Parse ``"10:20"``, ``"10:"`` or ``"10"`` into (start, end)."""
    if not spec:
        return 1, None
    start_s, sep, end_s = spec.partition(":")
    try:
        start = int(start_s) if start_s else 1
        if sep:
            end = int(end_s) if end_s else None
        else:
            end = start
    except ValueError:
        raise ValueError(f"Invalid line range: {spec!r}") from None
    if start < 1 or (end is not None and end < start):
        raise ValueError(f"Invalid line range: {spec!r}")
    return start, end


def _read_lines(path: Path) -> List[str]:
    # newline="" keeps \r\n intact and splits on line breaks only
    with open(path, "r", encoding="utf-8", newline="") as fh:
        return fh.readlines()


def _line_ending(lines: List[str]) -> str:
    for line in lines:
        if line.endswith("\r\n"):
            return "\r\n"
        if line.endswith(("\n", "\r")):
            return line[-1]
    return "\n"


def read_selection(selection: Selection) -> str:
    lines = _read_lines(selection.path)
    if selection.start_line > len(lines):
        raise ValueError(
            f"Selection starts at line {selection.start_line} but {selection.path} "
            f"has {len(lines)} lines"
        )
    return "".join(lines[selection.start_line - 1 : selection.end_line])


def insert_doc(selection: Selection, doc: str) -> None:
    """Insert ``doc`` followed by a newline at the start of the selection.

    The doc is written with the file's own line ending; other lines are untouched.
    """
    lines = _read_lines(selection.path)
    eol = _line_ending(lines)
    index = min(selection.start_line - 1, len(lines))
    if index == len(lines) and lines and not lines[-1].endswith(("\n", "\r")):
        lines[-1] += eol
    doc_lines = doc.replace("\r\n", "\n").split("\n")
    lines.insert(index, eol.join(doc_lines) + eol)
    with open(selection.path, "w", encoding="utf-8", newline="") as fh:
        fh.write("".join(lines))
    logger.info(f"Inserted {len(doc_lines)} doc lines at {selection.path}:{selection.start_line}")
