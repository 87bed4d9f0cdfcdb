"""Load markdown and asciidoc files into documents."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from raggedy.config import HEAD_CHARS
from raggedy.errors import PathConsistencyError, ReadError
from raggedy.models import Dialect, Document
from raggedy.utils.text import iter_lines, truncate_chars

LOGGER = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 without translating line endings."""
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise ReadError(path, f"not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc
    except OSError as exc:
        raise ReadError(path, exc.strerror or exc) from exc


def relative_path(path: Path, root: Path) -> str:
    try:
        rel_path = path.relative_to(root).as_posix()
    except ValueError as exc:
        raise PathConsistencyError(path, root) from exc
    # Undecodable file name bytes become U+FFFD.
    return os.fsencode(rel_path).decode("utf-8", "replace")


def extract_headings(content: str, dialect: Dialect) -> List[str]:
    """Return the heading lines of ``content`` in file order."""
    return [line for line in iter_lines(content) if dialect.is_heading(line)]


def read_document(path: Path, root: Path, *, head_chars: int = HEAD_CHARS) -> Document:
    """Build the :class:`Document` for one file below ``root``."""
    dialect = Dialect.from_path(path)
    if dialect is None:
        raise ValueError(f"{path} is not a markdown or asciidoc file")

    rel_path = relative_path(path, root)
    content = read_text(path)
    headings = extract_headings(content, dialect)
    LOGGER.debug("Read %s (%s, %d headings)", rel_path, dialect.name.lower(), len(headings))

    return Document(
        relative_path=rel_path,
        content=content,
        head=truncate_chars(content, head_chars),
        headings=tuple(headings),
    )
