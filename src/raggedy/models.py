"""Core raggedy data models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict, Optional, Tuple


class Dialect(Enum):
    """Supported markup dialects, keyed by file extension."""

    MARKDOWN = ("md", re.compile(r"^#+\s+.*"))
    ASCIIDOC = ("adoc", re.compile(r"^=+\s+.*"))

    def __init__(self, extension: str, pattern: re.Pattern[str]) -> None:
        self.extension = extension
        self.pattern = pattern

    @classmethod
    def from_path(cls, path: PurePath) -> Optional["Dialect"]:
        """Return the dialect for ``path`` or ``None`` if the extension is unknown.

        The extension is everything after the last dot of the file name and is
        compared case-sensitively, so ``README.MD`` is not a markdown file.
        """
        suffix = path.suffix
        if not suffix:
            return None
        extension = suffix[1:]
        for dialect in cls:
            if dialect.extension == extension:
                return dialect
        return None

    def is_heading(self, line: str) -> bool:
        return self.pattern.match(line) is not None


@dataclass(frozen=True, slots=True)
class Document:
    """One documentation file captured during a scan."""

    relative_path: str
    content: str
    head: str
    headings: Tuple[str, ...]

    def to_record(self) -> Dict[str, Any]:
        """Serializable mapping in the published field order."""
        return {
            "rel_path": self.relative_path,
            "content": self.content,
            "head": self.head,
            "headings": list(self.headings),
        }
