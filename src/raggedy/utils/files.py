"""Utility helpers for finding documentation files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

from raggedy.errors import FileSystemError
from raggedy.models import Dialect

LOGGER = logging.getLogger(__name__)


def iter_doc_paths(root: Path) -> Iterator[Path]:
    """Yield documentation files below ``root``, descending into directories.

    Directory symlinks are followed and cycles are not detected.
    """
    try:
        entries = sorted(root.iterdir())
    except OSError as exc:
        raise FileSystemError(root, exc.strerror or exc) from exc

    for entry in entries:
        if entry.is_dir():
            yield from iter_doc_paths(entry)
        elif Dialect.from_path(entry) is not None:
            yield entry
        else:
            LOGGER.debug("Skipping %s", entry)


def collect_doc_paths(root: Path) -> List[Path]:
    """Return every documentation file below ``root`` as an absolute path."""
    return list(iter_doc_paths(root.absolute()))
