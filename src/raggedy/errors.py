"""Exceptions raised while scanning a documentation tree."""

from __future__ import annotations

from pathlib import Path


class RaggedyError(Exception):
    """Base class for scan failures."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class FileSystemError(RaggedyError):
    """A directory could not be listed."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(path, f"Cannot list directory {path}: {reason}")
        self.reason = reason


class ReadError(RaggedyError):
    """A documentation file could not be read as text."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(path, f"Cannot read {path}: {reason}")
        self.reason = reason


class PathConsistencyError(RaggedyError):
    """A collected path does not live under the scan root."""

    def __init__(self, path: Path, root: Path) -> None:
        super().__init__(path, f"{path} is not under scan root {root}")
        self.root = root
