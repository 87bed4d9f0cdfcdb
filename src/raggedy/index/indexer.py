"""Documentation scanning pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from raggedy.config import AppConfig
from raggedy.errors import ReadError
from raggedy.ingestion.doc_loader import read_document
from raggedy.models import Document
from raggedy.utils.files import collect_doc_paths

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexStats:
    read: int = 0
    failed: int = 0
    processed_files: List[Path] = field(default_factory=list)

    def increment(self, status: str, path: Path) -> None:
        if status == "read":
            self.read += 1
        else:
            self.failed += 1
        self.processed_files.append(path)


class Indexer:
    """Collects documentation files under a root and reads them."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config if config is not None else AppConfig()
        self.stats = IndexStats()

    def index(self, root: Path) -> List[Document]:
        """Return one document per markdown or asciidoc file below ``root``.

        Any error aborts the scan. With ``skip_unreadable`` set, files that
        cannot be read are logged and left out instead.
        """
        self.stats = IndexStats()
        root = root.absolute()
        paths = collect_doc_paths(root)
        if not paths:
            LOGGER.warning("No documentation files found under %s", root)
            return []

        documents: List[Document] = []
        for path in paths:
            try:
                documents.append(read_document(path, root, head_chars=self.config.head_chars))
            except ReadError as exc:
                if not self.config.skip_unreadable:
                    raise
                LOGGER.warning("Skipping %s", exc)
                self.stats.increment("failed", path)
                continue
            self.stats.increment("read", path)

        LOGGER.info("Read %d documents, skipped %d", self.stats.read, self.stats.failed)
        return documents
