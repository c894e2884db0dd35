"""Navigation index driver: scan the content root, serialize, and persist.

``IndexBuilder`` owns the only fatal failure mode of a build. Everything the
scanner hits is logged and degrades to a partial tree, while failing to write
the output raises ``IndexWriteError`` for the caller to turn into an exit code.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .config import NavConfig
from .log import log_success
from .nav_tree import NavIndex, count_documents, path_exists, scan_directory

logger = logging.getLogger(__name__)


class SitenavError(Exception):
    """Base class for errors surfaced to the command line."""


class IndexWriteError(SitenavError):
    """The serialized index could not be written to its output path."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Error writing {path.name}: {cause}")
        self.path = path
        self.cause = cause


@dataclass(frozen=True)
class BuildReport:
    """Operator-facing summary of one written index."""

    output_path: Path
    size_bytes: int
    document_count: int

    @property
    def size_kb(self) -> str:
        return f"{self.size_bytes / 1024:.2f}"


class IndexBuilder:
    """Build and persist the navigation index described by ``config``."""

    def __init__(self, config: NavConfig) -> None:
        self.config = config

    def build(self) -> NavIndex:
        """Scan the content root; a missing root yields an empty index."""
        content_path = self.config.content_path
        logger.info("📁 Scanning /%s directory...", self.config.content_dir)
        if not path_exists(content_path):
            logger.info("   Directory not found")
            return NavIndex()

        documents = scan_directory(content_path, self.config.relative_root, self.config)
        logger.info("   Found %d files", count_documents(documents))
        return NavIndex(documents=documents)

    def serialize(self, index: NavIndex) -> str:
        """Render ``index`` as two-space indented JSON without a trailing newline."""
        return json.dumps(index.to_dict(self.config.root_key), indent=2, ensure_ascii=False)

    def write(self, index: NavIndex) -> BuildReport:
        """Overwrite the output file with ``index``.

        Raises ``IndexWriteError`` when the file cannot be written.
        """
        output_path = self.config.output_path
        payload = self.serialize(index).encode("utf-8")
        logger.info("💾 Writing %s...", output_path.name)
        try:
            output_path.write_bytes(payload)
        except OSError as exc:
            raise IndexWriteError(output_path, exc) from exc
        return BuildReport(
            output_path=output_path,
            size_bytes=len(payload),
            document_count=count_documents(index.documents),
        )

    def run(self) -> BuildReport:
        """Build then write, logging the success confirmation and summary."""
        report = self.write(self.build())
        log_success(logger, "Success! %s generated", report.output_path.name)
        logger.info("📊 File size: %s KB", report.size_kb)
        logger.info("📊 Total items: %d", report.document_count)
        return report


__all__ = [
    "SitenavError",
    "IndexWriteError",
    "BuildReport",
    "IndexBuilder",
]
