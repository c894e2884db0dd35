"""Filesystem scanning and navigation-tree construction."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..config import NavConfig
from .titles import extract_title
from .types import DocumentEntry, FolderEntry, NavEntry

logger = logging.getLogger(__name__)


def join_relative(relative_path: str, name: str) -> str:
    """Join navigation path segments with ``/`` whatever the host separator."""
    joined = f"{relative_path}/{name}" if relative_path else name
    return joined.replace("\\", "/")


def is_skipped_name(name: str, config: NavConfig) -> bool:
    """Return whether ``name`` is filtered out before any stat call."""
    if name in config.ignored_names:
        return True
    return name.startswith(".") or ".." in name


def display_name(name: str) -> str:
    """Return ``name`` with undecodable filename bytes replaced by U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def path_exists(path: Path) -> bool:
    """Return whether ``path`` exists; any stat error counts as missing."""
    return os.path.exists(path)


def list_directory_names(directory: Path) -> list[str]:
    """Return sorted child names of ``directory``.

    Raises ``OSError`` when the directory cannot be listed.
    """
    with os.scandir(directory) as entries:
        names = [entry.name for entry in entries]
    names.sort()
    return names


def read_document(path: Path) -> str:
    """Read document text as UTF-8, replacing undecodable bytes."""
    return path.read_text(encoding="utf-8", errors="replace")


def scan_directory(directory: Path, relative_path: str, config: NavConfig) -> tuple[NavEntry, ...]:
    """Recursively build name-sorted navigation entries for ``directory``.

    A missing directory yields ``()``. Listing, stat, and read failures are
    logged and only drop the affected subtree or entry. Symbolic links are
    never followed nor included, and non-document files are left out.
    """
    if not path_exists(directory):
        return ()

    try:
        names = list_directory_names(directory)
    except OSError as exc:
        logger.error("Error reading directory %s: %s", directory, exc)
        return ()

    entries: list[NavEntry] = []
    for name in names:
        if is_skipped_name(name, config):
            continue

        child_path = directory / name
        shown_name = display_name(name)
        child_relative = join_relative(relative_path, shown_name)
        try:
            mode = os.lstat(child_path).st_mode
        except OSError as exc:
            logger.error("Error checking %s: %s", child_path, exc)
            continue
        if stat.S_ISLNK(mode):
            logger.debug("Skipping symlink %s", child_path)
            continue

        if stat.S_ISDIR(mode):
            entries.append(
                FolderEntry(
                    name=shown_name,
                    path=child_relative,
                    children=scan_directory(child_path, child_relative, config),
                )
            )
            continue

        if not stat.S_ISREG(mode) or not name.endswith(config.document_extension):
            continue

        try:
            content = read_document(child_path)
        except OSError as exc:
            logger.error("Error reading %s: %s", child_path, exc)
            continue

        entries.append(
            DocumentEntry(
                name=shown_name,
                path=child_relative,
                title=extract_title(content, shown_name),
                hidden=shown_name in config.hidden_names,
            )
        )
    return tuple(entries)


def count_documents(entries: tuple[NavEntry, ...] | list[NavEntry]) -> int:
    """Count document leaves across the whole tree; folders are not counted."""
    count = 0
    for entry in entries:
        if isinstance(entry, DocumentEntry):
            count += 1
        else:
            count += count_documents(entry.children)
    return count


__all__ = [
    "join_relative",
    "is_skipped_name",
    "display_name",
    "path_exists",
    "list_directory_names",
    "read_document",
    "scan_directory",
    "count_documents",
]
