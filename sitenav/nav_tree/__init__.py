"""Domain model for the navigation tree.

This package contains the non-I/O-driver tree primitives:
- folder/document entry datatypes with nested children
- title extraction from document markup
- recursive filesystem scanning and document counting
"""

from __future__ import annotations

from .types import DocumentEntry, FolderEntry, NavEntry, NavIndex
from .titles import extract_title, strip_tags, title_from_filename
from .fs import (
    count_documents,
    display_name,
    is_skipped_name,
    join_relative,
    list_directory_names,
    path_exists,
    read_document,
    scan_directory,
)

__all__ = [
    "DocumentEntry",
    "FolderEntry",
    "NavEntry",
    "NavIndex",
    "extract_title",
    "strip_tags",
    "title_from_filename",
    "count_documents",
    "display_name",
    "is_skipped_name",
    "join_relative",
    "list_directory_names",
    "path_exists",
    "read_document",
    "scan_directory",
]
