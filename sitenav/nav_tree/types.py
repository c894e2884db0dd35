"""Domain datatypes for the navigation tree written to the index file."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentEntry:
    """Navigable document leaf with its display title."""

    name: str
    path: str
    title: str
    hidden: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "path": self.path,
            "type": "file",
            "title": self.title,
            "hidden": self.hidden,
        }


@dataclass(frozen=True)
class FolderEntry:
    """Folder entry with recursively nested, name-sorted children."""

    name: str
    path: str
    children: tuple["NavEntry", ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "path": self.path,
            "type": "folder",
            "children": [child.to_dict() for child in self.children],
        }


NavEntry = FolderEntry | DocumentEntry


@dataclass(frozen=True)
class NavIndex:
    """Top-level navigation artifact: the content root's children."""

    documents: tuple[NavEntry, ...] = ()

    def to_dict(self, root_key: str) -> dict[str, object]:
        return {root_key: [entry.to_dict() for entry in self.documents]}


__all__ = [
    "DocumentEntry",
    "FolderEntry",
    "NavEntry",
    "NavIndex",
]
