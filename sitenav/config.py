"""Immutable build configuration plus persisted JSON overrides.

``NavConfig`` carries every constant the scanner and builder need.
Overrides come from a JSON config file and are applied defensively:
malformed or missing config falls back to the built-in defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "sitenav"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_CONTENT_DIR = "posts"
DEFAULT_OUTPUT = "navigation.json"
DEFAULT_EXTENSION = ".html"
DEFAULT_ROOT_KEY = "documents"

IGNORED_NAMES = frozenset(
    {
        ".",
        "..",
        "manifest.json",
        "search_index.json",
        "index.html",
        ".DS_Store",
        ".gitignore",
    }
)
HIDDEN_FROM_NAV = frozenset({"privacy.html", "tos.html", "contact.html", "donate.html"})

_STRING_KEYS = ("content_dir", "output", "extension", "root_key", "path_prefix")


@dataclass(frozen=True)
class NavConfig:
    """Everything one navigation build needs, resolved up front."""

    base_dir: Path
    content_dir: str = DEFAULT_CONTENT_DIR
    output: str = DEFAULT_OUTPUT
    document_extension: str = DEFAULT_EXTENSION
    root_key: str = DEFAULT_ROOT_KEY
    path_prefix: str | None = None
    ignored_names: frozenset[str] = IGNORED_NAMES
    hidden_names: frozenset[str] = HIDDEN_FROM_NAV

    @property
    def content_path(self) -> Path:
        return self.base_dir / self.content_dir

    @property
    def output_path(self) -> Path:
        # Absolute outputs win over base_dir in Path joins.
        return self.base_dir / self.output

    @property
    def relative_root(self) -> str:
        """Path prefix for top-level entries; defaults to the content dir name."""
        if self.path_prefix is None:
            return self.content_dir.replace("\\", "/").strip("/")
        return self.path_prefix.replace("\\", "/").strip("/")


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load a JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = DEFAULT_CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _name_list(value: object) -> frozenset[str]:
    """Keep only non-empty string items of a JSON list."""
    if not isinstance(value, list):
        return frozenset()
    return frozenset(item for item in value if isinstance(item, str) and item)


def apply_overrides(config: NavConfig, data: dict[str, object]) -> NavConfig:
    """Return ``config`` updated with recognized, well-typed keys of ``data``.

    String settings replace their defaults. ``ignore`` and ``hide`` lists
    extend the default name sets rather than replacing them. Unknown keys and
    values of the wrong type are dropped.
    """
    changes: dict[str, object] = {}
    for key in _STRING_KEYS:
        value = data.get(key)
        if not isinstance(value, str):
            continue
        if key != "path_prefix" and not value:
            continue
        changes["document_extension" if key == "extension" else key] = value

    extra_ignored = _name_list(data.get("ignore"))
    if extra_ignored:
        changes["ignored_names"] = config.ignored_names | extra_ignored
    extra_hidden = _name_list(data.get("hide"))
    if extra_hidden:
        changes["hidden_names"] = config.hidden_names | extra_hidden

    return replace(config, **changes) if changes else config


def resolve_config(base_dir: Path, config_path: Path | None = None) -> NavConfig:
    """Build the effective config for ``base_dir`` from defaults and file overrides."""
    return apply_overrides(NavConfig(base_dir=base_dir), load_config(config_path))


__all__ = [
    "APP_NAME",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONTENT_DIR",
    "DEFAULT_OUTPUT",
    "DEFAULT_EXTENSION",
    "DEFAULT_ROOT_KEY",
    "IGNORED_NAMES",
    "HIDDEN_FROM_NAV",
    "NavConfig",
    "load_config",
    "apply_overrides",
    "resolve_config",
]
