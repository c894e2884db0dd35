"""Display-title extraction for HTML documents.

Deliberately a permissive text scan rather than an HTML parser: malformed or
unclosed tags simply do not match and the next title source is tried.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath

_TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)
_H1_RE = re.compile(r"<h1[^>]*>(.*?)</h1>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]*>")
_FILENAME_SEPARATOR_RE = re.compile(r"[-_]")
# Space separators, line terminators and U+FEFF; U+001C..U+001F are not trimmed.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(text: str) -> str:
    """Trim surrounding whitespace, treating U+FEFF as whitespace."""
    return text.strip(_TRIM_CHARS)


def strip_tags(markup: str) -> str:
    """Remove every ``<...>`` span from ``markup``."""
    return _TAG_RE.sub("", markup)


def title_from_filename(filename: str) -> str:
    """Turn ``my-cool_post.html`` into ``my cool post``."""
    stem = PurePosixPath(filename.replace("\\", "/")).stem
    return _FILENAME_SEPARATOR_RE.sub(" ", stem)


def extract_title(content: str, filename: str) -> str:
    """Return the display title for a document.

    Sources in precedence order, first match wins:

    1. the first ``<title>`` element, tags stripped and trimmed. An empty
       result is returned as-is; a present ``<title>`` always wins.
    2. the first ``<h1>`` element, tags and ``#`` markers stripped, trimmed.
    3. the filename stem with hyphens and underscores turned into spaces.
    """
    title_match = _TITLE_RE.search(content)
    if title_match is not None:
        return trim(strip_tags(title_match.group(1)))

    h1_match = _H1_RE.search(content)
    if h1_match is not None:
        return trim(strip_tags(h1_match.group(1)).replace("#", ""))

    return title_from_filename(filename)


__all__ = [
    "extract_title",
    "strip_tags",
    "title_from_filename",
    "trim",
]
