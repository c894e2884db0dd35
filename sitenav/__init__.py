"""Public package surface for sitenav.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in ``sitenav.nav_tree`` and ``sitenav.index``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
