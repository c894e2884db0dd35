"""Command-line front door for sitenav.

Parses CLI options, resolves the effective build config, and runs one
navigation build. Exit status is non-zero only when the index cannot be
written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import DEFAULT_CONFIG_PATH, NavConfig, resolve_config
from .highlight import DEFAULT_STYLE, colorize_json
from .index import IndexBuilder, IndexWriteError
from .log import configure_logging

logger = logging.getLogger(__name__)


def _non_empty(value: str) -> str:
    """argparse type rejecting empty strings."""
    if not value:
        raise argparse.ArgumentTypeError("value must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitenav",
        description="Generate a static navigation JSON index from a directory of HTML documents.",
    )
    parser.add_argument(
        "base_dir",
        nargs="?",
        default=None,
        help="Site root holding the content directory. Defaults to current directory.",
    )
    parser.add_argument("--content-dir", type=_non_empty, help="Content directory under the site root (default: posts).")
    parser.add_argument("--output", type=_non_empty, help="Output file, relative to the site root (default: navigation.json).")
    parser.add_argument("--extension", type=_non_empty, help="Document file extension (default: .html).")
    parser.add_argument("--root-key", type=_non_empty, help="Top-level key of the JSON index (default: documents).")
    parser.add_argument(
        "--path-prefix",
        default=None,
        help="Prefix for entry paths. Defaults to the content directory name; pass '' for none.",
    )
    parser.add_argument("--ignore", action="append", default=[], metavar="NAME", help="Extra basename to skip.")
    parser.add_argument("--hide", action="append", default=[], metavar="NAME", help="Extra basename to flag hidden.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"JSON config file (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument("--print", dest="print_only", action="store_true", help="Print the index to stdout instead of writing it.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for --print output.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only report warnings and errors.")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Report skipped entries too.")
    return parser


def config_from_args(args: argparse.Namespace, default_base: Path) -> NavConfig:
    """Layer CLI flags over defaults and config-file overrides."""
    base_dir = Path(args.base_dir) if args.base_dir is not None else default_base
    config = resolve_config(base_dir, args.config)

    changes: dict[str, object] = {}
    if args.content_dir is not None:
        changes["content_dir"] = args.content_dir
    if args.output is not None:
        changes["output"] = args.output
    if args.extension is not None:
        changes["document_extension"] = args.extension
    if args.root_key is not None:
        changes["root_key"] = args.root_key
    if args.path_prefix is not None:
        changes["path_prefix"] = args.path_prefix
    if args.ignore:
        changes["ignored_names"] = config.ignored_names | frozenset(args.ignore)
    if args.hide:
        changes["hidden_names"] = config.hidden_names | frozenset(args.hide)
    return replace(config, **changes) if changes else config


def main(default_base: Path | None = None) -> None:
    """Parse CLI arguments and run one navigation build.

    ``default_base`` is primarily for tests; when omitted the current working
    directory is used. Raises ``SystemExit(1)`` when the index cannot be
    written; every other failure degrades to a partial index.
    """
    args = build_parser().parse_args()

    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    configure_logging(level)

    config = config_from_args(args, Path.cwd() if default_base is None else default_base)
    builder = IndexBuilder(config)

    logger.info("🚀 Site Navigation Builder")
    logger.info("🔨 Building navigation structure...")

    if args.print_only:
        text = builder.serialize(builder.build())
        no_color = args.no_color or not sys.stdout.isatty()
        sys.stdout.write(colorize_json(text, args.style, no_color) + "\n")
        return

    try:
        builder.run()
    except IndexWriteError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    logger.info("✨ Build complete!")


if __name__ == "__main__":
    main()
