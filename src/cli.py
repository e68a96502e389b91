"""Command-line interface for html-import-inliner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from artifacts.inliner import MissingInputError
from artifacts.write import inline_html_imports
from parse.paths import ImportPolicyError
from rules.config import ConfigError, InlinerConfig, load_config
from verify.verify import verify_inlined


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Build output directory of the entry point package (default: .)",
    )
    parser.add_argument(
        "--bootstrap-file",
        default=None,
        help="Bootstrap script path relative to root (default: config value)",
    )
    parser.add_argument(
        "--html-entry-point",
        default=None,
        help="Html entry point path relative to root (default: config value)",
    )
    parser.add_argument(
        "--package",
        default=None,
        help="Package owning the entry point (default: config value)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="html-imports")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inline_parser = subparsers.add_parser(
        "inline", help="Move HtmlImport initializers into the html entry point"
    )
    _add_common_args(inline_parser)
    inline_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on cross-package imports from outside lib/",
    )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify that inlined artifacts are a fixed point"
    )
    _add_common_args(verify_parser)

    return parser


def _resolve_config(root: Path, args: argparse.Namespace) -> InlinerConfig:
    return load_config(
        root,
        overrides={
            "bootstrap_file": args.bootstrap_file,
            "html_entry_point": args.html_entry_point,
            "package": args.package,
            "strict_policy": getattr(args, "strict", None),
        },
    )


def _handle_inline(root: Path, config: InlinerConfig) -> int:
    try:
        inline_html_imports(root=root, config=config)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except (MissingInputError, ImportPolicyError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


def _handle_verify(root: Path, config: InlinerConfig) -> int:
    try:
        result = verify_inlined(root=root, config=config)
    except FileNotFoundError as exc:
        sys.stderr.write(f"root: {root}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except (MissingInputError, ImportPolicyError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    if not result.ok:
        for path in result.mismatches:
            sys.stderr.write(f"mismatches: {path}\n")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(args.root).expanduser().resolve()

    try:
        config = _resolve_config(root, args)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if args.command == "inline":
        return _handle_inline(root, config)

    if args.command == "verify":
        return _handle_verify(root, config)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
