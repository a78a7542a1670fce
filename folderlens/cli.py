"""Command-line front door for folderlens.

Parses CLI options, builds a ``TreeStateEngine`` from stored preferences,
loads a folder (or a saved ``file-tree.json`` snapshot), applies the
requested actions and prints the resulting view or export.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from .export import (
    IGNORE_RULES_FILENAME,
    STRUCTURED_EXPORT_FILENAME,
    TEXT_EXPORT_FILENAME,
    SnapshotFormatError,
    copy_to_clipboard,
    tree_from_structured,
    write_export,
)
from .file_tree_model.types import IgnoreRule
from .render import highlight_json, render_keybinding_help
from .runtime import config
from .runtime.engine import TreeStateEngine
from .tree_model import render_search_results, render_tree_lines
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _non_negative_int(value: str) -> int:
    """argparse type for depth limits."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _tag_assignment(value: str) -> tuple[str, str]:
    """argparse type for ``ID=TAG`` pairs."""
    node_id, sep, tag = value.rpartition("=")
    if not sep or not node_id or not tag.strip():
        raise argparse.ArgumentTypeError(f"expected ID=TAG, got {value!r}")
    return node_id, tag.strip()


def setup_logging(verbose: bool) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _cli_notify(level: str, message: str) -> None:
    """Print error notifications; other levels go to the log only."""
    if level == "error":
        print(message, file=sys.stderr)
    else:
        logging.getLogger("folderlens.cli").info("%s", message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse, filter, search, tag and export a folder tree."
    )
    parser.add_argument("path", nargs="?", default=None, help="Folder to load. Defaults to current directory.")
    parser.add_argument("--snapshot", metavar="FILE", help=f"Load a saved {STRUCTURED_EXPORT_FILENAME} instead of a folder.")
    parser.add_argument("--no-files", action="store_true", help="Show folders only.")
    parser.add_argument("--hidden", action="store_true", help="Show dot-files and dot-folders.")
    parser.add_argument("--ignore", metavar="PATTERN", action="append", default=[], help="Add an ignore rule.")
    parser.add_argument("--no-default-ignores", action="store_true", help="Start from an empty ignore-rule list.")
    parser.add_argument("--ignore-rules", metavar="FILE", help=f"Import ignore rules from an {IGNORE_RULES_FILENAME} file.")
    parser.add_argument("--save-ignore-rules", metavar="FILE", help="Write the active ignore rules to FILE.")
    parser.add_argument("--search", metavar="QUERY", help="Print nodes whose name contains QUERY.")
    expansion = parser.add_mutually_exclusive_group()
    expansion.add_argument("--expand-all", action="store_true", help="Expand every folder.")
    expansion.add_argument("--collapse-all", action="store_true", help="Collapse every folder.")
    parser.add_argument("--tag", metavar="ID=TAG", type=_tag_assignment, action="append", default=[], help="Tag a node.")
    parser.add_argument("--export", choices=("json", "text"), help="Export the filtered tree.")
    parser.add_argument("--output", metavar="DIR", help="Write the export into DIR instead of stdout.")
    parser.add_argument("--copy", action="store_true", help="Copy the export to the clipboard.")
    parser.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    parser.add_argument("--style", default="monokai", help="Pygments style for JSON output.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--keys", action="store_true", help="Print keyboard shortcuts and exit.")
    parser.add_argument("--max-depth", type=_non_negative_int, default=None, help="Limit how deep folders are read.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _resolve_node_id(engine: TreeStateEngine, node_id: str) -> str:
    """Accept absolute ids or paths relative to the loaded root."""
    if engine.find_node(node_id) is not None:
        return node_id
    return os.path.join(engine.raw_tree.path, node_id)


def _build_engine(args: argparse.Namespace) -> TreeStateEngine:
    settings = config.load_display_settings()
    if args.no_files:
        settings = replace(settings, show_files=False)
    if args.hidden:
        settings = replace(settings, show_hidden_files=True)
    if args.theme:
        settings = replace(settings, theme=args.theme)

    rules = [] if args.no_default_ignores else config.load_ignore_rules()
    max_depth = args.max_depth if args.max_depth is not None else config.load_max_depth()
    engine = TreeStateEngine(notify=_cli_notify, ignore_rules=rules, settings=settings, max_depth=max_depth)

    if args.ignore_rules:
        try:
            data = Path(args.ignore_rules).read_bytes()
        except OSError as exc:
            raise SystemExit(f"Cannot read {args.ignore_rules}: {exc}") from exc
        if not engine.import_ignore_rules(data):
            raise SystemExit(1)
    if args.ignore:
        extra = [IgnoreRule(pattern, pattern, True) for pattern in args.ignore]
        engine.set_ignore_rules([*engine.ignore_rules, *extra])
    return engine


def _load(engine: TreeStateEngine, args: argparse.Namespace, default_path: Path | None) -> None:
    if args.snapshot is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --snapshot.")
        try:
            tree = tree_from_structured(Path(args.snapshot).read_bytes())
        except (OSError, SnapshotFormatError) as exc:
            raise SystemExit(f"Cannot load snapshot {args.snapshot}: {exc}") from exc
        engine.load_snapshot(tree)
        return

    path = Path(args.path) if args.path else (default_path or Path.cwd())
    if not path.is_dir():
        raise SystemExit(f"Folder not found: {path}")
    if not engine.load(str(path.resolve())):
        raise SystemExit(1)


def _emit(data: bytes, args: argparse.Namespace, use_color: bool) -> None:
    """Write an export to ``--output``, the clipboard, or stdout."""
    filename = STRUCTURED_EXPORT_FILENAME if args.export == "json" else TEXT_EXPORT_FILENAME
    if args.output:
        target = write_export(data, Path(args.output), filename)
        print(f"Wrote {target}")
        return
    text = data.decode("utf-8")
    if args.copy:
        if not copy_to_clipboard(text):
            print("Clipboard is not available.", file=sys.stderr)
        return
    if args.export == "json" and use_color:
        text = highlight_json(text, args.style)
    sys.stdout.write(text)


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one folderlens session.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    use_color = not args.no_color and sys.stdout.isatty()
    with _build_engine(args) as engine:
        theme = resolve_theme(engine.settings.theme, no_color=not use_color)
        if args.keys:
            print("\n".join(render_keybinding_help(engine.build_keymap(), theme)))
            return

        if args.save_ignore_rules:
            target = Path(args.save_ignore_rules)
            write_export(engine.export_ignore_rules(), target.parent, target.name)

        _load(engine, args, default_path)

        if args.expand_all:
            engine.expand_all()
        elif args.collapse_all:
            engine.collapse_all()
        for node_id, tag in args.tag:
            engine.add_tag(_resolve_node_id(engine, node_id), tag)

        if args.search is not None:
            results = engine.set_search_query(args.search)
            for row in render_search_results(results, args.search, theme=theme):
                print(row)
            return

        if args.export is not None:
            data = engine.export_structured() if args.export == "json" else engine.export_text()
            _emit(data, args, use_color)
            return

        for line in render_tree_lines(engine.filtered_tree, theme=theme):
            print(line)
