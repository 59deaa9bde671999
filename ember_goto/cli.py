"""Command-line entry point: go to definition or related files from a terminal."""

import argparse
import logging
import sys
from pathlib import Path

from ember_goto.console_host import ConsoleHost
from ember_goto.extract_reference import extract_reference
from ember_goto.file_kind import FileKind, file_kind_for
from ember_goto.filter_existing import path_exists
from ember_goto.load_config import load_config
from ember_goto.models import SourceLocation
from ember_goto.navigate import navigate
from ember_goto.outcomes import NotFound
from ember_goto.related_files import NOT_FOUND, find_related, related_files
from ember_goto.resolve_definition import project_relative, resolve_definition
from ember_goto.root_configuration import RootConfiguration

logger = logging.getLogger(__name__)


def _load_root_configuration(args: argparse.Namespace) -> RootConfiguration:
    workspace = args.workspace.resolve()
    config = load_config(args.config, workspace_root=workspace)
    return RootConfiguration.from_config(config, workspace)


def run_definition(args: argparse.Namespace) -> int:
    """Resolve the reference at FILE:LINE:COLUMN."""
    file_path = args.file.resolve()
    try:
        source_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read {args.file}: {e}"
        raise SystemExit(msg) from e

    lines = source_text.splitlines()
    if not 1 <= args.line <= len(lines):
        msg = f"Line {args.line} is outside {args.file} ({len(lines)} lines)"
        raise SystemExit(msg)

    location = SourceLocation(str(file_path), lines[args.line - 1], args.column)
    config = _load_root_configuration(args)
    outcome = resolve_definition(
        location, source_text, config, path_exists, max_workers=args.workers
    )
    logger.debug("Outcome: %s", outcome)

    symbol = None
    if file_kind_for(file_path) is FileKind.SCRIPT:
        reference = extract_reference(location.line_text, args.column, FileKind.SCRIPT)
        symbol = reference.raw_text if reference else None

    navigate(outcome, ConsoleHost(interactive=not args.no_input), symbol)
    return 1 if isinstance(outcome, NotFound) else 0


def run_related(args: argparse.Namespace) -> int:
    """List and open the files related to FILE."""
    config = _load_root_configuration(args)
    relative = project_relative(str(args.file.resolve()), config.project_root)

    related = related_files(relative, config, path_exists)
    if related is None:
        print("Sorry, no related files found", file=sys.stderr)
        return 1
    for entry in related:
        if not entry.found:
            print(
                f"{entry.label}: {NOT_FOUND} ({entry.relative_path})",
                file=sys.stderr,
            )

    outcome = find_related(relative, config, path_exists)
    navigate(outcome, ConsoleHost(interactive=not args.no_input))
    return 1 if isinstance(outcome, NotFound) else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        prog="ember-goto",
        description=(
            "Find the module, component, helper or template referenced at a "
            "cursor position, or the files related to a file."
        ),
    )
    ap.add_argument(
        "--workspace",
        type=Path,
        default=Path.cwd(),
        help="Workspace root (default: current directory)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file (default: <workspace>/.ember-goto.yml)",
    )
    ap.add_argument(
        "--no-input",
        action="store_true",
        help="List ambiguous matches instead of prompting for one",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    definition = sub.add_parser("definition", help="Go to definition")
    definition.add_argument("file", type=Path, help="File the cursor is in")
    definition.add_argument("line", type=int, help="1-based line number")
    definition.add_argument("column", type=int, help="0-based column")
    definition.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used for existence checks (default: 1)",
    )
    definition.set_defaults(func=run_definition)

    related = sub.add_parser("related", help="Go to a related file")
    related.add_argument("file", type=Path, help="File to find relatives of")
    related.set_defaults(func=run_related)
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
