"""Command line interface for creating new projects from templates."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

from .command import NewProjectRequest, choose_parent, load_state, run_new_project, save_state
from .config import ScaffoldSettings
from .errors import ScaffoldError
from .io.adapters.local import JsonPreferenceStore
from .io.schema import ScaffoldResult
from .scaffold import ProjectScaffolder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create new projects from a template directory")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="create a new project from the templates")
    new_parser.add_argument(
        "name",
        nargs="?",
        default="",
        help="Project folder name (defaults to Untitled-N)",
    )
    new_parser.add_argument(
        "-p",
        "--parent",
        type=Path,
        help="Folder the project is created in; remembered for later runs",
    )
    new_parser.add_argument("-t", "--templates", type=Path, help="Override the template directory")
    new_parser.add_argument("--preferences", type=Path, help="Override the preferences file")

    return parser


def _open_entry(path: str) -> None:
    print(f"Opening {path}")


def _report(result: ScaffoldResult) -> None:
    print(f"Project created at {result.project_dir}")
    if result.error_count:
        names = ", ".join(sorted(result.outcome.failed))
        print(
            f"warning: {result.error_count} template file(s) were not copied: {names}",
            file=sys.stderr,
        )


def _handle_new(args: argparse.Namespace, settings: ScaffoldSettings) -> int:
    store = JsonPreferenceStore(args.preferences or settings.preferences_path)
    state = load_state(store)
    if args.parent is not None:
        state = choose_parent(state, str(args.parent.expanduser().resolve()))
        save_state(store, state)

    parent = state.parent_folder or str(settings.default_parent)
    scaffolder = ProjectScaffolder(
        str(args.templates or settings.template_dir),
        entry_file=settings.entry_file,
        open_file=_open_entry,
    )
    request = NewProjectRequest(parent=parent, name=args.name)

    try:
        result, state = asyncio.run(run_new_project(scaffolder, request, state))
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    save_state(store, state)
    _report(result)
    return 0


def main(argv: Sequence[str] | None = None, *, settings: ScaffoldSettings | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    settings = settings or ScaffoldSettings.from_env()
    if args.command == "new":
        return _handle_new(args, settings)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
