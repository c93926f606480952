from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from notegraph.app_settings import SettingsKeys, get_int, get_str, open_settings
from notegraph.core.canonical import canonicalize
from notegraph.core.errors import MalformedFilenameError
from notegraph.core.workspace import WorkspaceIndex
from notegraph.graph.builder import build_graph_snapshot
from notegraph.logging_setup import SESSION_ID, install_global_exception_hooks, log, setup_logging
from notegraph.services.markdown_renderer import MarkdownRenderer
from notegraph.vault.repo import WorkspaceRepository


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="notegraph", description="Wiki-link graph of a markdown workspace")
    p.add_argument(
        "--workspace",
        type=Path,
        default=None,
        help="Path to the notes folder (defaults to the last one used)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to the console")

    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("scan", help="Load every note and print a summary")

    show = sub.add_parser("show", help="Print a note with its links and backlinks")
    show.add_argument("name")

    graph = sub.add_parser("graph", help="Print the link graph as JSON")
    graph.add_argument("--center", default=None)
    graph.add_argument("--depth", type=int, default=None)
    graph.add_argument("--dangling", action="store_true", help="Include unresolved targets")

    render = sub.add_parser("render", help="Print a note as sanitized HTML")
    render.add_argument("name")

    return p.parse_args(argv)


async def load_workspace(index: WorkspaceIndex, paths: list[Path]) -> list[tuple[Path, Exception]]:
    """
    Add ``paths`` one after another, in the given order.

    Notes sharing a canonical id resolve last-write-wins, so the order decides
    which one stays. Returns the (path, error) pairs that failed.
    """
    failures = []
    for path in paths:
        try:
            await index.add_note_by_file_path(path)
        except (OSError, UnicodeDecodeError, MalformedFilenameError) as exc:
            log.warning("could not add note path=%s error=%s", path, exc)
            failures.append((path, exc))
    return failures


def _print_note_list(label: str, notes) -> None:
    print(f"{label} ({len(notes)}):")
    for note in sorted(notes, key=lambda n: n.canonical_id):
        print(f"  - {note.title} [{note.canonical_id}]")


def cmd_scan(index: WorkspaceIndex, failures: list) -> int:
    edges = sum(len(dsts) for dsts in index.outgoing_snapshot().values())
    dangling = sorted(index.dangling_targets())

    print(f"workspace: {index.path}")
    print(f"notes: {len(index)}")
    print(f"links: {edges}")
    print(f"dangling: {len(dangling)}")
    for note_id in dangling:
        print(f"  - {note_id}")
    if failures:
        print(f"failed: {len(failures)}")
        for path, err in failures:
            print(f"  - {path}: {err}")
    return 0


def cmd_show(index: WorkspaceIndex, name: str) -> int:
    note_id = canonicalize(name)
    result = index.get_note_with_links(note_id)
    if result is None:
        print(f"note not found: {name} ({note_id})", file=sys.stderr)
        return 1

    print(f"{result.note.title} [{note_id}]")
    print(f"path: {result.note.absolute_path}")
    _print_note_list("links", result.linked_notes)
    _print_note_list("backlinks", result.backlinks)
    return 0


def cmd_graph(index: WorkspaceIndex, args: argparse.Namespace, settings) -> int:
    center = canonicalize(args.center) if args.center else None
    depth = args.depth if args.depth is not None else get_int(settings, SettingsKeys.GRAPH_DEPTH, 1)
    mode = "local" if center else get_str(settings, SettingsKeys.GRAPH_MODE, "global")
    if mode == "local" and not center:
        mode = "global"

    snapshot = build_graph_snapshot(
        index,
        mode=mode,
        center=center,
        depth=depth,
        include_dangling=args.dangling,
    )
    print(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))
    return 0


def cmd_render(index: WorkspaceIndex, name: str) -> int:
    note_id = canonicalize(name)
    page = MarkdownRenderer(index).render_page(note_id)
    if page is None:
        print(f"note not found: {name} ({note_id})", file=sys.stderr)
        return 1
    print(page)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(console_level=logging.DEBUG if args.verbose else logging.WARNING)
    install_global_exception_hooks()

    settings = open_settings()
    workspace = args.workspace
    if workspace is None:
        workspace = Path(get_str(settings, SettingsKeys.WORKSPACE_DIR, "") or Path.cwd())

    workspace = workspace.expanduser().resolve()
    if not workspace.is_dir():
        log.error("workspace is not a directory: %s", workspace)
        print(f"workspace is not a directory: {workspace}", file=sys.stderr)
        return 2

    settings.setValue(SettingsKeys.WORKSPACE_DIR, str(workspace))
    log.info("loading workspace=%s sid=%s", workspace, SESSION_ID)

    index = WorkspaceIndex(workspace)
    paths = WorkspaceRepository(workspace).list_note_paths()
    failures = asyncio.run(load_workspace(index, paths))

    if args.command == "scan":
        return cmd_scan(index, failures)
    if args.command == "show":
        return cmd_show(index, args.name)
    if args.command == "graph":
        return cmd_graph(index, args, settings)
    return cmd_render(index, args.name)


if __name__ == "__main__":
    raise SystemExit(main())
