from __future__ import annotations

import asyncio
import logging
import threading
from pathlib import Path
from typing import Iterable

from notegraph.settings import APP_NAME
from notegraph.vault.repo import read_workspace_file

from .canonical import canonicalize
from .filenames import split_note_filename
from .markdown_parse import extract_link_tokens, extract_title
from .models import Note, NoteWithLinks

log = logging.getLogger(APP_NAME)

Index = dict[str, set[str]]


class WorkspaceIndex:
    """
    In-memory note registry plus the two inverse link indexes.

    ``_outgoing[a]`` holds every id that note ``a`` links to and
    ``_incoming[b]`` every id linking to ``b``. The two are kept as exact
    inverses. Targets need not be registered; such dangling ids stay in the
    indexes and are dropped only when a query resolves them.

    Every mutation and query runs under one re-entrant lock, so callers on
    different threads never see a half applied ``add_note``.
    """

    def __init__(
        self,
        path: str | Path,
        notes: Iterable[Note] = (),
        *,
        keep_stale_links: bool = False,
    ):
        self.path = Path(path)
        self.keep_stale_links = keep_stale_links

        self._lock = threading.RLock()
        self._notes: dict[str, Note] = {}
        self._outgoing: Index = {}
        self._incoming: Index = {}

        for note in notes:
            self.add_note(note)

    # ───────────────────────── mutation ─────────────────────────

    def add_note(self, note: Note) -> Note:
        src = note.canonical_id
        targets = [canonicalize(token) for token in extract_link_tokens(note.content)]

        with self._lock:
            replaced = src in self._notes
            self._notes[src] = note

            if not self.keep_stale_links:
                self._retract_outgoing(src)

            for dst in targets:
                self._outgoing.setdefault(src, set()).add(dst)
                self._incoming.setdefault(dst, set()).add(src)

        log.debug(
            "note added id=%s links=%d replaced=%s", src, len(set(targets)), replaced
        )
        return note

    def add_note_from_markdown(self, absolute_path: str | Path, markdown_text: str) -> Note:
        absolute_path = str(absolute_path)
        parts = split_note_filename(absolute_path)
        title = extract_title(markdown_text)

        note = Note(
            original=parts.original,
            canonical_id=canonicalize(parts.original),
            title=title or parts.original,
            filename=parts.filename,
            extension=parts.extension,
            absolute_path=absolute_path,
            content=markdown_text,
        )
        return self.add_note(note)

    async def add_note_by_file_path(self, file_path: str | Path) -> Note:
        """
        Read a note relative to the workspace (or absolute) and add it.

        File errors propagate unchanged.
        """
        path = Path(file_path)
        if not path.is_absolute():
            path = self.path / path

        markdown_text = await asyncio.to_thread(read_workspace_file, path)
        return self.add_note_from_markdown(path, markdown_text)

    def _retract_outgoing(self, src: str) -> None:
        for dst in self._outgoing.pop(src, set()):
            inc = self._incoming.get(dst)
            if inc:
                inc.discard(src)
                if not inc:
                    self._incoming.pop(dst, None)

    # ───────────────────────── queries ─────────────────────────

    def get_note_with_links(self, note_id: str) -> NoteWithLinks | None:
        with self._lock:
            note = self._notes.get(note_id)
            if note is None:
                return None

            return NoteWithLinks(
                note=note,
                linked_notes=self._resolve(self._outgoing.get(note_id, ())),
                backlinks=self._resolve(self._incoming.get(note_id, ())),
            )

    def _resolve(self, ids: Iterable[str]) -> tuple[Note, ...]:
        return tuple(self._notes[i] for i in ids if i in self._notes)

    def get_note(self, note_id: str) -> Note | None:
        with self._lock:
            return self._notes.get(note_id)

    def notes(self) -> tuple[Note, ...]:
        with self._lock:
            return tuple(self._notes.values())

    def links_from(self, note_id: str) -> frozenset[str]:
        with self._lock:
            return frozenset(self._outgoing.get(note_id, ()))

    def links_to(self, note_id: str) -> frozenset[str]:
        with self._lock:
            return frozenset(self._incoming.get(note_id, ()))

    def outgoing_snapshot(self) -> dict[str, set[str]]:
        with self._lock:
            return {src: set(dsts) for src, dsts in self._outgoing.items()}

    def dangling_targets(self) -> set[str]:
        with self._lock:
            return {dst for dst in self._incoming if dst not in self._notes}

    def asymmetries(self) -> list[tuple[str, str]]:
        """Edges (src, dst) present in one index but not mirrored in the other."""
        with self._lock:
            bad = [
                (src, dst)
                for src, dsts in self._outgoing.items()
                for dst in dsts
                if src not in self._incoming.get(dst, ())
            ]
            bad += [
                (src, dst)
                for dst, srcs in self._incoming.items()
                for src in srcs
                if dst not in self._outgoing.get(src, ())
            ]
        return bad

    def is_consistent(self) -> bool:
        return not self.asymmetries()

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        with self._lock:
            return note_id in self._notes
