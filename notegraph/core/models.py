from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    """One markdown document, as seen when it was added."""

    original: str
    canonical_id: str
    title: str
    filename: str
    extension: str
    absolute_path: str
    content: str


@dataclass(frozen=True)
class NoteWithLinks:
    note: Note
    # notes referenced from this note
    linked_notes: tuple[Note, ...]
    # notes that reference this note
    backlinks: tuple[Note, ...]

    @property
    def canonical_id(self) -> str:
        return self.note.canonical_id
