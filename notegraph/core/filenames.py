from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from .errors import MalformedFilenameError


@dataclass(frozen=True)
class NoteFilename:
    filename: str
    original: str
    extension: str


def split_note_filename(path: str) -> NoteFilename:
    """
    Split the basename of ``path`` into original name and extension.

    The last ``.`` segment is the extension and the rest is rejoined, so
    ``v1.2.note.md`` gives ``("v1.2.note", "md")``. A basename without an
    extension segment, or with nothing in front of it, is rejected.
    """
    filename = PurePath(path).name
    if "." not in filename:
        raise MalformedFilenameError(path, "no extension")

    original, extension = filename.rsplit(".", 1)
    if not extension:
        raise MalformedFilenameError(path, "empty extension")
    if not original:
        raise MalformedFilenameError(path, "empty note name")

    return NoteFilename(filename=filename, original=original, extension=extension)
