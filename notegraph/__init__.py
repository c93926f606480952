from .core import (
    MalformedFilenameError,
    Note,
    NotegraphError,
    NoteWithLinks,
    WorkspaceIndex,
    canonicalize,
)

__all__ = ['canonicalize',
           'MalformedFilenameError',
           'Note',
           'NotegraphError',
           'NoteWithLinks',
           'WorkspaceIndex'
           ]
