from .canonical import canonicalize
from .errors import MalformedFilenameError, NotegraphError
from .filenames import NoteFilename, split_note_filename
from .markdown_parse import extract_link_tokens, extract_title
from .models import Note, NoteWithLinks
from .workspace import WorkspaceIndex

__all__ = ["canonicalize",
           "MalformedFilenameError",
           "NotegraphError",
           "NoteFilename",
           "split_note_filename",
           "extract_link_tokens",
           "extract_title",
           "Note",
           "NoteWithLinks",
           "WorkspaceIndex"
           ]
