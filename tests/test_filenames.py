import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notegraph.core.errors import MalformedFilenameError
from notegraph.core.filenames import split_note_filename


def test_basic():
    parts = split_note_filename("/ws/My Note.md")
    assert parts.filename == "My Note.md"
    assert parts.original == "My Note"
    assert parts.extension == "md"


def test_multi_dot():
    parts = split_note_filename("/ws/sub/v1.2.note.md")
    assert parts.original == "v1.2.note"
    assert parts.extension == "md"


def test_no_extension():
    with pytest.raises(MalformedFilenameError):
        split_note_filename("/ws/README")


def test_trailing_dot():
    with pytest.raises(MalformedFilenameError):
        split_note_filename("/ws/note.")


def test_empty_name():
    with pytest.raises(MalformedFilenameError):
        split_note_filename("/ws/.md")


def test_is_value_error():
    with pytest.raises(ValueError) as exc_info:
        split_note_filename("plain")
    assert "plain" in str(exc_info.value)
