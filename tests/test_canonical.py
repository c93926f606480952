import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from notegraph.core.canonical import canonicalize


SAMPLES = [
    "",
    "My Note",
    "My Note!!",
    "my_note",
    "  Hello  ",
    "C++ (draft)",
    "v1.2.note",
    "\u00dcn\u00efcode N\u00e1me",
    "a\u00a0b\ufeffc",
    "trailing\uff3f",
    "--__--",
    "\u0132 \u0130stanbul",
]


def test_punctuation_and_case_collapse():
    assert canonicalize("My Note!!") == "my-note"
    assert canonicalize("my_note") == "my-note"
    assert canonicalize("my-note") == "my-note"
    assert canonicalize("MY   NOTE") == "my-note"


def test_empty_string():
    assert canonicalize("") == ""


def test_leading_separator_is_kept_trailing_is_stripped():
    assert canonicalize("  Hello  ") == "-hello"
    assert canonicalize("C++ (draft)") == "c-draft"


def test_dots_become_separators():
    assert canonicalize("v1.2.note") == "v1-2-note"


def test_unicode_whitespace_variants():
    assert canonicalize("a\u00a0b") == "a-b"
    assert canonicalize("a\u3000b") == "a-b"
    assert canonicalize("a\ufeffb") == "a-b"


def test_fullwidth_trailing_separators():
    assert canonicalize("note\uff3f") == "note"
    assert canonicalize("note\uff0d") == "note"
    # only stripped at the end
    assert canonicalize("a\uff0db") == "a\uff0db"


def test_non_ascii_letters_survive():
    assert canonicalize("\u00dcn\u00efcode N\u00e1me") == "\u00fcn\u00efcode-n\u00e1me"


def test_only_separators():
    assert canonicalize("--__--") == ""
    assert canonicalize("!!!") == ""


def test_idempotent():
    for s in SAMPLES:
        once = canonicalize(s)
        assert canonicalize(once) == once, s


def test_deterministic():
    for s in SAMPLES:
        assert canonicalize(s) == canonicalize(s)
