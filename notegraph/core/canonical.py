from __future__ import annotations

import re

SLUG_SEPARATOR = "-"

# ECMAScript "\s" class; Python's own \s lacks U+FEFF and adds C0 separators.
_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_PUNCTUATION = r"""!"#$%&'()*+,\-./:;<=>?@\[\\\]^_\u2018{|}~"""

SEPARATOR_RUN_RE = re.compile(f"[{_PUNCTUATION}{_WHITESPACE}]+")
TRAILING_SEPARATORS_RE = re.compile("[-_\uff0d\uff3f ]+$")


def canonicalize(name: str) -> str:
    """
    Map a free-form note name to the slug used as its graph node key.

    "My Note", "my-note" and "my_note" all collapse to "my-note".
    Idempotent and total: ``canonicalize("") == ""``.
    """
    slug = SEPARATOR_RUN_RE.sub(SLUG_SEPARATOR, name)
    slug = slug.lower()
    return TRAILING_SEPARATORS_RE.sub("", slug)
