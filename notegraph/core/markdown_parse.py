from __future__ import annotations

import html
import re

import markdown as md

WIKILINK_RE = re.compile(r"\[\[([^\]]+)\]\]")
_FENCED_CODE = r"^[ \t]{0,3}(`{3,}|~{3,}).*?^[ \t]{0,3}\1[ \t]*$"
_INLINE_CODE = r"`[^`\n]*`"
CODE_RE = re.compile(f"(?:{_FENCED_CODE})|(?:{_INLINE_CODE})", re.MULTILINE | re.DOTALL)


def split_wikilink(inner: str) -> tuple[str, str]:
    """
    Split the inside of ``[[...]]`` into (target, label).

    ``Note#Heading`` and ``Note^block`` point at ``Note``; an alias after
    ``|`` becomes the label.
    """
    inner = inner.strip()
    if "|" in inner:
        target_raw, label = inner.split("|", 1)
        label = label.strip()
    else:
        target_raw, label = inner, inner

    target = re.split(r"[#^]", target_raw, maxsplit=1)[0].strip()
    return target, label or target


def split_code(markdown_text: str) -> list[tuple[str, bool]]:
    """
    Cut text into (chunk, is_code) pieces.

    Fenced blocks and inline code spans are code; wiki-links inside them are
    not links.
    """
    chunks: list[tuple[str, bool]] = []
    pos = 0
    for m in CODE_RE.finditer(markdown_text):
        if m.start() > pos:
            chunks.append((markdown_text[pos:m.start()], False))
        chunks.append((m.group(0), True))
        pos = m.end()
    if pos < len(markdown_text):
        chunks.append((markdown_text[pos:], False))
    return chunks


def _strip_code(markdown_text: str) -> str:
    return "".join(chunk for chunk, is_code in split_code(markdown_text) if not is_code)


def extract_link_tokens(markdown_text: str) -> list[str]:
    """Raw, uncanonicalized wiki-link targets in order of appearance."""
    tokens: list[str] = []
    for m in WIKILINK_RE.finditer(_strip_code(markdown_text or "")):
        target, _ = split_wikilink(m.group(1) or "")
        if target:
            tokens.append(target)
    return tokens


def _first_h1(toc_tokens: list[dict]) -> str | None:
    for token in toc_tokens:
        if token.get("level") == 1:
            return token.get("name")
        nested = _first_h1(token.get("children") or [])
        if nested is not None:
            return nested
    return None


def extract_title(markdown_text: str) -> str | None:
    """Text of the first level-1 heading, or None."""
    if not markdown_text:
        return None

    converter = md.Markdown(extensions=["fenced_code", "toc"])
    converter.convert(markdown_text)
    name = _first_h1(getattr(converter, "toc_tokens", []))
    if name is None:
        return None

    title = html.unescape(name).strip()
    return title or None
