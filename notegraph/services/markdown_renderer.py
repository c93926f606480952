from __future__ import annotations

import html
from urllib.parse import quote

import markdown as md

from notegraph.core.canonical import canonicalize
from notegraph.core.markdown_parse import WIKILINK_RE, split_code, split_wikilink
from notegraph.core.sanitize import sanitize_rendered_html
from notegraph.core.workspace import WorkspaceIndex


class MarkdownRenderer:
    """Renders notes of a WorkspaceIndex to sanitized HTML."""

    def __init__(self, index: WorkspaceIndex):
        self.index = index

    def wikilinks_to_html(self, markdown_text: str) -> str:
        def repl(m) -> str:
            target, label = split_wikilink(m.group(1) or "")
            if not target:
                return ""

            text = html.escape(label, quote=False)
            note_id = canonicalize(target)
            if note_id not in self.index:
                return f'<span class="dangling" title="{html.escape(note_id)}">{text}</span>'

            href = "note://" + quote(note_id, safe="")
            return f'<a href="{href}">{text}</a>'

        # code spans and fenced blocks keep their wiki-link text verbatim
        return "".join(
            chunk if is_code else WIKILINK_RE.sub(repl, chunk)
            for chunk, is_code in split_code(markdown_text)
        )

    def render_html(self, markdown_text: str) -> str:
        rendered = md.markdown(
            self.wikilinks_to_html(markdown_text),
            extensions=["fenced_code", "tables", "toc"],
        )
        return sanitize_rendered_html(rendered)

    def render_page(self, note_id: str) -> str | None:
        note = self.index.get_note(note_id)
        if note is None:
            return None

        body = self.render_html(note.content)
        return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <title>{html.escape(note.title)}</title>
  <style>
    body {{ font-family: sans-serif; padding: 16px; line-height: 1.5; }}
    code, pre {{ background: #f5f5f5; }}
    pre {{ padding: 12px; overflow-x: auto; }}
    a {{ text-decoration: none; }}
    a:hover {{ text-decoration: underline; }}
    .dangling {{ color: #999; border-bottom: 1px dashed #999; }}
  </style>
</head>
<body>{body}</body>
</html>
"""
