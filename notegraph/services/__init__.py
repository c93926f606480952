from .markdown_renderer import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
