"""Content renderers for Scribe.

This module contains implementations of the ContentRenderer protocol
for the body markup dialects a post may be written in.

Key classes:
- MarkdownRenderer: Renders Markdown to HTML with syntax highlighting.
- MdxRenderer: Renders MDX posts, dropping their ESM import/export lines.
- RendererRegistry: Picks the renderer for a source file.
"""

from __future__ import annotations

import re
from pathlib import Path

import mistune
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .protocols import ContentRenderer

MDX_ESM_RE = re.compile(r"^(?:import|export)\s")
FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")


def _strip_mdx_esm(content: str) -> str:
    """Drop ESM import/export lines that sit outside fenced code blocks."""
    kept: list[str] = []
    fence: str | None = None
    for line in content.splitlines(keepends=True):
        match = FENCE_RE.match(line)
        if fence is None:
            if match:
                fence = match.group(1)
            elif MDX_ESM_RE.match(line):
                continue
        elif match and _closes_fence(match.group(1), fence):
            fence = None
        kept.append(line)
    return "".join(kept)


def _closes_fence(marker: str, fence: str) -> bool:
    return marker[0] == fence[0] and len(marker) >= len(fence)


def _generate_heading_id(text: str) -> str:
    """Generate a URL-friendly ID from heading text.

    Args:
        text: The heading text.

    Returns:
        URL-friendly slug suitable for anchor links.
    """
    slug = text.lower().strip()
    slug = re.sub(r"<[^>]+>", "", slug)
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[-\s]+", "-", slug)
    return slug.strip("-")


class _HighlightRenderer(mistune.HTMLRenderer):
    """Markdown renderer adding heading anchors and Pygments highlighting."""

    def __init__(self):
        super().__init__(escape=False)
        self._heading_id_counts: dict[str, int] = {}

    def heading(self, text: str, level: int, **attrs) -> str:
        base_id = _generate_heading_id(text)

        if base_id in self._heading_id_counts:
            self._heading_id_counts[base_id] += 1
            heading_id = f"{base_id}-{self._heading_id_counts[base_id]}"
        else:
            self._heading_id_counts[base_id] = 0
            heading_id = base_id

        return f'<h{level} id="{heading_id}">{text}</h{level}>\n'

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a code block with Pygments syntax highlighting.

        Args:
            code: The code content.
            info: Language identifier (e.g., 'python', 'javascript').

        Returns:
            HTML string with highlighted code.
        """
        lang = info.split()[0] if info else ""
        if lang:
            try:
                lexer = get_lexer_by_name(lang, stripall=True)
            except ClassNotFound:
                lexer = None
            if lexer is not None:
                formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
                return highlight(code, lexer, formatter)
        escaped = code.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        lang_class = f' class="language-{lang}"' if lang else ""
        return f"<pre><code{lang_class}>{escaped}</code></pre>\n"


class MarkdownRenderer:
    """Renders Markdown content to HTML."""

    suffixes = (".md", ".markdown")

    @property
    def source_type(self) -> str:
        """Return the source type identifier."""
        return "markdown"

    def can_render(self, path: Path) -> bool:
        """Check if this renderer can handle the given file.

        Args:
            path: Path to the source file.

        Returns:
            True if the file is a Markdown file.
        """
        return path.suffix.lower() in self.suffixes

    def render(self, content: str) -> str:
        """Render Markdown content to HTML.

        Args:
            content: Markdown source content.

        Returns:
            Rendered HTML.
        """
        markdown = mistune.create_markdown(
            renderer=_HighlightRenderer(),
            plugins=["strikethrough", "footnotes", "table", "url"],
        )
        return markdown(content)


class MdxRenderer(MarkdownRenderer):
    """Renders MDX content as Markdown.

    Top-level ``import``/``export`` statements are module plumbing for the
    JSX runtime and are dropped; embedded JSX passes through as raw HTML.
    """

    suffixes = (".mdx",)

    @property
    def source_type(self) -> str:
        return "mdx"

    def render(self, content: str) -> str:
        return super().render(_strip_mdx_esm(content))


class RendererRegistry:
    """Registry for content renderers.

    New renderers can be added without modifying existing code.
    """

    def __init__(self):
        """Initialize the registry with default renderers."""
        self._renderers: list[ContentRenderer] = []
        self.register(MarkdownRenderer())
        self.register(MdxRenderer())

    def register(self, renderer: ContentRenderer) -> None:
        """Register a new renderer.

        Args:
            renderer: A ContentRenderer implementation.
        """
        self._renderers.append(renderer)

    def get_renderer(self, path: Path) -> ContentRenderer | None:
        """Get the appropriate renderer for a file.

        Args:
            path: Path to the source file.

        Returns:
            The first renderer that can handle the file, or None.
        """
        for renderer in self._renderers:
            if renderer.can_render(path):
                return renderer
        return None


# Default renderer registry instance
default_renderer_registry = RendererRegistry()
