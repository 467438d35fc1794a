"""Protocol definitions for Scribe.

This module defines the interfaces used at Scribe's seams: body renderers,
metadata extractors and output targets. Any object with the right shape can
be plugged in, which keeps the builder testable with in-memory fakes.
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContentRenderer(Protocol):
    """Protocol for rendering a content body to HTML."""

    @abstractmethod
    def can_render(self, path: Path) -> bool:
        """Check if this renderer can handle the given file."""
        ...

    @abstractmethod
    def render(self, content: str) -> str:
        """Render body markup to HTML.

        Args:
            content: Body source (front-matter already removed).

        Returns:
            Rendered HTML.
        """
        ...

    @property
    @abstractmethod
    def source_type(self) -> str:
        """Return the source type identifier (e.g., 'markdown', 'mdx')."""
        ...


@runtime_checkable
class MetadataExtractor(Protocol):
    """Protocol for extracting metadata from content."""

    @abstractmethod
    def extract(self, content: str, path: Path) -> dict[str, Any]:
        """Extract metadata from content.

        Args:
            content: Source content.
            path: Path to the source file.

        Returns:
            Dictionary of extracted metadata.
        """
        ...


@runtime_checkable
class OutputTarget(Protocol):
    """Protocol for the destination rendered documents are written to."""

    @abstractmethod
    def write(self, route: str, html: str) -> None:
        """Write one rendered HTML document.

        Args:
            route: Route the document is published under.
            html: Complete HTML document.

        Raises:
            OSError: If the write is rejected.
        """
        ...
