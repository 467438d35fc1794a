"""Output targets for Scribe.

Implementations of the OutputTarget protocol: a directory on disk for real
builds and an in-memory mapping for embedding and tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

from .utils import ensure_clean_dir

logger = logging.getLogger(__name__)

NOT_FOUND_ROUTE = "/404"


class DirectoryTarget:
    """Writes rendered documents below an output directory.

    ``/`` is written to ``index.html`` and ``/404`` to ``404.html``, the file
    static hosts serve for unknown paths. Every other route is written to
    ``<route>/index.html``.

    Attributes:
        output_dir: Base output directory.
        clean: Whether ``prepare()`` empties the directory first.
    """

    def __init__(self, output_dir: Path, clean: bool = True):
        self.output_dir = output_dir
        self.clean = clean

    def prepare(self) -> None:
        """Create the output directory, emptying it when ``clean`` is set."""
        if self.clean:
            ensure_clean_dir(self.output_dir)
        else:
            self.output_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, route: str) -> Path:
        """Return the file a route is written to."""
        url_path = route.strip("/")
        if not url_path:
            return self.output_dir / "index.html"
        if route == NOT_FOUND_ROUTE:
            return self.output_dir / "404.html"
        return self.output_dir / url_path / "index.html"

    def write(self, route: str, html: str) -> None:
        """Write a rendered page to the output directory.

        Raises:
            OSError: If the file cannot be written.
        """
        html_path = self.path_for(route)
        html_path.parent.mkdir(parents=True, exist_ok=True)
        with open(html_path, "w", encoding="utf-8") as f:
            f.write(html)
        logger.debug("Wrote %s to %s", route, html_path)


class MemoryTarget(Mapping[str, str]):
    """Collects rendered documents in memory, keyed by route."""

    def __init__(self):
        self._documents: dict[str, str] = {}

    def write(self, route: str, html: str) -> None:
        self._documents[route] = html

    def __getitem__(self, route: str) -> str:
        return self._documents[route]

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)
