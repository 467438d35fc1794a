"""Content loading for Scribe.

This module discovers content files, parses their front-matter and body, and
collects the resulting Documents into an immutable ContentStore.

Key classes:
- Document: Frozen dataclass representing one published post.
- FileContentLoader: Discovers content files in a flat directory.
- DocumentBuilder: Builds a Document from one source file.
- ContentStore: Immutable, route-addressable collection of Documents.

Loading is partial-failure tolerant: a file that fails to parse is skipped and
its ContentLoadError is recorded, while the remaining files still load.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .errors import ContentLoadError, RouteCollisionError
from .extractors import CompositeMetadataExtractor, default_metadata_extractor
from .renderers import RendererRegistry, default_renderer_registry
from .utils import is_content_file, is_draft, route_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """A content document loaded from one source file.

    Attributes:
        route: URL path the document is published under.
        title: Title from the front-matter (required).
        description: Optional description from the front-matter.
        image: Optional image path relative to the site URL.
        image_alt: Optional alt text for the image.
        body: Rendered HTML of the document body.
        source_path: Path to the source file.
        source_type: "markdown" or "mdx".
        frontmatter: Raw front-matter mapping.
    """

    route: str
    title: str
    body: str
    source_path: Path
    description: str | None = None
    image: str | None = None
    image_alt: str | None = None
    source_type: str = "markdown"
    frontmatter: Mapping[str, Any] = field(default_factory=dict, compare=False)


class FileContentLoader:
    """Discovers content files in a flat directory.

    Attributes:
        content_dir: Directory containing content files.
    """

    def __init__(self, content_dir: Path):
        self.content_dir = content_dir

    def iter_files(self, include_drafts: bool = False) -> list[Path]:
        """List content files in the directory, sorted by name.

        Args:
            include_drafts: Whether to include draft files (``_`` prefix).

        Returns:
            List of paths to content files.

        Raises:
            ContentLoadError: If the directory does not exist.
        """
        if not self.content_dir.is_dir():
            raise ContentLoadError(self.content_dir, "Content directory does not exist")
        files: list[Path] = []
        for path in sorted(self.content_dir.iterdir()):
            if not path.is_file() or not is_content_file(path):
                continue
            if is_draft(path) and not include_drafts:
                logger.info("Skipping draft %s", path)
                continue
            files.append(path)
        return files


class DocumentBuilder:
    """Builds Document objects from source files.

    Attributes:
        renderer_registry: Registry of body renderers.
        metadata_extractor: Composite metadata extractor.
    """

    def __init__(
        self,
        renderer_registry: RendererRegistry | None = None,
        metadata_extractor: CompositeMetadataExtractor | None = None,
    ):
        self.renderer_registry = renderer_registry or default_renderer_registry
        self.metadata_extractor = metadata_extractor or default_metadata_extractor

    def build(self, path: Path) -> Document:
        """Build a Document from a source file.

        Args:
            path: Path to the source file.

        Returns:
            Document object.

        Raises:
            ContentLoadError: If the file cannot be read, parsed or validated.
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentLoadError(path, f"Cannot read file: {exc}") from exc

        metadata = self.metadata_extractor.extract(raw, path)
        renderer = self.renderer_registry.get_renderer(path)
        if renderer is None:
            raise ContentLoadError(path, f"No renderer for '{path.suffix}' files")

        try:
            body = renderer.render(metadata.get("body", raw))
        except Exception as exc:
            raise ContentLoadError(path, f"Cannot render body: {exc}") from exc

        return Document(
            route=route_for(path.stem),
            title=metadata["title"],
            body=body,
            source_path=path,
            description=metadata.get("description"),
            image=metadata.get("image"),
            image_alt=metadata.get("image_alt"),
            source_type=renderer.source_type,
            frontmatter=MappingProxyType(dict(metadata.get("frontmatter", {}))),
        )


class ContentStore(Sequence[Document]):
    """Immutable collection of Documents loaded from a content directory.

    Behaves as a read-only sequence ordered by source filename. Use
    ``by_route()`` or ``get()`` for lookup by route.

    Attributes:
        errors: ContentLoadErrors for files that were skipped during load.
    """

    def __init__(
        self,
        documents: Sequence[Document] = (),
        errors: Sequence[ContentLoadError] = (),
    ):
        self._documents = tuple(documents)
        self.errors = tuple(errors)
        self._index: Mapping[str, Document] | None = None

    @classmethod
    def load(
        cls,
        content_dir: Path,
        workers: int = 1,
        include_drafts: bool = False,
        builder: DocumentBuilder | None = None,
    ) -> ContentStore:
        """Load every content file in a directory.

        Args:
            content_dir: Flat directory of content files.
            workers: Number of threads used to parse files.
            include_drafts: Whether to include draft files.
            builder: Optional custom document builder.

        Returns:
            ContentStore with the documents that loaded and the errors of
            those that did not.

        Raises:
            ContentLoadError: If the directory does not exist.
        """
        builder = builder or DocumentBuilder()
        paths = FileContentLoader(content_dir).iter_files(include_drafts)

        results: dict[Path, Document | ContentLoadError] = {}
        if workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = {pool.submit(builder.build, path): path for path in paths}
                for future in as_completed(futures):
                    path = futures[future]
                    try:
                        results[path] = future.result()
                    except ContentLoadError as exc:
                        results[path] = exc
        else:
            for path in paths:
                try:
                    results[path] = builder.build(path)
                except ContentLoadError as exc:
                    results[path] = exc

        documents: list[Document] = []
        errors: list[ContentLoadError] = []
        for path in paths:
            outcome = results[path]
            if isinstance(outcome, ContentLoadError):
                logger.warning("Skipping %s: %s", path, outcome.message)
                errors.append(outcome)
            else:
                logger.debug("Loaded %s as %s", path, outcome.route)
                documents.append(outcome)
        return cls(documents, errors)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __getitem__(self, item):
        return self._documents[item]

    def by_route(self) -> Mapping[str, Document]:
        """Return a read-only mapping of route to Document.

        Raises:
            RouteCollisionError: If two documents share a route.
        """
        if self._index is None:
            index: dict[str, Document] = {}
            for document in self._documents:
                existing = index.get(document.route)
                if existing is not None:
                    raise RouteCollisionError(
                        document.route, existing.source_path, document.source_path
                    )
                index[document.route] = document
            self._index = MappingProxyType(index)
        return self._index

    def get(self, route: str) -> Document | None:
        """Look up a document by route."""
        return self.by_route().get(route)

    @property
    def routes(self) -> list[str]:
        return [document.route for document in self._documents]

    def __repr__(self) -> str:  # pragma: no cover - for debugging
        return f"ContentStore({len(self._documents)} documents, {len(self.errors)} errors)"
