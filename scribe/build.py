"""Site building functionality for Scribe.

This module drives the build: every Document in a ContentStore is resolved,
rendered and written to an output target, followed by the fixed not-found
page.

Key items:
- SiteBuilder: Orchestrates metadata resolution, rendering and writing.
- BuildResult: Pages written and write errors collected during a build.
- build_site: Convenience wrapper around SiteBuilder.

Failure policy: a route collision aborts the build before anything is
written. A failed write of an ordinary page is logged and recorded while the
build continues. A failed write of the not-found page raises WriteError.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field

from .config import SiteMetadata
from .content import ContentStore, Document
from .errors import RouteCollisionError, WriteError
from .output import NOT_FOUND_ROUTE
from .protocols import OutputTarget
from .seo import PageMetadata, head_tags, resolve, resolve_page
from .templates import PageRenderer, RenderedPage

logger = logging.getLogger(__name__)

NOT_FOUND_TITLE = "404 Page"
NOT_FOUND_MESSAGE = "The big empty. This page does not exist!"


@dataclass
class BuildResult:
    """Result of a site build.

    Attributes:
        pages: Pages successfully written, in content order, not-found page last.
        errors: Write errors for pages that could not be written.
    """

    pages: list[RenderedPage] = field(default_factory=list)
    errors: list[WriteError] = field(default_factory=list)

    @property
    def routes(self) -> list[str]:
        return [page.route for page in self.pages]

    @property
    def ok(self) -> bool:
        return not self.errors


class SiteBuilder:
    """Builds every page of a site into an output target.

    Attributes:
        site: Site-wide metadata.
        renderer: Page renderer used for layout and documents.
        workers: Number of threads used to render and write pages.
    """

    def __init__(
        self,
        site: SiteMetadata,
        renderer: PageRenderer | None = None,
        workers: int = 1,
    ):
        self.site = site
        self.renderer = renderer or PageRenderer()
        self.workers = workers

    def build(self, store: ContentStore, target: OutputTarget) -> BuildResult:
        """Build all documents and the not-found page.

        Args:
            store: Loaded content.
            target: Destination for rendered documents. If it has a
                ``prepare()`` method, it is called once routes are known to
                be unique.

        Returns:
            BuildResult with written pages and collected write errors.

        Raises:
            RouteCollisionError: If two documents share a route, or a
                document claims the not-found route.
            WriteError: If the not-found page cannot be written.
        """
        routes = store.by_route()
        reserved = routes.get(NOT_FOUND_ROUTE)
        if reserved is not None:
            raise RouteCollisionError(
                NOT_FOUND_ROUTE, reserved.source_path, "the built-in not-found page"
            )
        prepare = getattr(target, "prepare", None)
        if callable(prepare):
            prepare()

        result = BuildResult()
        outcomes: dict[str, RenderedPage | WriteError] = {}
        if self.workers > 1 and len(routes) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                futures = {
                    pool.submit(self._build_document, document, target): document.route
                    for document in store
                }
                for future in as_completed(futures):
                    outcomes[futures[future]] = future.result()
        else:
            for document in store:
                outcomes[document.route] = self._build_document(document, target)

        for document in store:
            outcome = outcomes[document.route]
            if isinstance(outcome, WriteError):
                result.errors.append(outcome)
            else:
                result.pages.append(outcome)

        not_found = self.render_not_found()
        self._write(not_found, target)
        result.pages.append(not_found)
        logger.info(
            "Built %d pages (%d write errors)", len(result.pages), len(result.errors)
        )
        return result

    def render_document(self, document: Document) -> RenderedPage:
        """Resolve metadata and render the body of one Document."""
        return self._render(document.route, resolve(document, self.site), document.body)

    def render_not_found(self) -> RenderedPage:
        """Render the fixed not-found page."""
        metadata = resolve_page(NOT_FOUND_TITLE, self.site)
        return self._render(
            NOT_FOUND_ROUTE, metadata, f"<div>{NOT_FOUND_MESSAGE}</div>"
        )

    def _render(self, route: str, metadata: PageMetadata, body: str) -> RenderedPage:
        return RenderedPage(
            route=route,
            title=metadata.document_title,
            head_tags=tuple(head_tags(metadata, self.site)),
            body_html=self.renderer.render(body),
            lang=self.site.lang,
        )

    def _build_document(
        self, document: Document, target: OutputTarget
    ) -> RenderedPage | WriteError:
        page = self.render_document(document)
        try:
            self._write(page, target)
        except WriteError as exc:
            logger.warning(
                "Failed to write %s (%s): %s",
                exc.route,
                document.source_path,
                exc.message,
            )
            return exc
        return page

    def _write(self, page: RenderedPage, target: OutputTarget) -> None:
        html = self.renderer.render_document(page)
        try:
            target.write(page.route, html)
        except OSError as exc:
            raise WriteError(page.route, f"Write rejected: {exc}", exc) from exc


def build_site(
    store: ContentStore,
    site: SiteMetadata,
    target: OutputTarget,
    workers: int = 1,
    renderer: PageRenderer | None = None,
) -> BuildResult:
    """Build the entire static site.

    Args:
        store: Loaded content.
        site: Site-wide metadata.
        target: Destination for rendered documents.
        workers: Number of threads used to render and write pages.
        renderer: Optional custom page renderer.

    Returns:
        BuildResult containing written pages and write errors.
    """
    return SiteBuilder(site, renderer=renderer, workers=workers).build(store, target)
