"""SEO metadata resolution for Scribe.

Merges a page's own metadata with the site-wide defaults and synthesizes the
ordered set of description, Open Graph and Twitter card head tags.

Key items:
- PageMetadata: Resolved, render-ready metadata for one page.
- MetaTag: One ``(key, content)`` head tag.
- resolve: Resolve a Document against the site metadata.
- resolve_page: Resolve an ad-hoc page that has no Document.
- head_tags: Build the ordered head tag list.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

from .config import SiteMetadata
from .content import Document

CARD_SUMMARY = "summary"
CARD_LARGE_IMAGE = "summary_large_image"

TITLE_TEMPLATE = "{title} | {site_title}"


class MetaTag(NamedTuple):
    """A single ``<meta>`` tag as a ``(key, content)`` pair."""

    key: str
    content: str

    @property
    def attribute(self) -> str:
        """HTML attribute carrying the key: ``name`` or ``property``."""
        return "name" if self.key == "description" else "property"


@dataclass(frozen=True)
class PageMetadata:
    """Metadata for one page after fallbacks are applied.

    Attributes:
        title: Page title.
        resolved_description: Page description, or the site description.
        resolved_image_url: Absolute image URL, or None without an image.
        image_alt: Alt text for the image, or None without an image.
        card_type: ``summary_large_image`` with an image, else ``summary``.
        document_title: Text for the ``<title>`` element.
    """

    title: str
    resolved_description: str
    resolved_image_url: str | None
    image_alt: str | None
    card_type: str
    document_title: str

    @property
    def has_image(self) -> bool:
        return self.resolved_image_url is not None


def resolve_page(
    title: str,
    site: SiteMetadata,
    description: str | None = None,
    image: str | None = None,
    image_alt: str | None = None,
) -> PageMetadata:
    """Resolve metadata for a page from its own fields and the site defaults.

    The image URL is the site URL and the image path concatenated as-is;
    no separator is inserted.
    """
    if image:
        image_url: str | None = site.site_url + image
        alt: str | None = image_alt or title
        card_type = CARD_LARGE_IMAGE
    else:
        image_url = None
        alt = None
        card_type = CARD_SUMMARY
    return PageMetadata(
        title=title,
        resolved_description=description or site.description,
        resolved_image_url=image_url,
        image_alt=alt,
        card_type=card_type,
        document_title=TITLE_TEMPLATE.format(title=title, site_title=site.title),
    )


def resolve(document: Document, site: SiteMetadata) -> PageMetadata:
    """Resolve metadata for a Document."""
    return resolve_page(
        document.title,
        site,
        description=document.description,
        image=document.image,
        image_alt=document.image_alt,
    )


def head_tags(
    metadata: PageMetadata,
    site: SiteMetadata,
    extra: Iterable[tuple[str, str]] = (),
) -> list[MetaTag]:
    """Build the ordered head tags for a page.

    Base tags come first, image tags follow when the page has an image, and
    caller-supplied extra tags are appended last.

    Args:
        metadata: Resolved page metadata.
        site: Site metadata, for the Twitter handle.
        extra: Additional ``(key, content)`` pairs.

    Returns:
        List of MetaTag in emission order.
    """
    description = metadata.resolved_description
    tags = [
        MetaTag("description", description),
        MetaTag("og:title", metadata.title),
        MetaTag("og:description", description),
        MetaTag("og:type", "website"),
        MetaTag("twitter:title", metadata.title),
        MetaTag("twitter:description", description),
        MetaTag("twitter:creator", site.twitter_handle or ""),
        MetaTag("twitter:card", metadata.card_type),
    ]
    if metadata.resolved_image_url is not None:
        tags.extend(
            [
                MetaTag("og:image", metadata.resolved_image_url),
                MetaTag("og:image:alt", metadata.image_alt or ""),
                MetaTag("twitter:image", metadata.resolved_image_url),
                MetaTag("twitter:image:alt", metadata.image_alt or ""),
            ]
        )
    tags.extend(MetaTag(key, content) for key, content in extra)
    return tags
