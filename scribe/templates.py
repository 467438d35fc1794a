"""Template rendering engine for Scribe.

This module uses Jinja2 to wrap page bodies in the site's layout shell and to
assemble complete HTML documents with a populated ``<head>``.

Key classes:
- LayoutSlots: Values filling the layout shell (home link, footer caption).
- RenderedPage: A page ready to be serialized and written.
- PageRenderer: Renders bodies into the layout and pages into documents.

Templates are loaded from the packaged ``layouts`` directory. A user template
directory, when given, is searched first so its files override the defaults.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .seo import MetaTag

_LAYOUTS_DIR = Path(__file__).parent / "layouts"

LAYOUT_TEMPLATE = "layout.html.jinja"
DOCUMENT_TEMPLATE = "document.html.jinja"


@dataclass(frozen=True)
class LayoutSlots:
    """Values for the fixed regions of the layout shell.

    Attributes:
        home_url: Target of the header's navigation link.
        home_label: Text of the header's navigation link.
        footer: Caption shown in the footer.
    """

    home_url: str = "/"
    home_label: str = "Home"
    footer: str = "A great footer."


@dataclass(frozen=True)
class RenderedPage:
    """A rendered page awaiting serialization.

    Attributes:
        route: Route the page is published under.
        title: Text for the ``<title>`` element.
        head_tags: Ordered ``<meta>`` tags.
        body_html: Body markup, already wrapped in the layout.
        lang: Language code for the ``<html>`` element.
    """

    route: str
    title: str
    head_tags: Sequence[MetaTag]
    body_html: str
    lang: str = "en"


class PageRenderer:
    """Renders page bodies and documents with Jinja2.

    Attributes:
        env: Jinja2 environment.
        slots: Default layout slot values.
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        slots: LayoutSlots | None = None,
    ):
        """Initialize the renderer.

        Args:
            templates_dir: Optional directory of templates overriding the
                packaged ones.
            slots: Default layout slot values.
        """
        search_path = [_LAYOUTS_DIR]
        if templates_dir is not None:
            search_path.insert(0, templates_dir)
        self.env = Environment(
            loader=FileSystemLoader(search_path),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.slots = slots or LayoutSlots()

    def render(self, page_body: str, slots: LayoutSlots | None = None) -> str:
        """Wrap page content in the header/main/footer layout shell.

        Args:
            page_body: Trusted HTML of the page content.
            slots: Optional slot values overriding the defaults.

        Returns:
            Body HTML.
        """
        template = self.env.get_template(LAYOUT_TEMPLATE)
        return template.render(content=Markup(page_body), slots=slots or self.slots)

    def render_document(self, page: RenderedPage) -> str:
        """Serialize a RenderedPage into a complete HTML document.

        Args:
            page: The page to serialize.

        Returns:
            HTML document string.
        """
        template = self.env.get_template(DOCUMENT_TEMPLATE)
        return template.render(
            lang=page.lang,
            title=page.title,
            head_tags=page.head_tags,
            body=Markup(page.body_html),
        )
