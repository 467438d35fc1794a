from pathlib import Path

import pytest

from scribe.config import SiteMetadata
from scribe.content import Document
from scribe.seo import MetaTag, PageMetadata, head_tags, resolve, resolve_page

SITE = SiteMetadata(
    title="My Blog Course",
    description="My personal blog",
    twitter_handle="myhandle",
    site_url="https://example.com",
)

IMAGE_KEYS = {"og:image", "og:image:alt", "twitter:image", "twitter:image:alt"}


def make_document(**overrides) -> Document:
    fields = {
        "route": "/hello",
        "title": "Hello",
        "body": "<p>Hi</p>",
        "source_path": Path("hello.md"),
    }
    fields.update(overrides)
    return Document(**fields)


def test_description_falls_back_to_site():
    metadata = resolve(make_document(), SITE)
    tags = dict(head_tags(metadata, SITE))
    assert metadata.resolved_description == "My personal blog"
    assert tags["description"] == "My personal blog"
    assert tags["twitter:card"] == "summary"
    assert IMAGE_KEYS.isdisjoint(tags)


def test_own_description_wins():
    metadata = resolve(make_document(description="About hello"), SITE)
    assert metadata.resolved_description == "About hello"


def test_image_resolution():
    metadata = resolve(make_document(image="/hero.png"), SITE)
    tags = dict(head_tags(metadata, SITE))
    assert metadata.card_type == "summary_large_image"
    assert metadata.resolved_image_url == "https://example.com/hero.png"
    assert tags["og:image"] == "https://example.com/hero.png"
    assert tags["og:image:alt"] == "Hello"
    assert tags["twitter:image:alt"] == "Hello"
    assert tags["twitter:card"] == "summary_large_image"


@pytest.mark.parametrize("image", ["/hero.png", "hero.png", "/img/a b.jpg"])
def test_image_url_is_plain_concatenation(image):
    metadata = resolve(make_document(image=image), SITE)
    assert metadata.resolved_image_url == SITE.site_url + image


def test_image_alt_is_used_when_given():
    metadata = resolve(make_document(image="/hero.png", image_alt="A hero"), SITE)
    tags = dict(head_tags(metadata, SITE))
    assert tags["og:image:alt"] == "A hero"
    assert tags["twitter:image:alt"] == "A hero"


def test_tag_order_without_image():
    tags = head_tags(resolve(make_document(), SITE), SITE)
    assert [tag.key for tag in tags] == [
        "description",
        "og:title",
        "og:description",
        "og:type",
        "twitter:title",
        "twitter:description",
        "twitter:creator",
        "twitter:card",
    ]
    assert tags[3] == MetaTag("og:type", "website")
    assert tags[6] == MetaTag("twitter:creator", "myhandle")


def test_tag_order_with_image_and_extra_tags():
    metadata = resolve(make_document(image="/hero.png"), SITE)
    tags = head_tags(metadata, SITE, extra=[("og:locale", "en_US")])
    keys = [tag.key for tag in tags]
    assert keys[:8][-1] == "twitter:card"
    assert keys[8:] == [
        "og:image",
        "og:image:alt",
        "twitter:image",
        "twitter:image:alt",
        "og:locale",
    ]
    assert keys.count("twitter:card") == 1


def test_resolution_is_deterministic():
    document = make_document(image="/hero.png", description="D")
    first = head_tags(resolve(document, SITE), SITE)
    second = head_tags(resolve(document, SITE), SITE)
    assert first == second


def test_missing_twitter_handle_emits_empty_creator():
    site = SiteMetadata(
        title="T", description="D", twitter_handle="", site_url="https://x.org"
    )
    tags = dict(head_tags(resolve_page("Page", site), site))
    assert tags["twitter:creator"] == ""


def test_meta_tag_attribute_and_document_title():
    assert MetaTag("description", "x").attribute == "name"
    assert MetaTag("og:title", "x").attribute == "property"
    metadata = resolve_page("404 Page", SITE)
    assert metadata.document_title == "404 Page | My Blog Course"
    assert not metadata.has_image


def test_head_tags_emit_resolved_alt_verbatim():
    metadata = PageMetadata(
        title="Hello",
        resolved_description="About hello",
        resolved_image_url="https://example.com/hero.png",
        image_alt="Custom",
        card_type="summary_large_image",
        document_title="Hello | My Blog Course",
    )
    tags = dict(head_tags(metadata, SITE))
    assert tags["og:image:alt"] == "Custom"
    assert tags["twitter:image:alt"] == "Custom"
