from scribe.seo import MetaTag
from scribe.templates import LayoutSlots, PageRenderer, RenderedPage


def test_layout_shell_regions():
    html = PageRenderer().render("<p>Hello</p>")
    assert html.index("<header") < html.index("<main") < html.index("<footer")
    assert '<a href="/">Home</a>' in html
    assert "<p>Hello</p>" in html
    assert "A great footer." in html
    assert "text-align: center" in html
    assert "max-width" in html


def test_layout_is_deterministic():
    renderer = PageRenderer()
    assert renderer.render("<p>x</p>") == renderer.render("<p>x</p>")


def test_layout_slots_override_and_escape():
    slots = LayoutSlots(home_url="/blog/", home_label="Back <home>", footer="(c) Me & Co")
    html = PageRenderer().render("<p>Body</p>", slots)
    assert '<a href="/blog/">Back &lt;home&gt;</a>' in html
    assert "(c) Me &amp; Co" in html


def test_render_document_head():
    page = RenderedPage(
        route="/hello",
        title="Hello | Blog",
        head_tags=[
            MetaTag("description", 'Say "hi" & <wave>'),
            MetaTag("og:title", "Hello"),
        ],
        body_html="<main>Body</main>",
        lang="de",
    )
    html = PageRenderer().render_document(page)
    assert html.startswith("<!DOCTYPE html>")
    assert '<html lang="de">' in html
    assert "<title>Hello | Blog</title>" in html
    assert (
        '<meta name="description" content="Say &#34;hi&#34; &amp; &lt;wave&gt;">' in html
    )
    assert '<meta property="og:title" content="Hello">' in html
    assert html.index('name="description"') < html.index('property="og:title"')
    assert "<main>Body</main>" in html


def test_user_templates_override_packaged_layout(tmp_path):
    (tmp_path / "layout.html.jinja").write_text(
        "<section>{{ content }}|{{ slots.footer }}</section>", encoding="utf-8"
    )
    html = PageRenderer(templates_dir=tmp_path).render("<b>x</b>")
    assert html.strip() == "<section><b>x</b>|A great footer.</section>"

    # document template still comes from the package
    page = RenderedPage(route="/", title="T", head_tags=[], body_html=html)
    assert "<!DOCTYPE html>" in PageRenderer(templates_dir=tmp_path).render_document(page)
