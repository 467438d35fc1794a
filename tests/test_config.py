import json

import pytest

from scribe.config import SiteMetadata, load_site_metadata
from scribe.errors import ConfigError


def test_load_site_metadata_from_yaml(tmp_path):
    config = tmp_path / "site.yaml"
    config.write_text(
        "title: My Blog Course\n"
        "description: My personal blog\n"
        "twitterHandle: myhandle\n"
        "siteUrl: https://example.com\n",
        encoding="utf-8",
    )
    site = load_site_metadata(config)
    assert site == SiteMetadata(
        title="My Blog Course",
        description="My personal blog",
        twitter_handle="myhandle",
        site_url="https://example.com",
    )
    assert site.lang == "en"


def test_nested_site_metadata_and_aliases(tmp_path):
    config = tmp_path / "site.yaml"
    config.write_text(
        "siteMetadata:\n"
        "  title: Blog\n"
        "  description: Desc\n"
        "  twitter: handle\n"
        "  site_url: https://blog.example.org\n"
        "  lang: fr\n",
        encoding="utf-8",
    )
    site = load_site_metadata(config)
    assert site.twitter_handle == "handle"
    assert site.site_url == "https://blog.example.org"
    assert site.lang == "fr"


def test_json_config_is_accepted(tmp_path):
    config = tmp_path / "site.json"
    config.write_text(
        json.dumps(
            {"title": "T", "description": "D", "siteUrl": "http://localhost:8000"}
        ),
        encoding="utf-8",
    )
    site = load_site_metadata(config)
    assert site.twitter_handle == ""
    assert site.site_url == "http://localhost:8000"


@pytest.mark.parametrize(
    "raw, fragment",
    [
        ({"description": "D", "siteUrl": "https://example.com"}, "title"),
        ({"title": "T", "siteUrl": "https://example.com"}, "description"),
        ({"title": "T", "description": "D"}, "site_url"),
        ({"title": "T", "description": "D", "siteUrl": "example.com"}, "absolute"),
        ({"title": "T", "description": "D", "siteUrl": "https://example.com/"}, "slash"),
        ({"title": 3, "description": "D", "siteUrl": "https://example.com"}, "string"),
    ],
)
def test_invalid_metadata_raises_config_error(raw, fragment):
    with pytest.raises(ConfigError) as excinfo:
        SiteMetadata.from_mapping(raw)
    assert fragment in str(excinfo.value)


def test_missing_and_malformed_files(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_site_metadata(tmp_path / "nope.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("title: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML") as excinfo:
        load_site_metadata(broken)
    assert excinfo.value.path == broken

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_site_metadata(listing)
