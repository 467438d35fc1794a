"""Site configuration for Scribe.

Loads the site-wide metadata record (title, description, social handle and
canonical URL) from a YAML file and validates it into an immutable
``SiteMetadata`` instance. JSON files are accepted too, since JSON is a
subset of YAML.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

# Accepted spellings for each field, first match wins.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("title",),
    "description": ("description",),
    "twitter_handle": ("twitterHandle", "twitter_handle", "twitter"),
    "site_url": ("siteUrl", "site_url"),
    "lang": ("lang",),
}

_REQUIRED = ("title", "description", "site_url")


@dataclass(frozen=True)
class SiteMetadata:
    """Site-wide metadata shared read-only by every component.

    Attributes:
        title: Site title, used in the page title template.
        description: Default description for pages without their own.
        twitter_handle: Social handle for ``twitter:creator``; may be empty.
        site_url: Absolute base URL without a trailing slash.
        lang: Language code for the ``<html lang>`` attribute.
    """

    title: str
    description: str
    twitter_handle: str
    site_url: str
    lang: str = "en"

    @classmethod
    def from_mapping(
        cls, raw: dict[str, Any], path: Path | None = None
    ) -> SiteMetadata:
        """Build and validate SiteMetadata from a loaded mapping.

        Args:
            raw: Mapping loaded from the config file. Keys may be nested
                under a top-level ``siteMetadata`` mapping.
            path: Source file, used in error messages.

        Returns:
            Validated SiteMetadata.

        Raises:
            ConfigError: If a required field is missing or a value is malformed.
        """
        nested = raw.get("siteMetadata")
        if isinstance(nested, dict):
            raw = nested

        values: dict[str, str] = {}
        for field_name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if alias in raw and raw[alias] is not None:
                    value = raw[alias]
                    if not isinstance(value, str):
                        raise ConfigError(
                            f"Field '{alias}' must be a string, got {type(value).__name__}",
                            path,
                        )
                    values[field_name] = value.strip()
                    break

        missing = [name for name in _REQUIRED if not values.get(name)]
        if missing:
            raise ConfigError(
                f"Missing required field(s): {', '.join(missing)}", path
            )

        _validate_site_url(values["site_url"], path)
        return cls(
            title=values["title"],
            description=values["description"],
            twitter_handle=values.get("twitter_handle", ""),
            site_url=values["site_url"],
            lang=values.get("lang") or "en",
        )


def _validate_site_url(url: str, path: Path | None) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"siteUrl must be an absolute http(s) URL: {url!r}", path)
    if url.endswith("/"):
        raise ConfigError(f"siteUrl must not end with a slash: {url!r}", path)
    if parsed.query or parsed.fragment:
        raise ConfigError(
            f"siteUrl must not carry a query or fragment: {url!r}", path
        )


def load_site_metadata(config_path: Path) -> SiteMetadata:
    """Load site metadata from a YAML (or JSON) config file.

    Args:
        config_path: Path to the config file.

    Returns:
        Validated SiteMetadata.

    Raises:
        ConfigError: If the file is missing, unparsable, or invalid.
    """
    if not config_path.is_file():
        raise ConfigError("Site config file not found", config_path)
    try:
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML: {exc}", config_path) from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config: {exc}", config_path) from exc
    if not isinstance(loaded, dict):
        raise ConfigError("Site config must be a mapping", config_path)
    site = SiteMetadata.from_mapping(loaded, config_path)
    logger.debug("Loaded site metadata for %s from %s", site.site_url, config_path)
    return site
