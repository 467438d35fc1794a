"""Metadata extractors for Scribe.

This module contains implementations of the MetadataExtractor protocol.
Each extractor handles a single slice of a content file's metadata.

Key items:
- validate_fields: Validates the document fields carried in the front-matter.
- FrontmatterExtractor: Splits the front-matter from the body and validates it.
- CompositeMetadataExtractor: Runs several extractors and merges their results.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from .errors import ContentLoadError
from .protocols import MetadataExtractor

FRONTMATTER_RE = re.compile(r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)", re.DOTALL)


def extract_frontmatter(text: str, path: Path) -> tuple[dict[str, Any], str]:
    """Extract YAML frontmatter from content.

    Args:
        text: Raw file content.
        path: Path to the source file, used in error messages.

    Returns:
        Tuple of (frontmatter dict, remaining content). Content without a
        front-matter block yields an empty dict and the full text.

    Raises:
        ContentLoadError: If the block is not valid YAML or not a mapping.
    """
    text = text.lstrip("\ufeff")
    match = FRONTMATTER_RE.match(text)
    if not match:
        return {}, text
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise ContentLoadError(path, f"Malformed front-matter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentLoadError(path, "Front-matter must be a mapping")
    return data, text[match.end() :]


OPTIONAL_FIELDS: dict[str, tuple[str, ...]] = {
    "description": ("description",),
    "image": ("image",),
    "image_alt": ("imageAlt", "image_alt"),
}


def validate_fields(frontmatter: dict[str, Any], path: Path) -> dict[str, Any]:
    """Validate the document fields declared in the front-matter.

    ``title`` is required; ``description``, ``image`` and ``imageAlt`` are
    optional strings where a blank value counts as absent.

    Args:
        frontmatter: Parsed front-matter mapping.
        path: Path to the source file, used in error messages.

    Returns:
        Dictionary with 'title', 'description', 'image' and 'image_alt'.

    Raises:
        ContentLoadError: If the title is missing or a field is not a string.
    """
    title = frontmatter.get("title")
    if title is None or (isinstance(title, str) and not title.strip()):
        raise ContentLoadError(path, "Missing required front-matter field 'title'")
    # Numeric titles such as "2024" are legitimate.
    if isinstance(title, (int, float)) and not isinstance(title, bool):
        title = str(title)
    if not isinstance(title, str):
        raise ContentLoadError(path, "Front-matter field 'title' must be a string")

    result: dict[str, Any] = {"title": title.strip()}
    for name, keys in OPTIONAL_FIELDS.items():
        result[name] = _optional_string(frontmatter, keys, path)
    return result


def _optional_string(
    frontmatter: dict[str, Any], keys: tuple[str, ...], path: Path
) -> str | None:
    for key in keys:
        value = frontmatter.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ContentLoadError(path, f"Front-matter field '{key}' must be a string")
        return value.strip() or None
    return None


class FrontmatterExtractor:
    """Extracts YAML frontmatter and the document fields it declares.

    Parses YAML frontmatter at the beginning of the file
    (between --- markers) once, then validates the fields.
    """

    def extract(self, content: str, path: Path) -> dict[str, Any]:
        """Extract frontmatter and document fields from content.

        Args:
            content: Source content with potential frontmatter.
            path: Path to the source file.

        Returns:
            Dictionary with 'frontmatter' and 'body' keys plus the fields
            returned by ``validate_fields``.

        Raises:
            ContentLoadError: If the front-matter or a field is invalid.
        """
        frontmatter, body = extract_frontmatter(content, path)
        result: dict[str, Any] = {"frontmatter": frontmatter, "body": body}
        result.update(validate_fields(frontmatter, path))
        return result


class CompositeMetadataExtractor:
    """Combines multiple metadata extractors.

    Runs all extractors on the content and merges their results.
    Later extractors can override earlier ones.
    """

    def __init__(self, extractors: list[MetadataExtractor] | None = None):
        """Initialize with a list of extractors.

        Args:
            extractors: List of MetadataExtractor implementations.
                       If None, uses default extractors.
        """
        if extractors is None:
            self._extractors: list[MetadataExtractor] = [FrontmatterExtractor()]
        else:
            self._extractors = list(extractors)

    def extract(self, content: str, path: Path) -> dict[str, Any]:
        """Extract all metadata from content.

        Args:
            content: Source content.
            path: Path to the source file.

        Returns:
            Dictionary with all extracted metadata.
        """
        result: dict[str, Any] = {}
        for extractor in self._extractors:
            result.update(extractor.extract(content, path))
        return result


# Default composite extractor instance
default_metadata_extractor = CompositeMetadataExtractor()
