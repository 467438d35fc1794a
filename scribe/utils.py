"""Utility functions for Scribe.

This module contains small string and path helpers shared across the Scribe codebase.

Key functions:
    slugify: Convert filenames to URL slugs.
    route_for: Derive the published route for a content file stem.
    is_content_file: Check if a path is a Markdown/MDX content file.
    ensure_clean_dir: Ensure a directory exists and is empty.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path

CONTENT_SUFFIXES = (".md", ".markdown", ".mdx")


def slugify(name: str) -> str:
    """Convert filename (without extension) to slug, dropping date prefix.

    Args:
        name: Filename stem.

    Returns:
        URL-friendly slug.

    Examples:
        >>> slugify("2024-01-15-Hello World")
        'hello-world'
    """
    cleaned = name
    if "-" in cleaned:
        parts = cleaned.split("-")
        if len(parts) >= 4 and all(p.isdigit() for p in parts[:3]):
            cleaned = "-".join(parts[3:])
    cleaned = re.sub(r"[^a-zA-Z0-9]+", "-", cleaned)
    cleaned = cleaned.strip("-").lower()
    return cleaned or "index"


def route_for(stem: str) -> str:
    """Derive the route a content file is published under.

    Args:
        stem: Filename stem (without extension).

    Returns:
        Route path such as ``/hello-world``; ``index`` maps to ``/``.
    """
    slug = slugify(stem)
    if slug == "index":
        return "/"
    return f"/{slug}"


def is_content_file(path: Path) -> bool:
    """Return True if path is a Markdown or MDX content file."""
    return path.suffix.lower() in CONTENT_SUFFIXES


def is_draft(path: Path) -> bool:
    """Return True if the file is a draft (name starts with ``_``)."""
    return path.name.startswith("_")


def ensure_clean_dir(path: Path) -> None:
    """Ensure a directory exists and is empty.

    If the directory exists, it is removed and recreated.

    Args:
        path: Path to the directory to clean.
    """
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)
