"""Scribe static blog renderer.

This package turns a flat directory of Markdown/MDX posts with YAML
front-matter into a static site: one HTML document per post, each with
description, Open Graph and Twitter card head tags, plus a fixed not-found
page.

The main entry point is the CLI module, which provides commands for
scaffolding a new blog and building it.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
