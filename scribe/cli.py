"""Command-line interface for Scribe.

This module defines the CLI commands using Click framework.

Commands:
- build: Render a content directory into an output directory.
- new: Scaffold a new blog project.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from . import __version__

_SITE_CONFIG = """\
siteMetadata:
  title: {title}
  description: My personal blog
  twitter: myhandle
  siteUrl: https://example.com
"""

_SAMPLE_POST = """\
---
title: Hello World
description: The first post on this blog.
---

# Hello World

Welcome to your new blog. Edit `posts/hello-world.md` to get started.
"""


@click.group()
@click.version_option(version=__version__, prog_name="scribe")
def cli():
    """Scribe static blog renderer."""


@cli.command()
@click.option(
    "--content-dir",
    type=click.Path(path_type=Path),
    required=True,
    help="Flat directory of Markdown/MDX posts",
)
@click.option(
    "--site-config",
    type=click.Path(path_type=Path),
    required=True,
    help="YAML file with the site metadata",
)
@click.option(
    "--out-dir",
    type=click.Path(path_type=Path),
    required=True,
    help="Directory to write the built site into",
)
@click.option(
    "--templates",
    type=click.Path(path_type=Path, file_okay=False),
    required=False,
    help="Directory of templates overriding the packaged layout",
)
@click.option("--workers", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--drafts", is_flag=True, help="Include draft content")
@click.option("--verbose", "-v", is_flag=True, help="Log build progress to stderr")
def build(
    content_dir: Path,
    site_config: Path,
    out_dir: Path,
    templates: Path | None,
    workers: int,
    drafts: bool,
    verbose: bool,
):
    """Build the site into the output directory."""
    _configure_logging(verbose)
    from jinja2 import TemplateError

    from .build import build_site
    from .config import load_site_metadata
    from .content import ContentStore
    from .errors import ConfigError, ContentLoadError, RouteCollisionError, WriteError
    from .output import DirectoryTarget
    from .templates import PageRenderer

    try:
        site = load_site_metadata(site_config)
    except ConfigError as exc:
        _fail("Invalid site config:", exc.path, exc.message)

    try:
        store = ContentStore.load(content_dir, workers=workers, include_drafts=drafts)
    except ContentLoadError as exc:
        _fail("Cannot load content:", exc.source_path, exc.message)

    for error in store.errors:
        _warn(f"Skipped {error.source_path}: {error.message}")
    if store.errors and not store:
        _fail("No documents loaded:", content_dir, f"{len(store.errors)} file(s) failed")

    try:
        result = build_site(
            store,
            site,
            DirectoryTarget(out_dir),
            workers=workers,
            renderer=PageRenderer(templates_dir=templates),
        )
    except RouteCollisionError as exc:
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  Route: {exc.route}", fg="yellow"), err=True)
        click.echo(click.style(f"  Files: {exc.first}, {exc.second}", fg="white"), err=True)
        raise SystemExit(1) from None
    except WriteError as exc:
        _fail("Build failed:", exc.route, exc.message)
    except TemplateError as exc:
        _fail("Template error:", templates or "packaged layouts", str(exc))

    for error in result.errors:
        _warn(f"Could not write {error.route}: {error.message}")
    click.echo(f"Built {len(result.pages)} pages into {out_dir}")


@cli.command()
@click.argument("name")
def new(name: str):
    """Scaffold a new blog project."""
    target = Path(name).resolve()
    if target.exists() and any(target.iterdir()):
        raise click.ClickException(
            f"Refusing to initialize into non-empty directory: {target}"
        )
    (target / "posts").mkdir(parents=True, exist_ok=True)
    (target / "site.yaml").write_text(
        _SITE_CONFIG.format(title=target.name), encoding="utf-8"
    )
    (target / "posts" / "hello-world.md").write_text(_SAMPLE_POST, encoding="utf-8")
    click.echo(f"New blog created at {target}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _warn(message: str) -> None:
    click.echo(click.style(f"Warning: {message}", fg="yellow"), err=True)


def _fail(headline: str, resource, message: str):
    click.echo(click.style(headline, fg="red", bold=True), err=True)
    if resource is not None:
        click.echo(click.style(f"  Resource: {resource}", fg="yellow"), err=True)
    click.echo(click.style(f"  Error: {message}", fg="white"), err=True)
    raise SystemExit(1)


def main():
    """Entry point for the scribe console script."""
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
