#!/usr/bin/env python3
"""
Site Build CLI

Builds the portfolio site and inspects the writings collection.

Commands:
    build   - Build the full site into the output directory
    recent  - Show the posts the home page will list
    posts   - List every post, newest first
    check   - Validate writings and the site config without writing anything
    history - Show recent build events

Examples:\n

    build_site.py build                              # Build with paths from .env

    build_site.py build --out /tmp/site --drafts     # Build elsewhere, include drafts

    build_site.py recent --limit 5                   # Five most recent posts

    build_site.py check                              # Validate sources

    build_site.py history -n 20                      # Last 20 build events
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.composing import IconRegistry, InvalidSiteConfigError, load_site_config
from folio.contexts.composing.site_config import SITE_CONFIG_PATH
from folio.contexts.content import (
    RECENT_POSTS_LIMIT,
    ContentCollectionError,
    PostValidationError,
    load_content_collection,
    load_recent_posts,
    sort_posts_by_date,
)
from folio.contexts.content.logger import setup_content_logger
from folio.contexts.rendering import build_site
from folio.contexts.rendering.builder import CONTENT_PATH, LOGS_PATH, OUTPUT_PATH, STATIC_PATH
from folio.utils.event_logging import get_recent_events
from folio.utils.timestamp import format_timestamp, now

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", "."))

CONTENT_ERRORS = (ContentCollectionError, PostValidationError)


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


def _load_posts(content_dir: Path, include_drafts: bool):
    """Load the collection or exit with a red error message."""
    try:
        return load_content_collection(content_dir, include_drafts=include_drafts)
    except CONTENT_ERRORS as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


app = typer.Typer(
    help="Build the portfolio site and inspect its writings",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    content_dir: Annotated[
        Path,
        typer.Option("--content", "-c", help="Directory of markdown writings"),
    ] = CONTENT_PATH,
    site_config: Annotated[
        Path,
        typer.Option("--config", help="Site metadata YAML"),
    ] = SITE_CONFIG_PATH,
    output_dir: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output directory"),
    ] = OUTPUT_PATH,
    static_dir: Annotated[
        Path,
        typer.Option("--static", help="Static assets directory"),
    ] = STATIC_PATH,
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="Include posts marked draft"),
    ] = False,
    no_clean: Annotated[
        bool,
        typer.Option("--no-clean", help="Keep existing files in the output directory"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every written route"),
    ] = False,
):
    """
    Build the full site.

    Examples:\n

        $ build_site.py build                       # Build with defaults

        $ build_site.py build -o /tmp/site -v       # Verbose build elsewhere
    """
    typer.secho(f"\nBuilding site: {display_path(output_dir)}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    try:
        result = build_site(
            content_dir=content_dir,
            site_config_path=site_config,
            output_dir=output_dir,
            static_dir=static_dir,
            clean=not no_clean,
            include_drafts=drafts,
            verbose=verbose,
        )
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho("✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Pages: {len(result.pages)}")
        typer.echo(f"  Posts: {result.post_count}")
        typer.echo(f"  Site: {display_path(result.output_dir)}")
    else:
        typer.secho(
            f"✗ Build failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True
        )
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)

    if result.log_dir:
        typer.echo(f"  Log: {display_path(result.log_dir / 'build.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("recent")
def recent_command(
    content_dir: Annotated[
        Path,
        typer.Option("--content", "-c", help="Directory of markdown writings"),
    ] = CONTENT_PATH,
    limit: Annotated[
        int,
        typer.Option("--limit", "-n", help="Number of posts to show", min=0),
    ] = RECENT_POSTS_LIMIT,
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="Include posts marked draft"),
    ] = False,
):
    """
    Show the posts the home page lists, most recent first.

    Examples:\n

        $ build_site.py recent             # Home page selection

        $ build_site.py recent -n 10       # Ten most recent
    """
    collection = _load_posts(content_dir, drafts)

    try:
        recent = load_recent_posts(collection.posts, limit=limit)
    except PostValidationError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nRecent writings ({len(recent)} of {len(collection)})", bold=True)
    for post in recent:
        typer.echo(f"  {post.date}  {post.title}  [{post.read_time}]  {post.url}")
    typer.echo("")


@app.command("posts")
def posts_command(
    content_dir: Annotated[
        Path,
        typer.Option("--content", "-c", help="Directory of markdown writings"),
    ] = CONTENT_PATH,
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="Include posts marked draft"),
    ] = False,
):
    """List every post, newest first, with its source file."""
    collection = _load_posts(content_dir, drafts)

    typer.secho(f"\nWritings ({len(collection)})", bold=True)
    for post in sort_posts_by_date(collection.posts):
        source = display_path(post.source_path) if post.source_path else "-"
        typer.echo(f"  {post.date}  {post.slug:<40}  {source}")
    typer.echo("")


@app.command("check")
def check_command(
    content_dir: Annotated[
        Path,
        typer.Option("--content", "-c", help="Directory of markdown writings"),
    ] = CONTENT_PATH,
    site_config: Annotated[
        Path,
        typer.Option("--config", help="Site metadata YAML"),
    ] = SITE_CONFIG_PATH,
):
    """
    Validate writings and the site config without writing the site.

    Catches missing titles, unparsable dates, bad or duplicate slugs and
    malformed site metadata. Technologies whose icon has no entry in the
    icon table are listed with the known identifiers.
    """
    setup_content_logger(LOGS_PATH / f"check_{now()}", content_dir)

    collection = _load_posts(content_dir, include_drafts=True)
    typer.secho(f"✓ {len(collection)} writings valid", fg=typer.colors.GREEN)

    try:
        site = load_site_config(site_config)
    except (InvalidSiteConfigError, FileNotFoundError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"✓ Site config valid ({len(site.projects)} projects, "
        f"{len(site.technologies)} technologies)",
        fg=typer.colors.GREEN,
    )

    icons = IconRegistry()
    unknown = [tech for tech in site.technologies if not icons.has_icon(tech.icon)]
    if unknown:
        typer.secho(
            f"! {len(unknown)} technologies fall back to the '{icons.fallback}' icon:",
            fg=typer.colors.YELLOW,
        )
        for tech in unknown:
            typer.echo(f"  - {tech.name} (icon: {tech.icon})")
        typer.echo(f"  Known icons: {', '.join(icons.identifiers())}")


@app.command("history")
def history_command(
    count: Annotated[
        int,
        typer.Option("--count", "-n", help="Number of events to show", min=1),
    ] = 10,
    event_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Only show this event type (e.g., build_failed)"),
    ] = None,
):
    """Show recent build events from the build event log."""
    events = get_recent_events(count, event_type=event_type)

    if not events:
        typer.echo("No build events recorded.")
        raise typer.Exit()

    for event in events:
        when = format_timestamp(event.get("timestamp", ""), relative=True)
        details = ", ".join(
            f"{key}={value}"
            for key, value in event.items()
            if key not in ("timestamp", "event_type", "source")
        )
        colour = typer.colors.RED if event.get("event_type") == "build_failed" else None
        typer.secho(f"  {when:>10}  {event.get('event_type')}  {details}", fg=colour)


if __name__ == "__main__":
    app()
