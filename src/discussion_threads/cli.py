"""CLI for fetching and rendering discussion threads."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from discussion_threads.core.render.html import render_thread
from discussion_threads.core.render.text import pluralize
from discussion_threads.fetcher import PageFetcher
from discussion_threads.logging_config import configure_logging
from discussion_threads.models.thread import Comment, Thread, count_all_comments
from discussion_threads.providers.registry import ProviderRegistry, default_registry
from discussion_threads.service import DiscussionService

app = typer.Typer(help="Fetch discussion threads and render them as HTML.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write debug logs to this file"),
    ] = None,
) -> None:
    configure_logging(verbose=verbose, log_file=log_file)


def _build_registry(cache: bool) -> ProviderRegistry:
    return default_registry(PageFetcher(from_cache=cache))


def _load_thread(url: str, content: str, cache: bool) -> Thread:
    """Fetch the reconciled thread, exiting with status 1 when unavailable."""
    service = DiscussionService(_build_registry(cache))
    thread = service.get_thread(url, content)
    if thread is None:
        logger.error("No discussion available for {}", url)
        raise typer.Exit(1)
    return thread


@app.command()
def render(
    url: str = typer.Argument(..., help="Discussion or feed item URL"),
    content: str = typer.Option("", "--content", "-c", help="Feed item description to scan"),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the fragment here instead of stdout"),
    ] = None,
    cache: bool = typer.Option(False, "--cache", "-C", help="Cache fetched pages and use cache"),
) -> None:
    """Render a discussion thread as an HTML fragment."""
    html = render_thread(_load_thread(url, content, cache))
    if output is None:
        typer.echo(html)
    else:
        output.write_text(html, encoding="utf-8")
        logger.info("Wrote {} bytes to {}", len(html.encode("utf-8")), output)


def _outline(comments: tuple[Comment, ...]) -> list[str]:
    lines: list[str] = []
    todo = [(comment, 0) for comment in reversed(comments)]
    while todo:
        comment, indent = todo.pop()
        when = f" ({comment.time})" if comment.time else ""
        lines.append(f"{'    ' * indent}- {comment.author or '?'}{when} [id={comment.id}]")
        todo.extend((child, indent + 1) for child in reversed(comment.children))
    return lines


@app.command()
def thread(
    url: str = typer.Argument(..., help="Discussion or feed item URL"),
    content: str = typer.Option("", "--content", "-c", help="Feed item description to scan"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    cache: bool = typer.Option(False, "--cache", "-C", help="Cache fetched pages and use cache"),
) -> None:
    """Show the reconciled comment tree of a discussion."""
    t = _load_thread(url, content, cache)
    if output_json:
        data = asdict(t)
        data["total_comments"] = count_all_comments(t.comments)
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"{t.title} [{t.source}]")
    if t.url:
        typer.echo(f"  {t.url}")
    typer.echo(f"{pluralize(count_all_comments(t.comments), 'comment')}\n")
    for line in _outline(t.comments):
        typer.echo(line)


@app.command()
def providers() -> None:
    """List the built-in discussion providers."""
    for provider in _build_registry(cache=False).providers:
        typer.echo(f"  {provider.name}  [theme={provider.theme}]")
