"""Common CLI utilities and the main app group."""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from robotrules.config import get_settings
from robotrules.models import ParseResult

console = Console(stderr=True)
_configured = False


def configure_logging(*, verbose: bool = False) -> None:
    """Configure logging with Rich handler. Call once at startup."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else get_settings().log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
            )
        ],
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _configured = True


def render_text(result: ParseResult) -> str:
    """
    Render a ParseResult in robots.txt-like text form.

    Args:
        result: Parsed document.

    Returns:
        One ``User-agent:`` block per title with indented rules, followed
        by ``Sitemap:`` and ``Unknown:`` lines.
    """
    lines: list[str] = []
    for title, ruleset in result.rulesets.items():
        lines.append(f"User-agent: {title}")
        lines.extend(f"  Allow: {pattern}" for pattern in ruleset.allow)
        lines.extend(f"  Disallow: {pattern}" for pattern in ruleset.disallow)
        if ruleset.delay is not None:
            lines.append(f"  Crawl-delay: {ruleset.delay}")
    lines.extend(f"Sitemap: {sitemap}" for sitemap in result.sitemaps)
    lines.extend(f"Unknown: {value}" for value in result.unknown)
    return "\n".join(lines)


def render_json(result: ParseResult) -> str:
    """Render a ParseResult as indented JSON (``delay`` omitted when unset)."""
    return json.dumps(result.model_dump(mode="json", exclude_none=True), indent=2)


def emit(content: str, output: Path | None, summary: str) -> None:
    """
    Write content to a file or stdout.

    Args:
        content: Text to write.
        output: Destination file. If None, prints to stdout.
        summary: Message echoed after writing to a file.
    """
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(content)
            if not content.endswith("\n"):
                f.write("\n")
        click.echo(summary)
    else:
        click.echo(content)


format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format: json (full result) or text (robots.txt-like summary).",
)

output_option = click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Output file path. If omitted, prints to stdout.",
)


@click.group(help="Parse robots.txt documents into structured rules.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def app(verbose: bool) -> None:
    """
    Entry point for the robotrules CLI.

    Provides commands for parsing local robots.txt files and fetching
    them from websites.
    """
    configure_logging(verbose=verbose)
