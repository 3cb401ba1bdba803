"""Remote robots.txt retrieval command."""

from pathlib import Path

import click

from robotrules.cli._common import app, emit, format_option, output_option, render_json, render_text
from robotrules.config import load_settings
from robotrules.exceptions import ConfigurationError, InvalidInputError, RetrievalError


@app.command("fetch", help="Fetch robots.txt from a website and parse it.")
@click.argument("url")
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="HTTP timeout in seconds. Also reads ROBOTRULES_TIMEOUT env.",
)
@click.option(
    "--user-agent",
    type=str,
    default=None,
    help="User-Agent header to send. Also reads ROBOTRULES_USER_AGENT env.",
)
@click.option(
    "--raw",
    is_flag=True,
    default=False,
    help="Print the retrieved document instead of the parsed result.",
)
@format_option
@output_option
def fetch_cmd(
    url: str,
    timeout: float | None,
    user_agent: str | None,
    raw: bool,
    output_format: str,
    output: Path | None,
) -> None:
    """Fetch and parse a site's robots.txt.

    Examples:
        robotrules fetch https://example.com
        robotrules fetch https://example.com/robots.txt --format json
        robotrules fetch https://example.com --raw --output robots.txt
    """
    import asyncio

    from robotrules.fetch import RobotsFetcher

    try:
        settings = load_settings(timeout=timeout, user_agent=user_agent)
        fetcher = RobotsFetcher(settings=settings)
        text = asyncio.run(fetcher.fetch_raw(url))
    except (ConfigurationError, InvalidInputError, RetrievalError) as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1) from e

    if raw:
        emit(text, output, f"Wrote robots.txt for {url} to {output}")
        return

    result = fetcher.parse(text)
    content = render_json(result) if output_format == "json" else render_text(result)
    emit(content, output, f"Wrote {len(result.rulesets)} ruleset(s) to {output}")
