"""Local robots.txt parsing command."""

from pathlib import Path
from typing import TextIO

import click

from robotrules.cli._common import app, emit, format_option, output_option, render_json, render_text
from robotrules.parser import parse_robots_txt


@app.command("parse", help="Parse a robots.txt file (use - for stdin).")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@format_option
@output_option
def parse_cmd(source: TextIO, output_format: str, output: Path | None) -> None:
    """Parse a local robots.txt document.

    Examples:
        robotrules parse robots.txt
        cat robots.txt | robotrules parse --format json
    """
    try:
        text = source.read()
    except UnicodeDecodeError as e:
        click.echo(f"Error: {source.name} is not valid UTF-8 text ({e.reason} at byte {e.start})", err=True)
        raise SystemExit(1) from e

    result = parse_robots_txt(text)

    content = render_json(result) if output_format == "json" else render_text(result)
    emit(content, output, f"Wrote {len(result.rulesets)} ruleset(s) to {output}")
