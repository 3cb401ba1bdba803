"""Command-line interface for robotrules.

Commands are organized into modules by functionality:

- parse: Parse a local robots.txt file (or stdin)
- fetch: Retrieve robots.txt from a site and parse it
"""

# Import all command modules to register them with the app
from robotrules.cli import (
    fetch,  # noqa: F401
    parse,  # noqa: F401
)
from robotrules.cli._common import app

__all__ = ["app"]
