"""Allow running as ``python -m robotrules``."""

from robotrules.cli import app

if __name__ == "__main__":
    app()
