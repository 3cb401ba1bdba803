"""Pytest configuration and shared fixtures for robotrules tests."""

from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests with no I/O or network")
    config.addinivalue_line("markers", "integration: Tests touching the filesystem, CLI or a faked HTTP transport")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Apply default markers to tests without explicit markers.

    Unmarked tests default to unit.
    """
    for item in items:
        marker_names = [m.name for m in item.iter_markers()]
        if any(m in marker_names for m in ("unit", "integration")):
            continue

        item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep ROBOTRULES_* environment and the settings cache out of tests."""
    from robotrules.config import get_settings

    for name in ("ROBOTRULES_TIMEOUT", "ROBOTRULES_USER_AGENT", "ROBOTRULES_FOLLOW_REDIRECTS", "ROBOTRULES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_robots() -> str:
    """A representative robots.txt document."""
    return "\n".join(
        [
            "# robots.txt for example.com",
            "",
            "User-agent: *",
            "Disallow: /admin",
            "Allow: /admin/public",
            "Crawl-delay: 5",
            "",
            "User-agent: Googlebot",
            "Disallow: /private # not a comment",
            "Host: example.com",
            "",
            "Sitemap: https://example.com/sitemap.xml",
        ]
    )


@pytest.fixture
def robots_file(tmp_path: Path, sample_robots: str) -> Path:
    """Write the sample document to a temporary robots.txt.

    Args:
        tmp_path: Pytest temporary directory.
        sample_robots: Document contents.

    Returns:
        Path to created file.
    """
    path = tmp_path / "robots.txt"
    path.write_text(sample_robots, encoding="utf-8")
    return path
