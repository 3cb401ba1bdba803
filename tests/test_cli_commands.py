"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from robotrules.cli import app
from robotrules.exceptions import RetrievalError

ROBOTS_BODY = "User-agent: *\nDisallow: /admin\nCrawl-delay: 2\nSitemap: https://example.com/sitemap.xml\n"


@pytest.fixture
def runner() -> CliRunner:
    """Click test runner."""
    return CliRunner()


@pytest.mark.integration
class TestParseCommand:
    """Tests for the parse command."""

    def test_text_output(self, runner: CliRunner, robots_file: Path) -> None:
        """Test the default text rendering."""
        result = runner.invoke(app, ["parse", str(robots_file)])

        assert result.exit_code == 0, result.output
        assert "User-agent: *\n  Allow: /admin/public\n  Disallow: /admin\n  Crawl-delay: 5" in result.output
        assert "User-agent: Googlebot\n  Disallow: /private # not a comment" in result.output
        assert "Sitemap: https://example.com/sitemap.xml" in result.output
        assert "Unknown: example.com" in result.output

    def test_json_output(self, runner: CliRunner, robots_file: Path) -> None:
        """Test JSON rendering of the full result."""
        result = runner.invoke(app, ["parse", str(robots_file), "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["rulesets"]["*"] == {"allow": ["/admin/public"], "disallow": ["/admin"], "delay": "5"}
        assert "delay" not in data["rulesets"]["Googlebot"]
        assert data["sitemaps"] == ["https://example.com/sitemap.xml"]
        assert data["unknown"] == ["example.com"]

    def test_reads_stdin(self, runner: CliRunner) -> None:
        """Test that '-' (the default) reads from stdin."""
        result = runner.invoke(app, ["parse"], input="User-agent: bot\nDisallow: /x\n")

        assert result.exit_code == 0, result.output
        assert "User-agent: bot\n  Disallow: /x" in result.output

    def test_writes_output_file(self, runner: CliRunner, robots_file: Path, tmp_path: Path) -> None:
        """Test that --output writes the rendering to a file."""
        output_file = tmp_path / "rules.json"
        result = runner.invoke(app, ["parse", str(robots_file), "--format", "json", "--output", str(output_file)])

        assert result.exit_code == 0, result.output
        assert "Wrote 2 ruleset(s)" in result.output
        data = json.loads(output_file.read_text(encoding="utf-8"))
        assert list(data["rulesets"]) == ["*", "Googlebot"]

    def test_empty_document(self, runner: CliRunner) -> None:
        """Test that a comment-only document produces empty JSON collections."""
        result = runner.invoke(app, ["parse", "--format", "json"], input="# nothing\n")

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"rulesets": {}, "sitemaps": [], "unknown": []}

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that a missing file is a usage error."""
        result = runner.invoke(app, ["parse", str(tmp_path / "absent.txt")])
        assert result.exit_code == 2

    def test_non_utf8_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that undecodable bytes are reported and exit with status 1."""
        path = tmp_path / "robots.txt"
        path.write_bytes(b"User-agent: *\nDisallow: /caf\xe9\xff\n")

        result = runner.invoke(app, ["parse", str(path)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "is not valid UTF-8 text" in result.output
        assert "Traceback" not in result.output


@pytest.mark.integration
class TestFetchCommand:
    """Tests for the fetch command."""

    @pytest.fixture
    def fake_fetch(self, monkeypatch: pytest.MonkeyPatch) -> list[str]:
        """Replace network retrieval with a canned document, recording URLs."""
        requested: list[str] = []

        async def fetch_raw(self, url: str) -> str:
            requested.append(url)
            return ROBOTS_BODY

        monkeypatch.setattr("robotrules.fetch.RobotsFetcher.fetch_raw", fetch_raw)
        return requested

    def test_parsed_output(self, runner: CliRunner, fake_fetch: list[str]) -> None:
        """Test that fetched text is parsed and rendered."""
        result = runner.invoke(app, ["fetch", "https://example.com"])

        assert result.exit_code == 0, result.output
        assert fake_fetch == ["https://example.com"]
        assert "User-agent: *\n  Disallow: /admin\n  Crawl-delay: 2" in result.output

    def test_raw_output(self, runner: CliRunner, fake_fetch: list[str]) -> None:
        """Test that --raw prints the document unparsed."""
        result = runner.invoke(app, ["fetch", "https://example.com", "--raw"])

        assert result.exit_code == 0, result.output
        assert result.output == ROBOTS_BODY + "\n"

    def test_json_output(self, runner: CliRunner, fake_fetch: list[str]) -> None:
        """Test JSON rendering for fetched documents."""
        result = runner.invoke(app, ["fetch", "https://example.com", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["rulesets"]["*"]["delay"] == "2"

    def test_retrieval_error_exits_nonzero(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that retrieval failures are reported and exit with status 1."""

        async def fetch_raw(self, url: str) -> str:
            raise RetrievalError("robots.txt returned status 503", url=url, status_code=503)

        monkeypatch.setattr("robotrules.fetch.RobotsFetcher.fetch_raw", fetch_raw)
        result = runner.invoke(app, ["fetch", "https://example.com"])

        assert result.exit_code == 1
        assert "Error: robots.txt returned status 503" in result.output

    def test_invalid_timeout(self, runner: CliRunner) -> None:
        """Test that an invalid --timeout is reported as a configuration error."""
        result = runner.invoke(app, ["fetch", "https://example.com", "--timeout", "0"])

        assert result.exit_code == 1
        assert "Error: Invalid robotrules settings" in result.output

    def test_relative_url(self, runner: CliRunner) -> None:
        """Test that a URL without scheme fails before any request."""
        result = runner.invoke(app, ["fetch", "example.com"])

        assert result.exit_code == 1
        assert "Error: Not an absolute URL" in result.output
