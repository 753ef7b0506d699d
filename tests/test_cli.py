"""Tests for the github-ls command line interface."""

import json

import httpx
import pytest
from click.testing import CliRunner

from github_ls.domain.entities import Entry, EntryType
from github_ls.domain.exceptions import HostReportedError, NotFoundError
from github_ls.infrastructure.config import APP_VERSION
from github_ls.interface import cli as cli_module
from github_ls.interface.cli import cli

ENTRIES = [
    Entry(name="src", path="src", type=EntryType.COLLECTION, author="hubot", root=True),
    Entry(name="main.py", path="src/main.py", author="octocat", size=4096),
]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def calls(monkeypatch):
    """Replace the network call with a recorder returning ENTRIES."""
    recorded = []

    async def fake_list_remote(query, branch=None, settings=None):
        recorded.append((query, branch))
        return ENTRIES

    monkeypatch.setattr(cli_module, "list_remote", fake_list_remote)
    return recorded


def failing_list_remote(exc):
    async def fake(query, branch=None, settings=None):
        raise exc

    return fake


class TestCli:
    """Test the cli command."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["-v"])
        assert result.exit_code == 0
        assert result.output.strip() == APP_VERSION

    def test_help(self, runner):
        result = runner.invoke(cli, ["-h"])
        assert result.exit_code == 0
        for flag in ("--branch", "--json", "--no-colors", "--version"):
            assert flag in result.output

    def test_missing_path(self, runner, calls):
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "Error: Github path required!" in result.output
        assert calls == []

    def test_table_output(self, runner, calls):
        result = runner.invoke(cli, ["acme/widgets/src", "--no-colors"])
        assert result.exit_code == 0
        assert calls == [("acme/widgets/src", None)]
        lines = result.output.splitlines()
        assert lines[0].startswith("d  hubot")
        assert lines[0].endswith(" .")
        assert lines[1].endswith("4.1K  main.py")

    def test_colors_disabled_without_tty(self, runner, calls, monkeypatch):
        """Colors default on, but a non-terminal stdout gets a plain table."""
        seen = []

        def fake_render_table(entries, colors=True):
            seen.append(colors)
            return ""

        monkeypatch.setattr(cli_module, "render_table", fake_render_table)
        result = runner.invoke(cli, ["acme/widgets/src", "--colors"])
        assert result.exit_code == 0
        assert seen == [False]

    def test_branch_option(self, runner, calls):
        result = runner.invoke(cli, ["acme/widgets", "-b", "dev"])
        assert result.exit_code == 0
        assert calls == [("acme/widgets", "dev")]

    def test_json_output(self, runner, calls):
        result = runner.invoke(cli, ["acme/widgets/src", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["name"] for item in data] == ["src", "main.py"]
        assert "size" not in data[0]

    @pytest.mark.parametrize(
        ("exc", "message"),
        [
            (NotFoundError("src"), "Error: No such file or directory: src"),
            (HostReportedError("rate limit exceeded\n"), "Error: rate limit exceeded"),
        ],
    )
    def test_listing_errors_are_reported(self, runner, monkeypatch, exc, message):
        monkeypatch.setattr(cli_module, "list_remote", failing_list_remote(exc))
        result = runner.invoke(cli, ["acme/widgets/src"])
        assert result.exit_code == 1
        assert message in result.output

    def test_unexpected_errors_propagate(self, runner, monkeypatch):
        request = httpx.Request("PROPFIND", "https://github.com/acme/widgets.git/trunk/")
        exc = httpx.ConnectError("connection refused", request=request)
        monkeypatch.setattr(cli_module, "list_remote", failing_list_remote(exc))
        result = runner.invoke(cli, ["acme/widgets"])
        assert result.exit_code == 1
        assert isinstance(result.exception, httpx.ConnectError)
