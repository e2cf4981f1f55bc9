"""Tests for CLI commands."""

import json

from skillsearch import __version__
from skillsearch.cli import cli


def run(cli_runner, skills_dir, *args):
    return cli_runner.invoke(
        cli, ["--quiet", *args, "--dir", f"local={skills_dir}"], catch_exceptions=False
    )


class TestSearchCommand:
    """Test the search command."""

    def test_search_table(self, cli_runner, skills_dir):
        result = run(cli_runner, skills_dir, "search", "pdf")

        assert result.exit_code == 0
        assert "pdf-tools" in result.output
        assert "xlsx" not in result.output
        assert "1 of 3 skills" in result.output

    def test_search_list(self, cli_runner, skills_dir):
        result = run(cli_runner, skills_dir, "search", "excel OR git", "-f", "list")

        assert result.exit_code == 0
        assert "xlsx (local)" in result.output
        assert "git-helper (local)" in result.output
        assert "Rebase and bisect recipes." in result.output

    def test_search_json(self, cli_runner, skills_dir):
        result = run(cli_runner, skills_dir, "search", "name:pdf", "--format", "json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [hit["name"] for hit in data] == ["pdf-tools"]
        assert data[0]["tags"] == ["documents"]
        assert data[0]["highlights"]["name"][0] == {"text": "pdf", "is_match": True}

    def test_search_json_without_highlight(self, cli_runner, skills_dir):
        result = run(
            cli_runner, skills_dir, "search", "pdf", "-f", "json", "--no-highlight"
        )

        assert json.loads(result.output)[0]["highlights"] == {}

    def test_no_matches(self, cli_runner, skills_dir):
        result = run(cli_runner, skills_dir, "search", "pdf NOT pdfplumber")

        assert result.exit_code == 0
        assert "No skills match the query" in result.output

    def test_tag_filter(self, cli_runner, skills_dir):
        result = run(cli_runner, skills_dir, "search", "", "-t", "office", "-f", "json")

        assert [hit["name"] for hit in json.loads(result.output)] == ["xlsx"]

    def test_location_filter(self, cli_runner, skills_dir):
        result = run(cli_runner, skills_dir, "search", "pdf", "-l", "claude")

        assert "No skills match the query" in result.output

    def test_invalid_dir_spec(self, cli_runner, isolated_home):
        result = cli_runner.invoke(cli, ["search", "pdf", "--dir", "nolocation"])

        assert result.exit_code == 2
        assert "LOCATION=PATH" in result.output

    def test_default_format_from_env(self, cli_runner, skills_dir, monkeypatch):
        monkeypatch.setenv("SKILLSEARCH_FORMAT", "json")

        result = run(cli_runner, skills_dir, "search", "xlsx")

        assert json.loads(result.output)[0]["name"] == "xlsx"


class TestListCommand:
    """Test the list command."""

    def test_list_all(self, cli_runner, skills_dir):
        result = run(cli_runner, skills_dir, "list", "-f", "json")

        assert result.exit_code == 0
        assert [hit["name"] for hit in json.loads(result.output)] == [
            "git-helper",
            "pdf-tools",
            "xlsx",
        ]

    def test_directories_from_env(self, cli_runner, skills_dir, monkeypatch):
        monkeypatch.setenv("SKILLSEARCH_DIRS", f"env={skills_dir}")

        result = cli_runner.invoke(cli, ["-q", "list", "-f", "json"])

        assert result.exit_code == 0
        assert {hit["location"] for hit in json.loads(result.output)} == {"env"}


class TestExplainCommand:
    """Test the explain command."""

    def test_explain_table(self, cli_runner, isolated_home):
        result = cli_runner.invoke(cli, ["explain", "name:pdf AND convert NOT excel"])

        assert result.exit_code == 0
        assert "name:pdf AND convert AND NOT excel" in result.output

    def test_explain_json(self, cli_runner, isolated_home):
        result = cli_runner.invoke(cli, ["explain", "pdf excel", "--json"])

        data = json.loads(result.output)
        assert data["operators"]["or"] == ["pdf", "excel"]
        assert data["terms"] == []

    def test_explain_empty(self, cli_runner, isolated_home):
        result = cli_runner.invoke(cli, ["explain", ""])

        assert "every skill matches" in result.output


class TestTagsCommand:
    """Test the tags command."""

    def test_tags(self, cli_runner, skills_dir):
        result = run(cli_runner, skills_dir, "tags")

        assert result.exit_code == 0
        assert result.output.split() == ["documents", "office"]

    def test_no_tags(self, cli_runner, isolated_home):
        empty = isolated_home / "empty"
        empty.mkdir()

        result = cli_runner.invoke(cli, ["tags", "--dir", f"x={empty}"])

        assert "No tags found" in result.output


class TestGroup:
    """Test global options."""

    def test_version(self, cli_runner):
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert f"skillsearch version {__version__}" in result.output

    def test_invalid_config_file(self, cli_runner, isolated_home):
        config = isolated_home / "bad.yaml"
        config.write_text("highlight: [unclosed\n")

        result = cli_runner.invoke(cli, ["--config", str(config), "explain", "pdf"])

        assert result.exit_code == 1
        assert "Error loading configuration" in result.output
