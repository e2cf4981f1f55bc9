"""Fixtures for CLI tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Keep CLI tests away from real config files."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    return tmp_path


@pytest.fixture
def skills_dir(isolated_home):
    """A skill directory with three skills."""
    root = isolated_home / "skills"
    skills = {
        "pdf-tools": (
            "---\ndescription: Extract text from PDF files\ntags: [documents]\n---\n"
            "# PDF\n\nUse pdfplumber.\n"
        ),
        "xlsx": (
            "---\ndescription: Edit Excel spreadsheets\ntags: [office]\n---\n"
            "# XLSX\n\nPivot tables.\n"
        ),
        "git-helper": "# Git\n\nRebase and bisect recipes.\n",
    }
    for name, content in skills.items():
        (root / name).mkdir(parents=True)
        (root / name / "SKILL.md").write_text(content, encoding="utf-8")
    return root
