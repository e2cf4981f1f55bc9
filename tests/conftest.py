"""Pytest configuration and fixtures."""

import os

import pytest

from skillsearch.models import Skill


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Isolate environment variables for each test.

    This prevents test pollution where one test's environment
    changes affect other tests.
    """
    original_env = os.environ.copy()
    monkeypatch.delenv("SKILLSEARCH_DIRS", raising=False)
    monkeypatch.delenv("SKILLSEARCH_FORMAT", raising=False)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def pdf_skill() -> Skill:
    """Skill used by most matching scenarios."""
    return Skill(
        name="PDF Converter",
        description="Convert documents to PDF format",
        location="claude",
        path="/test/pdf-converter/SKILL.md",
        content="Full content here",
        body="Clean content here",
    )


@pytest.fixture
def sample_skills() -> list[Skill]:
    """Skills with diverse content for search testing."""
    return [
        Skill(
            name="pdf-tools",
            description="Extract text and tables from PDF files",
            location="claude",
            body="Use pdfplumber to read pages.",
            metadata={"tags": ["documents", "pdf"]},
        ),
        Skill(
            name="xlsx",
            description="Create and edit Excel spreadsheets",
            location="claude",
            body="Formulas, charts and pivot tables.",
            metadata={"tags": ["documents", "office"]},
        ),
        Skill(
            name="pptx",
            description="Build PowerPoint decks",
            location="opencode",
            body="Slides with layouts and speaker notes.",
            metadata={"tags": ["office"]},
        ),
        Skill(
            name="git-helper",
            description=None,
            location="opencode",
            body="Rebase, bisect and cherry-pick recipes.",
        ),
    ]
