"""Rendering of search results for the terminal."""

from __future__ import annotations

from typing import Any

import msgspec
from rich.console import Console
from rich.table import Table
from rich.text import Text

from skillsearch.highlighting import Highlighter
from skillsearch.models import HighlightSpan, SearchHit
from skillsearch.query.parser import ParsedQuery


def _hit_to_dict(hit: SearchHit) -> dict[str, Any]:
    """Convert a hit to a JSON-friendly dictionary."""
    skill = hit.skill
    return {
        "name": skill.name,
        "location": skill.location,
        "path": skill.path,
        "description": skill.description,
        "tags": skill.tags,
        "highlights": hit.highlights,
    }


def format_hits_json(hits: list[SearchHit]) -> str:
    """Format hits as pretty-printed JSON."""
    encoded = msgspec.json.encode([_hit_to_dict(hit) for hit in hits])
    return msgspec.json.format(encoded, indent=2).decode()


def _render(spans: list[HighlightSpan], highlighter: Highlighter | None) -> Text:
    if highlighter is None:
        return Text("".join(span.text for span in spans))
    return highlighter.to_rich_text(spans)


def display_hits(
    console: Console,
    hits: list[SearchHit],
    total: int,
    output_format: str = "table",
    highlighter: Highlighter | None = None,
) -> None:
    """Print hits as a table, a list or JSON.

    Args:
        console: Console to print to
        hits: Matching skills
        total: Number of skills searched
        output_format: One of "table", "list" or "json"
        highlighter: Highlighter used to style matches, None for plain text
    """
    if output_format == "json":
        console.out(format_hits_json(hits), highlight=False)
        return

    if not hits:
        console.print("[yellow]No skills match the query[/yellow]")
        return

    if output_format == "list":
        for hit in hits:
            line = _render(hit.spans_for("name"), highlighter)
            line.append(f" ({hit.skill.location})", style="dim")
            console.print(line)
            description = hit.spans_for("description")
            if any(span.text for span in description):
                console.print(Text("  ") + _render(description, highlighter))
    else:
        table = Table(title=f"{len(hits)} of {total} skills")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Location", style="magenta")
        table.add_column("Description")

        for hit in hits:
            table.add_row(
                _render(hit.spans_for("name"), highlighter),
                Text(hit.skill.location),
                _render(hit.spans_for("description"), highlighter),
            )

        console.print(table)


def display_parsed_query(console: Console, parsed_query: ParsedQuery) -> None:
    """Print the buckets of a parsed query."""
    if parsed_query.is_empty:
        console.print("[dim]Empty query: every skill matches[/dim]")
        return

    table = Table(show_header=True)
    table.add_column("Bucket", style="cyan")
    table.add_column("Values")

    operators = parsed_query.operators
    rows = [(f"{field}:", values) for field, values in parsed_query.field_queries.items()]
    rows += [
        ("AND", operators.and_),
        ("OR", operators.or_),
        ("NOT", operators.not_),
        ("ignored", parsed_query.terms),
    ]
    for bucket, values in rows:
        if values:
            table.add_row(Text(bucket), Text(", ".join(values)))

    console.print(table)
    console.print(Text(parsed_query.to_string(), style="dim"))
