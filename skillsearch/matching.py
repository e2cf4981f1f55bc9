"""Boolean evaluation of parsed queries against skill records."""

from collections.abc import Iterable
from typing import Any

from .query.parser import ParsedQuery, SkillField, parse_query


def searchable_text(record: Any) -> str:
    """Build the lowercase full-text surface of a record."""
    parts = [record.name, record.description or "", record.location, record.body]
    return " ".join(parts).lower()


def matches(record: Any, parsed_query: ParsedQuery) -> bool:
    """Check whether a record satisfies a parsed query.

    Exclusions are checked first, then field queries, then AND terms,
    then OR terms. An empty query matches every record.

    Args:
        record: Object exposing name, description, location and body
        parsed_query: Query produced by QueryParser

    Returns:
        True if the record matches
    """
    text = searchable_text(record)
    operators = parsed_query.operators

    if any(term in text for term in operators.not_):
        return False

    for field_name, values in parsed_query.field_queries.items():
        target = _field_text(record, SkillField.from_name(field_name), text)
        if not any(value in target for value in values):
            return False

    if operators.and_ and not all(term in text for term in operators.and_):
        return False

    if operators.or_ and not any(term in text for term in operators.or_):
        return False

    return True


def parse_and_filter(records: Iterable[Any], query_string: str) -> list[Any]:
    """Parse a query once and keep the records it matches, in order."""
    parsed_query = parse_query(query_string)
    return [record for record in records if matches(record, parsed_query)]


def _field_text(record: Any, field: SkillField, full_text: str) -> str:
    """Get the lowercase text a field query should be checked against."""
    if field is SkillField.NAME:
        return record.name.lower()
    elif field is SkillField.DESCRIPTION:
        # A missing description never satisfies a description query
        return (record.description or "").lower()
    elif field is SkillField.LOCATION:
        return record.location.lower()
    return full_text
