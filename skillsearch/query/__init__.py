"""Query parsing subsystem."""

from .parser import (
    BooleanOperator,
    ParsedQuery,
    QueryOperators,
    QueryParser,
    SkillField,
    parse_query,
)

__all__ = [
    "QueryParser",
    "ParsedQuery",
    "QueryOperators",
    "BooleanOperator",
    "SkillField",
    "parse_query",
]
