"""Boolean search over skills.

This package parses search box queries, evaluates them against skill
records and highlights matched terms in display text.

Main components:
- QueryParser: flat field/AND/OR/NOT query parsing
- matches / parse_and_filter: boolean evaluation over records
- Highlighter: matched/unmatched span splitting
- SkillSearcher: filtering, matching and highlighting over loaded skills
"""

__version__ = "1.0.0"

from .filters import SearchFilters, collect_tags
from .highlighting import Highlighter, highlight
from .matching import matches, parse_and_filter, searchable_text
from .models import HighlightSpan, SearchHit, Skill
from .query import (
    BooleanOperator,
    ParsedQuery,
    QueryOperators,
    QueryParser,
    SkillField,
    parse_query,
)
from .search import SkillSearcher

__all__ = [
    # Query parsing
    "QueryParser",
    "ParsedQuery",
    "QueryOperators",
    "BooleanOperator",
    "SkillField",
    "parse_query",
    # Evaluation
    "matches",
    "parse_and_filter",
    "searchable_text",
    # Highlighting
    "Highlighter",
    "HighlightSpan",
    "highlight",
    # Search
    "SkillSearcher",
    "SearchHit",
    "SearchFilters",
    "collect_tags",
    "Skill",
]
