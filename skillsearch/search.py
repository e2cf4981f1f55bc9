"""Search service tying filtering, matching and highlighting together."""

import logging

from .filters import SearchFilters
from .highlighting import Highlighter
from .matching import matches
from .models import SearchHit, Skill
from .query.parser import ParsedQuery, QueryParser

logger = logging.getLogger(__name__)

HIGHLIGHT_FIELDS = ("name", "description")


class SkillSearcher:
    """Search over an in-memory list of skills.

    Coordinates query parsing, facet filtering, boolean matching and
    highlighting of the displayed fields.
    """

    def __init__(self, skills: list[Skill], highlighter: Highlighter | None = None):
        """Initialize searcher.

        Args:
            skills: Skills to search, in display order
            highlighter: Highlighter for matched fields (default: Highlighter())
        """
        self.skills = list(skills)
        self.query_parser = QueryParser()
        self.highlighter = highlighter or Highlighter(parser=self.query_parser)

    def search(
        self,
        query: str,
        filters: SearchFilters | None = None,
        highlight: bool = True,
    ) -> list[SearchHit]:
        """Find skills matching a query.

        Args:
            query: Raw query string
            filters: Optional location/tag filters applied first
            highlight: Whether to compute highlight spans

        Returns:
            Hits in the original skill order
        """
        candidates = filters.apply(self.skills) if filters else self.skills
        parsed_query = self.query_parser.parse(query)

        hits = []
        for skill in candidates:
            if not matches(skill, parsed_query):
                continue
            hit = SearchHit(skill=skill)
            if highlight:
                for field_name in HIGHLIGHT_FIELDS:
                    value = getattr(skill, field_name) or ""
                    hit.highlights[field_name] = self.highlighter.highlight(
                        value, query
                    )
            hits.append(hit)

        logger.debug(
            f"Query {query!r} matched {len(hits)} of {len(candidates)} skills "
            f"({len(self.skills)} loaded)"
        )
        return hits

    def explain(self, query: str) -> ParsedQuery:
        """Parse a query without running it."""
        return self.query_parser.parse(query)
