"""Query parser for skill search queries."""

import re
from enum import Enum

import msgspec


class SkillField(str, Enum):
    """Skill attributes a field query can target."""

    NAME = "name"
    DESCRIPTION = "description"
    LOCATION = "location"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "SkillField":
        """Resolve a field name, mapping unknown names to OTHER."""
        try:
            return cls(name.lower())
        except ValueError:
            return cls.OTHER


class BooleanOperator(Enum):
    """Boolean operator keywords recognized by the parser."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class QueryOperators(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    rename={"and_": "and", "or_": "or", "not_": "not"},
):
    """Operator buckets of a parsed query."""

    and_: tuple[str, ...] = ()
    or_: tuple[str, ...] = ()
    not_: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.and_ or self.or_ or self.not_)


class ParsedQuery(msgspec.Struct, frozen=True, kw_only=True):
    """Flat representation of a search query.

    Terms, field values and operator tokens are all lowercase and never
    empty. A fresh instance is built for every query string.
    """

    terms: tuple[str, ...] = ()
    field_queries: dict[str, tuple[str, ...]] = msgspec.field(default_factory=dict)
    operators: QueryOperators = msgspec.field(default_factory=QueryOperators)

    @property
    def is_empty(self) -> bool:
        """Check if the query has no predicates at all."""
        return not self.terms and not self.field_queries and self.operators.is_empty

    def get_terms(self) -> list[str]:
        """Get every literal term a matching record may contain.

        Exclusions are left out since they are never highlighted.
        """
        terms = [*self.terms, *self.operators.and_, *self.operators.or_]
        for values in self.field_queries.values():
            terms.extend(values)
        return [term for term in terms if term]

    def get_excluded_terms(self) -> list[str]:
        """Get the terms a matching record must not contain."""
        return list(self.operators.not_)

    def to_string(self) -> str:
        """Render the query buckets in a readable form."""
        parts = []
        for field, values in self.field_queries.items():
            parts.append(" OR ".join(f"{field}:{value}" for value in values))
        if self.operators.and_:
            parts.append(" AND ".join(self.operators.and_))
        if self.operators.or_:
            parts.append(f"({' OR '.join(self.operators.or_)})")
        for term in self.operators.not_:
            parts.append(f"NOT {term}")

        result = " AND ".join(parts)
        if self.terms:
            ignored = " ".join(self.terms)
            result = f"{result} [ignored: {ignored}]" if result else ignored
        return result


class QueryParser:
    """Parser for skill search query strings.

    The grammar is flat: field queries are pulled out first, the rest is
    split on AND, then each AND part on NOT, then on OR. An operator keyword
    is a whole word in any case followed by whitespace, so one left at the
    start of a part after field extraction ("NOT excel") still counts, while
    a lone or trailing keyword ("not", "pdf OR") is a plain word.
    """

    def __init__(self):
        self.field_pattern = re.compile(r"([A-Za-z0-9_]+):(\S+)")
        self.and_pattern = self._keyword_pattern(BooleanOperator.AND)
        self.or_pattern = self._keyword_pattern(BooleanOperator.OR)
        self.not_pattern = self._keyword_pattern(BooleanOperator.NOT)

    def parse(self, query_string: str) -> ParsedQuery:
        """Parse a query string into a ParsedQuery.

        Args:
            query_string: Raw query string from user

        Returns:
            ParsedQuery with terms, field queries and operator buckets
        """
        if not query_string or not query_string.strip():
            return ParsedQuery()

        field_queries, working_query = self._extract_field_queries(query_string)

        terms: list[str] = []
        and_terms: list[str] = []
        or_terms: list[str] = []
        not_terms: list[str] = []

        and_parts = [p for p in self._split(self.and_pattern, working_query) if p]

        for part in and_parts:
            not_parts = self._split(self.not_pattern, part)

            if len(not_parts) > 1:
                # First part is what to include, the rest are exclusions
                if not_parts[0]:
                    and_terms.append(not_parts[0].lower())
                not_terms.extend(p.lower() for p in not_parts[1:] if p)
                continue

            or_parts = self._split(self.or_pattern, part)

            if len(or_parts) > 1:
                or_terms.extend(p.lower() for p in or_parts if p)
            else:
                terms.extend(word.lower() for word in part.split())

        # Bare words only become OR terms when no operator is used anywhere
        if terms and not (and_terms or or_terms or not_terms):
            or_terms = terms
            terms = []

        return ParsedQuery(
            terms=tuple(terms),
            field_queries={field: tuple(values) for field, values in field_queries.items()},
            operators=QueryOperators(
                and_=tuple(and_terms), or_=tuple(or_terms), not_=tuple(not_terms)
            ),
        )

    def _extract_field_queries(
        self, query_string: str
    ) -> tuple[dict[str, list[str]], str]:
        """Pull out field:value pairs, returning them and the leftover text."""
        field_queries: dict[str, list[str]] = {}
        working_query = query_string

        for match in self.field_pattern.finditer(query_string):
            field = match.group(1).lower()
            value = match.group(2).lower()
            field_queries.setdefault(field, []).append(value)
            working_query = working_query.replace(match.group(0), "", 1)

        return field_queries, working_query

    @staticmethod
    def _keyword_pattern(operator: BooleanOperator) -> re.Pattern:
        return re.compile(rf"(?<!\S){operator.value}\s+", re.IGNORECASE)

    @staticmethod
    def _split(pattern: re.Pattern, text: str) -> list[str]:
        """Split on an operator keyword, keeping empty segments."""
        return [part.strip() for part in pattern.split(text)]


_default_parser = QueryParser()


def parse_query(query_string: str) -> ParsedQuery:
    """Parse a query string with a shared parser instance."""
    return _default_parser.parse(query_string)
