"""Highlighting of query terms inside display text."""

import html
import re

from rich.text import Text

from .models import HighlightSpan
from .query.parser import QueryParser


class Highlighter:
    """Splits text into matched and unmatched spans for a query."""

    def __init__(
        self,
        highlight_tag: str = "mark",
        highlight_style: str = "bold yellow",
        parser: QueryParser | None = None,
    ):
        """Initialize highlighter.

        Args:
            highlight_tag: HTML tag wrapped around matched spans
            highlight_style: Rich style applied to matched spans
            parser: Query parser to use (default: a new QueryParser)
        """
        self.highlight_tag = highlight_tag
        self.highlight_style = highlight_style
        self.parser = parser or QueryParser()

    def highlight(self, text: str, query: str) -> list[HighlightSpan]:
        """Split text into spans, flagging those equal to a query term.

        Concatenating the span texts always gives back ``text``.

        Args:
            text: Text to highlight
            query: Raw query string

        Returns:
            Ordered list of spans covering the whole text
        """
        if not query.strip() or not text:
            return [HighlightSpan(text=text)]

        terms = self.parser.parse(query).get_terms()
        if not terms:
            return [HighlightSpan(text=text)]

        pattern = self._build_pattern(terms)

        spans = []
        for part in pattern.split(text):
            if not part:
                continue
            part_lower = part.lower()
            is_match = any(part_lower == term.lower() for term in terms)
            spans.append(HighlightSpan(text=part, is_match=is_match))

        return spans

    def to_markup(self, spans: list[HighlightSpan]) -> str:
        """Render spans as escaped HTML with matched spans tagged."""
        tag = self.highlight_tag
        result = []
        for span in spans:
            escaped = html.escape(span.text)
            if span.is_match:
                escaped = f"<{tag}>{escaped}</{tag}>"
            result.append(escaped)
        return "".join(result)

    def to_rich_text(self, spans: list[HighlightSpan]) -> Text:
        """Render spans as a Rich Text with matched spans styled."""
        text = Text()
        for span in spans:
            text.append(span.text, style=self.highlight_style if span.is_match else None)
        return text

    @staticmethod
    def _build_pattern(terms: list[str]) -> re.Pattern:
        """Build one capturing, case-insensitive alternation of all terms."""
        escaped_terms = [re.escape(term) for term in terms]
        return re.compile(f"({'|'.join(escaped_terms)})", re.IGNORECASE)


_default_highlighter = Highlighter()


def highlight(text: str, query: str) -> list[HighlightSpan]:
    """Highlight query terms in text with a shared highlighter."""
    return _default_highlighter.highlight(text, query)
