"""
Autocomplete suggestions and search-term highlighting.
"""

import re
from typing import Optional, Sequence

from ..domain.entities import FAQ
from .tokenizer import Tokenizer

MIN_SUGGESTION_QUERY_LENGTH = 2
DEFAULT_SUGGESTION_LIMIT = 5

HIGHLIGHT_OPEN = "<mark>"
HIGHLIGHT_CLOSE = "</mark>"


def get_search_suggestions(
    query: str, faqs: Sequence[FAQ], limit: int = DEFAULT_SUGGESTION_LIMIT
) -> list[str]:
    """
    Suggest whole questions and tags containing the query.

    FAQs are scanned in order; per FAQ the question is checked before its
    tags. Each distinct string is suggested once, at its first match.

    Args:
        query: Raw partial query
        faqs: Candidate FAQs
        limit: Maximum number of suggestions

    Returns:
        Up to `limit` unique strings, empty for queries shorter than
        two characters after stripping
    """
    if not query or len(query.strip()) < MIN_SUGGESTION_QUERY_LENGTH or limit <= 0:
        return []

    lower_query = query.lower()
    suggestions: dict[str, None] = {}

    for faq in faqs:
        if lower_query in faq.question.lower():
            suggestions.setdefault(faq.question)
        for tag in faq.tags:
            if lower_query in tag.lower():
                suggestions.setdefault(tag)
        if len(suggestions) >= limit:
            break

    return list(suggestions)[:limit]


def highlight_search_terms(
    text: str,
    query: str,
    tokenizer: Optional[Tokenizer] = None,
    open_tag: str = HIGHLIGHT_OPEN,
    close_tag: str = HIGHLIGHT_CLOSE,
) -> str:
    """
    Wrap whole-word occurrences of query tokens in highlight markup.

    Matching is case-insensitive and the matched text keeps its casing.
    All tokens are replaced in one pass so markup inserted for one token
    is never matched by another.

    Examples:
        highlight_search_terms("Reset your Password", "password reset")
        -> "<mark>Reset</mark> your <mark>Password</mark>"
    """
    if not text or not query:
        return text

    tokens = list(dict.fromkeys((tokenizer or Tokenizer()).tokenize(query)))
    if not tokens:
        return text

    pattern = re.compile(
        r"\b(?:" + "|".join(re.escape(token) for token in tokens) + r")\b",
        re.IGNORECASE | re.ASCII,
    )
    return pattern.sub(lambda match: f"{open_tag}{match.group(0)}{close_tag}", text)
