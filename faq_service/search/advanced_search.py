"""
Filter composition on top of relevance ranking.

Filters are applied after ranking and only ever remove entries, so the
ranked order of the survivors is preserved.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Sequence

from ..domain.entities import FAQ
from .relevance_scorer import RelevanceScorer

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class SearchFilters:
    """
    Optional filters for advanced search.

    Attributes:
        category: Category to keep (case-insensitive), None or "all" to skip
        tags: Keep FAQs having any of these tags (case-insensitive)
        date_from: Inclusive lower bound on created_at
        date_to: Inclusive upper bound on created_at
    """

    category: Optional[str] = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC so they compare with aware ones
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def filter_by_category(faqs: list[FAQ], category: Optional[str]) -> list[FAQ]:
    if not category or category == ALL_CATEGORIES:
        return faqs
    wanted = category.lower()
    return [faq for faq in faqs if faq.category is not None and faq.category.lower() == wanted]


def filter_by_tags(faqs: list[FAQ], tags: Sequence[str]) -> list[FAQ]:
    if not tags:
        return faqs
    wanted = {tag.lower() for tag in tags}
    return [faq for faq in faqs if any(tag.lower() in wanted for tag in faq.tags)]


def filter_by_date(
    faqs: list[FAQ], date_from: Optional[datetime], date_to: Optional[datetime]
) -> list[FAQ]:
    """Keep FAQs created within [date_from, date_to]; undated FAQs fail any bound."""
    if date_from is not None:
        lower = _as_utc(date_from)
        faqs = [faq for faq in faqs if faq.created_at and _as_utc(faq.created_at) >= lower]
    if date_to is not None:
        upper = _as_utc(date_to)
        faqs = [faq for faq in faqs if faq.created_at and _as_utc(faq.created_at) <= upper]
    return faqs


def advanced_search(
    query: str,
    faqs: Sequence[FAQ],
    filters: Optional[SearchFilters] = None,
    scorer: Optional[RelevanceScorer] = None,
) -> list[FAQ]:
    """
    Rank FAQs for query, then narrow the ranking with filters.

    Filter order: category, tags, date lower bound, date upper bound.

    Args:
        query: Raw search query (empty query keeps input order, unscored)
        faqs: Candidate FAQs
        filters: Filters to apply, none when omitted
        scorer: Relevance scorer to rank with

    Returns:
        Ranked FAQs surviving every filter
    """
    filters = filters or SearchFilters()
    results = (scorer or RelevanceScorer()).rank_faqs(query, faqs)

    results = filter_by_category(results, filters.category)
    results = filter_by_tags(results, filters.tags)
    results = filter_by_date(results, filters.date_from, filters.date_to)

    logger.debug("Advanced search '%s' kept %d results after filters %s", query, len(results), filters)
    return results
