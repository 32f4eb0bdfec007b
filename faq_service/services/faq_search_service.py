"""
Business logic service layer.

Orchestrates FAQ search: validates the request, takes a snapshot of the
FAQ store, runs the relevance engine and paginates the ranking.
"""

import math
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import structlog

from ..config import Settings
from ..domain.entities import FAQ
from ..domain.exceptions import ValidationException
from ..metrics import faq_corpus_size, record_search, suggestion_requests_total
from ..repositories.faq_repository import IFAQRepository
from ..search.advanced_search import ALL_CATEGORIES, SearchFilters
from ..search.engine import RelevanceEngine

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SearchPage:
    """One page of ranked search results."""

    query: str
    results: list[FAQ]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


class FAQSearchService:
    """
    FAQ search service.

    The engine itself validates nothing; request-level rules (minimum
    query length, pagination bounds) are enforced here.
    """

    def __init__(self, repository: IFAQRepository, engine: RelevanceEngine, settings: Settings):
        """
        Initialize search service.

        Args:
            repository: FAQ store supplying the candidate corpus
            engine: Relevance engine used for ranking and suggestions
            settings: Service configuration
        """
        self.repository = repository
        self.engine = engine
        self.settings = settings

    async def search(
        self,
        query: str,
        category: Optional[str] = ALL_CATEGORIES,
        tags: Sequence[str] = (),
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> SearchPage:
        """
        Rank the FAQ store for query and return one page.

        Args:
            query: Search query
            category: Category filter ("all" disables it)
            tags: Tag filter, any of these tags must be present
            date_from: Inclusive creation date lower bound
            date_to: Inclusive creation date upper bound
            page: 1-based page number
            limit: Page size (defaults to DEFAULT_PAGE_SIZE)

        Returns:
            SearchPage with the requested slice of the ranking

        Raises:
            ValidationException: If the query is too short or pagination
                parameters are out of range
        """
        limit = self.settings.DEFAULT_PAGE_SIZE if limit is None else limit
        self._validate(query, page, limit)

        start_time = time.perf_counter()
        faqs = await self.repository.get_all()
        faq_corpus_size.set(len(faqs))

        filters = SearchFilters(
            category=category,
            tags=tuple(tag.strip() for tag in tags if tag.strip()),
            date_from=date_from,
            date_to=date_to,
        )
        results = self.engine.advanced_search(query, faqs, filters)
        duration = time.perf_counter() - start_time

        record_search("success", duration, len(results))
        logger.info(
            "FAQ search completed",
            query=query,
            candidates=len(faqs),
            total=len(results),
            page=page,
            duration_ms=round(duration * 1000, 3),
        )

        offset = (page - 1) * limit
        return SearchPage(
            query=query,
            results=results[offset : offset + limit],
            total=len(results),
            page=page,
            limit=limit,
        )

    async def suggestions(self, query: str) -> list[str]:
        """
        Autocomplete suggestions for a partial query.

        Queries shorter than two characters yield an empty list.
        """
        faqs = await self.repository.get_all()
        suggestions = self.engine.get_search_suggestions(
            query, faqs, self.settings.SUGGESTION_LIMIT
        )
        suggestion_requests_total.labels(status="success").inc()
        logger.debug("Suggestions generated", query=query, count=len(suggestions))
        return suggestions

    async def list_faqs(self) -> list[FAQ]:
        """All stored FAQs in store order, unscored."""
        return await self.repository.get_all()

    async def get_faq(self, faq_id: str) -> FAQ:
        """
        Get a single FAQ.

        Raises:
            FAQNotFoundException: If no FAQ has this id
        """
        return await self.repository.get_by_id(faq_id)

    def _validate(self, query: str, page: int, limit: int) -> None:
        min_length = self.settings.MIN_SEARCH_QUERY_LENGTH
        if not query or len(query.strip()) < min_length:
            record_search("invalid", 0.0, 0)
            raise ValidationException(
                "query", query, f"Search query must be at least {min_length} characters long"
            )
        if page < 1:
            raise ValidationException("page", page, "Page must be 1 or greater")
        if not 1 <= limit <= self.settings.MAX_PAGE_SIZE:
            raise ValidationException(
                "limit", limit, f"Limit must be between 1 and {self.settings.MAX_PAGE_SIZE}"
            )
