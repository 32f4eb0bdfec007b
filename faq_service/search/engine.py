"""
Relevance engine facade.

Bundles the tokenizer, scorer, fuzzy matcher, suggestions and filters
behind one object that owns a single stop-word set. The engine keeps no
mutable state, so one instance can serve concurrent callers.
"""

from typing import Iterable, Optional, Sequence

from ..domain.entities import FAQ
from .advanced_search import SearchFilters, advanced_search
from .fuzzy_matcher import FuzzyMatcher, levenshtein_distance, string_similarity
from .relevance_scorer import RelevanceScorer
from .suggestions import DEFAULT_SUGGESTION_LIMIT, get_search_suggestions, highlight_search_terms
from .tfidf import TfidfScorer
from .tokenizer import Tokenizer


class RelevanceEngine:
    """Entry point for ranking, fuzzy matching and suggestions over FAQs."""

    def __init__(
        self,
        fuzzy_threshold: float = FuzzyMatcher.DEFAULT_THRESHOLD,
        stop_words: Optional[Iterable[str]] = None,
    ):
        self.tokenizer = Tokenizer(stop_words)
        self.tfidf = TfidfScorer(self.tokenizer)
        self.scorer = RelevanceScorer(self.tokenizer, self.tfidf)
        self.fuzzy = FuzzyMatcher(fuzzy_threshold, self.tokenizer)

    def tokenize(self, text: str) -> list[str]:
        return self.tokenizer.tokenize(text)

    def rank_faqs(self, query: str, faqs: Sequence[FAQ]) -> list[FAQ]:
        return self.scorer.rank_faqs(query, faqs)

    def fuzzy_search(
        self, query: str, faqs: Sequence[FAQ], threshold: Optional[float] = None
    ) -> list[FAQ]:
        return self.fuzzy.fuzzy_search(query, faqs, threshold)

    @staticmethod
    def levenshtein_distance(s1: str, s2: str) -> int:
        return levenshtein_distance(s1, s2)

    @staticmethod
    def string_similarity(s1: str, s2: str) -> float:
        return string_similarity(s1, s2)

    @staticmethod
    def get_search_suggestions(
        query: str, faqs: Sequence[FAQ], limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> list[str]:
        return get_search_suggestions(query, faqs, limit)

    def highlight_search_terms(self, text: str, query: str) -> str:
        return highlight_search_terms(text, query, self.tokenizer)

    def advanced_search(
        self, query: str, faqs: Sequence[FAQ], filters: Optional[SearchFilters] = None
    ) -> list[FAQ]:
        return advanced_search(query, faqs, filters, self.scorer)

    def get_stats(self) -> dict:
        """Combined scorer and matcher configuration."""
        return {
            "scorer": self.scorer.get_stats(),
            "fuzzy": self.fuzzy.get_stats(),
        }


_default_engine = RelevanceEngine()


def get_default_engine() -> RelevanceEngine:
    """Shared engine with the default stop words and fuzzy threshold."""
    return _default_engine


def tokenize(text: str) -> list[str]:
    """Tokenize text with the default stop words."""
    return _default_engine.tokenize(text)


def rank_faqs(query: str, faqs: Sequence[FAQ]) -> list[FAQ]:
    """Rank FAQs for query using the shared default engine."""
    return _default_engine.rank_faqs(query, faqs)


def fuzzy_search(query: str, faqs: Sequence[FAQ], threshold: Optional[float] = None) -> list[FAQ]:
    """Fuzzy-match FAQs using the shared default engine."""
    return _default_engine.fuzzy_search(query, faqs, threshold)
