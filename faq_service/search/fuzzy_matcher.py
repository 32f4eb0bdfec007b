"""
Fuzzy matching engine for FAQ search.

Provides typo-tolerant matching of query tokens against FAQ tokens
using normalized Levenshtein (edit distance) similarity.
"""

import logging
from typing import Optional, Sequence

from rapidfuzz.distance import Levenshtein

from ..domain.entities import FAQ
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Classic edit distance between two strings.

    Insertions, deletions and substitutions each cost 1; an adjacent
    transposition costs 2.

    Examples:
        levenshtein_distance("kitten", "sitting") -> 3
        levenshtein_distance("", "abc") -> 3
    """
    return Levenshtein.distance(s1, s2)


def string_similarity(s1: str, s2: str) -> float:
    """
    Normalized similarity in [0, 1] derived from edit distance.

    Computed as (len(longer) - distance) / len(longer). Two empty strings
    are identical (1.0).
    """
    return Levenshtein.normalized_similarity(s1, s2)


class FuzzyMatcher:
    """
    Typo-tolerant FAQ matcher.

    An FAQ matches when any query token is at least `threshold` similar to
    any token of the FAQ's question, answer or tags.
    """

    DEFAULT_THRESHOLD = 0.7

    def __init__(self, threshold: float = DEFAULT_THRESHOLD, tokenizer: Optional[Tokenizer] = None):
        """
        Initialize fuzzy matcher.

        Args:
            threshold: Minimum token similarity for a match (0-1)
            tokenizer: Tokenizer for queries and FAQ text
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")
        self.threshold = threshold
        self.tokenizer = tokenizer or Tokenizer()

    def fuzzy_search(
        self, query: str, faqs: Sequence[FAQ], threshold: Optional[float] = None
    ) -> list[FAQ]:
        """
        Return the FAQs with at least one token close to a query token.

        Args:
            query: Raw search query
            faqs: Candidate FAQs
            threshold: Override of the matcher threshold for this call

        Returns:
            Matching FAQs, unscored, in input order
        """
        limit = self.threshold if threshold is None else threshold
        query_tokens = self.tokenizer.tokenize(query)
        if not query_tokens:
            return []

        matches = [
            faq
            for faq in faqs
            if self._matches(query_tokens, self.tokenizer.tokenize(faq.searchable_text), limit)
        ]

        logger.debug(
            "Fuzzy search '%s' matched %d of %d FAQs (threshold=%.2f)",
            query,
            len(matches),
            len(faqs),
            limit,
        )
        return matches

    @staticmethod
    def _matches(query_tokens: list[str], faq_tokens: list[str], threshold: float) -> bool:
        return any(
            string_similarity(query_token, faq_token) >= threshold
            for query_token in query_tokens
            for faq_token in faq_tokens
        )

    def get_stats(self) -> dict:
        """
        Get matcher configuration.

        Returns:
            Dictionary with matcher statistics
        """
        return {
            "threshold": self.threshold,
            "algorithm": "levenshtein",
        }
