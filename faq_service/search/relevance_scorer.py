"""
Relevance scoring system for FAQ search results.

Scores FAQs against a query by summing TF-IDF term weights with
heuristic boosts for question matches, exact phrase matches, category
and tag matches, and popularity.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..domain.entities import FAQ
from .tfidf import TfidfScorer
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Individual score components for one FAQ.

    Attributes:
        tfidf: Sum of TF-IDF weights over unique query terms
        question_boost: Boost for query terms found in the question
        exact_match_boost: Boost for the raw query appearing verbatim
        category_boost: Boost for a category token among the query tokens
        tag_boost: Boost for a whole tag equal to a query token
        popularity_boost: Boost from views and helpfulness votes
    """

    tfidf: float = 0.0
    question_boost: float = 0.0
    exact_match_boost: float = 0.0
    category_boost: float = 0.0
    tag_boost: float = 0.0
    popularity_boost: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.tfidf
            + self.question_boost
            + self.exact_match_boost
            + self.category_boost
            + self.tag_boost
            + self.popularity_boost
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for debugging output."""
        return {
            "tfidf": self.tfidf,
            "question_boost": self.question_boost,
            "exact_match_boost": self.exact_match_boost,
            "category_boost": self.category_boost,
            "tag_boost": self.tag_boost,
            "popularity_boost": self.popularity_boost,
            "total": self.total,
        }


class RelevanceScorer:
    """
    Rank FAQs for a query.

    Scoring factors (all additive):
    1. TF-IDF - sum over unique query terms, IDF over the candidate list
    2. Question match - 2 points per unique query term in the question
    3. Exact phrase - 3 points if the raw query appears in the FAQ text
    4. Category - 1.5 points if a category token is a query token
    5. Tag - 1.5 points if a whole tag equals a query token
    6. Popularity - ln(views + 1) * 0.1 + (helpful - not_helpful) * 0.2

    Results scoring at or below MIN_RELEVANCE_SCORE are dropped.
    """

    QUESTION_TERM_BOOST = 2.0
    EXACT_MATCH_BOOST = 3.0
    CATEGORY_BOOST = 1.5
    TAG_BOOST = 1.5
    VIEWS_WEIGHT = 0.1
    VOTES_WEIGHT = 0.2

    MIN_RELEVANCE_SCORE = 0.1

    def __init__(self, tokenizer: Optional[Tokenizer] = None, tfidf: Optional[TfidfScorer] = None):
        """
        Initialize relevance scorer.

        Args:
            tokenizer: Tokenizer shared with the TF-IDF scorer
            tfidf: TF-IDF scorer (built from tokenizer when omitted)
        """
        self.tokenizer = tokenizer or Tokenizer()
        self.tfidf = tfidf or TfidfScorer(self.tokenizer)

    def rank_faqs(self, query: str, faqs: Sequence[FAQ]) -> list[FAQ]:
        """
        Score, filter and sort FAQs for a query.

        An empty or whitespace-only query returns the FAQs as given:
        same order, no scores attached, nothing filtered.

        Args:
            query: Raw search query
            faqs: Candidate FAQs, also used as the IDF corpus

        Returns:
            Scored copies with relevance_score above MIN_RELEVANCE_SCORE,
            highest first. Ties keep their input order.
        """
        if not query or not query.strip():
            return list(faqs)

        query_tokens = self.tokenizer.tokenize(query)
        unique_terms = list(dict.fromkeys(query_tokens))

        corpus_tokens = self.tfidf.tokenize_corpus(faqs)
        corpus_sets = [set(tokens) for tokens in corpus_tokens]
        idf = {
            term: self.tfidf.inverse_document_frequency(term, corpus_sets)
            for term in unique_terms
        }

        scored = []
        for faq, tokens in zip(faqs, corpus_tokens):
            breakdown = self._score(query, unique_terms, faq, tokens, idf)
            scored.append(faq.with_score(breakdown.total))

        relevant = [faq for faq in scored if faq.relevance_score > self.MIN_RELEVANCE_SCORE]
        relevant.sort(key=lambda faq: faq.relevance_score, reverse=True)

        logger.debug(
            "Ranked %d of %d FAQs for query '%s' (%d terms)",
            len(relevant),
            len(faqs),
            query,
            len(unique_terms),
        )
        return relevant

    def explain(self, query: str, faq: FAQ, faqs: Sequence[FAQ]) -> ScoreBreakdown:
        """
        Break down the score faq would receive for query within corpus faqs.

        Args:
            query: Raw search query
            faq: FAQ to explain
            faqs: Candidate corpus used for IDF

        Returns:
            ScoreBreakdown whose total equals the ranked relevance_score
        """
        unique_terms = list(dict.fromkeys(self.tokenizer.tokenize(query)))
        corpus_sets = [set(tokens) for tokens in self.tfidf.tokenize_corpus(faqs)]
        idf = {
            term: self.tfidf.inverse_document_frequency(term, corpus_sets)
            for term in unique_terms
        }
        return self._score(query, unique_terms, faq, self.tfidf.document_tokens(faq), idf)

    def _score(
        self,
        query: str,
        unique_terms: list[str],
        faq: FAQ,
        tokens: list[str],
        idf: dict[str, float],
    ) -> ScoreBreakdown:
        total_tfidf = 0.0
        for term in unique_terms:
            total_tfidf += self.tfidf.term_frequency(term, tokens) * idf[term]

        query_terms = set(unique_terms)
        return ScoreBreakdown(
            tfidf=total_tfidf,
            question_boost=self._question_boost(query_terms, faq),
            exact_match_boost=self._exact_match_boost(query, faq),
            category_boost=self._category_boost(query_terms, faq),
            tag_boost=self._tag_boost(query_terms, faq),
            popularity_boost=self._popularity_boost(faq),
        )

    def _question_boost(self, query_terms: set[str], faq: FAQ) -> float:
        question_tokens = set(self.tokenizer.tokenize(faq.question))
        return len(query_terms & question_tokens) * self.QUESTION_TERM_BOOST

    def _exact_match_boost(self, query: str, faq: FAQ) -> float:
        # Raw query, not tokenized: punctuation and stop words must match too
        if query.lower() in faq.searchable_text.lower():
            return self.EXACT_MATCH_BOOST
        return 0.0

    def _category_boost(self, query_terms: set[str], faq: FAQ) -> float:
        if not faq.category:
            return 0.0
        if any(token in query_terms for token in self.tokenizer.tokenize(faq.category)):
            return self.CATEGORY_BOOST
        return 0.0

    def _tag_boost(self, query_terms: set[str], faq: FAQ) -> float:
        # Whole tags are compared, unlike categories which are tokenized
        if any(tag.lower() in query_terms for tag in faq.tags):
            return self.TAG_BOOST
        return 0.0

    def _popularity_boost(self, faq: FAQ) -> float:
        return (
            math.log(faq.views + 1) * self.VIEWS_WEIGHT
            + (faq.helpful - faq.not_helpful) * self.VOTES_WEIGHT
        )

    def get_stats(self) -> dict:
        """
        Get scorer configuration.

        Returns:
            Dictionary with boost weights and the relevance cut-off
        """
        return {
            "boosts": {
                "question_term": self.QUESTION_TERM_BOOST,
                "exact_match": self.EXACT_MATCH_BOOST,
                "category": self.CATEGORY_BOOST,
                "tag": self.TAG_BOOST,
                "views": self.VIEWS_WEIGHT,
                "votes": self.VOTES_WEIGHT,
            },
            "min_relevance_score": self.MIN_RELEVANCE_SCORE,
            "stop_words": len(self.tokenizer.stop_words),
        }
