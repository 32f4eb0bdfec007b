"""
TF-IDF term weighting against a per-call FAQ corpus.

Document frequency is recomputed by rescanning the corpus for every
term. Nothing is cached between calls.
"""

import math
from typing import Collection, Optional, Sequence

from ..domain.entities import FAQ
from .tokenizer import Tokenizer


class TfidfScorer:
    """
    Term frequency x inverse document frequency weighting.

    IDF is ``ln(N / (df + 1))`` which goes negative for terms present in
    most documents, so ubiquitous terms score below zero.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()

    def document_tokens(self, faq: FAQ) -> list[str]:
        """Tokenize question, answer and tags of an FAQ as one bag of tokens."""
        return self.tokenizer.tokenize(faq.searchable_text)

    def tokenize_corpus(self, faqs: Sequence[FAQ]) -> list[list[str]]:
        """Tokenize every FAQ of a candidate corpus."""
        return [self.document_tokens(faq) for faq in faqs]

    @staticmethod
    def term_frequency(term: str, tokens: Sequence[str]) -> float:
        """
        Share of a document's tokens equal to term.

        Returns 0.0 for a document without tokens.
        """
        if not tokens:
            return 0.0
        return tokens.count(term) / len(tokens)

    @staticmethod
    def document_frequency(term: str, corpus: Sequence[Collection[str]]) -> int:
        """Count corpus documents containing term at least once."""
        return sum(1 for tokens in corpus if term in tokens)

    def inverse_document_frequency(self, term: str, corpus: Sequence[Collection[str]]) -> float:
        """
        Calculate IDF of term over corpus.

        Args:
            term: Query term
            corpus: Token collections, one per candidate FAQ

        Returns:
            ln(corpus size / (document frequency + 1)), 0.0 for an empty corpus
        """
        if not corpus:
            return 0.0
        return math.log(len(corpus) / (self.document_frequency(term, corpus) + 1))

    def tfidf(
        self, term: str, tokens: Sequence[str], corpus: Sequence[Collection[str]]
    ) -> float:
        """Weight of term in one document relative to the corpus."""
        return self.term_frequency(term, tokens) * self.inverse_document_frequency(term, corpus)

    @staticmethod
    def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
        """
        Cosine similarity between two equal-length weight vectors.

        Returns 0.0 if either vector has zero magnitude.

        Raises:
            ValueError: If the vectors differ in length
        """
        if len(vec1) != len(vec2):
            raise ValueError(
                f"Vectors must have equal length, got {len(vec1)} and {len(vec2)}"
            )

        dot_product = sum(a * b for a, b in zip(vec1, vec2))
        mag1 = math.sqrt(sum(a * a for a in vec1))
        mag2 = math.sqrt(sum(b * b for b in vec2))

        if mag1 == 0 or mag2 == 0:
            return 0.0
        return dot_product / (mag1 * mag2)
