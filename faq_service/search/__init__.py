"""
Search module for FAQ relevance ranking.

Provides tokenization, TF-IDF relevance scoring, fuzzy matching,
suggestions and filtered search.
"""
from .advanced_search import SearchFilters, advanced_search
from .engine import RelevanceEngine, fuzzy_search, get_default_engine, rank_faqs, tokenize
from .fuzzy_matcher import FuzzyMatcher, levenshtein_distance, string_similarity
from .relevance_scorer import RelevanceScorer, ScoreBreakdown
from .suggestions import get_search_suggestions, highlight_search_terms
from .tfidf import TfidfScorer
from .tokenizer import STOP_WORDS, Tokenizer

__all__ = [
    "STOP_WORDS",
    "FuzzyMatcher",
    "RelevanceEngine",
    "RelevanceScorer",
    "ScoreBreakdown",
    "SearchFilters",
    "TfidfScorer",
    "Tokenizer",
    "advanced_search",
    "fuzzy_search",
    "get_default_engine",
    "get_search_suggestions",
    "highlight_search_terms",
    "levenshtein_distance",
    "rank_faqs",
    "string_similarity",
    "tokenize",
]
