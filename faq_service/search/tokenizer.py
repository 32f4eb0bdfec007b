"""
Text tokenizer for FAQ relevance scoring.

Lower-cases text, treats punctuation as a separator, and drops short
tokens and stop words. No stemming is applied; typo tolerance comes from
the fuzzy matcher instead.
"""

import re
from typing import Iterable, Optional

STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "by",
        "for",
        "from",
        "has",
        "he",
        "in",
        "is",
        "it",
        "its",
        "of",
        "on",
        "that",
        "the",
        "to",
        "was",
        "will",
        "with",
        "what",
        "when",
        "where",
        "who",
        "how",
    }
)

# Tokens of this length or shorter are discarded
MIN_TOKEN_LENGTH = 2

# Only ASCII letters, digits and underscore are word characters
NON_WORD_CHARS = re.compile(r"[^\w\s]", re.ASCII)


class Tokenizer:
    """
    Splits free text into lower-cased search tokens.

    The stop-word set is fixed at construction and never mutated, so a
    single instance can be shared freely between callers.
    """

    def __init__(self, stop_words: Optional[Iterable[str]] = None):
        """
        Initialize tokenizer.

        Args:
            stop_words: Words to drop (defaults to STOP_WORDS)
        """
        self.stop_words = frozenset(stop_words) if stop_words is not None else STOP_WORDS

    def tokenize(self, text: str) -> list[str]:
        """
        Tokenize text.

        Examples:
            "What is the time?" -> ["time"]
            "Reset-password (admin)" -> ["reset", "password", "admin"]

        Args:
            text: Text to tokenize

        Returns:
            Tokens in their original order, duplicates kept
        """
        cleaned = NON_WORD_CHARS.sub(" ", text.lower())
        return [
            word
            for word in cleaned.split()
            if len(word) > MIN_TOKEN_LENGTH and word not in self.stop_words
        ]

    def __call__(self, text: str) -> list[str]:
        return self.tokenize(text)
