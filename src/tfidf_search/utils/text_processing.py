"""Text normalization: tokenizing, stopword filtering and light stemming."""

import re
from typing import FrozenSet, List, Sequence

# Duplicates in the literal collapse in the frozenset; they carry no weight.
STOPWORDS = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'by', 'for', 'from', 'has', 'he',
    'in', 'is', 'it', 'its', 'of', 'on', 'that', 'the', 'to', 'was', 'will', 'with',
    'the', 'this', 'but', 'they', 'have', 'had', 'what', 'said', 'each', 'which',
    'she', 'do', 'how', 'their', 'if', 'up', 'out', 'many', 'then', 'them', 'these',
    'so', 'some', 'her', 'would', 'make', 'like', 'into', 'him', 'time', 'two',
    'more', 'very', 'when', 'come', 'may', 'use', 'than', 'first', 'been', 'his',
    'who', 'oil', 'sit', 'now', 'find', 'down', 'day', 'did', 'get', 'has', 'made',
    'my', 'over', 'such', 'me', 'even', 'most', 'can', 'should', 'after',
])

# First match wins, in this order. Repeated entries are unreachable but kept
# so the list reads the same as the ranking it reproduces.
SUFFIXES = (
    'ing', 'ly', 'ed', 'ies', 'ied', 'ies', 'ied', 'ies', 'ing', 'ed',
    'er', 'est', 's', 'es', 'ment', 'ness', 'tion', 'sion', 'able', 'ible',
)

MIN_TOKEN_LENGTH = 3

# Anything that is not a letter, digit or whitespace. \w admits "_", so it
# is listed explicitly.
_PUNCTUATION_PATTERN = re.compile(r'[^\w\s]|_')


def stem(word: str, suffixes: Sequence[str] = SUFFIXES) -> str:
    """
    Strip the first matching suffix from ``word``.

    A suffix only applies when the word is longer than the suffix by more
    than two characters. This is a crude heuristic, not a Porter stemmer.
    """
    word = word.lower()
    for suffix in suffixes:
        if word.endswith(suffix) and len(word) > len(suffix) + 2:
            return word[:-len(suffix)]
    return word


class TextNormalizer:
    """Turns raw text into the index terms used for weighting."""

    def __init__(
        self,
        stopwords: FrozenSet[str] = STOPWORDS,
        suffixes: Sequence[str] = SUFFIXES,
    ):
        self.stopwords = stopwords
        self.suffixes = suffixes

    def tokenize(self, text: str) -> List[str]:
        """Lowercase, blank out punctuation and split on whitespace."""
        if not text:
            return []
        cleaned = _PUNCTUATION_PATTERN.sub(' ', text.lower())
        return cleaned.split()

    def normalize(self, text: str) -> List[str]:
        """
        Produce ordered index terms for ``text``.

        Args:
            text: Raw text content

        Returns:
            Stemmed tokens with stopwords and tokens of two characters or
            fewer removed, duplicates retained
        """
        return [
            self.stem(token)
            for token in self.tokenize(text)
            if token not in self.stopwords and len(token) >= MIN_TOKEN_LENGTH
        ]

    def stem(self, word: str) -> str:
        return stem(word, self.suffixes)
