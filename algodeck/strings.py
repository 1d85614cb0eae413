"""String puzzles: anagram distance, palindromes and a vowel-tolerant spellchecker."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

__all__ = ["min_steps_to_anagram", "is_palindrome", "devowel", "spellcheck"]

_VOWELS = frozenset("aeiou")


def min_steps_to_anagram(s: str, t: str) -> int:
    """Fewest character replacements in t that make it an anagram of s."""
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    return sum((Counter(t) - Counter(s)).values())


def is_palindrome(text: str) -> bool:
    """Tell whether text reads the same both ways, ignoring case."""
    lowered = text.lower()
    return lowered == lowered[::-1]


def devowel(word: str) -> str:
    """Lower-case word with every vowel replaced by ``*``."""
    return "".join("*" if c in _VOWELS else c for c in word.lower())


def spellcheck(wordlist: Iterable[str], queries: Iterable[str]) -> list[str]:
    """Correct each query against wordlist.

    A query matches exactly, else case-insensitively, else up to vowel
    substitutions; in the last two cases the earliest such word wins.
    Unmatched queries give an empty string.
    """
    words = list(wordlist)
    exact = set(words)
    by_lower: dict[str, str] = {}
    by_devowel: dict[str, str] = {}
    for word in words:
        by_lower.setdefault(word.lower(), word)
        by_devowel.setdefault(devowel(word), word)

    def correct(query: str) -> str:
        if query in exact:
            return query
        lowered = query.lower()
        if lowered in by_lower:
            return by_lower[lowered]
        return by_devowel.get(devowel(query), "")

    return [correct(query) for query in queries]