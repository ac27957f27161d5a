"""Small string exercises: reversal, palindromes and word counts."""

from __future__ import annotations


def reverse_text(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same backwards, character for character."""
    return text == reverse_text(text)


def word_count(sentence: str) -> int:
    """Count words as the number of single spaces plus one; empty text has none."""
    if not sentence:
        return 0
    return sentence.count(" ") + 1


def describe_sum(first: int, second: int) -> str:
    """Render an addition as ``"a + b = total"``."""
    return f"{first} + {second} = {first + second}"