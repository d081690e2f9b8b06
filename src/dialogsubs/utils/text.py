from __future__ import annotations


def split_words(text: str) -> list[str]:
    """Whitespace tokens of ``text``; empty tokens never appear."""
    return text.split()


def count_words(text: str) -> int:
    return len(split_words(text))
