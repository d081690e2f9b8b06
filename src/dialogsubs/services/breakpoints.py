from __future__ import annotations

from dialogsubs.utils.text import split_words

BREAK_BEFORE_WORDS = ("and", "but", "or", "so", "yet", "because", "when", "while", "where")
BREAK_AFTER_WORDS = ("that", "which", "who")
BREAK_AFTER_SUFFIXES = (",", ";")


def find_break_points(text: str) -> list[int]:
    """
    Word indices before which a split reads naturally.

    Checks run in a fixed order per word and at most one fires: trailing
    comma/semicolon (break after), conjunction (break before, never at index 0),
    relative pronoun (break after). Indices come out in emission order and may
    repeat; callers treat them as a set.
    """
    points: list[int] = []
    for i, word in enumerate(split_words(text)):
        lowered = word.lower()
        if word.endswith(BREAK_AFTER_SUFFIXES):
            points.append(i + 1)
        elif lowered in BREAK_BEFORE_WORDS:
            if i > 0:
                points.append(i)
        elif lowered in BREAK_AFTER_WORDS:
            points.append(i + 1)
    return points
