from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Speaker(str, Enum):
    """One of the two fixed dialogue parties."""

    A = "A"
    B = "B"


@dataclass(frozen=True)
class DialogueLine:
    speaker: Speaker
    text: str


@dataclass(frozen=True)
class SubtitleSegment:
    """
    Text shown during ``[start_ms, end_ms)`` of the rendered timeline.

    ``end_ms > start_ms`` holds for segments built by the estimator and the
    splitter. It is not enforced here because parsing edited text must degrade
    (e.g. to ``0,0``) rather than raise.
    """

    start_ms: int
    end_ms: int
    speaker: Speaker
    text: str

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms
