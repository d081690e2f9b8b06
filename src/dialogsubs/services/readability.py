from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from dialogsubs.domain.segments import SubtitleSegment
from dialogsubs.utils.text import count_words

GOOD_MAX_WORDS = 4
CONSIDER_MAX_WORDS = 6
WORDS_PER_SUGGESTED_SEGMENT = 4


class ReadabilityStatus(str, Enum):
    GOOD = "good"
    CONSIDER_SPLITTING = "consider-splitting"
    SHOULD_SPLIT = "should-split"


FONT_SCALES: dict[ReadabilityStatus, int] = {
    ReadabilityStatus.GOOD: 100,
    ReadabilityStatus.CONSIDER_SPLITTING: 90,
    ReadabilityStatus.SHOULD_SPLIT: 80,
}


@dataclass(frozen=True)
class Readability:
    status: ReadabilityStatus
    word_count: int
    recommended_font_scale: int
    message: str
    suggested_segments: int = 1

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "word_count": self.word_count,
            "recommended_font_scale": self.recommended_font_scale,
            "message": self.message,
            "suggested_segments": self.suggested_segments,
        }


def classify(segment: SubtitleSegment) -> Readability:
    """Advisory length bucket for a segment. Does not gate splitting."""
    word_count = count_words(segment.text)
    if word_count <= GOOD_MAX_WORDS:
        return Readability(
            status=ReadabilityStatus.GOOD,
            word_count=word_count,
            recommended_font_scale=FONT_SCALES[ReadabilityStatus.GOOD],
            message="Perfect length! Easy to read.",
        )

    suggested = math.ceil(word_count / WORDS_PER_SUGGESTED_SEGMENT)
    if word_count <= CONSIDER_MAX_WORDS:
        status = ReadabilityStatus.CONSIDER_SPLITTING
        message = f"Consider splitting into {suggested} segments for better readability."
    else:
        status = ReadabilityStatus.SHOULD_SPLIT
        message = f"This is too long! Split into {suggested} segments."
    return Readability(
        status=status,
        word_count=word_count,
        recommended_font_scale=FONT_SCALES[status],
        message=message,
        suggested_segments=suggested,
    )
