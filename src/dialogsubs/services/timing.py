"""
Speech timing estimator.

Turns dialogue lines into contiguous subtitle segments using a fixed
speaking-rate model: every line is given ``words / 150 wpm`` of screen time,
floored at 700 ms so very short lines stay readable. Segments are laid end to
end from 0 ms, so the output is contiguous by construction.
"""

from __future__ import annotations

from typing import Iterable

from dialogsubs.domain.segments import DialogueLine, SubtitleSegment
from dialogsubs.utils.logging import get_logger
from dialogsubs.utils.text import count_words
from dialogsubs.utils.timecode import round_half_up

log = get_logger(__name__)

WORDS_PER_MINUTE = 150
MIN_LINE_DURATION_MS = 700


def estimate_duration_ms(text: str) -> int:
    word_count = count_words(text)
    return max(MIN_LINE_DURATION_MS, round_half_up(word_count / WORDS_PER_MINUTE * 60_000))


def estimate(lines: Iterable[DialogueLine]) -> list[SubtitleSegment]:
    segments: list[SubtitleSegment] = []
    cursor = 0
    for line in lines:
        end = cursor + estimate_duration_ms(line.text)
        segments.append(
            SubtitleSegment(
                start_ms=cursor,
                end_ms=end,
                speaker=line.speaker,
                text=line.text.strip(),
            )
        )
        cursor = end
    log.debug("Estimated %d segments spanning %d ms", len(segments), cursor)
    return segments
