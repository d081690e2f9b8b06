"""
Segment splitter.

Breaks a segment that is too long to read into shorter consecutive segments
inside the segment's original time window. The audio behind a segment is
already rendered, so the window is fixed: chunk durations are redistributed
proportionally to word count and the final chunk absorbs whatever is left,
making the split durations sum to the original duration exactly.
"""

from __future__ import annotations

from typing import Iterable

from dialogsubs.domain.segments import SubtitleSegment
from dialogsubs.services.breakpoints import find_break_points
from dialogsubs.utils.logging import get_logger
from dialogsubs.utils.text import split_words
from dialogsubs.utils.timecode import round_half_up

log = get_logger(__name__)

MAX_WORDS_PER_SEGMENT = 4
MIN_SEGMENT_DURATION_MS = 700
MIN_WORDS_BEFORE_NATURAL_BREAK = 2


def is_too_long(segment: SubtitleSegment) -> bool:
    return len(split_words(segment.text)) > MAX_WORDS_PER_SEGMENT


def _chunk_words(words: list[str], break_points: set[int]) -> list[list[str]]:
    chunks: list[list[str]] = []
    current: list[str] = []
    last = len(words) - 1
    for i, word in enumerate(words):
        current.append(word)
        should_break = len(current) >= MAX_WORDS_PER_SEGMENT or (
            (i + 1) in break_points and len(current) >= MIN_WORDS_BEFORE_NATURAL_BREAK
        )
        if should_break and i < last:
            chunks.append(current)
            current = []
    if current:
        chunks.append(current)
    return chunks


def split_segment(segment: SubtitleSegment) -> list[SubtitleSegment]:
    words = split_words(segment.text)
    if len(words) <= MAX_WORDS_PER_SEGMENT:
        return [segment]

    chunks = _chunk_words(words, set(find_break_points(segment.text)))

    total_duration = segment.end_ms - segment.start_ms
    total_words = len(words)
    cursor = segment.start_ms
    result: list[SubtitleSegment] = []
    for index, chunk in enumerate(chunks):
        if index == len(chunks) - 1:
            # Exact closure: no rounding, no floor.
            duration = segment.end_ms - cursor
        else:
            duration = max(
                MIN_SEGMENT_DURATION_MS,
                round_half_up(len(chunk) / total_words * total_duration),
            )
        result.append(
            SubtitleSegment(
                start_ms=cursor,
                end_ms=cursor + duration,
                speaker=segment.speaker,
                text=" ".join(chunk),
            )
        )
        cursor += duration

    log.debug(
        "Split %d-word segment [%d, %d) into %d chunks",
        total_words,
        segment.start_ms,
        segment.end_ms,
        len(result),
    )
    return result


def split_all(segments: Iterable[SubtitleSegment]) -> list[SubtitleSegment]:
    result: list[SubtitleSegment] = []
    for segment in segments:
        result.extend(split_segment(segment))
    return result
