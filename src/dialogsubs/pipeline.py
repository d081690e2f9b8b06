"""
Subtitle pipeline for dialogsubs.

The pipeline executes a single subtitle build:

1) Estimate timings for each dialogue line
2) Re-split segments that are too long to read (optional)

Responsibilities:
- Coordinate the pure segmentation functions in order
- Log step durations

Does NOT:
- Parse or validate script text (upstream)
- Read or write files (the CLI and codec helpers do)
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from dialogsubs.config.settings import Settings
from dialogsubs.domain.segments import DialogueLine, SubtitleSegment
from dialogsubs.services.readability import ReadabilityStatus, classify
from dialogsubs.services.splitter import split_all
from dialogsubs.services.timing import estimate
from dialogsubs.utils.logging import get_logger
from dialogsubs.utils.steps import StepTimer

log = get_logger(__name__)


def build_segments(lines: Iterable[DialogueLine], *, auto_split: bool = True) -> list[SubtitleSegment]:
    segments = estimate(lines)
    if auto_split:
        segments = split_all(segments)
    return segments


def summarize(segments: Sequence[SubtitleSegment]) -> dict:
    statuses = Counter(classify(segment).status for segment in segments)
    return {
        "segment_count": len(segments),
        "total_duration_ms": segments[-1].end_ms - segments[0].start_ms if segments else 0,
        "readability": {status.value: statuses.get(status, 0) for status in ReadabilityStatus},
    }


class SubtitlePipeline:
    """
    Runs estimate/split with settings-driven behavior and step timing.

    Stateless between runs apart from the timer of the last run, which is
    kept for inspection.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self.timer = StepTimer()

    def run(self, lines: Sequence[DialogueLine], *, auto_split: bool | None = None) -> list[SubtitleSegment]:
        do_split = self.settings.auto_split if auto_split is None else auto_split
        self.timer = StepTimer()

        with self.timer.step("estimate"):
            segments = estimate(lines)
        if do_split:
            with self.timer.step("split"):
                segments = split_all(segments)

        for step in self.timer.steps:
            log.info("Step %s took %.2f ms", step.name, step.duration_ms)
        log.info("Built %d segments from %d dialogue lines", len(segments), len(lines))
        return segments

    def resplit(self, segments: Sequence[SubtitleSegment]) -> list[SubtitleSegment]:
        self.timer = StepTimer()
        with self.timer.step("split"):
            result = split_all(segments)
        log.info("Re-split %d segments into %d", len(segments), len(result))
        return result
