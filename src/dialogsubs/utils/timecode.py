from __future__ import annotations

import math
import re

_TIMESTAMP_RE = re.compile(
    r"^(?P<hours>\d{1,2}):(?P<minutes>\d{2}):(?P<seconds>\d{2})\.(?P<ms>\d{1,3})$"
)


def round_half_up(value: float) -> int:
    # round() is banker's rounding; timings must round .5 upwards.
    return int(math.floor(value + 0.5))


def _split_ms(ms: float) -> tuple[int, int, int, int]:
    total = max(0, round_half_up(ms))
    hours = total // 3_600_000
    minutes = (total % 3_600_000) // 60_000
    seconds = (total % 60_000) // 1_000
    return hours, minutes, seconds, total % 1_000


def ms_to_timestamp(ms: float) -> str:
    """Editor timestamp ``HH:MM:SS.mmm``; negative input clamps to zero."""
    hh, mm, ss, mmm = _split_ms(ms)
    return f"{hh:02d}:{mm:02d}:{ss:02d}.{mmm:03d}"


def ms_to_srt_time(ms: float) -> str:
    # ms -> "HH:MM:SS,mmm"
    hh, mm, ss, mmm = _split_ms(ms)
    return f"{hh:02d}:{mm:02d}:{ss:02d},{mmm:03d}"


def timestamp_to_ms(value: str | None) -> int:
    """Parse ``H:MM:SS.m`` .. ``HH:MM:SS.mmm``; anything else yields 0."""
    match = _TIMESTAMP_RE.match(value or "")
    if match is None:
        return 0
    return (
        int(match.group("hours")) * 3_600_000
        + int(match.group("minutes")) * 60_000
        + int(match.group("seconds")) * 1_000
        + int(match.group("ms"))
    )
