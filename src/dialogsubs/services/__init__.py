from dialogsubs.services.breakpoints import find_break_points
from dialogsubs.services.codec import parse, serialize, to_srt
from dialogsubs.services.readability import Readability, ReadabilityStatus, classify
from dialogsubs.services.splitter import is_too_long, split_all, split_segment
from dialogsubs.services.timing import estimate, estimate_duration_ms

__all__ = [
    "Readability",
    "ReadabilityStatus",
    "classify",
    "estimate",
    "estimate_duration_ms",
    "find_break_points",
    "is_too_long",
    "parse",
    "serialize",
    "split_all",
    "split_segment",
    "to_srt",
]
