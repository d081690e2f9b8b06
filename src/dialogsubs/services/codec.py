"""
Pseudo-SRT codec.

The editable, persisted form of a segment list is one record per line::

    <start_ms>,<end_ms>,<A|B>,<text, which may contain commas>

Only the first three fields are comma-delimited; everything after the third
comma is text. Parsing never fails: bad numbers become 0 and any speaker token
other than ``B`` becomes ``A``. Newlines are the record delimiter and are not
escaped, so text containing newlines does not round-trip.

``to_srt`` additionally renders standard SubRip for ordinary players.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from dialogsubs.domain.segments import Speaker, SubtitleSegment
from dialogsubs.exceptions import InputError
from dialogsubs.utils.logging import get_logger
from dialogsubs.utils.timecode import ms_to_srt_time

log = get_logger(__name__)

FIELD_SEPARATOR = ","
RECORD_SEPARATOR = "\n"

_LINE_BREAK_RE = re.compile(r"\r?\n")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_ms(value: str) -> int:
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        return 0
    return int(value)


def _parse_speaker(value: str) -> Speaker:
    return Speaker.B if value.strip() == Speaker.B.value else Speaker.A


def _parse_record(line: str) -> SubtitleSegment:
    fields = line.split(FIELD_SEPARATOR)
    start, end, speaker = (fields + ["", "", ""])[:3]
    return SubtitleSegment(
        start_ms=_parse_ms(start),
        end_ms=_parse_ms(end),
        speaker=_parse_speaker(speaker),
        text=FIELD_SEPARATOR.join(fields[3:]).strip(),
    )


def parse(text: str | None) -> list[SubtitleSegment]:
    if not text or not text.strip():
        return []
    lines = (line.strip() for line in _LINE_BREAK_RE.split(text))
    segments = [_parse_record(line) for line in lines if line]
    log.debug("Parsed %d segments", len(segments))
    return segments


def _format_record(segment: SubtitleSegment) -> str:
    speaker = Speaker(segment.speaker).value
    return f"{segment.start_ms},{segment.end_ms},{speaker},{segment.text}"


def serialize(segments: Iterable[SubtitleSegment]) -> str:
    return RECORD_SEPARATOR.join(_format_record(segment) for segment in segments)


def to_srt(segments: Iterable[SubtitleSegment]) -> str:
    blocks = []
    for index, segment in enumerate(segments, start=1):
        blocks.append(
            f"{index}\n"
            f"{ms_to_srt_time(segment.start_ms)} --> {ms_to_srt_time(segment.end_ms)}\n"
            f"{segment.text}\n"
        )
    return "\n".join(blocks)


def read_segments(path: Path) -> list[SubtitleSegment]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read subtitles from {path}: {exc}") from exc
    return parse(text)


def write_segments(path: Path, segments: Iterable[SubtitleSegment]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(segments), encoding="utf-8")
    log.info("Subtitles written to %s", path)
    return path
