"""
Dialogue ingestion.

Script authoring and validation live upstream; this module only accepts the
already-structured result as JSON (``[{"speaker": "A", "text": "..."}, ...]``)
and converts it to DialogueLine values for the timing estimator.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from dialogsubs.domain.segments import DialogueLine, Speaker
from dialogsubs.exceptions import InputError
from dialogsubs.utils.logging import get_logger

log = get_logger(__name__)


class DialogueLineIn(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    speaker: Speaker
    text: str = Field(min_length=1)

    def to_line(self) -> DialogueLine:
        return DialogueLine(speaker=self.speaker, text=self.text)


_SCRIPT_ADAPTER = TypeAdapter(list[DialogueLineIn])


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first['msg']}" if location else first["msg"]


def parse_dialogue(payload: str | bytes) -> list[DialogueLine]:
    try:
        items = _SCRIPT_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        raise InputError(f"Invalid dialogue script ({_describe(exc)})") from exc
    return [item.to_line() for item in items]


def load_dialogue(path: Path) -> list[DialogueLine]:
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise InputError(f"Cannot read dialogue script {path}: {exc}") from exc
    lines = parse_dialogue(payload)
    log.info("Loaded %d dialogue lines from %s", len(lines), path)
    return lines
