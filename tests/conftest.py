from __future__ import annotations

import inspect
import json
from pathlib import Path

import pytest
import typer.testing


def _patch_clirunner() -> None:
    if "mix_stderr" in inspect.signature(typer.testing.CliRunner).parameters:
        return

    class PatchedCliRunner(typer.testing.CliRunner):
        def __init__(self, *args, **kwargs):  # noqa: ANN002, ANN003
            kwargs.pop("mix_stderr", None)
            super().__init__(*args, **kwargs)

    typer.testing.CliRunner = PatchedCliRunner


_patch_clirunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("DIALOGSUBS_AUTO_SPLIT", "DIALOGSUBS_OUTPUT_FORMAT", "DIALOGSUBS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of Settings().
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_dialogue(tmp_path: Path):
    def _write(lines: list[dict], name: str = "script.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(lines), encoding="utf-8")
        return path

    return _write
