from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from dialogsubs.cli.main import app

SCRIPT = [
    {"speaker": "A", "text": "Hi there"},
    {"speaker": "B", "text": "one two three four five six seven"},
]


def test_estimate_without_split(write_dialogue) -> None:
    script = write_dialogue(SCRIPT)

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["estimate", str(script), "--no-split"])

    assert result.exit_code == 0, result.stderr
    assert result.stdout.splitlines() == [
        "0,800,A,Hi there",
        "800,3600,B,one two three four five six seven",
    ]


def test_estimate_splits_by_default(write_dialogue) -> None:
    script = write_dialogue(SCRIPT)

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["estimate", str(script)])

    assert result.exit_code == 0, result.stderr
    assert result.stdout.splitlines() == [
        "0,800,A,Hi there",
        "800,2400,B,one two three four",
        "2400,3600,B,five six seven",
    ]


def test_estimate_respects_env_settings(write_dialogue, monkeypatch) -> None:
    monkeypatch.setenv("DIALOGSUBS_AUTO_SPLIT", "false")
    monkeypatch.setenv("DIALOGSUBS_OUTPUT_FORMAT", "srt")
    script = write_dialogue(SCRIPT)

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["estimate", str(script)])

    assert result.exit_code == 0, result.stderr
    assert "2\n00:00:00,800 --> 00:00:03,600\none two three four five six seven" in result.stdout


def test_estimate_writes_output_file(write_dialogue, tmp_path: Path) -> None:
    script = write_dialogue(SCRIPT)
    out = tmp_path / "out" / "subs.txt"

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["estimate", str(script), "--out", str(out)])

    assert result.exit_code == 0, result.stderr
    assert out.read_text(encoding="utf-8").splitlines()[1] == "800,2400,B,one two three four"
    assert str(out) in result.stdout


def test_split_command(tmp_path: Path) -> None:
    subs = tmp_path / "subs.txt"
    subs.write_text("0,4000,A,one two three four five six seven\n4000,4700,B,ok", encoding="utf-8")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["split", str(subs)])

    assert result.exit_code == 0, result.stderr
    assert result.stdout.splitlines() == [
        "0,2286,A,one two three four",
        "2286,4000,A,five six seven",
        "4000,4700,B,ok",
    ]


def test_check_json_report(tmp_path: Path) -> None:
    subs = tmp_path / "subs.txt"
    subs.write_text("0,800,A,Hi there\n800,3600,B,a b c d e f g", encoding="utf-8")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["check", str(subs), "--json"])

    assert result.exit_code == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["summary"]["readability"] == {"good": 1, "consider-splitting": 0, "should-split": 1}
    assert payload["segments"][1]["status"] == "should-split"
    assert payload["segments"][1]["recommended_font_scale"] == 80
    assert payload["segments"][1]["suggested_segments"] == 2


def test_check_table_report(tmp_path: Path) -> None:
    subs = tmp_path / "subs.txt"
    subs.write_text("0,800,B,Hi there", encoding="utf-8")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["check", str(subs)])

    assert result.exit_code == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines[0].startswith("start\tend\tspeaker\tstatus")
    assert lines[1] == "00:00:00.000\t00:00:00.800\tB\tgood\t2\t100\tHi there"


def test_export_command(tmp_path: Path) -> None:
    subs = tmp_path / "subs.txt"
    subs.write_text("0,1500,A,Hello, you", encoding="utf-8")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["export", str(subs)])

    assert result.exit_code == 0, result.stderr
    assert result.stdout.startswith("1\n00:00:00,000 --> 00:00:01,500\nHello, you\n")


def test_missing_input_reports_input_error(tmp_path: Path) -> None:
    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["check", str(tmp_path / "missing.txt")])

    assert result.exit_code == 4
    assert "Input error: Cannot read subtitles" in result.stderr


def test_invalid_dialogue_reports_input_error(write_dialogue) -> None:
    script = write_dialogue([{"speaker": "Z", "text": "who?"}])

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["estimate", str(script)])

    assert result.exit_code == 4
    assert "Input error: Invalid dialogue script" in result.stderr


def test_unknown_format_reports_config_error(write_dialogue) -> None:
    script = write_dialogue(SCRIPT)

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["estimate", str(script), "--format", "vtt"])

    assert result.exit_code == 2
    assert "Configuration error: Unknown format 'vtt'" in result.stderr


def test_config_prints_settings() -> None:
    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "auto_split": True,
        "output_format": "pseudo",
        "log_level": "INFO",
    }


def test_config_reports_invalid_env(monkeypatch) -> None:
    monkeypatch.setenv("DIALOGSUBS_OUTPUT_FORMAT", "bogus")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 2
    assert "Configuration error: Invalid settings" in result.stderr
