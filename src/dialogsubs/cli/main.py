from __future__ import annotations

import functools
import json
from pathlib import Path
from typing import Callable, Sequence

import typer

from dialogsubs.config.settings import Settings, load_settings
from dialogsubs.domain.segments import SubtitleSegment
from dialogsubs.exceptions import ConfigurationError, DialogSubsError
from dialogsubs.pipeline import SubtitlePipeline, summarize
from dialogsubs.services import codec
from dialogsubs.services.dialogue import load_dialogue
from dialogsubs.services.readability import classify
from dialogsubs.utils.logging import configure_logging, get_logger
from dialogsubs.utils.timecode import ms_to_timestamp

app = typer.Typer(add_completion=False)
log = get_logger(__name__)

OUTPUT_FORMATS = ("pseudo", "srt")


def _reports_errors(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs):  # noqa: ANN002, ANN003
        try:
            return func(*args, **kwargs)
        except DialogSubsError as err:
            typer.echo(f"{err.label()}: {err.message}", err=True)
            raise typer.Exit(code=err.exit_code)

    return wrapper


def _prepare(log_level: str | None) -> Settings:
    settings = load_settings()
    # Configure logging after overrides so we use the final resolved level
    configure_logging(log_level or settings.log_level)
    return settings


def _resolve_format(fmt: str | None, settings: Settings) -> str:
    if fmt is None:
        return settings.output_format
    fmt_key = fmt.strip().lower()
    if fmt_key not in OUTPUT_FORMATS:
        raise ConfigurationError(f"Unknown format '{fmt}'. Use one of: {', '.join(OUTPUT_FORMATS)}.")
    return fmt_key


def _render(segments: Sequence[SubtitleSegment], fmt: str) -> str:
    if fmt == "srt":
        return codec.to_srt(segments)
    return codec.serialize(segments)


def _emit(text: str, out: Path | None) -> None:
    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote {out}")


@app.command()
@_reports_errors
def config() -> None:
    """Print resolved config."""
    settings = load_settings()
    typer.echo(json.dumps(settings.to_public_dict(), indent=2))


@app.command()
@_reports_errors
def estimate(
    script: Path = typer.Argument(..., help="Dialogue JSON: a list of {speaker, text} objects."),
    split: bool = typer.Option(None, "--split/--no-split", help="Re-split long segments (overrides config)."),
    fmt: str = typer.Option(None, "--format", help="Output format: pseudo or srt (overrides config)."),
    out: Path = typer.Option(None, help="Write output to this file instead of stdout."),
    log_level: str = typer.Option(None, help="Log level (overrides config)."),
) -> None:
    """Estimate subtitle timings for a dialogue script."""
    settings = _prepare(log_level)
    output_format = _resolve_format(fmt, settings)

    lines = load_dialogue(script)
    segments = SubtitlePipeline(settings).run(lines, auto_split=split)
    _emit(_render(segments, output_format), out)


@app.command("split")
@_reports_errors
def split_cmd(
    subtitles: Path = typer.Argument(..., help="Pseudo-SRT file (start,end,speaker,text per line)."),
    fmt: str = typer.Option(None, "--format", help="Output format: pseudo or srt (overrides config)."),
    out: Path = typer.Option(None, help="Write output to this file instead of stdout."),
    log_level: str = typer.Option(None, help="Log level (overrides config)."),
) -> None:
    """Re-split long segments without moving their time windows."""
    settings = _prepare(log_level)
    output_format = _resolve_format(fmt, settings)

    segments = codec.read_segments(subtitles)
    result = SubtitlePipeline(settings).resplit(segments)
    _emit(_render(result, output_format), out)


@app.command()
@_reports_errors
def check(
    subtitles: Path = typer.Argument(..., help="Pseudo-SRT file (start,end,speaker,text per line)."),
    json_output: bool = typer.Option(False, "--json", help="Output the report as JSON."),
    log_level: str = typer.Option(None, help="Log level (overrides config)."),
) -> None:
    """Report readability for every segment."""
    _prepare(log_level)
    segments = codec.read_segments(subtitles)

    if json_output:
        payload = {
            "summary": summarize(segments),
            "segments": [
                {
                    "start_ms": segment.start_ms,
                    "end_ms": segment.end_ms,
                    "speaker": segment.speaker.value,
                    "text": segment.text,
                    **classify(segment).to_dict(),
                }
                for segment in segments
            ],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo("start\tend\tspeaker\tstatus\twords\tscale\ttext")
    for segment in segments:
        report = classify(segment)
        typer.echo(
            f"{ms_to_timestamp(segment.start_ms)}\t"
            f"{ms_to_timestamp(segment.end_ms)}\t"
            f"{segment.speaker.value}\t"
            f"{report.status.value}\t"
            f"{report.word_count}\t"
            f"{report.recommended_font_scale}\t"
            f"{segment.text}"
        )


@app.command()
@_reports_errors
def export(
    subtitles: Path = typer.Argument(..., help="Pseudo-SRT file (start,end,speaker,text per line)."),
    out: Path = typer.Option(None, help="Write output to this file instead of stdout."),
    log_level: str = typer.Option(None, help="Log level (overrides config)."),
) -> None:
    """Export pseudo-SRT as standard SubRip."""
    _prepare(log_level)
    segments = codec.read_segments(subtitles)
    _emit(codec.to_srt(segments), out)


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
