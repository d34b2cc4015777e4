"""Command line interface for the textlens toolkit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from rich.console import Console
from rich.table import Table

from .config import StatsConfig, load_config
from .exceptions import InputReadError, TextLensError
from .metrics import format_count, get_most_frequent_words, truncate_text
from .report import (
    analyze,
    build_error_response,
    build_success_response,
    compute_statistics,
    grade_band,
    grade_percentage,
    parse_reading_level,
)
from .utils import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def _read_text(path: str | None, *, encoding: str = "utf-8") -> str:
    if not path or path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise InputReadError(f"input file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise InputReadError(f"input file is not valid {encoding} text: {path}") from exc
    except OSError as exc:
        raise InputReadError(f"cannot read input file {path}: {exc.strerror}") from exc


def _write_text(path: str | None, data: str, *, encoding: str = "utf-8") -> None:
    if not path or path == "-":
        sys.stdout.write(data)
        return
    Path(path).write_text(data, encoding=encoding)


def _write_json(path: str | None, payload: Mapping[str, Any] | Sequence[Any]) -> None:
    serialised = json.dumps(payload, ensure_ascii=False, indent=2)
    _write_text(path, serialised + "\n")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
        default=None,
        help="Set the log level for the CLI session",
    )


def _prepare(args: argparse.Namespace) -> StatsConfig:
    configure_logging(args.log_level)
    return load_config()


def _handle_stats(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="textlens stats", description="Compute descriptive statistics for a text.")
    parser.add_argument("-i", "--in", dest="input_path", default="-", help="Text input file (default: stdin)")
    parser.add_argument("--top", type=int, default=None, help="Number of frequent words to report")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Emit JSON instead of a table")
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))

    try:
        config = _prepare(args)
        text = _read_text(args.input_path)
    except TextLensError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        return 1

    stats = compute_statistics(text, top_n=args.top, config=config)
    logger.debug("computed statistics for %d characters", len(text))

    if args.as_json:
        _write_json(None, stats.to_dict())
        return 0

    table = Table(title="Text statistics")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Words", format_count(stats.word_count, config.locale))
    table.add_row("Unique words", format_count(stats.unique_word_count, config.locale))
    table.add_row("Reading time (min)", str(stats.reading_time_minutes))
    table.add_row("Speaking time (min)", str(stats.speaking_time_minutes))
    table.add_row("Avg sentence length", str(stats.average_sentence_length))
    console.print(table)

    if stats.top_words:
        console.print("[bold]Top words:[/bold]")
        for entry in stats.top_words:
            console.print(f"  {entry.word}: {entry.count}", markup=False)
    return 0


def _handle_top_words(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="textlens top-words", description="List the most frequent content words.")
    parser.add_argument("-i", "--in", dest="input_path", default="-", help="Text input file (default: stdin)")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of words to list")
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))

    try:
        config = _prepare(args)
        text = _read_text(args.input_path)
    except TextLensError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        return 1

    limit = config.top_words_limit if args.limit is None else args.limit
    entries = get_most_frequent_words(text, limit)
    _write_json(None, [entry.to_dict() for entry in entries])
    return 0


def _handle_report(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(
        prog="textlens report",
        description="Merge a saved model reply with locally computed statistics.",
    )
    parser.add_argument("-i", "--in", dest="input_path", required=True, help="Text input file")
    parser.add_argument("--reply", dest="reply_path", required=True, help="File holding the model's JSON reply")
    parser.add_argument("-o", "--out", dest="output_path", default="-", help="Analysis JSON output (default: stdout)")
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))

    try:
        config = _prepare(args)
        text = _read_text(args.input_path)
        raw_reply = _read_text(args.reply_path)
        result = analyze(text, raw_reply, config=config)
    except TextLensError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        _write_json(args.output_path, build_error_response(exc))
        return 1

    _write_json(args.output_path, build_success_response(result))
    return 0


def _handle_reading_level(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(
        prog="textlens reading-level",
        description="Interpret a reading level label such as '7th grade (easy to understand)'.",
    )
    parser.add_argument("label", help="Reading level label")
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))
    try:
        configure_logging(args.log_level)
    except TextLensError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        return 1

    level = parse_reading_level(args.label)
    band = grade_band(level.grade)
    console.print(f"Grade: {level.grade}")
    console.print(f"Band: {band.name} ({band.min_grade}-{band.max_grade})")
    console.print(f"Scale: {grade_percentage(level.grade):.0f}%")
    return 0


def _handle_truncate(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="textlens truncate", description="Shorten a text to a fixed length.")
    parser.add_argument("-i", "--in", dest="input_path", default="-", help="Text input file (default: stdin)")
    parser.add_argument("--max-length", type=int, required=True, help="Maximum number of characters to keep")
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))
    try:
        configure_logging(args.log_level)
        text = _read_text(args.input_path)
    except TextLensError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        return 1

    _write_text(None, truncate_text(text, args.max_length) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textlens",
        description="Command line interface for the textlens toolkit.",
    )
    subparsers = parser.add_subparsers(dest="command")
    for command in ["stats", "top-words", "report", "reading-level", "truncate"]:
        subparsers.add_parser(command)
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    if not args:
        build_parser().print_help()
        return 0

    command, rest = args[0], args[1:]

    if command == "stats":
        return _handle_stats(rest)
    if command == "top-words":
        return _handle_top_words(rest)
    if command == "report":
        return _handle_report(rest)
    if command == "reading-level":
        return _handle_reading_level(rest)
    if command == "truncate":
        return _handle_truncate(rest)
    if command in {"-h", "--help"}:
        build_parser().print_help()
        return 0

    console.print(f"[red]Error:[/red] unknown command '{command}'")
    build_parser().print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
