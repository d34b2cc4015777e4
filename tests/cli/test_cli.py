from __future__ import annotations

import json

from textlens import cli as cli_module


SAMPLE_TEXT = "Rivers carry water. Rivers shape valleys over time! Water always finds a way."


def _run_cli(*args: str) -> int:
    return cli_module.main(list(args))


def test_no_arguments_prints_help(capsys):
    assert _run_cli() == 0
    assert "textlens" in capsys.readouterr().out


def test_unknown_command_fails(capsys):
    assert _run_cli("summarise") == 1
    assert "unknown command" in capsys.readouterr().out


def test_stats_json_output(tmp_path, capsys):
    text_path = tmp_path / "input.txt"
    text_path.write_text(SAMPLE_TEXT, encoding="utf-8")

    exit_code = _run_cli("stats", "-i", str(text_path), "--top", "2", "--json")

    captured = capsys.readouterr()
    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["wordCount"] == 13
    assert payload["uniqueWordCount"] == 11
    assert payload["topWords"] == [{"word": "rivers", "count": 2}, {"word": "water", "count": 2}]


def test_stats_table_output(tmp_path, capsys):
    text_path = tmp_path / "input.txt"
    text_path.write_text(SAMPLE_TEXT, encoding="utf-8")

    exit_code = _run_cli("stats", "-i", str(text_path))

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Words" in captured.out
    assert "Top words" in captured.out
    assert "rivers: 2" in captured.out


def test_stats_reports_bad_configuration(tmp_path, monkeypatch, capsys):
    text_path = tmp_path / "input.txt"
    text_path.write_text(SAMPLE_TEXT, encoding="utf-8")
    monkeypatch.setenv("TEXTLENS_TOP_WORDS", "many")

    exit_code = _run_cli("stats", "-i", str(text_path))

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().out


def test_top_words_respects_limit(tmp_path, capsys):
    text_path = tmp_path / "input.txt"
    text_path.write_text("cat dog cat bird cat dog", encoding="utf-8")

    exit_code = _run_cli("top-words", "-i", str(text_path), "--limit", "2")

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == [
        {"word": "cat", "count": 3},
        {"word": "dog", "count": 2},
    ]


def test_report_writes_combined_result(tmp_path):
    text_path = tmp_path / "input.txt"
    text_path.write_text(SAMPLE_TEXT, encoding="utf-8")
    reply_path = tmp_path / "reply.json"
    reply_path.write_text(
        json.dumps({"summary": "Rivers matter.", "key_points": ["water"], "reading_level": "Grade 6"}),
        encoding="utf-8",
    )
    output_path = tmp_path / "analysis.json"

    exit_code = _run_cli("report", "-i", str(text_path), "--reply", str(reply_path), "-o", str(output_path))

    assert exit_code == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["success"] is True
    assert payload["data"]["summary"] == "Rivers matter."
    assert payload["data"]["readingLevel"] == "Grade 6"
    assert payload["data"]["explanation"] == "No explanation available"
    assert payload["data"]["wordCount"] == 13


def test_report_fails_on_invalid_reply(tmp_path, capsys):
    text_path = tmp_path / "input.txt"
    text_path.write_text(SAMPLE_TEXT, encoding="utf-8")
    reply_path = tmp_path / "reply.json"
    reply_path.write_text("not json at all", encoding="utf-8")
    output_path = tmp_path / "analysis.json"

    exit_code = _run_cli("report", "-i", str(text_path), "--reply", str(reply_path), "-o", str(output_path))

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "not valid JSON" in captured.out
    assert json.loads(output_path.read_text(encoding="utf-8")) == {
        "success": False,
        "error": "model reply is not valid JSON",
        "status": 400,
    }


def test_report_writes_server_error_for_empty_reply(tmp_path):
    text_path = tmp_path / "input.txt"
    text_path.write_text(SAMPLE_TEXT, encoding="utf-8")
    reply_path = tmp_path / "reply.json"
    reply_path.write_text("   ", encoding="utf-8")
    output_path = tmp_path / "analysis.json"

    exit_code = _run_cli("report", "-i", str(text_path), "--reply", str(reply_path), "-o", str(output_path))

    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert exit_code == 1
    assert payload["success"] is False
    assert payload["status"] == 500


def test_report_missing_reply_file(tmp_path, capsys):
    text_path = tmp_path / "input.txt"
    text_path.write_text(SAMPLE_TEXT, encoding="utf-8")
    output_path = tmp_path / "analysis.json"

    exit_code = _run_cli(
        "report", "-i", str(text_path), "--reply", str(tmp_path / "absent.json"), "-o", str(output_path)
    )

    assert exit_code == 1
    assert "input file not found" in capsys.readouterr().out
    assert json.loads(output_path.read_text(encoding="utf-8"))["status"] == 400


def test_report_fails_on_short_text(tmp_path, capsys):
    text_path = tmp_path / "input.txt"
    text_path.write_text("tiny", encoding="utf-8")
    reply_path = tmp_path / "reply.json"
    reply_path.write_text("{}", encoding="utf-8")

    exit_code = _run_cli("report", "-i", str(text_path), "--reply", str(reply_path))

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "too short" in captured.out
    assert '"success": false' in captured.out


def test_reading_level_command(capsys):
    exit_code = _run_cli("reading-level", "College level (advanced)")

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Grade: 14" in captured.out
    assert "college" in captured.out
    assert "70%" in captured.out


def test_truncate_command(tmp_path, capsys):
    text_path = tmp_path / "input.txt"
    text_path.write_text("hello world", encoding="utf-8")

    exit_code = _run_cli("truncate", "-i", str(text_path), "--max-length", "5")

    assert exit_code == 0
    assert capsys.readouterr().out == "hello...\n"


def test_stats_reports_unreadable_input(tmp_path, capsys):
    text_path = tmp_path / "input.bin"
    text_path.write_bytes(b"\xff\xfe\xfa not utf-8")

    exit_code = _run_cli("stats", "-i", str(text_path))

    assert exit_code == 1
    assert "not valid utf-8 text" in capsys.readouterr().out


def test_unknown_log_level_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("TEXTLENS_LOG_LEVEL", "chatty")

    exit_code = _run_cli("reading-level", "Grade 4")

    assert exit_code == 1
    assert "unknown log level" in capsys.readouterr().out
