"""Tests for the icstree command-line entry point."""

import io
import json
from unittest.mock import patch

import pytest

from icstree.__main__ import _create_parser, main

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring the root logger during tests."""
    with patch("icstree.__main__.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def event_file(tmp_path, event_ics):
    path = tmp_path / "event.ics"
    path.write_text(event_ics, encoding="utf-8")
    return path


class TestArgumentParser:
    """Tests for _create_parser."""

    def test_defaults(self):
        args = _create_parser().parse_args(["cal.ics"])

        assert args.file == "cal.ics"
        assert not args.json
        assert not args.validate
        assert not args.debug

    def test_json_and_validate_are_exclusive(self):
        with pytest.raises(SystemExit) as exc_info:
            _create_parser().parse_args(["cal.ics", "--json", "--validate"])
        assert exc_info.value.code == 2

    def test_file_required(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2


class TestMain:
    """Tests for main."""

    def test_reserializes_file(self, event_file, capsys):
        assert main([str(event_file)]) == 0

        lines = capsys.readouterr().out.split("\r\n")
        assert lines[0] == "BEGIN:VCALENDAR"
        assert "LOCATION:Restaurant XYZ\\, 123 Main St" in lines
        assert lines[-2:] == ["END:VCALENDAR", ""]

    def test_json_output(self, event_file, capsys):
        assert main([str(event_file), "--json"]) == 0

        tree = json.loads(capsys.readouterr().out)
        assert tree["component_type"] == "VCALENDAR"
        event = tree["sub_components"][0]
        assert event["component_type"] == "VEVENT"
        assert event["properties"]["SUMMARY"][0]["value"] == "Christmas Team Lunch"

    def test_validate_valid(self, event_file, capsys):
        assert main([str(event_file), "--validate"]) == 0
        assert capsys.readouterr().out.startswith("Validation Result: VALID")

    def test_validate_invalid(self, tmp_path, capsys):
        path = tmp_path / "bare.ics"
        path.write_text("BEGIN:VCALENDAR\nEND:VCALENDAR\n", encoding="utf-8")

        assert main([str(path), "--validate"]) == 1
        out = capsys.readouterr().out
        assert "INVALID" in out
        assert "VCALENDAR is missing required property: VERSION" in out

    def test_parse_error_exits_1(self, tmp_path, caplog):
        path = tmp_path / "broken.ics"
        path.write_text("BEGIN:VCALENDAR\nBEGIN:VEVENT\n", encoding="utf-8")

        assert main([str(path)]) == 1
        assert "Unexpected end of input while parsing VEVENT" in caplog.text

    def test_missing_file_exits_1(self, tmp_path, caplog):
        assert main([str(tmp_path / "missing.ics")]) == 1
        assert "Cannot read" in caplog.text

    def test_reads_stdin(self, monkeypatch, capsys, minimal_ics):
        monkeypatch.setattr("sys.stdin", io.StringIO(minimal_ics))

        assert main(["-"]) == 0
        assert "PRODID:-//X//Y//EN\r\n" in capsys.readouterr().out

    def test_debug_flag_enables_debug_logging(self, event_file, no_logging_setup):
        main([str(event_file), "--debug"])
        no_logging_setup.assert_called_once_with(debug_mode=True, log_level="INFO")

    def test_settings_log_level_passed_to_logging(self, event_file, monkeypatch, no_logging_setup):
        monkeypatch.setenv("ICSTREE_LOG_LEVEL", "error")

        main([str(event_file)])
        no_logging_setup.assert_called_once_with(debug_mode=False, log_level="ERROR")

    def test_reads_file_with_byte_order_mark(self, tmp_path, capsys, minimal_ics):
        path = tmp_path / "bom.ics"
        path.write_bytes(b"\xef\xbb\xbf" + minimal_ics.encode("utf-8"))

        assert main([str(path)]) == 0
        assert capsys.readouterr().out.startswith("BEGIN:VCALENDAR\r\n")
