"""Tests for the CLI module."""

import json
from unittest.mock import patch

import pytest

from id3_reader import __version__
from id3_reader.cli import main
from id3_reader.cli.utils import ExitCode, setup_logging


def run(argv):
    with patch("sys.argv", ["id3r"] + argv):
        main()


def test_version_output(capsys):
    """Test that --version flag displays version correctly."""
    with pytest.raises(SystemExit) as exc_info:
        run(["--version"])

    assert exc_info.value.code == 0
    captured = capsys.readouterr()
    assert __version__ in captured.out


def test_help_output(capsys):
    """Test that --help flag displays help information."""
    with pytest.raises(SystemExit) as exc_info:
        run(["--help"])

    assert exc_info.value.code == 0
    captured = capsys.readouterr()
    assert "ID3 Reader" in captured.out
    assert "show" in captured.out
    assert "frames" in captured.out
    assert "inspect" in captured.out


def test_no_command_shows_help(capsys):
    """Test that running without a command shows help."""
    with pytest.raises(SystemExit) as exc_info:
        run([])

    assert exc_info.value.code == ExitCode.ERROR
    assert "ID3 Reader" in capsys.readouterr().out


def test_setup_logging_invalid_level():
    with pytest.raises(ValueError):
        setup_logging("loud")


class TestShow:
    def test_id3v2_line(self, mp3_file, capsys):
        """Test the comma-joined line for an ID3v2 file."""
        run(["show", str(mp3_file)])
        assert capsys.readouterr().out.strip() == (
            "1999,The Artist,The Album,5,Café,Nice track,Rock,2.3.0"
        )

    def test_id3v1_line(self, id3v1_file, capsys):
        run(["show", str(id3v1_file)])
        assert capsys.readouterr().out.strip() == (
            "1987,Old Artist,Old Album,5,Old Song,From tape,Metal,1.1.0"
        )

    def test_separator(self, mp3_file, capsys):
        run(["show", "-s", "|", str(mp3_file)])
        assert capsys.readouterr().out.startswith("1999|The Artist|")

    def test_directory_scan(self, tmp_path, mp3_file, id3v1_file, capsys):
        (tmp_path / "notes.txt").write_text("not audio")
        run(["show", str(tmp_path)])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        assert lines[0].endswith("1.1.0")  # old.mp3 sorts first
        assert lines[1].endswith("2.3.0")

    def test_missing_path(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            run(["show", str(tmp_path / "missing.mp3")])
        assert exc_info.value.code == ExitCode.INVALID_INPUT

    def test_untagged_file(self, tmp_path):
        path = tmp_path / "plain.mp3"
        path.write_bytes(b"\xff\xfb" * 300)
        with pytest.raises(SystemExit) as exc_info:
            run(["show", str(path)])
        assert exc_info.value.code == ExitCode.PARSE_ERROR

    def test_no_id3v1_flag(self, id3v1_file):
        with pytest.raises(SystemExit) as exc_info:
            run(["show", "--no-id3v1", str(id3v1_file)])
        assert exc_info.value.code == ExitCode.PARSE_ERROR

    def test_json(self, mp3_file, tmp_path, capsys):
        bad = tmp_path / "plain.mp3"
        bad.write_bytes(b"\x00" * 300)
        with pytest.raises(SystemExit) as exc_info:
            run(["show", "--json", str(mp3_file), str(bad)])
        assert exc_info.value.code == ExitCode.PARSE_ERROR

        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "completed_with_errors"
        assert data["tags"][0]["title"] == "Café"
        assert data["tags"][0]["total_tracks"] == 12
        assert data["errors"][0]["error"] == "no_tag"

    def test_config_fields(self, mp3_file, tmp_path, capsys):
        config = tmp_path / "id3r.toml"
        config.write_text('[output]\nseparator = ";"\nfields = ["title", "genre"]\n')
        run(["show", "-c", str(config), str(mp3_file)])
        assert capsys.readouterr().out.strip() == "Café;Rock"

    def test_config_unknown_field_ignored(self, mp3_file, tmp_path, capsys):
        config = tmp_path / "id3r.toml"
        config.write_text('[output]\nfields = ["title", "bitrate"]\n')
        run(["show", "-c", str(config), str(mp3_file)])
        assert capsys.readouterr().out.strip() == "Café"

    def test_json_text_track(self, tmp_path, id3v2, text_frame, capsys):
        """Test a non-numeric track is kept in the JSON output."""
        path = tmp_path / "side.mp3"
        path.write_bytes(id3v2([text_frame("TRCK", "A1")]))
        with pytest.raises(SystemExit) as exc_info:
            run(["show", "--json", str(path)])
        assert exc_info.value.code == ExitCode.SUCCESS
        assert json.loads(capsys.readouterr().out)["tags"][0]["track"] == "A1"


class TestFrames:
    def test_table(self, mp3_file, capsys):
        run(["frames", str(mp3_file)])
        out = capsys.readouterr().out
        assert "TIT2" in out
        assert "PRIV" in out
        assert "8 frames" in out

    def test_json(self, mp3_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run(["frames", "--json", str(mp3_file)])
        assert exc_info.value.code == 0

        data = json.loads(capsys.readouterr().out)
        assert data["version"] == "2.3.0"
        keys = [frame["key"] for frame in data["frames"]]
        assert keys[0] == "TIT2"
        assert data["frames"][0]["value"] == "Café"
        assert "value" not in data["frames"][-1]

    def test_id3v1_only_file(self, id3v1_file):
        with pytest.raises(SystemExit) as exc_info:
            run(["frames", str(id3v1_file)])
        assert exc_info.value.code == ExitCode.PARSE_ERROR


class TestInspect:
    def test_header(self, mp3_file, capsys):
        run(["inspect", str(mp3_file)])
        out = capsys.readouterr().out
        assert "ID3v2 Header" in out
        assert "2.3.0" in out

    def test_footer(self, id3v1_file, capsys):
        run(["inspect", str(id3v1_file)])
        out = capsys.readouterr().out
        assert "ID3v1 Footer" in out
        assert "Metal" in out

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            run(["inspect", str(tmp_path / "nope.mp3")])
        assert exc_info.value.code == ExitCode.INVALID_INPUT
