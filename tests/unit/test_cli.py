"""Unit tests for the font-info command line."""

import importlib
import json
from pathlib import Path

import pytest
from helpers import fc_descriptor
from typer.testing import CliRunner

from font_enumeration import __version__
from font_enumeration.cli import app
from font_enumeration.config import BACKEND_ENV_VAR
from font_enumeration.exceptions import SystemCollectionUnavailable

cli_app = importlib.import_module("font_enumeration.cli.app")
runner = CliRunner()


@pytest.fixture
def family_backend(monkeypatch, make_backend, font_path: Path, bold_italic_path: Path):
    """Route system enumeration to a fake backend listing the built fonts."""
    backend = make_backend(
        [
            fc_descriptor("Test Sans", "Test Sans Regular", path=str(font_path)),
            fc_descriptor("Other Serif", "Other Serif Regular", path="/fonts/other.ttf"),
            fc_descriptor(
                "Test Sans", "Test Sans Bold Italic", path=str(bold_italic_path), slant=100, weight=200
            ),
            fc_descriptor("TEST SANS", "Test Sans Regular", path=str(font_path)),
        ]
    )
    monkeypatch.setattr(cli_app, "system_backend", lambda *_args, **_kwargs: backend)
    return backend


def _unavailable(*_args, **_kwargs):
    def backend():
        raise SystemCollectionUnavailable("fake", "service down")

    return backend


class TestInfoFontFile:
    """Tests for info --font-file."""

    def test_human_readable(self, font_path: Path):
        """Test the labelled block for a single face."""
        result = runner.invoke(app, ["info", "--font-file", str(font_path)])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].startswith("-[ FONT 1 ]-")
        assert len(lines[0]) == 60
        assert f"              Source: {font_path}" in lines
        assert "Font index in source: 0" in lines
        assert "              Weight: 400" in lines
        assert "               Style: normal" in lines
        assert "             Stretch: 1.00" in lines
        assert "         Glyph count: 3" in lines
        assert "              Ascent: 800.0" in lines
        assert "    Stroke thickness: 50.0" in lines
        assert "Features" not in result.stdout

    def test_features_and_writing_systems(self, font_path: Path):
        """Test optional listings in human-readable output."""
        result = runner.invoke(
            app,
            ["info", "--font-file", str(font_path), "--print-features", "--print-writing-systems"],
        )
        assert result.exit_code == 0
        assert "            Features: liga:substitution" in result.stdout
        assert "kern:adjustment" in result.stdout
        assert "     Writing systems: DFLT:dflt" in result.stdout
        assert "latn:TRK" in result.stdout

    def test_json(self, font_path: Path):
        """Test JSON output for a single face."""
        result = runner.invoke(
            app,
            ["info", "--font-file", str(font_path), "--format", "json", "--print-features"],
        )
        assert result.exit_code == 0
        (entry,) = json.loads(result.stdout)
        assert entry["source"] == str(font_path)
        assert entry["fontIndex"] == 0
        assert entry["features"] == [
            {"feature": "liga", "action": "substitution"},
            {"feature": "kern", "action": "adjustment"},
        ]
        assert "writingSystems" not in entry
        assert entry["metrics"]["unitsPerEm"] == 1000
        assert entry["metrics"]["descent"] == 200.0

    def test_json_writing_systems(self, font_path: Path):
        """Test writing systems in JSON output."""
        result = runner.invoke(
            app,
            ["info", "--font-file", str(font_path), "--format", "json", "--print-writing-systems"],
        )
        assert result.exit_code == 0
        (entry,) = json.loads(result.stdout)
        assert {"script": "latn", "language": "TRK"} in entry["writingSystems"]

    def test_collection_faces_numbered(self, collection_path: Path):
        """Test every face of a collection gets its own block."""
        result = runner.invoke(app, ["info", "--font-file", str(collection_path)])
        assert result.exit_code == 0
        assert "-[ FONT 1 ]-" in result.stdout
        assert "-[ FONT 2 ]-" in result.stdout
        assert "Font index in source: 1" in result.stdout.splitlines()

    def test_missing_file(self, tmp_path: Path):
        """Test an unreadable file is an error."""
        result = runner.invoke(app, ["info", "--font-file", str(tmp_path / "nope.ttf")])
        assert result.exit_code == 1
        assert "Failed to parse font file" in result.output

    def test_invalid_font(self, tmp_path: Path):
        """Test a file that is not a font is an error."""
        path = tmp_path / "bad.ttf"
        path.write_bytes(b"\x00\x01\x00\x00 but nothing else")
        result = runner.invoke(app, ["info", "--font-file", str(path)])
        assert result.exit_code == 1
        assert "Failed to parse font file" in result.output


class TestInfoFamilyName:
    """Tests for info --family-name."""

    @pytest.mark.usefixtures("family_backend")
    def test_distinct_files(self):
        """Test each matching file is inspected once, in order."""
        result = runner.invoke(app, ["info", "--family-name", "test sans", "--format", "json"])
        assert result.exit_code == 0
        entries = json.loads(result.stdout)
        assert len(entries) == 2
        assert entries[0]["source"].endswith("TestSans-Regular.ttf")
        assert entries[1]["source"].endswith("TestSans-BoldItalic.ttf")

    @pytest.mark.usefixtures("family_backend")
    def test_unknown_family(self):
        """Test an unknown family prints an empty result."""
        result = runner.invoke(app, ["info", "--family-name", "Nope", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == []

    def test_unavailable(self, monkeypatch):
        """Test enumeration failures exit with an error."""
        monkeypatch.setattr(cli_app, "system_backend", _unavailable)
        result = runner.invoke(app, ["info", "--family-name", "Test Sans"])
        assert result.exit_code == 1
        assert "service down" in result.output

    def test_both_inputs(self, font_path: Path):
        """Test --font-file and --family-name are exclusive."""
        result = runner.invoke(
            app, ["info", "--font-file", str(font_path), "--family-name", "Test Sans"]
        )
        assert result.exit_code == 1
        assert "together" in result.output


class TestInfoStdin:
    """Tests for reading font data from stdin."""

    def test_reads_stdin(self, monkeypatch, font_path: Path):
        """Test piped font data is parsed."""
        monkeypatch.setattr(cli_app, "_stdin_is_terminal", lambda: False)
        result = runner.invoke(
            app, ["info", "--format", "json"], input=font_path.read_bytes()
        )
        assert result.exit_code == 0
        (entry,) = json.loads(result.stdout)
        assert entry["source"] == "stdin"

    def test_terminal_stdin(self, monkeypatch):
        """Test an interactive stdin prints usage help instead of blocking."""
        monkeypatch.setattr(cli_app, "_stdin_is_terminal", lambda: True)
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 1
        assert "--font-file" in result.output

    def test_empty_stdin(self, monkeypatch):
        """Test empty stdin is an error."""
        monkeypatch.setattr(cli_app, "_stdin_is_terminal", lambda: False)
        result = runner.invoke(app, ["info"], input=b"")
        assert result.exit_code == 1
        assert "no data" in result.output


class TestListCommand:
    """Tests for the list command."""

    @pytest.mark.usefixtures("family_backend")
    def test_list_all_json(self):
        """Test every record is listed."""
        result = runner.invoke(app, ["list", "--format", "json"])
        assert result.exit_code == 0
        records = json.loads(result.stdout)
        assert len(records) == 4
        assert records[2] == {
            "familyName": "Test Sans",
            "fontName": "Test Sans Bold Italic",
            "path": records[2]["path"],
            "style": "italic",
            "weight": 700.0,
            "stretch": 1.0,
        }

    @pytest.mark.usefixtures("family_backend")
    def test_list_family(self):
        """Test family filtering ignores case."""
        result = runner.invoke(app, ["list", "--family-name", "OTHER serif"])
        assert result.exit_code == 0
        assert "Other Serif Regular" in result.stdout
        assert "Test Sans" not in result.stdout

    def test_list_unavailable(self, monkeypatch):
        """Test enumeration failures exit with an error."""
        monkeypatch.setattr(cli_app, "system_backend", _unavailable)
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 1
        assert "Could not enumerate system fonts" in result.output

    def test_list_unknown_backend(self, monkeypatch):
        """Test a misnamed backend variable exits with an error."""
        monkeypatch.setenv(BACKEND_ENV_VAR, "freetype")
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 1
        assert "freetype" in result.output


def test_version():
    """Test --version prints the package version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
