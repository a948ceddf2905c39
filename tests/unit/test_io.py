"""Unit tests for the Font I/O layer.

Tests for FontReader and the face metric extractors.
"""

import io
from pathlib import Path

import pytest
from helpers import MARK_FEATURES, build_font

from font_enumeration.domain import Stretch, Style, Weight
from font_enumeration.exceptions import FontLoadError
from font_enumeration.io import (
    Feature,
    FontReader,
    WritingSystem,
    extract_features,
    extract_metrics,
    extract_writing_systems,
    face_attributes,
    face_names,
    native_attributes,
)
from font_enumeration.io.metrics import native_style


class TestFontReader:
    """Tests for FontReader class."""

    def test_iter_faces_before_load(self):
        """Test iterating faces before loading raises RuntimeError."""
        reader = FontReader("test.ttf", b"")
        with pytest.raises(RuntimeError, match="Font not loaded"):
            list(reader.iter_faces())

    def test_face_count_before_load(self):
        """Test accessing face_count before loading raises RuntimeError."""
        reader = FontReader("test.ttf", b"")
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.face_count

    def test_missing_file(self, tmp_path: Path):
        """Test a missing file raises FontLoadError naming it."""
        path = tmp_path / "missing.ttf"
        with pytest.raises(FontLoadError, match="missing.ttf"):
            FontReader.from_path(path)

    def test_empty_data(self):
        """Test empty input is rejected."""
        reader = FontReader("stdin", b"")
        with pytest.raises(FontLoadError, match="no data"):
            reader.load()

    def test_garbage_data(self):
        """Test non-font data is rejected."""
        reader = FontReader("stdin", b"definitely not a font")
        with pytest.raises(FontLoadError) as exc_info:
            reader.load()
        assert exc_info.value.source == "stdin"

    def test_single_font(self, font_path: Path):
        """Test a plain font file has one face."""
        with FontReader.from_path(font_path) as reader:
            assert not reader.is_collection
            assert reader.face_count == 1
            assert reader.source == str(font_path)
            ((index, face),) = list(reader.iter_faces())
            assert index == 0
            assert face["head"].unitsPerEm == 1000

    def test_collection(self, collection_path: Path):
        """Test every face of a TTC is yielded in order."""
        with FontReader.from_path(collection_path) as reader:
            assert reader.is_collection
            names = [face_names(face)[1] for _, face in reader.iter_faces()]
        assert names == ["Test Sans Regular", "Test Sans Bold"]

    def test_from_stream(self, font_path: Path):
        """Test reading from a binary stream."""
        reader = FontReader.from_stream(io.BytesIO(font_path.read_bytes()))
        assert reader.source == "stdin"
        with reader:
            assert reader.face_count == 1

    def test_close(self, font_path: Path):
        """Test close releases the faces."""
        reader = FontReader.from_path(font_path)
        reader.load()
        reader.close()
        with pytest.raises(RuntimeError):
            _ = reader.face_count


class TestFaceAttributes:
    """Tests for OS/2 attribute reading."""

    @pytest.mark.parametrize(
        ("fs_selection", "expected"),
        [(0x40, 0), (0x01, 2), (0x200, 1), (0x201, 1)],
    )
    def test_native_style(self, fs_selection, expected):
        """Test fsSelection maps to DWRITE_FONT_STYLE, oblique first."""
        assert native_style(fs_selection) == expected

    def test_regular(self):
        """Test a regular face."""
        face = build_font()
        assert native_attributes(face) == (0, 400, 5)
        attributes = face_attributes(face)
        assert attributes.weight == Weight.NORMAL
        assert attributes.style == Style.NORMAL
        assert attributes.stretch == Stretch.NORMAL

    def test_bold_italic_condensed(self):
        """Test weight, italic and width classes."""
        attributes = face_attributes(build_font(weight=700, width=3, fs_selection=0x01))
        assert attributes.weight == Weight.BOLD
        assert attributes.style == Style.ITALIC
        assert attributes.stretch == Stretch.CONDENSED

    def test_no_os2_table(self):
        """Test faces without OS/2 get DirectWrite defaults."""
        face = build_font()
        del face["OS/2"]
        assert native_attributes(face) == (0, 400, 5)

    def test_face_names(self):
        """Test family and full names come from the name table."""
        assert face_names(build_font(family="Demo Serif", style_name="Light")) == (
            "Demo Serif",
            "Demo Serif Light",
        )

    def test_face_names_keep_regular(self):
        """Test the full name keeps the Regular subfamily."""
        assert face_names(build_font()) == ("Test Sans", "Test Sans Regular")


class TestExtractMetrics:
    """Tests for global metric extraction."""

    def test_hhea_metrics(self):
        """Test hhea values are used without USE_TYPO_METRICS."""
        metrics = extract_metrics(build_font())
        assert metrics.glyph_count == 3
        assert metrics.units_per_em == 1000
        assert metrics.average_advance == 600.0
        assert metrics.ascent == 800.0
        assert metrics.descent == 200.0
        assert metrics.leading == 0.0
        assert metrics.line_height == 1000.0
        assert metrics.cap_height == 700.0
        assert metrics.x_height == 500.0
        assert metrics.stroke_size == 50.0
        assert metrics.underline_offset == -100.0
        assert metrics.strikeout_offset == 300.0

    def test_typo_metrics(self):
        """Test OS/2 typographic values win with USE_TYPO_METRICS."""
        metrics = extract_metrics(build_font(fs_selection=0xC0))
        assert metrics.ascent == 750.0
        assert metrics.descent == 250.0
        assert metrics.leading == 100.0
        assert metrics.line_height == 1000.0

    def test_to_dict(self):
        """Test camelCase serialization."""
        data = extract_metrics(build_font()).to_dict()
        assert data["glyphCount"] == 3
        assert data["unitsPerEm"] == 1000
        assert data["lineHeight"] == 1000.0
        assert data["strikeoutOffset"] == 300.0
        assert len(data) == 12


class TestLayoutTables:
    """Tests for feature and writing system listings."""

    def test_features(self):
        """Test GSUB features come before GPOS features."""
        assert extract_features(build_font()) == [
            Feature(tag="liga", action="substitution"),
            Feature(tag="kern", action="adjustment"),
        ]

    def test_mark_feature_is_attachment(self):
        """Test GPOS features with mark lookups are attachments."""
        features = extract_features(build_font(extra_features=MARK_FEATURES))
        assert Feature(tag="mark", action="attachment") in features
        assert Feature(tag="kern", action="adjustment") in features
        assert Feature(tag="liga", action="substitution") in features

    def test_writing_systems(self):
        """Test script/language pairs are listed once, unpadded."""
        systems = extract_writing_systems(build_font())
        assert [str(s) for s in systems] == ["DFLT:dflt", "latn:dflt", "latn:TRK"]
        assert systems[2] == WritingSystem(script="latn", language="TRK")

    def test_no_layout_tables(self):
        """Test fonts without GSUB/GPOS have nothing to list."""
        face = build_font(features=False)
        assert extract_features(face) == []
        assert extract_writing_systems(face) == []
