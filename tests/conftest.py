"""Shared fixtures: small fonts built with fontTools and fake backends."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from fontTools.ttLib import TTCollection
from helpers import build_font

from font_enumeration.domain import RawFontDescriptor


@pytest.fixture
def font_path(tmp_path: Path) -> Path:
    """A regular weight TrueType font on disk."""
    path = tmp_path / "TestSans-Regular.ttf"
    build_font().save(str(path))
    return path


@pytest.fixture
def bold_italic_path(tmp_path: Path) -> Path:
    """A bold italic, condensed TrueType font on disk."""
    path = tmp_path / "TestSans-BoldItalic.ttf"
    build_font(style_name="Bold Italic", weight=700, width=3, fs_selection=0x01).save(str(path))
    return path


@pytest.fixture
def collection_path(tmp_path: Path) -> Path:
    """A TTC holding a regular and a bold face."""
    path = tmp_path / "TestSans.ttc"
    collection = TTCollection()
    collection.fonts = [
        build_font(features=False),
        build_font(style_name="Bold", weight=700, features=False),
    ]
    collection.save(str(path))
    return path


@pytest.fixture
def make_backend() -> Callable[[list[RawFontDescriptor]], Callable[[], list[RawFontDescriptor]]]:
    """Factory for fake backends returning fixed descriptors."""

    def factory(descriptors: list[RawFontDescriptor]) -> Callable[[], list[RawFontDescriptor]]:
        def backend() -> list[RawFontDescriptor]:
            return list(descriptors)

        backend.name = "fake"  # type: ignore[attr-defined]
        return backend

    return factory


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging after each test."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_font_enumeration_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
