"""Font reader for loading font faces from files and streams.

This module provides the FontReader class, which parses font data
(single fonts or TTC/OTC collections) into fontTools TTFont faces.
"""

from collections.abc import Iterator
from io import BytesIO
from pathlib import Path
from typing import BinaryIO

from fontTools.ttLib import TTCollection, TTFont

from font_enumeration.exceptions import FontLoadError

COLLECTION_TAG = b"ttcf"


class FontReader:
    """Loads font data and yields its faces.

    Example:
        with FontReader.from_path(Path("font.ttc")) as reader:
            for index, face in reader.iter_faces():
                print(index, face["head"].unitsPerEm)
    """

    def __init__(self, source: str, data: bytes) -> None:
        """Initialize the font reader.

        Args:
            source: Human-readable origin of the data (path or "stdin")
            data: Raw font file contents
        """
        self._source = source
        self._data = data
        self._faces: list[TTFont] | None = None

    @classmethod
    def from_path(cls, font_path: Path) -> "FontReader":
        """Read font data from a file.

        Raises:
            FontLoadError: If the file cannot be read
        """
        try:
            data = font_path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(font_path), e.strerror or str(e)) from e
        return cls(str(font_path), data)

    @classmethod
    def from_stream(cls, stream: BinaryIO, source: str = "stdin") -> "FontReader":
        """Read font data from a binary stream."""
        return cls(source, stream.read())

    @property
    def source(self) -> str:
        return self._source

    @property
    def is_collection(self) -> bool:
        """Whether the data is a TTC/OTC font collection."""
        return self._data[:4] == COLLECTION_TAG

    def load(self) -> None:
        """Parse the font data into faces.

        Raises:
            FontLoadError: If the data is not a font fontTools can read
        """
        if not self._data:
            raise FontLoadError(self._source, "no data")

        try:
            if self.is_collection:
                self._faces = list(TTCollection(BytesIO(self._data), lazy=True).fonts)
            else:
                self._faces = [TTFont(BytesIO(self._data), lazy=True)]
        except Exception as e:
            raise FontLoadError(self._source, str(e)) from e

    @property
    def face_count(self) -> int:
        """Return the number of faces in the data.

        Raises:
            RuntimeError: If the font has not been loaded yet
        """
        if self._faces is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return len(self._faces)

    def iter_faces(self) -> Iterator[tuple[int, TTFont]]:
        """Iterate over (face index, face) pairs in file order.

        Raises:
            RuntimeError: If the font has not been loaded yet
        """
        if self._faces is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        yield from enumerate(self._faces)

    def close(self) -> None:
        """Close all faces and free resources."""
        if self._faces is not None:
            for face in self._faces:
                face.close()
            self._faces = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
