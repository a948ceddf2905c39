"""DirectWrite-scale backend (Windows).

Walks the font files registered with Windows and reads each face's OS/2
weight class, width class and fsSelection with fontTools. These are the
values DirectWrite itself reports as DWRITE_FONT_WEIGHT,
DWRITE_FONT_STRETCH and DWRITE_FONT_STYLE.
"""

import os
from pathlib import Path

import structlog

from font_enumeration.domain.font import Platform, RawFontDescriptor
from font_enumeration.exceptions import SystemCollectionUnavailable
from font_enumeration.io.metrics import face_names, native_attributes
from font_enumeration.io.reader import FontReader

# Optional Windows dependency
try:
    import winreg
except ImportError:
    winreg = None

FONTS_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion\Fonts"
FONT_EXTENSIONS = {".ttf", ".otf", ".ttc", ".otc"}


def _windows_fonts_dir() -> Path:
    return Path(os.environ.get("WINDIR", "C:\\Windows")) / "Fonts"


class DirectWriteBackend:
    """Enumerates fonts registered with Windows."""

    name = Platform.DIRECT_WRITE.value

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    def registered_font_files(self) -> list[Path]:
        """Font file paths from the machine and per-user font registry keys.

        Raises:
            SystemCollectionUnavailable: If the registry cannot be read
        """
        if winreg is None:
            raise SystemCollectionUnavailable(self.name, "Windows registry not available")

        try:
            machine_key = winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, FONTS_KEY)
        except OSError as e:
            raise SystemCollectionUnavailable(self.name, f"cannot open font registry: {e}") from e

        keys = [machine_key]
        try:
            keys.append(winreg.OpenKey(winreg.HKEY_CURRENT_USER, FONTS_KEY))
        except OSError:
            self._logger.debug("No per-user font registry key")

        paths = []
        for key in keys:
            with key:
                index = 0
                while True:
                    try:
                        _value_name, value_data, _ = winreg.EnumValue(key, index)
                    except OSError:
                        break
                    index += 1

                    font_path = Path(str(value_data))
                    if not font_path.is_absolute():
                        font_path = _windows_fonts_dir() / font_path
                    if font_path.suffix.lower() in FONT_EXTENSIONS:
                        paths.append(font_path)
        return paths

    def read_font_file(self, font_path: Path) -> list[RawFontDescriptor]:
        """Describe every face in one font file.

        Unreadable files are logged and produce no descriptors.
        """
        descriptors = []
        try:
            with FontReader.from_path(font_path) as reader:
                for _index, face in reader.iter_faces():
                    family, full_name = face_names(face)
                    style, weight, stretch = native_attributes(face)
                    descriptors.append(
                        RawFontDescriptor(
                            family_name=family,
                            font_name=full_name,
                            path=font_path,
                            platform=Platform.DIRECT_WRITE,
                            slant=style,
                            weight=weight,
                            width=stretch,
                        )
                    )
        except Exception as e:
            self._logger.debug("Skipping unreadable font", path=str(font_path), error=str(e))
            return []
        return descriptors

    def __call__(self) -> list[RawFontDescriptor]:
        """List installed fonts.

        Raises:
            SystemCollectionUnavailable: If the registry cannot be read
        """
        descriptors = []
        for font_path in self.registered_font_files():
            descriptors.extend(self.read_font_file(font_path))

        self._logger.debug("Registered fonts read", fonts=len(descriptors))
        return descriptors
