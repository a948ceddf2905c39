"""Font records.

A font record combines identity (family, name, path) with canonical
attributes. Three shapes exist:

- RawFontDescriptor: What a backend reports, in platform-native units
- OwnedFont: A record independent of any collection
- FontView: A borrowed view onto a record stored in a live Collection
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from font_enumeration.domain.attributes import Stretch, Style, Weight


class Platform(str, Enum):
    """Native font service a descriptor came from."""

    FONTCONFIG = "fontconfig"
    CORE_TEXT = "core_text"
    DIRECT_WRITE = "direct_write"


@dataclass(frozen=True, slots=True)
class RawFontDescriptor:
    """A native font descriptor before normalization.

    Missing native attributes must already be replaced by the platform's
    defaults; converters never see an absent value.

    Attributes:
        family_name: Family name as reported by the platform
        font_name: Full font name (may be empty)
        path: Absolute path of the font file
        platform: Which native scale slant/weight/width are expressed in
        slant: Native slant (FC_SLANT, Core Text slant trait, DWRITE_FONT_STYLE)
        weight: Native weight (FC_WEIGHT, Core Text weight trait, DWRITE_FONT_WEIGHT)
        width: Native width (FC_WIDTH, Core Text width trait, DWRITE_FONT_STRETCH)
        italic: Core Text italic symbolic trait
        vertical: Core Text vertical symbolic trait
    """

    family_name: str
    font_name: str
    path: Path
    platform: Platform
    slant: float
    weight: float
    width: float
    italic: bool = False
    vertical: bool = False


FIELD_NAMES = ("family_name", "font_name", "path", "style", "weight", "stretch")


def _fields(font: Any) -> tuple[Any, ...]:
    return tuple(getattr(font, name) for name in FIELD_NAMES)


@dataclass(frozen=True, slots=True)
class OwnedFont:
    """A font record that owns its data.

    Attributes:
        family_name: Family name
        font_name: Full font name
        path: Path of the font file
        style: Canonical style
        weight: Canonical weight
        stretch: Canonical stretch
    """

    family_name: str
    font_name: str
    path: Path
    style: Style
    weight: Weight
    stretch: Stretch

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (OwnedFont, FontView)):
            return _fields(self) == _fields(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(_fields(self))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary.

        Returns:
            Dictionary with the six record fields
        """
        return {
            "familyName": self.family_name,
            "fontName": self.font_name,
            "path": str(self.path),
            "style": str(self.style),
            "weight": self.weight.value,
            "stretch": self.stretch.value,
        }


class FontView:
    """Borrowed, read-only view of a font stored in a Collection.

    Views are created by Collection.all() and Collection.by_family(). While
    any view is alive its collection refuses take().
    """

    __slots__ = ("_owner", "_font", "__weakref__")

    def __init__(self, owner: object, font: OwnedFont) -> None:
        self._owner = owner
        self._font = font

    @property
    def family_name(self) -> str:
        return self._font.family_name

    @property
    def font_name(self) -> str:
        return self._font.font_name

    @property
    def path(self) -> Path:
        return self._font.path

    @property
    def style(self) -> Style:
        return self._font.style

    @property
    def weight(self) -> Weight:
        return self._font.weight

    @property
    def stretch(self) -> Stretch:
        return self._font.stretch

    def to_owned(self) -> OwnedFont:
        """Copy the viewed record out of the collection."""
        return OwnedFont(*_fields(self._font))

    def to_dict(self) -> dict[str, Any]:
        return self._font.to_dict()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (OwnedFont, FontView)):
            return _fields(self) == _fields(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(_fields(self))

    def __repr__(self) -> str:
        return (
            f"FontView(family_name={self.family_name!r}, font_name={self.font_name!r}, "
            f"path={self.path!r}, style={self.style!r}, weight={self.weight!r}, "
            f"stretch={self.stretch!r})"
        )
