"""Canonical font attribute types.

This module defines the platform-neutral value types that every backend's
native attributes are normalized into:
- Style: Upright, italic or oblique (with an optional angle)
- Weight: Weight class on the CSS/OpenType 1-1000 scale
- Stretch: Character width as a factor of normal
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class StyleKind(str, Enum):
    """Variant tag of a Style."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


@dataclass(frozen=True, slots=True)
class Style:
    """Style of a font.

    Exactly one variant is active. Use the ``NORMAL`` and ``ITALIC``
    constants or ``Style.oblique()`` rather than the constructor.

    Attributes:
        kind: Which variant this style is
        angle: Slant angle in degrees, only set for obliques whose angle
            the platform reports
    """

    kind: StyleKind
    angle: float | None = None

    NORMAL: ClassVar["Style"]
    ITALIC: ClassVar["Style"]

    def __post_init__(self) -> None:
        if self.kind is not StyleKind.OBLIQUE and self.angle is not None:
            raise ValueError(f"Only oblique styles carry an angle, got {self.kind.value}")

    @classmethod
    def oblique(cls, angle: float | None = None) -> "Style":
        """Create an oblique style.

        Args:
            angle: Slant in degrees, or None when the platform does not say

        Returns:
            Oblique Style
        """
        return cls(StyleKind.OBLIQUE, angle)

    @property
    def is_oblique(self) -> bool:
        return self.kind is StyleKind.OBLIQUE

    def __str__(self) -> str:
        if self.kind is StyleKind.OBLIQUE and self.angle is not None:
            return f"oblique {self.angle:g}deg"
        return self.kind.value


Style.NORMAL = Style(StyleKind.NORMAL)
Style.ITALIC = Style(StyleKind.ITALIC)


@dataclass(frozen=True, slots=True, order=True)
class Weight:
    """Weight class of a font, usually from 1 to 1000.

    No range is enforced and equality is exact.

    Attributes:
        value: The corresponding CSS font-weight value
    """

    value: float

    THIN: ClassVar["Weight"]
    EXTRA_LIGHT: ClassVar["Weight"]
    LIGHT: ClassVar["Weight"]
    SEMI_LIGHT: ClassVar["Weight"]
    NORMAL: ClassVar["Weight"]
    MEDIUM: ClassVar["Weight"]
    SEMI_BOLD: ClassVar["Weight"]
    BOLD: ClassVar["Weight"]
    EXTRA_BOLD: ClassVar["Weight"]
    BLACK: ClassVar["Weight"]
    EXTRA_BLACK: ClassVar["Weight"]

    @classmethod
    def new(cls, value: float) -> "Weight":
        """Create the weight corresponding to the given CSS value."""
        return cls(float(value))

    def __str__(self) -> str:
        return f"{self.value:g}"


Weight.THIN = Weight(100.0)
Weight.EXTRA_LIGHT = Weight(200.0)
Weight.LIGHT = Weight(300.0)
Weight.SEMI_LIGHT = Weight(350.0)
Weight.NORMAL = Weight(400.0)
Weight.MEDIUM = Weight(500.0)
Weight.SEMI_BOLD = Weight(600.0)
Weight.BOLD = Weight(700.0)
Weight.EXTRA_BOLD = Weight(800.0)
Weight.BLACK = Weight(900.0)
Weight.EXTRA_BLACK = Weight(950.0)


@dataclass(frozen=True, slots=True, order=True)
class Stretch:
    """Stretch of a font as a factor of normal width.

    1.0 is normal, less than 1.0 is condensed, more than 1.0 is expanded.

    Attributes:
        value: Character width relative to the normal design
    """

    value: float

    ULTRA_CONDENSED: ClassVar["Stretch"]
    EXTRA_CONDENSED: ClassVar["Stretch"]
    CONDENSED: ClassVar["Stretch"]
    SEMI_CONDENSED: ClassVar["Stretch"]
    NORMAL: ClassVar["Stretch"]
    SEMI_EXPANDED: ClassVar["Stretch"]
    EXPANDED: ClassVar["Stretch"]
    EXTRA_EXPANDED: ClassVar["Stretch"]
    ULTRA_EXPANDED: ClassVar["Stretch"]

    @classmethod
    def new(cls, value: float) -> "Stretch":
        """Create the specified stretch as a factor of normal."""
        return cls(float(value))

    def __str__(self) -> str:
        return f"{self.value:.2f}"


Stretch.ULTRA_CONDENSED = Stretch(0.5)
Stretch.EXTRA_CONDENSED = Stretch(0.625)
Stretch.CONDENSED = Stretch(0.75)
Stretch.SEMI_CONDENSED = Stretch(0.875)
Stretch.NORMAL = Stretch(1.0)
Stretch.SEMI_EXPANDED = Stretch(1.125)
Stretch.EXPANDED = Stretch(1.25)
Stretch.EXTRA_EXPANDED = Stretch(1.5)
Stretch.ULTRA_EXPANDED = Stretch(2.0)

# Named stretches in OpenType usWidthClass order (1..9)
STRETCH_STEPS: tuple[Stretch, ...] = (
    Stretch.ULTRA_CONDENSED,
    Stretch.EXTRA_CONDENSED,
    Stretch.CONDENSED,
    Stretch.SEMI_CONDENSED,
    Stretch.NORMAL,
    Stretch.SEMI_EXPANDED,
    Stretch.EXPANDED,
    Stretch.EXTRA_EXPANDED,
    Stretch.ULTRA_EXPANDED,
)
