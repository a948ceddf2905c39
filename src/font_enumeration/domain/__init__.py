"""Domain models for font-enumeration.

This module contains the platform-neutral models describing installed
fonts. All value types are immutable (frozen dataclasses) and independent
of any platform font service.

Key classes:
- Style, Weight, Stretch: Canonical font attributes
- RawFontDescriptor: A backend's native record, before normalization
- OwnedFont: A normalized record independent of any collection
- FontView: A borrowed view of a record stored in a Collection
"""

from font_enumeration.domain.attributes import STRETCH_STEPS, Stretch, Style, StyleKind, Weight
from font_enumeration.domain.font import FontView, OwnedFont, Platform, RawFontDescriptor

__all__: list[str] = [
    # Enums
    "Platform",
    "StyleKind",
    # Attribute types
    "Style",
    "Weight",
    "Stretch",
    "STRETCH_STEPS",
    # Records
    "RawFontDescriptor",
    "OwnedFont",
    "FontView",
]
