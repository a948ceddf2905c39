"""Core normalization and query layer.

This module contains the algorithmic heart of font-enumeration:
- Piecewise-linear weight interpolation (WeightTable)
- Per-platform attribute converters
- Ordinal case-insensitive family matching
- The immutable font Collection

Key classes:
- Collection: Snapshot of installed fonts with query operations
- FontSequence: Lazy, restartable sequence of borrowed font views
- WeightTable: Native-to-canonical weight lookup
"""

from font_enumeration.core.collection import Backend, Collection, FontSequence
from font_enumeration.core.converters import (
    convert_descriptor,
    stretch_from_core_text,
    stretch_from_direct_write,
    stretch_from_fontconfig,
    style_from_core_text,
    style_from_direct_write,
    style_from_fontconfig,
    weight_from_core_text,
    weight_from_direct_write,
    weight_from_fontconfig,
)
from font_enumeration.core.interpolation import WeightTable
from font_enumeration.core.matching import case_insensitive_match

__all__ = [
    # Collection
    "Backend",
    "Collection",
    "FontSequence",
    # Conversion
    "WeightTable",
    "convert_descriptor",
    "stretch_from_core_text",
    "stretch_from_direct_write",
    "stretch_from_fontconfig",
    "style_from_core_text",
    "style_from_direct_write",
    "style_from_fontconfig",
    "weight_from_core_text",
    "weight_from_direct_write",
    "weight_from_fontconfig",
    # Matching
    "case_insensitive_match",
]
