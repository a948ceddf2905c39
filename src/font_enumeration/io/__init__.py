"""Font file I/O layer for font-enumeration.

This module handles parsing font files using fonttools. It is used by the
DirectWrite-scale backend and by the font-info tool; the core collection
never parses font files.

Key responsibilities:
- Load single fonts and TTC/OTC collections from files or stdin
- Read OS/2 attributes on the DirectWrite scale
- Extract global metrics, layout features and writing systems

Key classes:
- FontReader: Load font data and iterate its faces
- FontMetrics: Global metrics of one face
"""

from font_enumeration.io.metrics import (
    FaceAttributes,
    Feature,
    FontMetrics,
    WritingSystem,
    extract_features,
    extract_metrics,
    extract_writing_systems,
    face_attributes,
    face_names,
    native_attributes,
)
from font_enumeration.io.reader import FontReader

__all__ = [
    "FaceAttributes",
    "Feature",
    "FontMetrics",
    "FontReader",
    "WritingSystem",
    "extract_features",
    "extract_metrics",
    "extract_writing_systems",
    "face_attributes",
    "face_names",
    "native_attributes",
]
