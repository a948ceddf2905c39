"""Face attribute and metric extraction.

Converts fontTools table data of a single face into plain domain values
for the font-info tool. All metrics are in font design units.
"""

from dataclasses import asdict, dataclass
from typing import Any

from fontTools.ttLib import TTFont

from font_enumeration.core.converters import (
    DWRITE_FONT_STRETCH_NORMAL,
    DWRITE_FONT_STYLE_ITALIC,
    DWRITE_FONT_STYLE_NORMAL,
    DWRITE_FONT_STYLE_OBLIQUE,
    DWRITE_FONT_WEIGHT_NORMAL,
    stretch_from_direct_write,
    style_from_direct_write,
    weight_from_direct_write,
)
from font_enumeration.domain.attributes import Stretch, Style, Weight

# OS/2 fsSelection bits
FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_USE_TYPO_METRICS = 1 << 7
FS_SELECTION_OBLIQUE = 1 << 9

FEATURE_ACTIONS = {"GSUB": "substitution", "GPOS": "adjustment"}
ATTACHMENT_ACTION = "attachment"

# Cursive, mark-to-base, mark-to-ligature and mark-to-mark
GPOS_ATTACHMENT_LOOKUPS = {3, 4, 5, 6}
GPOS_EXTENSION_LOOKUP = 9
DEFAULT_LANGUAGE = "dflt"


@dataclass(frozen=True)
class FaceAttributes:
    """OS/2 attributes of a face, as DirectWrite would report them."""

    weight: Weight
    style: Style
    stretch: Stretch


@dataclass(frozen=True)
class FontMetrics:
    """Global metrics of a face."""

    glyph_count: int
    units_per_em: int
    average_advance: float
    ascent: float
    descent: float
    leading: float
    line_height: float
    cap_height: float
    x_height: float
    stroke_size: float
    underline_offset: float
    strikeout_offset: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys."""
        return {_camel_case(key): value for key, value in asdict(self).items()}


@dataclass(frozen=True)
class Feature:
    """An OpenType layout feature and the kind of table it lives in."""

    tag: str
    action: str


@dataclass(frozen=True)
class WritingSystem:
    """A script/language system pair a face has layout rules for."""

    script: str
    language: str

    def __str__(self) -> str:
        return f"{self.script}:{self.language}"


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _os2(face: TTFont) -> Any | None:
    return face["OS/2"] if "OS/2" in face else None


def native_style(fs_selection: int) -> int:
    """DWRITE_FONT_STYLE for an OS/2 fsSelection value."""
    if fs_selection & FS_SELECTION_OBLIQUE:
        return DWRITE_FONT_STYLE_OBLIQUE
    if fs_selection & FS_SELECTION_ITALIC:
        return DWRITE_FONT_STYLE_ITALIC
    return DWRITE_FONT_STYLE_NORMAL


def native_attributes(face: TTFont) -> tuple[int, int, int]:
    """Return (style, weight, stretch) on the DirectWrite scale.

    Faces without an OS/2 table get the DirectWrite defaults.
    """
    os2 = _os2(face)
    if os2 is None:
        return DWRITE_FONT_STYLE_NORMAL, DWRITE_FONT_WEIGHT_NORMAL, DWRITE_FONT_STRETCH_NORMAL
    return (
        native_style(os2.fsSelection),
        os2.usWeightClass,
        os2.usWidthClass or DWRITE_FONT_STRETCH_NORMAL,
    )


def face_attributes(face: TTFont) -> FaceAttributes:
    """Canonical weight, style and stretch of a face."""
    style, weight, stretch = native_attributes(face)
    return FaceAttributes(
        weight=weight_from_direct_write(weight),
        style=style_from_direct_write(style),
        stretch=stretch_from_direct_write(stretch),
    )


def face_names(face: TTFont) -> tuple[str, str]:
    """Return (family name, full name) from the name table.

    The full name is name ID 4, falling back to getBestFullName() when the
    record is missing.
    """
    if "name" not in face:
        return "", ""
    name_table = face["name"]
    full_name = name_table.getDebugName(4) or name_table.getBestFullName()
    return name_table.getBestFamilyName() or "", full_name or ""


def extract_metrics(face: TTFont) -> FontMetrics:
    """Read global metrics of a face.

    Ascent, descent and leading come from the OS/2 typographic values when
    USE_TYPO_METRICS is set, otherwise from hhea. Descent is positive.
    """
    os2 = _os2(face)
    hhea = face["hhea"] if "hhea" in face else None

    if os2 is not None and os2.fsSelection & FS_SELECTION_USE_TYPO_METRICS:
        ascent = float(os2.sTypoAscender)
        descent = float(-os2.sTypoDescender)
        leading = float(os2.sTypoLineGap)
    elif hhea is not None:
        ascent = float(hhea.ascent)
        descent = float(-hhea.descent)
        leading = float(hhea.lineGap)
    else:
        ascent = descent = leading = 0.0

    post = face["post"] if "post" in face else None

    return FontMetrics(
        glyph_count=face["maxp"].numGlyphs,
        units_per_em=face["head"].unitsPerEm,
        average_advance=float(os2.xAvgCharWidth) if os2 is not None else 0.0,
        ascent=ascent,
        descent=descent,
        leading=leading,
        line_height=ascent + descent,
        cap_height=float(getattr(os2, "sCapHeight", 0) or 0),
        x_height=float(getattr(os2, "sxHeight", 0) or 0),
        stroke_size=float(post.underlineThickness) if post is not None else 0.0,
        underline_offset=float(post.underlinePosition) if post is not None else 0.0,
        strikeout_offset=float(os2.yStrikeoutPosition) if os2 is not None else 0.0,
    )


def _gpos_action(table: Any, record: Any) -> str:
    """Action of a GPOS feature: attachment if any lookup anchors glyphs."""
    lookups = table.LookupList.Lookup if table.LookupList is not None else []
    for index in record.Feature.LookupListIndex:
        if index >= len(lookups):
            continue
        lookup = lookups[index]
        lookup_type = lookup.LookupType
        if lookup_type == GPOS_EXTENSION_LOOKUP and lookup.SubTable:
            lookup_type = lookup.SubTable[0].ExtensionLookupType
        if lookup_type in GPOS_ATTACHMENT_LOOKUPS:
            return ATTACHMENT_ACTION
    return FEATURE_ACTIONS["GPOS"]


def extract_features(face: TTFont) -> list[Feature]:
    """List layout features in GSUB then GPOS order, without repeats.

    GPOS features using cursive or mark lookups are attachments, all other
    GPOS features are adjustments.
    """
    features: list[Feature] = []
    seen: set[Feature] = set()
    for table_tag, action in FEATURE_ACTIONS.items():
        if table_tag not in face:
            continue
        table = face[table_tag].table
        if table.FeatureList is None:
            continue
        for record in table.FeatureList.FeatureRecord:
            if table_tag == "GPOS":
                action = _gpos_action(table, record)
            feature = Feature(tag=record.FeatureTag.strip(), action=action)
            if feature not in seen:
                seen.add(feature)
                features.append(feature)
    return features


def extract_writing_systems(face: TTFont) -> list[WritingSystem]:
    """List script/language pairs from the GSUB and GPOS script lists.

    Tags are reported without their trailing space padding.
    """
    systems: list[WritingSystem] = []
    seen: set[WritingSystem] = set()

    def add(system: WritingSystem) -> None:
        if system not in seen:
            seen.add(system)
            systems.append(system)

    for table_tag in FEATURE_ACTIONS:
        if table_tag not in face:
            continue
        script_list = face[table_tag].table.ScriptList
        if script_list is None:
            continue
        for script_record in script_list.ScriptRecord:
            script = script_record.ScriptTag.strip()
            if script_record.Script.DefaultLangSys is not None:
                add(WritingSystem(script=script, language=DEFAULT_LANGUAGE))
            for lang_record in script_record.Script.LangSysRecord:
                add(WritingSystem(script=script, language=lang_record.LangSysTag.strip()))
    return systems
