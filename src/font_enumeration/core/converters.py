"""Native attribute converters.

Each platform font service encodes slant, weight and width on its own
scale. The functions here map those native values onto the canonical
Style, Weight and Stretch types. All converters are total: any input,
including out-of-range values, produces a result.

Platforms:
- fontconfig: FC_SLANT / FC_WEIGHT / FC_WIDTH integers
- Core Text: float traits in -1.0..1.0 plus symbolic trait flags
- DirectWrite: DWRITE_FONT_STYLE / DWRITE_FONT_WEIGHT / DWRITE_FONT_STRETCH
"""

from font_enumeration.core.interpolation import WeightTable
from font_enumeration.domain.attributes import STRETCH_STEPS, Stretch, Style, Weight
from font_enumeration.domain.font import OwnedFont, Platform, RawFontDescriptor

# fontconfig constants (fontconfig.h)
FC_SLANT_ROMAN = 0
FC_SLANT_ITALIC = 100
FC_SLANT_OBLIQUE = 110

FC_WEIGHT_THIN = 0
FC_WEIGHT_EXTRALIGHT = 40
FC_WEIGHT_LIGHT = 50
FC_WEIGHT_BOOK = 75
FC_WEIGHT_REGULAR = 80
FC_WEIGHT_MEDIUM = 100
FC_WEIGHT_DEMIBOLD = 180
FC_WEIGHT_BOLD = 200
FC_WEIGHT_EXTRABOLD = 205
FC_WEIGHT_BLACK = 210
FC_WEIGHT_EXTRABLACK = 215

FC_WIDTH_NORMAL = 100

FONTCONFIG_WEIGHTS = WeightTable(
    entries=(
        (FC_WEIGHT_THIN, Weight.THIN),
        (FC_WEIGHT_EXTRALIGHT, Weight.EXTRA_LIGHT),
        (FC_WEIGHT_LIGHT, Weight.LIGHT),
        (FC_WEIGHT_BOOK, Weight.SEMI_LIGHT),
        (FC_WEIGHT_REGULAR, Weight.NORMAL),
        (FC_WEIGHT_MEDIUM, Weight.MEDIUM),
        (FC_WEIGHT_DEMIBOLD, Weight.SEMI_BOLD),
        (FC_WEIGHT_BOLD, Weight.BOLD),
        (FC_WEIGHT_EXTRABOLD, Weight.EXTRA_BOLD),
        (FC_WEIGHT_BLACK, Weight.BLACK),
        (FC_WEIGHT_EXTRABLACK, Weight.EXTRA_BLACK),
    ),
    floor=Weight.THIN,
    ceiling=Weight.EXTRA_BLACK,
)

# fontconfig rounds these widths from 62.5%, 87.5% and 112.5%
FC_WIDTH_SNAPS: dict[int, Stretch] = {
    63: Stretch.EXTRA_CONDENSED,
    87: Stretch.SEMI_CONDENSED,
    113: Stretch.SEMI_EXPANDED,
}


def style_from_fontconfig(slant: int) -> Style:
    """Convert an FC_SLANT value."""
    if slant == FC_SLANT_ITALIC:
        return Style.ITALIC
    if slant == FC_SLANT_OBLIQUE:
        return Style.oblique()
    return Style.NORMAL


def weight_from_fontconfig(weight: int) -> Weight:
    """Convert an FC_WEIGHT value.

    Anything heavier than FC_WEIGHT_EXTRABLACK saturates at EXTRA_BLACK.
    """
    return FONTCONFIG_WEIGHTS.lookup(weight)


def stretch_from_fontconfig(width: int) -> Stretch:
    """Convert an FC_WIDTH percentage."""
    snapped = FC_WIDTH_SNAPS.get(width)
    if snapped is not None:
        return snapped
    return Stretch.new(width / 100.0)


# Core Text (CTFontTraits.h)
CT_ITALIC_TRAIT = 1 << 0
CT_VERTICAL_TRAIT = 1 << 11

# A slant trait of 1.0 is a 30 degree clockwise slant
CT_SLANT_DEGREES = 30.0
CT_TOLERANCE = 1e-5

# Ceiling is BLACK, not the table's last entry
CORE_TEXT_WEIGHTS = WeightTable(
    entries=(
        (-0.8, Weight.THIN),
        (-0.6, Weight.EXTRA_LIGHT),
        (-0.4, Weight.LIGHT),
        (0.0, Weight.NORMAL),
        (0.23, Weight.MEDIUM),
        (0.3, Weight.SEMI_BOLD),
        (0.4, Weight.BOLD),
        (0.56, Weight.EXTRA_BOLD),
        (0.62, Weight.BLACK),
        (1.0, Weight.EXTRA_BLACK),
    ),
    floor=Weight.THIN,
    ceiling=Weight.BLACK,
    tolerance=CT_TOLERANCE,
)


def style_from_core_text(slant: float, italic: bool = False, vertical: bool = False) -> Style:
    """Convert Core Text slant and symbolic traits.

    Vertical fonts are always upright in this model.

    Args:
        slant: kCTFontSlantTrait, -1.0..1.0
        italic: kCTFontItalicTrait is set
        vertical: kCTFontVerticalTrait is set

    Returns:
        Canonical style
    """
    if vertical:
        return Style.NORMAL
    if italic:
        return Style.ITALIC
    if abs(slant) > CT_TOLERANCE:
        return Style.oblique(slant * CT_SLANT_DEGREES)
    return Style.NORMAL


def weight_from_core_text(weight: float) -> Weight:
    """Convert a kCTFontWeightTrait value."""
    return CORE_TEXT_WEIGHTS.lookup(weight)


def stretch_from_core_text(width: float) -> Stretch:
    """Convert a kCTFontWidthTrait value.

    -1.0 maps to ULTRA_CONDENSED, 0.0 to NORMAL and 1.0 to ULTRA_EXPANDED,
    linearly on each side of zero.
    """
    width = min(max(width, -1.0), 1.0)
    if width < 0.0:
        return Stretch.new(1.0 + width * 0.5)
    return Stretch.new(1.0 + width)


# DirectWrite (dwrite.h)
DWRITE_FONT_STYLE_NORMAL = 0
DWRITE_FONT_STYLE_OBLIQUE = 1
DWRITE_FONT_STYLE_ITALIC = 2

DWRITE_FONT_WEIGHT_NORMAL = 400
DWRITE_FONT_STRETCH_NORMAL = 5

DIRECT_WRITE_WEIGHTS = WeightTable(
    entries=(
        (1, Weight.new(1)),
        (100, Weight.THIN),
        (200, Weight.EXTRA_LIGHT),
        (300, Weight.LIGHT),
        (350, Weight.SEMI_LIGHT),
        (400, Weight.NORMAL),
        (500, Weight.MEDIUM),
        (600, Weight.SEMI_BOLD),
        (700, Weight.BOLD),
        (800, Weight.EXTRA_BOLD),
        (900, Weight.BLACK),
        (950, Weight.EXTRA_BLACK),
        (999, Weight.new(999)),
    ),
    floor=Weight.new(1),
    ceiling=Weight.new(999),
)


def style_from_direct_write(style: int) -> Style:
    """Convert a DWRITE_FONT_STYLE value."""
    if style == DWRITE_FONT_STYLE_ITALIC:
        return Style.ITALIC
    if style == DWRITE_FONT_STYLE_OBLIQUE:
        return Style.oblique()
    return Style.NORMAL


def weight_from_direct_write(weight: int) -> Weight:
    """Convert a DWRITE_FONT_WEIGHT value."""
    return DIRECT_WRITE_WEIGHTS.lookup(weight)


def stretch_from_direct_write(stretch: int) -> Stretch:
    """Convert a DWRITE_FONT_STRETCH code (1..9, clamped)."""
    code = min(max(int(stretch), 1), len(STRETCH_STEPS))
    return STRETCH_STEPS[code - 1]


def convert_descriptor(raw: RawFontDescriptor) -> OwnedFont:
    """Normalize a backend descriptor into a font record.

    Args:
        raw: Descriptor with native attribute values

    Returns:
        OwnedFont with canonical style, weight and stretch
    """
    if raw.platform is Platform.FONTCONFIG:
        style = style_from_fontconfig(int(raw.slant))
        weight = weight_from_fontconfig(int(raw.weight))
        stretch = stretch_from_fontconfig(int(raw.width))
    elif raw.platform is Platform.CORE_TEXT:
        style = style_from_core_text(raw.slant, italic=raw.italic, vertical=raw.vertical)
        weight = weight_from_core_text(raw.weight)
        stretch = stretch_from_core_text(raw.width)
    else:
        style = style_from_direct_write(int(raw.slant))
        weight = weight_from_direct_write(int(raw.weight))
        stretch = stretch_from_direct_write(int(raw.width))

    return OwnedFont(
        family_name=raw.family_name,
        font_name=raw.font_name,
        path=raw.path,
        style=style,
        weight=weight,
        stretch=stretch,
    )
