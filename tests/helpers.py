"""Font builders and descriptor factories shared by the tests."""

from io import BytesIO
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont

from font_enumeration.domain import Platform, RawFontDescriptor

GLYPH_ORDER = [".notdef", "A", "B"]

FEATURES = """
languagesystem DFLT dflt;
languagesystem latn dflt;
languagesystem latn TRK;

feature liga {
    sub A B by A;
} liga;

feature kern {
    pos A B -50;
} kern;
"""

MARK_FEATURES = """
markClass [B] <anchor 300 0> @TOP;

feature mark {
    pos base [A] <anchor 300 700> mark @TOP;
} mark;
"""


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def build_font(
    family: str = "Test Sans",
    style_name: str = "Regular",
    weight: int = 400,
    width: int = 5,
    fs_selection: int = 0x40,
    features: bool = True,
    extra_features: str = "",
) -> TTFont:
    """Build a three-glyph TrueType font.

    The font is compiled and read back so every table holds the values a
    font loaded from disk would.
    """
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap({0x41: "A", 0x42: "B"})
    fb.setupGlyf({name: _square_glyph() for name in GLYPH_ORDER})
    fb.setupHorizontalMetrics({name: (600, 100) for name in GLYPH_ORDER})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": style_name,
            "fullName": f"{family} {style_name}",
            "psName": f"{family.replace(' ', '')}-{style_name}",
        }
    )
    fb.setupOS2(
        sTypoAscender=750,
        sTypoDescender=-250,
        sTypoLineGap=100,
        usWinAscent=800,
        usWinDescent=200,
        usWeightClass=weight,
        usWidthClass=width,
        fsSelection=fs_selection,
        sCapHeight=700,
        sxHeight=500,
        yStrikeoutPosition=300,
        xAvgCharWidth=600,
    )
    fb.setupPost(underlinePosition=-100, underlineThickness=50)
    fb.setupMaxp()
    if features:
        fb.addOpenTypeFeatures(FEATURES + extra_features)
    buffer = BytesIO()
    fb.font.save(buffer)
    buffer.seek(0)
    return TTFont(buffer)


def fc_descriptor(
    family: str,
    name: str = "",
    path: str = "/usr/share/fonts/test.ttf",
    slant: int = 0,
    weight: int = 80,
    width: int = 100,
) -> RawFontDescriptor:
    """A fontconfig descriptor with fontconfig defaults."""
    return RawFontDescriptor(
        family_name=family,
        font_name=name or f"{family} Regular",
        path=Path(path),
        platform=Platform.FONTCONFIG,
        slant=slant,
        weight=weight,
        width=width,
    )
