"""Core Text backend (macOS).

Reads every available font descriptor through the pyobjc CoreText
bindings and reports Core Text's native float traits.
"""

from pathlib import Path
from typing import Any

import structlog

from font_enumeration.core.converters import CT_ITALIC_TRAIT, CT_VERTICAL_TRAIT
from font_enumeration.domain.font import Platform, RawFontDescriptor
from font_enumeration.exceptions import SystemCollectionUnavailable


def descriptor_from_attributes(
    family: str | None,
    name: str | None,
    path: str | None,
    traits: dict[str, Any] | None,
    keys: dict[str, str],
) -> RawFontDescriptor | None:
    """Build a descriptor from Core Text attribute values.

    Args:
        family: kCTFontFamilyNameAttribute
        name: kCTFontDisplayNameAttribute (or kCTFontNameAttribute)
        path: Filesystem path of kCTFontURLAttribute
        traits: kCTFontTraitsAttribute dictionary
        keys: Trait key names: "weight", "slant", "width", "symbolic"

    Returns:
        Descriptor, or None if the font has no file
    """
    if not path:
        return None

    traits = traits or {}
    symbolic = int(traits.get(keys["symbolic"], 0) or 0)

    return RawFontDescriptor(
        family_name=str(family or ""),
        font_name=str(name or ""),
        path=Path(path),
        platform=Platform.CORE_TEXT,
        slant=float(traits.get(keys["slant"], 0.0) or 0.0),
        weight=float(traits.get(keys["weight"], 0.0) or 0.0),
        width=float(traits.get(keys["width"], 0.0) or 0.0),
        italic=bool(symbolic & CT_ITALIC_TRAIT),
        vertical=bool(symbolic & CT_VERTICAL_TRAIT),
    )


class CoreTextBackend:
    """Enumerates fonts through Core Text."""

    name = Platform.CORE_TEXT.value

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    def __call__(self) -> list[RawFontDescriptor]:
        """List installed fonts.

        Raises:
            SystemCollectionUnavailable: If Core Text cannot be used
        """
        try:
            import CoreText
        except ImportError as e:
            raise SystemCollectionUnavailable(self.name, f"CoreText bindings unavailable: {e}") from e

        collection = CoreText.CTFontCollectionCreateFromAvailableFonts(None)
        font_descriptors = (
            CoreText.CTFontCollectionCreateMatchingFontDescriptors(collection)
            if collection is not None
            else None
        )
        if font_descriptors is None:
            raise SystemCollectionUnavailable(self.name, "no font descriptors returned")

        keys = {
            "weight": CoreText.kCTFontWeightTrait,
            "slant": CoreText.kCTFontSlantTrait,
            "width": CoreText.kCTFontWidthTrait,
            "symbolic": CoreText.kCTFontSymbolicTrait,
        }

        def attribute(font: Any, key: Any) -> Any:
            return CoreText.CTFontDescriptorCopyAttribute(font, key)

        descriptors = []
        skipped = 0
        for font in font_descriptors:
            url = attribute(font, CoreText.kCTFontURLAttribute)
            name = attribute(font, CoreText.kCTFontDisplayNameAttribute) or attribute(
                font, CoreText.kCTFontNameAttribute
            )
            descriptor = descriptor_from_attributes(
                family=attribute(font, CoreText.kCTFontFamilyNameAttribute),
                name=name,
                path=str(url.path()) if url is not None else None,
                traits=attribute(font, CoreText.kCTFontTraitsAttribute),
                keys=keys,
            )
            if descriptor is None:
                skipped += 1
                continue
            descriptors.append(descriptor)

        self._logger.debug("Core Text descriptors read", fonts=len(descriptors), skipped=skipped)
        return descriptors
