"""font-enumeration - List installed system fonts through one data model.

The library asks the host platform's font service (fontconfig, Core Text or
DirectWrite) for every installed font face and normalizes each platform's
native style, weight and stretch encoding onto one canonical scale.

Example:
    >>> from font_enumeration import Collection
    >>> collection = Collection.new()
    >>> for font in collection.by_family("DejaVu Sans"):
    ...     print(font.font_name, font.weight, font.path)

The ``font-info`` command-line tool built on top of the collection prints
metrics of the fonts it finds.
"""

from font_enumeration.core.collection import Collection, FontSequence
from font_enumeration.domain import (
    FontView,
    OwnedFont,
    RawFontDescriptor,
    Stretch,
    Style,
    StyleKind,
    Weight,
)
from font_enumeration.exceptions import (
    CollectionBorrowedError,
    CollectionConsumedError,
    FontEnumerationError,
    SystemCollectionUnavailable,
)

__version__ = "0.1.0"

__all__ = [
    "Collection",
    "CollectionBorrowedError",
    "CollectionConsumedError",
    "FontEnumerationError",
    "FontSequence",
    "FontView",
    "OwnedFont",
    "RawFontDescriptor",
    "Stretch",
    "Style",
    "StyleKind",
    "SystemCollectionUnavailable",
    "Weight",
    "__version__",
]
