"""Collection of installed fonts.

A Collection is an immutable snapshot of every font the platform font
service reported when it was created. Queries hand out borrowed FontView
objects; take() hands the records out as OwnedFont values and consumes
the collection.
"""

import itertools
import weakref
from collections.abc import Callable, Iterable, Iterator

import structlog

from font_enumeration.core.converters import convert_descriptor
from font_enumeration.core.matching import case_insensitive_match
from font_enumeration.domain.font import FontView, OwnedFont, RawFontDescriptor
from font_enumeration.exceptions import (
    CollectionBorrowedError,
    CollectionConsumedError,
    SystemCollectionUnavailable,
)

Backend = Callable[[], list[RawFontDescriptor]]


class FontSequence:
    """Lazy, restartable sequence of font views.

    Iterating walks the collection's storage each time, so the same
    sequence can be iterated any number of times.
    """

    def __init__(self, collection: "Collection", family_name: str | None = None) -> None:
        self._collection = collection
        self._family_name = family_name

    def _matching(self) -> Iterator[OwnedFont]:
        for font in self._collection._storage():
            if self._family_name is None or case_insensitive_match(
                font.family_name, self._family_name
            ):
                yield font

    def __iter__(self) -> Iterator[FontView]:
        for font in self._matching():
            yield self._collection._borrow(font)

    def __len__(self) -> int:
        return sum(1 for _ in self._matching())

    def __repr__(self) -> str:
        if self._family_name is None:
            return "FontSequence(all)"
        return f"FontSequence(family_name={self._family_name!r})"


class Collection:
    """Immutable snapshot of the system's fonts.

    Example:
        collection = Collection.new()
        for font in collection.by_family("DejaVu Sans"):
            print(font.path)
    """

    def __init__(self, fonts: Iterable[OwnedFont]) -> None:
        """Create a collection from already normalized records.

        Args:
            fonts: Records in enumeration order
        """
        self._fonts: tuple[OwnedFont, ...] | None = tuple(fonts)
        self._views: weakref.WeakValueDictionary[int, FontView] = weakref.WeakValueDictionary()
        self._view_ids = itertools.count()

    @classmethod
    def new(
        cls,
        backend: Backend | None = None,
        *,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> "Collection":
        """Enumerate the system's fonts.

        This blocks on the platform font service and has no timeout of its
        own.

        Args:
            backend: Callable producing raw descriptors (default: the
                backend for the current platform)
            logger: Logger for diagnostics (default: module logger)

        Returns:
            Collection of every reported font

        Raises:
            SystemCollectionUnavailable: If the font service cannot be initialized
        """
        log = logger if logger is not None else structlog.get_logger(__name__)

        try:
            if backend is None:
                from font_enumeration.backends import system_backend

                backend = system_backend()

            backend_name = getattr(backend, "name", type(backend).__name__)
            log.debug("Enumerating system fonts", backend=backend_name)
            descriptors = backend()
        except SystemCollectionUnavailable as e:
            log.error("System collection unavailable", backend=e.backend, reason=e.reason)
            raise

        fonts = tuple(convert_descriptor(raw) for raw in descriptors)
        log.info("System collection loaded", backend=backend_name, fonts=len(fonts))
        return cls(fonts)

    def _storage(self) -> tuple[OwnedFont, ...]:
        if self._fonts is None:
            raise CollectionConsumedError()
        return self._fonts

    def _borrow(self, font: OwnedFont) -> FontView:
        view = FontView(self, font)
        self._views[next(self._view_ids)] = view
        return view

    @property
    def live_views(self) -> int:
        """Number of FontView objects from this collection still alive."""
        return len(self._views)

    def all(self) -> FontSequence:
        """All fonts, in enumeration order."""
        self._storage()
        return FontSequence(self)

    def by_family(self, family_name: str) -> FontSequence:
        """Fonts whose family name matches, ignoring case.

        Args:
            family_name: Family name to look for

        Returns:
            Sequence of matching font views
        """
        self._storage()
        return FontSequence(self, family_name)

    def take(self) -> list[OwnedFont]:
        """Consume the collection and return its fonts as owned records.

        Returns:
            All records in enumeration order

        Raises:
            CollectionBorrowedError: If any FontView from this collection is alive
            CollectionConsumedError: If take() was already called
        """
        fonts = self._storage()
        live = self.live_views
        if live:
            raise CollectionBorrowedError(live)
        self._fonts = None
        return list(fonts)

    def __len__(self) -> int:
        return len(self._storage())

    def __repr__(self) -> str:
        if self._fonts is None:
            return "Collection(consumed)"
        return f"Collection(fonts={len(self._fonts)})"
