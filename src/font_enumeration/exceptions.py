"""Exception hierarchy for font-enumeration."""


class FontEnumerationError(Exception):
    """Base exception for all font-enumeration errors."""

    pass


class SystemCollectionUnavailable(FontEnumerationError):
    """The platform font service could not be reached or initialized."""

    def __init__(self, backend: str, reason: str) -> None:
        self.backend = backend
        self.reason = reason
        super().__init__(f"Could not initialize system collection ({backend}): {reason}")


class CollectionError(FontEnumerationError):
    """Errors related to collection ownership."""

    pass


class CollectionBorrowedError(CollectionError):
    """The collection cannot be consumed while views into it are alive."""

    def __init__(self, live_views: int) -> None:
        self.live_views = live_views
        super().__init__(
            f"Cannot take fonts from collection: {live_views} font views still alive"
        )


class CollectionConsumedError(CollectionError):
    """The collection was already consumed by take()."""

    def __init__(self) -> None:
        super().__init__("Collection was consumed by take() and holds no fonts")


class FontLoadError(FontEnumerationError):
    """Error loading font data from a file or stream."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse font file '{source}': {reason}")
