"""Family name matching."""

from collections.abc import Iterator
from itertools import zip_longest

_END = object()


def _folded(text: str) -> Iterator[str]:
    # Lowercase per character: a single character may fold to several
    for char in text:
        yield from char.lower()


def case_insensitive_match(left: str, right: str) -> bool:
    """Compare two names ordinally, ignoring case.

    Both names are lowercased one character at a time without locale or
    context rules, and the resulting character streams are compared.

    Args:
        left: First name
        right: Second name

    Returns:
        True if the folded streams are identical
    """
    return all(a == b for a, b in zip_longest(_folded(left), _folded(right), fillvalue=_END))
