"""Piecewise-linear weight lookup.

Every platform describes weight on its own native scale whose named
reference points are unevenly spaced relative to the CSS scale. A
WeightTable treats each pair of adjacent reference points as one linear
segment and saturates outside the table.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from font_enumeration.domain.attributes import Weight


@dataclass(frozen=True)
class WeightTable:
    """Reference table mapping a native weight scale to canonical weights.

    Attributes:
        entries: (native value, canonical weight) pairs in ascending native order
        floor: Weight returned at or below the first entry
        ceiling: Weight returned above the last entry
        tolerance: Absolute distance at which an input snaps to an entry
            (0 for integer scales)
    """

    entries: Sequence[tuple[float, Weight]]
    floor: Weight
    ceiling: Weight
    tolerance: float = 0.0

    def __post_init__(self) -> None:
        if len(self.entries) < 2:
            raise ValueError("A weight table needs at least two entries")
        natives = [native for native, _ in self.entries]
        if any(b <= a for a, b in zip(natives, natives[1:])):
            raise ValueError("Weight table entries must be strictly ascending")

    def lookup(self, native: float) -> Weight:
        """Convert a native weight to a canonical one.

        Args:
            native: Weight in the platform's native units

        Returns:
            Canonical weight (floor, exact entry, interpolated, or ceiling)
        """
        first_native, first_weight = self.entries[0]
        if native <= first_native:
            return self.floor
        if abs(native - first_native) <= self.tolerance:
            return first_weight

        for idx in range(1, len(self.entries)):
            native_b, weight_b = self.entries[idx]

            if abs(native - native_b) <= self.tolerance:
                return weight_b

            if native < native_b:
                native_a, weight_a = self.entries[idx - 1]
                t = (native - native_a) / (native_b - native_a)
                return Weight.new(weight_a.value + t * (weight_b.value - weight_a.value))

        return self.ceiling
