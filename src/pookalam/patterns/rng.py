from __future__ import annotations

MASK_32 = 0xFFFFFFFF
_GOLDEN_INCREMENT = 0x6D2B79F5
_UINT32_RANGE = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK_32


class Mulberry32:
    """Seedable 32-bit generator producing a reproducible stream in ``[0, 1)``.

    Every consumer owns its own instance; there is no module level state.
    """

    def __init__(self, seed: int) -> None:
        self._state = int(seed) & MASK_32

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        self._state = (self._state + _GOLDEN_INCREMENT) & MASK_32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t = ((t + _imul(t ^ (t >> 7), t | 61)) & MASK_32) ^ t
        return ((t ^ (t >> 14)) & MASK_32) / _UINT32_RANGE

    def next_index(self, count: int) -> int:
        """Return a uniform index in ``range(count)``."""

        return int(self.next() * count)
