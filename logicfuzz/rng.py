"""Deterministic pseudo-random generator based on a 64-bit linear congruential step."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 6364136223846793005
_INCREMENT = 1442695040888963407
_TWO_POW_32 = 4294967296.0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


class Random:
    """Deterministic random source: the same seed yields the same sequence."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK64

    @property
    def seed(self) -> int:
        """The current internal state."""
        return self._state

    @seed.setter
    def seed(self, value: int) -> None:
        self._state = value & _MASK64

    def __iadd__(self, a: int) -> "Random":
        self._state = (self._state + a) & _MASK64
        if not self._state:
            self._state = 1
        self.next()
        return self

    def next(self) -> int:
        """Advance the state and return it."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK64
        if not self._state:
            raise RuntimeError("random generator reached a zero state")
        return self._state

    def generate(self) -> int:
        """Return an unsigned 32-bit random value."""
        self.next()
        return self._state >> 32

    def generate_int(self) -> int:
        """Return a signed 32-bit random value."""
        return _to_int32(self.generate())

    def generate_bool(self) -> bool:
        """Return a random boolean."""
        return self.generate() < 2147483648

    def pick_int(self, low: int, high: int) -> int:
        """Return an integer in the closed range [low, high]."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        delta = (1 + high - low) & 0xFFFFFFFF
        tmp = self.generate()
        if delta:
            scaled = int(delta * (tmp / _TWO_POW_32)) & 0xFFFFFFFF
        else:
            scaled = tmp
        result = _to_int32(scaled + low)
        if not low <= result <= high:
            raise RuntimeError("picked value outside of the requested range")
        return result