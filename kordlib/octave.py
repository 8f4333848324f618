"""The octave of a note."""

from __future__ import annotations

from enum import IntEnum

_MAX_OCTAVE = 15


def _checked(value: int) -> Octave:
    if value > _MAX_OCTAVE:
        raise OverflowError("Octave overflow.")
    if value < 0:
        raise OverflowError("Octave underflow.")
    return Octave(value)


class Octave(IntEnum):
    """An octave number from zero to fifteen."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11
    TWELVE = 12
    THIRTEEN = 13
    FOURTEEN = 14
    FIFTEEN = 15

    def static_name(self) -> str:
        """Return the octave number as text."""
        return str(int(self))

    @classmethod
    def default(cls) -> Octave:
        """Return the default octave, four."""
        return cls.FOUR

    @classmethod
    def from_index(cls, value: int) -> Octave:
        """Return the octave with the given number."""
        if not 0 <= value <= _MAX_OCTAVE:
            raise ValueError("Octave overflow.")
        return cls(value)

    def __add__(self, other: object) -> Octave:
        if not isinstance(other, int):
            return NotImplemented
        return _checked(int(self) + int(other))

    def __sub__(self, other: object) -> Octave:
        if not isinstance(other, int):
            return NotImplemented
        return _checked(int(self) - int(other))