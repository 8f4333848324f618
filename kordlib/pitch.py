"""The twelve pitch classes of the chromatic scale."""

from __future__ import annotations

from enum import IntEnum


class Pitch(IntEnum):
    """A pitch class without enharmonic spelling; black keys are named as flats."""

    C = 0
    D_FLAT = 1
    D = 2
    E_FLAT = 3
    E = 4
    F = 5
    G_FLAT = 6
    G = 7
    A_FLAT = 8
    A = 9
    B_FLAT = 10
    B = 11

    def base_frequency(self) -> float:
        """Return the frequency of this pitch in octave zero, in hertz."""
        return _BASE_FREQUENCIES[self]

    @classmethod
    def from_index(cls, value: int) -> Pitch:
        """Return the pitch with the given semitone index (0 to 11)."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError("Invalid pitch") from None


_BASE_FREQUENCIES = {
    Pitch.C: 16.35,
    Pitch.D_FLAT: 17.32,
    Pitch.D: 18.35,
    Pitch.E_FLAT: 19.45,
    Pitch.E: 20.60,
    Pitch.F: 21.83,
    Pitch.G_FLAT: 23.12,
    Pitch.G: 24.50,
    Pitch.A_FLAT: 25.96,
    Pitch.A: 27.50,
    Pitch.B_FLAT: 29.14,
    Pitch.B: 30.87,
}