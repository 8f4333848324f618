"""Named pitches: pitches with an enharmonic spelling, such as C or F♯."""

from __future__ import annotations

from enum import Enum

from kordlib.pitch import Pitch

_LETTER_SEMITONES = {"F": 5, "C": 0, "G": 7, "D": 2, "A": 9, "E": 4, "B": 11}
_LETTERS = "FCGDAEB"
_ACCIDENTAL_SYMBOLS = ("♭𝄫", "𝄫", "♭", "", "♯", "𝄪", "♯𝄪")


class NamedPitch(Enum):
    """A pitch with a spelling; ordered along the circle of fifths, triple flats first."""

    F_TRIPLE_FLAT = 0
    C_TRIPLE_FLAT = 1
    G_TRIPLE_FLAT = 2
    D_TRIPLE_FLAT = 3
    A_TRIPLE_FLAT = 4
    E_TRIPLE_FLAT = 5
    B_TRIPLE_FLAT = 6

    F_DOUBLE_FLAT = 7
    C_DOUBLE_FLAT = 8
    G_DOUBLE_FLAT = 9
    D_DOUBLE_FLAT = 10
    A_DOUBLE_FLAT = 11
    E_DOUBLE_FLAT = 12
    B_DOUBLE_FLAT = 13

    F_FLAT = 14
    C_FLAT = 15
    G_FLAT = 16
    D_FLAT = 17
    A_FLAT = 18
    E_FLAT = 19
    B_FLAT = 20

    F = 21
    C = 22
    G = 23
    D = 24
    A = 25
    E = 26
    B = 27

    F_SHARP = 28
    C_SHARP = 29
    G_SHARP = 30
    D_SHARP = 31
    A_SHARP = 32
    E_SHARP = 33
    B_SHARP = 34

    F_DOUBLE_SHARP = 35
    C_DOUBLE_SHARP = 36
    G_DOUBLE_SHARP = 37
    D_DOUBLE_SHARP = 38
    A_DOUBLE_SHARP = 39
    E_DOUBLE_SHARP = 40
    B_DOUBLE_SHARP = 41

    F_TRIPLE_SHARP = 42
    C_TRIPLE_SHARP = 43
    G_TRIPLE_SHARP = 44
    D_TRIPLE_SHARP = 45
    A_TRIPLE_SHARP = 46
    E_TRIPLE_SHARP = 47
    B_TRIPLE_SHARP = 48

    @property
    def _accidental(self) -> int:
        return self.value // 7 - 3

    def letter(self) -> str:
        """Return the letter name, without accidentals."""
        return _LETTERS[self.value % 7]

    def static_name(self) -> str:
        """Return the spelled name, such as "F♯" or "B𝄫"."""
        return self.letter() + _ACCIDENTAL_SYMBOLS[self._accidental + 3]

    def pitch(self) -> Pitch:
        """Return the sounding pitch class."""
        return Pitch((_LETTER_SEMITONES[self.letter()] + self._accidental) % 12)

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> NamedPitch:
        """Return the default spelling of a pitch (naturals and flats)."""
        return cls[Pitch(pitch).name]

    def __add__(self, steps: object) -> NamedPitch:
        """Move the given number of steps along the circle of fifths."""
        if not isinstance(steps, int):
            return NotImplemented
        new_index = self.value + steps
        if not 0 <= new_index < len(_ALL_NAMED_PITCHES):
            raise ValueError("NamedPitch out of range.")
        return _ALL_NAMED_PITCHES[new_index]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NamedPitch):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NamedPitch):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NamedPitch):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NamedPitch):
            return NotImplemented
        return self.value >= other.value


_ALL_NAMED_PITCHES = tuple(NamedPitch)