"""Notes: named pitches placed in an octave."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from kordlib.named_pitch import NamedPitch
from kordlib.octave import Octave
from kordlib.pitch import Pitch

_ID_BITS = 128
_SEMITONES_PER_OCTAVE = 12

# Spellings whose sounding octave differs from their written octave.
_OCTAVE_UP = frozenset(
    {
        NamedPitch.A_TRIPLE_SHARP,
        NamedPitch.B_TRIPLE_SHARP,
        NamedPitch.B_DOUBLE_SHARP,
        NamedPitch.B_SHARP,
    }
)
_OCTAVE_DOWN = frozenset(
    {
        NamedPitch.D_TRIPLE_FLAT,
        NamedPitch.C_TRIPLE_FLAT,
        NamedPitch.C_DOUBLE_FLAT,
        NamedPitch.C_FLAT,
    }
)


@dataclass(frozen=True)
class Note:
    """A named pitch with an octave.

    Equality compares spelling and octave; ordering compares frequency.
    """

    named_pitch: NamedPitch
    octave: Octave = Octave.FOUR

    def __post_init__(self) -> None:
        object.__setattr__(self, "named_pitch", NamedPitch(self.named_pitch))
        object.__setattr__(self, "octave", Octave.from_index(int(self.octave)))

    def pitch(self) -> Pitch:
        """Return the sounding pitch class."""
        return self.named_pitch.pitch()

    def static_name(self) -> str:
        """Return the spelled name without the octave, such as "C♭"."""
        return self.named_pitch.static_name()

    def name(self) -> str:
        """Return the spelled name with the octave, such as "C4"."""
        return f"{self.named_pitch.static_name()}{self.octave.static_name()}"

    def __str__(self) -> str:
        return self.name()

    def frequency(self) -> float:
        """Return the frequency of the note in hertz."""
        octave = self.octave
        if self.named_pitch in _OCTAVE_UP:
            octave = octave + 1
        elif self.named_pitch in _OCTAVE_DOWN:
            octave = octave - 1
        return self.pitch().base_frequency() * 2.0 ** int(octave)

    def with_named_pitch(self, named_pitch: NamedPitch) -> Note:
        """Return this note respelled with the given named pitch."""
        return Note(named_pitch, self.octave)

    def with_octave(self, octave: Octave) -> Note:
        """Return this note moved to the given octave."""
        return Note(self.named_pitch, octave)

    def id(self) -> int:
        """Return the note's ID: a single bit at its semitone position."""
        shift = _SEMITONES_PER_OCTAVE * int(self.octave) + int(self.pitch())
        if shift >= _ID_BITS:
            raise OverflowError(f"{self} is too high to have an ID.")
        return 1 << shift

    @classmethod
    def from_id(cls, id: int) -> Note:
        """Return the note for an ID; the highest set bit decides."""
        if id <= 0 or id >= 1 << _ID_BITS:
            raise ValueError(f"Invalid note ID: {id}.")
        octave_num, pitch_num = divmod(id.bit_length() - 1, _SEMITONES_PER_OCTAVE)
        octave = Octave.from_index(octave_num)
        pitch = Pitch.from_index(pitch_num)
        return cls(NamedPitch.from_pitch(pitch), octave)

    @classmethod
    def id_mask(cls, notes) -> int:
        """Return the bitwise union of the IDs of the given notes."""
        mask = 0
        for note_ in notes:
            mask |= note_.id()
        return mask

    @classmethod
    def from_id_mask(cls, id_mask: int) -> list[Note]:
        """Return the notes whose bits are set in the mask, lowest first."""
        if id_mask < 0 or id_mask >= 1 << _ID_BITS:
            raise ValueError(f"Invalid note ID mask: {id_mask}.")
        return [
            cls.from_id(1 << shift)
            for shift in range(id_mask.bit_length())
            if id_mask >> shift & 1
        ]

    def to_universal(self) -> Note:
        """Return the same note spelled with its default (flat) spelling."""
        return self.with_named_pitch(NamedPitch.from_pitch(self.pitch()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.frequency() < other.frequency()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.frequency() <= other.frequency()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.frequency() > other.frequency()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.frequency() >= other.frequency()


def note(name: NamedPitch | str, octave: Octave | int = Octave.FOUR) -> Note:
    """Build a note from a named pitch (or its member name, e.g. "C_SHARP") and an octave."""
    named_pitch = NamedPitch[name.upper()] if isinstance(name, str) else NamedPitch(name)
    return Note(named_pitch, Octave.from_index(int(octave)))


@lru_cache(maxsize=None)
def all_pitch_notes() -> tuple[Note, ...]:
    """Return every pitch, in default spelling, in every octave, lowest first."""
    return tuple(
        Note(NamedPitch.from_pitch(pitch), octave) for octave in Octave for pitch in Pitch
    )


@lru_cache(maxsize=None)
def all_pitch_notes_with_frequency() -> tuple[tuple[Note, float], ...]:
    """Return every note from all_pitch_notes paired with its frequency."""
    return tuple((n, n.frequency()) for n in all_pitch_notes())