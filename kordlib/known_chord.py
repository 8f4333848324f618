"""Known chords: the chord qualities the library can name and describe."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from kordlib.modifier import Degree


class KnownChordKind(IntEnum):
    """The kind of a known chord."""

    UNKNOWN = 0
    MAJOR = 1
    MINOR = 2
    MAJOR7 = 3
    DOMINANT = 4
    MINOR_MAJOR7 = 5
    MINOR_DOMINANT = 6
    DOMINANT_SHARP11 = 7
    AUGMENTED = 8
    AUGMENTED_MAJOR7 = 9
    AUGMENTED_DOMINANT = 10
    HALF_DIMINISHED = 11
    DIMINISHED = 12
    DOMINANT_FLAT9 = 13
    DOMINANT_SHARP9 = 14


_WITH_DEGREE = frozenset(
    {
        KnownChordKind.DOMINANT,
        KnownChordKind.MINOR_DOMINANT,
        KnownChordKind.DOMINANT_SHARP11,
        KnownChordKind.AUGMENTED_DOMINANT,
        KnownChordKind.HALF_DIMINISHED,
        KnownChordKind.DOMINANT_FLAT9,
        KnownChordKind.DOMINANT_SHARP9,
    }
)

_DESCRIPTIONS = {
    KnownChordKind.MAJOR: "major",
    KnownChordKind.MINOR: "minor",
    KnownChordKind.MAJOR7: "major 7, ionian, first mode of major scale",
    KnownChordKind.DOMINANT: "dominant, mixolydian, fifth mode of major scale, major with flat seven",
    KnownChordKind.MINOR_MAJOR7: "minor major 7, melodic minor, major with flat third",
    KnownChordKind.MINOR_DOMINANT: (
        "minor 7, dorian, second mode of major scale, major with flat third and flat seven"
    ),
    KnownChordKind.DOMINANT_SHARP11: (
        "dominant sharp 11, lydian dominant, lyxian, major with sharp four and flat seven"
    ),
    KnownChordKind.AUGMENTED: "augmented, major with sharp five",
    KnownChordKind.AUGMENTED_MAJOR7: (
        "augmented major 7, major with sharp four and five, third mode of melodic minor"
    ),
    KnownChordKind.AUGMENTED_DOMINANT: "augmented dominant, whole tone",
    KnownChordKind.HALF_DIMINISHED: (
        "half diminished, locrian, minor seven flat five, seventh mode of major scale, "
        "major scale starting one half step up"
    ),
    KnownChordKind.DIMINISHED: (
        "fully diminished (whole first), diminished seventh, whole/half/whole diminished"
    ),
    KnownChordKind.DOMINANT_FLAT9: (
        "dominant flat 9, fully diminished (half first), half/whole/half diminished"
    ),
    KnownChordKind.DOMINANT_SHARP9: (
        "dominant sharp 9, altered, altered dominant, super locrian, diminished whole tone, "
        "seventh mode of a melodic minor scale, melodic minor up a half step"
    ),
}

# Name templates; "{}" is replaced by the degree's name.
_NAME_TEMPLATES = {
    KnownChordKind.MAJOR: "",
    KnownChordKind.MINOR: "m",
    KnownChordKind.MAJOR7: "maj7",
    KnownChordKind.DOMINANT: "{}",
    KnownChordKind.MINOR_MAJOR7: "m(maj7)",
    KnownChordKind.MINOR_DOMINANT: "m{}",
    KnownChordKind.DOMINANT_SHARP11: "{}(♯11)",
    KnownChordKind.AUGMENTED: "+",
    KnownChordKind.AUGMENTED_MAJOR7: "+(maj7)",
    KnownChordKind.AUGMENTED_DOMINANT: "+{}",
    KnownChordKind.HALF_DIMINISHED: "m{}(♭5)",
    KnownChordKind.DIMINISHED: "dim",
    KnownChordKind.DOMINANT_FLAT9: "{}(♭9)",
    KnownChordKind.DOMINANT_SHARP9: "{}(♯9)",
}


@dataclass(frozen=True, order=True)
class KnownChord:
    """A known chord quality; dominant-style kinds carry a degree."""

    kind: KnownChordKind
    degree: Degree | None = None

    def __post_init__(self) -> None:
        if self.kind in _WITH_DEGREE and self.degree is None:
            raise ValueError(f"The {self.kind.name.lower()} chord needs a degree.")
        if self.kind not in _WITH_DEGREE and self.degree is not None:
            raise ValueError(f"The {self.kind.name.lower()} chord takes no degree.")

    def _require_known(self) -> None:
        if self.kind is KnownChordKind.UNKNOWN:
            raise ValueError("An unknown chord has no name or description.")

    def description(self) -> str:
        """Return a description of the chord and its associated scale."""
        self._require_known()
        return _DESCRIPTIONS[self.kind]

    def name(self) -> str:
        """Return the chord-symbol suffix for this chord quality."""
        self._require_known()
        template = _NAME_TEMPLATES[self.kind]
        if self.degree is None:
            return template
        return template.replace("{}", self.degree.static_name())