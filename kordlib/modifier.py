"""Chord modifiers, extensions and the degrees of dominant chords."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Degree(IntEnum):
    """The degree of a dominant chord."""

    SEVEN = 0
    NINE = 1
    ELEVEN = 2
    THIRTEEN = 3

    def static_name(self) -> str:
        """Return the degree as chord-symbol text."""
        return _DEGREE_NAMES[self]


_DEGREE_NAMES = {
    Degree.SEVEN: "7",
    Degree.NINE: "9",
    Degree.ELEVEN: "11",
    Degree.THIRTEEN: "13",
}


class ModifierKind(IntEnum):
    """The kind of a chord modifier."""

    MINOR = 0
    FLAT5 = 1
    AUGMENTED5 = 2
    MAJOR7 = 3
    DOMINANT = 4
    FLAT9 = 5
    SHARP9 = 6
    SHARP11 = 7
    DIMINISHED = 8


_MODIFIER_NAMES = {
    ModifierKind.MINOR: "m",
    ModifierKind.FLAT5: "♭5",
    ModifierKind.AUGMENTED5: "+",
    ModifierKind.MAJOR7: "maj7",
    ModifierKind.FLAT9: "♭9",
    ModifierKind.SHARP9: "♯9",
    ModifierKind.SHARP11: "♯11",
    ModifierKind.DIMINISHED: "°",
}


@dataclass(frozen=True, order=True)
class Modifier:
    """A modifier that changes how a chord is interpreted.

    Only the dominant modifier carries a degree.
    """

    kind: ModifierKind
    degree: Degree | None = None

    def __post_init__(self) -> None:
        if self.kind is ModifierKind.DOMINANT and self.degree is None:
            raise ValueError("A dominant modifier needs a degree.")
        if self.kind is not ModifierKind.DOMINANT and self.degree is not None:
            raise ValueError(f"The {self.kind.name.lower()} modifier takes no degree.")

    @classmethod
    def dominant(cls, degree: Degree) -> Modifier:
        """Return the dominant modifier of the given degree."""
        return cls(ModifierKind.DOMINANT, Degree(degree))

    def is_dominant(self) -> bool:
        """Return whether this is a dominant modifier."""
        return self.kind is ModifierKind.DOMINANT

    def static_name(self) -> str:
        """Return the modifier as chord-symbol text."""
        if self.degree is not None:
            return self.degree.static_name()
        return _MODIFIER_NAMES[self.kind]


class Extension(IntEnum):
    """An extension that adds tones without changing the chord's interpretation."""

    SUS2 = 0
    SUS4 = 1
    FLAT11 = 2
    FLAT13 = 3
    SHARP13 = 4
    ADD2 = 5
    ADD4 = 6
    ADD6 = 7
    ADD9 = 8
    ADD11 = 9
    ADD13 = 10

    def static_name(self) -> str:
        """Return the extension as chord-symbol text."""
        return _EXTENSION_NAMES[self]


_EXTENSION_NAMES = {
    Extension.SUS2: "sus2",
    Extension.SUS4: "sus4",
    Extension.FLAT11: "♭11",
    Extension.FLAT13: "♭13",
    Extension.SHARP13: "♯13",
    Extension.ADD2: "add2",
    Extension.ADD4: "add4",
    Extension.ADD6: "add6",
    Extension.ADD9: "add9",
    Extension.ADD11: "add11",
    Extension.ADD13: "add13",
}


def _m(kind: ModifierKind) -> Modifier:
    return Modifier(kind)


def _with_each_degree(*prefix: Modifier) -> list[tuple[Modifier, ...]]:
    return [(*prefix, Modifier.dominant(degree)) for degree in Degree]


_MINOR = _m(ModifierKind.MINOR)
_FLAT5 = _m(ModifierKind.FLAT5)
_AUGMENTED5 = _m(ModifierKind.AUGMENTED5)
_MAJOR7 = _m(ModifierKind.MAJOR7)
_FLAT9 = _m(ModifierKind.FLAT9)
_SHARP9 = _m(ModifierKind.SHARP9)
_SHARP11 = _m(ModifierKind.SHARP11)
_DIMINISHED = _m(ModifierKind.DIMINISHED)

_KNOWN_MODIFIER_SETS: tuple[tuple[Modifier, ...], ...] = tuple(
    [
        (),
        (_MINOR,),
        (_MAJOR7,),
        *_with_each_degree(),
        (_MINOR, _MAJOR7),
        *_with_each_degree(_MINOR),
        *_with_each_degree(_SHARP11),
        (_AUGMENTED5,),
        (_AUGMENTED5, _MAJOR7),
        *_with_each_degree(_AUGMENTED5),
        *_with_each_degree(_MINOR, _FLAT5),
        (_DIMINISHED,),
        *_with_each_degree(_FLAT9),
        *_with_each_degree(_SHARP9),
    ]
)

_ONE_OFF_MODIFIER_SETS: tuple[tuple[Modifier, ...], ...] = (
    (),
    (_SHARP11,),
    (_AUGMENTED5,),
    (_FLAT5,),
    (_FLAT9,),
    (_SHARP9,),
)

_LIKELY_EXTENSION_SETS: tuple[tuple[Extension, ...], ...] = (
    (),
    (Extension.SUS2,),
    (Extension.SUS4,),
    (Extension.ADD2,),
    (Extension.ADD4,),
    (Extension.ADD6,),
    (Extension.ADD9,),
    (Extension.ADD11,),
    (Extension.ADD13,),
    (Extension.FLAT11,),
    (Extension.FLAT13,),
    (Extension.SHARP13,),
)


def known_modifier_sets() -> tuple[tuple[Modifier, ...], ...]:
    """Return the sets of modifiers that have associated known chords."""
    return _KNOWN_MODIFIER_SETS


def one_off_modifier_sets() -> tuple[tuple[Modifier, ...], ...]:
    """Return the sets of modifiers that can be used as one-off extensions."""
    return _ONE_OFF_MODIFIER_SETS


def likely_extension_sets() -> tuple[tuple[Extension, ...], ...]:
    """Return the sets of extensions worth trying when guessing chords."""
    return _LIKELY_EXTENSION_SETS