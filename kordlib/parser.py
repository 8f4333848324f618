"""Parsing of note names such as "C#", "Bb3" or "D♯7"."""

from __future__ import annotations

import re

from kordlib.named_pitch import NamedPitch
from kordlib.note import Note
from kordlib.octave import Octave


class ParseError(ValueError):
    """Raised when text cannot be read as a note or an octave."""


_ACCIDENTAL_SUFFIXES = {
    "": "",
    "#": "_SHARP",
    "♯": "_SHARP",
    "##": "_DOUBLE_SHARP",
    "𝄪": "_DOUBLE_SHARP",
    "b": "_FLAT",
    "♭": "_FLAT",
    "bb": "_DOUBLE_FLAT",
    "𝄫": "_DOUBLE_FLAT",
}

_NOTES = {
    letter + accidental: Note(NamedPitch[letter + suffix], Octave.FOUR)
    for letter in "ABCDEFG"
    for accidental, suffix in _ACCIDENTAL_SUFFIXES.items()
}

_OCTAVES = {str(int(octave)): octave for octave in Octave if octave <= Octave.NINE}

_NOTE_WITH_OCTAVE = re.compile(r"([A-G](?:##|#|♯|𝄪|bb|b|♭|𝄫)?)(\d+)?")


def note_str_to_note(note_str: str) -> Note:
    """Return the note (in octave four) for a note name such as "F#" or "B♭"."""
    try:
        return _NOTES[note_str]
    except KeyError:
        raise ParseError(
            "Please use fairly standard notes (e.g., don't use triple sharps / flats)."
        ) from None


def octave_str_to_octave(octave_str: str) -> Octave:
    """Return the octave for a single digit from "0" to "9"."""
    try:
        return _OCTAVES[octave_str]
    except KeyError:
        raise ParseError("Please use a valid octave (0 - 9).") from None


def parse_note(text: str) -> Note:
    """Parse a note name with an optional octave; the octave defaults to four."""
    match = _NOTE_WITH_OCTAVE.fullmatch(text.strip())
    if match is None:
        raise ParseError(f"Invalid note: {text!r}.")
    note_str, octave_str = match.groups()
    result = note_str_to_note(note_str)
    if octave_str is not None:
        result = result.with_octave(octave_str_to_octave(octave_str))
    return result