# kordlib

A small library for exploring music theory in Python. It models pitches,
octaves, enharmonically named pitches and notes. It has types for chord
modifiers, extensions and known chord qualities. It also reads and writes
binary note sample files.

## Installation

```
pip install kordlib
```

To run the test suite, install the test extra:

```
pip install "kordlib[test]"
pytest
```

## Modules

- `kordlib.pitch`
  - `Pitch` is an `IntEnum` of the twelve pitch classes, `C` to `B`, with the
    black keys spelled as flats (`D_FLAT`, `E_FLAT`, …).
  - `base_frequency()` gives the pitch's frequency in octave zero.
  - `Pitch.from_index(n)` turns 0–11 into a pitch and raises `ValueError`
    otherwise.
- `kordlib.octave`
  - `Octave` is an `IntEnum` of octaves 0–15.
  - Adding or subtracting an integer returns another `Octave`, or raises
    `OverflowError` when the result leaves that range.
  - `Octave.default()` is octave four. `Octave.from_index(n)` validates a
    number. `static_name()` gives the number as text.
- `kordlib.named_pitch`
  - `NamedPitch` covers spellings from triple flat to triple sharp, ordered
    along the circle of fifths.
  - Each member has `letter()`, `static_name()` (for example `"F♯"` or
    `"B𝄫"`) and `pitch()`.
  - `NamedPitch.from_pitch()` gives a pitch's default spelling.
  - `named_pitch + n` moves `n` steps along the circle of fifths and raises
    `ValueError` past either end.
- `kordlib.note`
  - `Note` is a frozen dataclass of a named pitch and an octave; the octave
    defaults to four. Equality compares spelling and octave. Ordering compares
    frequency.
  - It has `pitch()`, `static_name()`, `name()` / `str()`, `frequency()`,
    `with_named_pitch()`, `with_octave()` and `to_universal()`.
  - Its ID encoding uses one bit per semitone: `id()`, `Note.from_id()`,
    `Note.id_mask()` and `Note.from_id_mask()`.
  - `note(name, octave)` builds a note from a `NamedPitch` or a member name
    such as `"C_SHARP"`.
  - `all_pitch_notes()` lists every pitch in every octave.
    `all_pitch_notes_with_frequency()` pairs each of those notes with its
    frequency.
- `kordlib.parser`
  - `parse_note()` reads strings such as `"C"`, `"Bb3"` or `"D♯7"`. The octave
    is optional and defaults to four.
  - `note_str_to_note()` and `octave_str_to_octave()` handle the two parts.
    Accidentals go up to double sharps and flats, and octaves run 0–9.
  - Bad input raises `ParseError`, which is a subclass of `ValueError`.
- `kordlib.modifier`
  - `Degree`, `Modifier` (built from a `ModifierKind`; use
    `Modifier.dominant(degree)` for dominants) and `Extension`, each with
    `static_name()`.
  - The reference sets `known_modifier_sets()`, `one_off_modifier_sets()` and
    `likely_extension_sets()`.
- `kordlib.known_chord`
  - `KnownChord` combines a `KnownChordKind` with a `Degree` for the
    dominant-style kinds.
  - It has `name()`, the chord-symbol suffix, and `description()`. Both raise
    `ValueError` for `UNKNOWN`.
- `kordlib.sample`
  - `KordItem` holds a path, a frequency space of 8192 values and a 128-bit
    note-ID label.
  - `load_kord_item()` and `save_kord_item()` use the binary format: big-endian
    `f32` values followed by a big-endian 128-bit label. Saved files are named
    `<prefix><note_names>_<hash>.bin`.
  - `TrainConfig` holds training settings and saves and loads them as JSON.
  - Helpers: `linspace()`, `u128_to_binary()`, `binary_to_u128()` and
    `fold_binary()`.

## Example

```python
from kordlib.parser import parse_note
from kordlib.note import Note

c4 = parse_note("C4")
print(c4, c4.frequency())          # C4 261.6
print(c4.id() == 1 << 48)          # True

mask = Note.id_mask([parse_note("C1"), parse_note("Db1")])
print([str(n) for n in Note.from_id_mask(mask)])   # ['C1', 'D♭1']
```

## What it does not do

- There is no chord type. The package cannot parse chord symbols such as
  `"Cm7b5"`, build chords from notes, or derive their scales and tones.
- There are no intervals, so notes cannot be transposed by an interval.
- There is no audio capture or frequency analysis, and no mel filter banks.
- There is no model training or inference. `TrainConfig` and the sample
  files only store data.
- There is no command-line tool.