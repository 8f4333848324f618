import pytest

from kordlib.named_pitch import NamedPitch
from kordlib.note import Note, all_pitch_notes, all_pitch_notes_with_frequency, note
from kordlib.octave import Octave
from kordlib.pitch import Pitch


def n(name, octave=4):
    return Note(NamedPitch[name], Octave(octave))


def test_text():
    assert n("C_FLAT").static_name() == "C♭"
    assert str(n("C")) == "C4"
    assert n("F_SHARP", 10).name() == "F♯10"


def test_default_octave():
    assert Note(NamedPitch.C) == n("C", 4)


def test_note_helper():
    assert note("c_sharp", 1) == n("C_SHARP", 1)
    assert note(NamedPitch.B_FLAT) == n("B_FLAT", 4)


def test_note_helper_unknown_name():
    with pytest.raises(KeyError):
        note("H")


def test_invalid_octave():
    with pytest.raises(ValueError):
        Note(NamedPitch.C, 16)


def test_pitch():
    assert n("C_FLAT", 4).frequency() == n("B", 3).frequency()
    assert n("B_SHARP").frequency() == n("C", 5).frequency()
    assert n("D_TRIPLE_FLAT", 5).frequency() == n("B").frequency()
    assert n("B_DOUBLE_SHARP", 5).with_named_pitch(NamedPitch.A).frequency() == n("A", 5).frequency()
    assert n("G").pitch() is Pitch.G


def test_frequency_value():
    assert n("A", 0).frequency() == pytest.approx(27.5)
    assert n("A", 4).frequency() == pytest.approx(440.0)


def test_recreators():
    assert n("C").with_octave(Octave.SEVEN) == n("C", 7)
    assert n("C", 2).with_named_pitch(NamedPitch.E_FLAT) == n("E_FLAT", 2)


def test_id():
    assert n("C", 0).id() == 1 << 0
    assert n("C_SHARP", 0).id() == 1 << 1
    assert n("B", 0).id() == 1 << 11
    assert n("C", 1).id() == 1 << 12
    assert n("C_SHARP", 1).id() == 1 << 13
    assert n("D_FLAT", 1).id() == 1 << 13
    assert n("C", 4).id() == 1 << 48

    assert Note.from_id(1 << 0) == n("C", 0)
    assert Note.from_id(1 << 1) == n("D_FLAT", 0)
    assert Note.from_id(1 << 11) == n("B", 0)
    assert Note.from_id(1 << 12) == n("C", 1)
    assert Note.from_id(1 << 13) == n("D_FLAT", 1)
    assert Note.from_id(1 << 48) == n("C", 4)


def test_id_mask():
    assert Note.id_mask([n("C", 0), n("C_SHARP", 0)]) == 1 << 0 | 1 << 1
    assert Note.id_mask([n("C", 0), n("C_SHARP", 0), n("D_FLAT", 0)]) == 1 << 0 | 1 << 1
    assert Note.id_mask([n("C", 0), n("C_SHARP", 0), n("B", 0)]) == 1 << 0 | 1 << 1 | 1 << 11

    assert Note.from_id_mask(1 << 0 | 1 << 1) == [n("C", 0), n("D_FLAT", 0)]
    assert Note.from_id_mask(1 << 0 | 1 << 1 | 1 << 11) == [n("C", 0), n("D_FLAT", 0), n("B", 0)]
    assert Note.from_id_mask(1 << 13 | 1 << 48) == [n("D_FLAT", 1), n("C", 4)]
    assert Note.from_id_mask(0) == []


def test_id_round_trip():
    for item in all_pitch_notes()[:128]:
        assert Note.from_id(item.id()) == item


def test_id_errors():
    with pytest.raises(ValueError):
        Note.from_id(0)
    with pytest.raises(ValueError):
        Note.from_id(1 << 128)
    with pytest.raises(OverflowError):
        n("B", 15).id()


def test_universal():
    assert n("F_SHARP", 5).to_universal() == n("G_FLAT", 5)
    assert n("B_SHARP", 3).to_universal() == n("C", 3)


def test_ordering_by_frequency():
    notes = [n("G", 4), n("C", 5), n("E", 2), n("B_FLAT", 4)]
    assert sorted(notes) == [n("E", 2), n("G", 4), n("B_FLAT", 4), n("C", 5)]
    assert n("C_FLAT") <= n("B", 3)
    assert n("C_FLAT") != n("B", 3)
    assert n("D") > n("C")


def test_all_pitch_notes():
    notes = all_pitch_notes()
    assert len(notes) == 192
    assert notes[0] == n("C", 0)
    assert notes[1] == n("D_FLAT", 0)
    assert notes[48] == n("C", 4)
    assert notes[-1] == n("B", 15)
    assert list(notes) == sorted(notes)


def test_all_pitch_notes_with_frequency():
    pairs = all_pitch_notes_with_frequency()
    assert len(pairs) == 192
    assert pairs[0][0] == n("C", 0)
    assert pairs[0][1] == pytest.approx(16.35)
    assert pairs[57][0] == n("A", 4)
    assert pairs[57][1] == pytest.approx(440.0)