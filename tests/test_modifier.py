import pytest

from kordlib.modifier import (
    Degree,
    Extension,
    Modifier,
    ModifierKind,
    known_modifier_sets,
    likely_extension_sets,
    one_off_modifier_sets,
)


@pytest.mark.parametrize(
    "degree, name",
    [(Degree.SEVEN, "7"), (Degree.NINE, "9"), (Degree.ELEVEN, "11"), (Degree.THIRTEEN, "13")],
)
def test_degree_names(degree, name):
    assert degree.static_name() == name


@pytest.mark.parametrize(
    "kind, name",
    [
        (ModifierKind.MINOR, "m"),
        (ModifierKind.FLAT5, "♭5"),
        (ModifierKind.AUGMENTED5, "+"),
        (ModifierKind.MAJOR7, "maj7"),
        (ModifierKind.FLAT9, "♭9"),
        (ModifierKind.SHARP9, "♯9"),
        (ModifierKind.SHARP11, "♯11"),
        (ModifierKind.DIMINISHED, "°"),
    ],
)
def test_modifier_names(kind, name):
    assert Modifier(kind).static_name() == name


def test_dominant_name_is_degree_name():
    for degree in Degree:
        assert Modifier.dominant(degree).static_name() == degree.static_name()


def test_is_dominant():
    assert Modifier.dominant(Degree.NINE).is_dominant()
    assert not Modifier(ModifierKind.MINOR).is_dominant()
    assert not Modifier(ModifierKind.MAJOR7).is_dominant()


def test_dominant_requires_degree():
    with pytest.raises(ValueError):
        Modifier(ModifierKind.DOMINANT)


def test_non_dominant_rejects_degree():
    with pytest.raises(ValueError):
        Modifier(ModifierKind.MINOR, Degree.SEVEN)


def test_modifier_equality_and_hash():
    a = Modifier.dominant(Degree.SEVEN)
    b = Modifier(ModifierKind.DOMINANT, Degree.SEVEN)
    assert a == b
    assert len({a, b}) == 1
    assert Modifier.dominant(Degree.SEVEN) != Modifier.dominant(Degree.NINE)


def test_modifier_ordering_follows_declaration():
    assert Modifier(ModifierKind.MINOR) < Modifier(ModifierKind.FLAT5)
    assert Modifier.dominant(Degree.SEVEN) < Modifier.dominant(Degree.THIRTEEN)
    assert Modifier(ModifierKind.MAJOR7) < Modifier.dominant(Degree.SEVEN) < Modifier(ModifierKind.FLAT9)


@pytest.mark.parametrize(
    "extension, name",
    [
        (Extension.SUS2, "sus2"),
        (Extension.SUS4, "sus4"),
        (Extension.FLAT11, "♭11"),
        (Extension.FLAT13, "♭13"),
        (Extension.SHARP13, "♯13"),
        (Extension.ADD2, "add2"),
        (Extension.ADD4, "add4"),
        (Extension.ADD6, "add6"),
        (Extension.ADD9, "add9"),
        (Extension.ADD11, "add11"),
        (Extension.ADD13, "add13"),
    ],
)
def test_extension_names(extension, name):
    assert extension.static_name() == name


def test_known_modifier_sets():
    sets = known_modifier_sets()
    assert len(sets) == 35
    assert sets[0] == ()
    assert sets[1] == (Modifier(ModifierKind.MINOR),)
    assert sets[-1] == (Modifier(ModifierKind.SHARP9), Modifier.dominant(Degree.THIRTEEN))
    assert (Modifier(ModifierKind.DIMINISHED),) in sets
    assert len(set(sets)) == len(sets)


def test_one_off_modifier_sets():
    sets = one_off_modifier_sets()
    assert len(sets) == 6
    assert sets[0] == ()
    assert all(len(s) <= 1 for s in sets)
    assert not any(m.is_dominant() for s in sets for m in s)


def test_likely_extension_sets():
    sets = likely_extension_sets()
    assert len(sets) == 12
    assert sets[0] == ()
    assert {e for s in sets for e in s} == set(Extension)