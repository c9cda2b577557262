import pytest

from combat_sorts.classes import (
    SPELLS_PER_CLASS,
    CharacterClass,
    ClassSpell,
    initial_classes,
)


def test_class_names_in_order():
    assert [c.name for c in initial_classes()] == ["Guerrier", "Mage", "Archer", "Soigneur"]


@pytest.mark.parametrize(
    "index, hp, ap, mp",
    [(0, 120, 6, 3), (1, 80, 7, 4), (2, 90, 8, 5), (3, 100, 6, 3)],
)
def test_class_pools(index, hp, ap, mp):
    cls = initial_classes()[index]
    assert (cls.hp, cls.ap, cls.mp) == (hp, ap, mp)


def test_every_class_has_four_spells():
    for cls in initial_classes():
        assert len(cls.spells) == SPELLS_PER_CLASS


def test_warrior_first_spell():
    spell = initial_classes()[0].spells[0]
    assert spell == ClassSpell("Coup de Hache", 1, 1, 4, 15, 25, 10)


def test_resurrection_values():
    spell = initial_classes()[3].spells[3]
    assert spell.name == "Résurrection"
    assert spell.ap_cost == 10
    assert spell.damage_min == -999
    assert spell.damage_max == -999
    assert spell.failure_chance == 40


def test_mage_heal_keeps_inverted_bounds():
    spell = initial_classes()[1].spells[3]
    assert spell.name == "Transfert Vital"
    assert spell.damage_min == -30
    assert spell.damage_max == -40


def test_spell_ranges_are_ordered():
    for cls in initial_classes():
        for spell in cls.spells:
            assert 0 <= spell.range_min <= spell.range_max
            assert 0 <= spell.failure_chance <= 100


def test_calls_return_independent_copies():
    first = initial_classes()
    first[0].hp = 1
    first[0].spells[0].ap_cost = 99
    second = initial_classes()
    assert second[0].hp == 120
    assert second[0].spells[0].ap_cost == 4


def test_character_class_defaults():
    cls = CharacterClass(name="Guerrier", hp=120, ap=6, mp=3)
    assert cls.spells == []
    assert cls.pos == 0