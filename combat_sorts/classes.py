"""Playable character classes and their spell books."""

from __future__ import annotations

from dataclasses import dataclass, field

SPELLS_PER_CLASS = 4


@dataclass
class ClassSpell:
    """A spell as described in a class's spell book.

    Negative damage values mean healing or shielding.
    """

    name: str
    range_min: int
    range_max: int
    ap_cost: int
    damage_min: int
    damage_max: int
    failure_chance: int  # percent


@dataclass
class CharacterClass:
    """A character class with its pools of HP, AP and MP and its spells."""

    name: str
    hp: int
    ap: int
    mp: int
    spells: list[ClassSpell] = field(default_factory=list)
    pos: int = 0


_CLASS_TABLE = (
    (
        "Guerrier", 120, 6, 3,
        (
            ("Coup de Hache", 1, 1, 4, 15, 25, 10),
            ("Tempête de Lames", 1, 1, 6, 10, 18, 15),
            ("Cri de Défi", 0, 3, 5, -15, -15, 5),
            ("Fureur Berserk", 1, 2, 7, 25, 40, 30),
        ),
    ),
    (
        "Mage", 80, 7, 4,
        (
            ("Rayon Arcanique", 3, 7, 4, 12, 20, 15),
            ("Nova de Givre", 1, 4, 6, 8, 14, 20),
            ("Éruption Tellurique", 4, 6, 7, 15, 25, 25),
            ("Transfert Vital", 1, 5, 5, -30, -40, 10),
        ),
    ),
    (
        "Archer", 90, 8, 5,
        (
            ("Flèche Empennée", 2, 8, 3, 10, 18, 10),
            ("Pluie de Flèches", 3, 6, 6, 8, 15, 20),
            ("Piège Venimeux", 1, 3, 4, 5, 8, 15),
            ("Tir Perforant", 2, 5, 7, 20, 35, 25),
        ),
    ),
    (
        "Soigneur", 100, 6, 3,
        (
            ("Soin Lumineux", 1, 4, 4, -20, -30, 5),
            ("Purification", 1, 3, 3, 0, 0, 10),
            ("Barrière Sacrée", 1, 2, 5, -30, -30, 0),
            ("Résurrection", 1, 1, 10, -999, -999, 40),
        ),
    ),
)


def initial_classes() -> list[CharacterClass]:
    """Return fresh copies of the four base classes: warrior, mage, archer, healer."""
    return [
        CharacterClass(
            name=name,
            hp=hp,
            ap=ap,
            mp=mp,
            spells=[ClassSpell(*spell) for spell in spells],
        )
        for name, hp, ap, mp, spells in _CLASS_TABLE
    ]