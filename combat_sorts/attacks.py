"""Melee and spell attacks resolved on a turn-based grid."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from combat_sorts.classes import CharacterClass

SPELL_SLOTS = 6
DEFAULT_SPELL_COOLDOWN = 3
MELEE_AP_COST = 2


class AttackType(IntEnum):
    MELEE = 0
    SPELL = 1


@dataclass
class Spell:
    """A castable spell with its range, cost, damage and cooldown."""

    name: str
    range_min: int
    range_max: int
    ap_cost: int
    damage_min: int
    damage_max: int
    cooldown: int
    failure_chance: int  # percent
    element: int = 0  # 0 neutral, 1 fire, 2 water, 3 earth, 4 air
    zone: int = 0  # 0 single target, n circle of radius n


@dataclass
class Equipment:
    has_weapon: bool = False
    weapon_damage_min: int = 0
    weapon_damage_max: int = 0
    strength_bonus: int = 0
    weakness_malus: int = 0
    special_attack: bool = False


@dataclass
class EnemyStats:
    physical_resistance: int = 0
    is_boss: bool = False
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Position:
    x: int
    y: int


@dataclass
class SpellState:
    """Per-spell cooldown and cast counter; ready to use by default."""

    last_turn_used: int = -3
    casts_left_this_turn: int = 1


@dataclass
class Player:
    character_class: CharacterClass
    pos: Position = Position(0, 0)
    spell_states: list[SpellState] = field(
        default_factory=lambda: [SpellState() for _ in range(SPELL_SLOTS)]
    )
    stunned: bool = False
    silenced: bool = False
    cast_this_turn: bool = False

    def reset_casts(self, casts_per_spell: int) -> None:
        """Give every spell slot the same number of casts for this turn."""
        for state in self.spell_states:
            state.casts_left_this_turn = casts_per_spell


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _roll(rng, low: int, high: int) -> int:
    """Pick a value starting at ``low``; inverted bounds still roll upward from ``low``."""
    span = high - low + 1
    if span == 0:
        raise ValueError(f"empty damage range {low}..{high}")
    return low + rng.randrange(abs(span))


def distance(a: Position, b: Position) -> int:
    """Manhattan distance between two cells."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def melee_attack(
    attacker: CharacterClass,
    target: CharacterClass,
    equipment: Equipment,
    enemy: EnemyStats,
    attacker_x: int,
    attacker_y: int,
    rng: random.Random | None = None,
) -> bool:
    """Strike an adjacent enemy; return whether the attack was carried out."""
    rng = rng if rng is not None else random
    dx = abs(attacker_x - enemy.x)
    dy = abs(attacker_y - enemy.y)
    if not (dx <= 1 and dy <= 1 and dx + dy > 0):
        return False
    if attacker.ap < MELEE_AP_COST:
        return False
    attacker.ap -= MELEE_AP_COST

    if equipment.has_weapon:
        low, high = equipment.weapon_damage_min, equipment.weapon_damage_max
    else:
        low, high = 1, 3

    modifier = equipment.strength_bonus - equipment.weakness_malus
    low = max(1, low + modifier)
    high = max(low, high + modifier)

    if enemy.physical_resistance > 0:
        kept = 100 - enemy.physical_resistance * 2
        low = max(1, _trunc_div(low * kept, 100))
        high = max(low, _trunc_div(high * kept, 100))

    if equipment.special_attack:
        low, high = 2, 5

    if rng.randrange(10) != 0:
        target.hp = max(0, target.hp - _roll(rng, low, high))
    return True


def new_turn(players: Iterable[Player], current_turn: int) -> None:
    """Start a new turn: one cast per spell and no spell cast yet."""
    for player in players:
        player.reset_casts(1)
        player.cast_this_turn = False


def zone_cells(centre: Position, radius: int) -> Iterator[Position]:
    """Yield every cell within Manhattan ``radius`` of ``centre``."""
    for x in range(centre.x - radius, centre.x + radius + 1):
        for y in range(centre.y - radius, centre.y + radius + 1):
            cell = Position(x, y)
            if distance(centre, cell) <= radius:
                yield cell


def spell_attack(
    caster: Player,
    target: CharacterClass,
    enemy: EnemyStats,
    spell: Spell,
    spell_index: int,
    is_enemy: bool,
    current_turn: int,
    rng: random.Random | None = None,
) -> bool:
    """Cast ``spell`` at the cell of ``enemy``; return whether it was cast."""
    rng = rng if rng is not None else random
    if caster.stunned or caster.silenced:
        return False
    if caster.cast_this_turn:
        return False
    if caster.character_class.ap < spell.ap_cost:
        return False

    reach = distance(caster.pos, Position(enemy.x, enemy.y))
    if reach < spell.range_min or reach > spell.range_max:
        return False

    state = caster.spell_states[spell_index]
    if current_turn - state.last_turn_used < spell.cooldown:
        return False
    if state.casts_left_this_turn <= 0:
        return False

    caster.character_class.ap -= spell.ap_cost
    caster.cast_this_turn = True
    state.casts_left_this_turn -= 1
    state.last_turn_used = current_turn

    if rng.randrange(100) < spell.failure_chance:
        return True

    if spell.damage_min == spell.damage_max:
        effect = spell.damage_min
    else:
        effect = _roll(rng, spell.damage_min, spell.damage_max)

    if effect > 0 and is_enemy:
        target.hp = max(0, target.hp - effect)
    elif effect < 0 and not is_enemy:
        target.hp -= effect
    return True


def perform_attack(
    attacker: Player,
    target: CharacterClass,
    enemy: EnemyStats,
    equipment: Equipment,
    attack_type: int,
    spell_index: int,
    current_turn: int,
    rng: random.Random | None = None,
) -> bool:
    """Resolve a melee or spell attack; unknown attack types do nothing."""
    is_enemy = target is not attacker.character_class
    if attacker.stunned:
        return False
    try:
        kind = AttackType(attack_type)
    except ValueError:
        return False

    if kind is AttackType.MELEE:
        return melee_attack(
            attacker.character_class,
            target,
            equipment,
            enemy,
            attacker.pos.x,
            attacker.pos.y,
            rng,
        )

    known = attacker.character_class.spells[spell_index]
    spell = Spell(
        name=known.name,
        range_min=known.range_min,
        range_max=known.range_max,
        ap_cost=known.ap_cost,
        damage_min=known.damage_min,
        damage_max=known.damage_max,
        cooldown=DEFAULT_SPELL_COOLDOWN,
        failure_chance=known.failure_chance,
    )
    return spell_attack(
        attacker, target, enemy, spell, spell_index, is_enemy, current_turn, rng
    )