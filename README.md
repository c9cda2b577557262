# combat_sorts

Rules for a small turn-based tactical combat system: four playable
character classes with four spells each, melee attacks, spell casting
and turn bookkeeping.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Character classes

`combat_sorts.classes.initial_classes()` returns fresh copies of the four
base classes, in this order: Guerrier, Mage, Archer and Soigneur.

Each `CharacterClass` has `name`, `hp` (life points), `ap` (action points),
`mp` (movement points) and a list of four `ClassSpell` entries in `spells`.
A `ClassSpell` holds `name`, `range_min`, `range_max`, `ap_cost`,
`damage_min`, `damage_max` and `failure_chance` (a percentage). A negative
damage value means healing or shielding.

```python
from combat_sorts.classes import initial_classes

warrior, mage, archer, healer = initial_classes()
print(warrior.name, warrior.hp, warrior.ap, warrior.spells[0].name)
```

## Attacks

`combat_sorts.attacks` resolves the fights themselves. Its data types are
dataclasses: `Spell`, `Equipment`, `EnemyStats` (with `physical_resistance`,
`is_boss` and the enemy's cell `x`, `y`), `Position` (frozen), `SpellState`
and `Player`.

- `melee_attack(attacker, target, equipment, enemy, attacker_x, attacker_y, rng)`
  hits an enemy on one of the eight neighbouring cells for 2 action points.
  Damage comes from the weapon (1 to 3 bare-handed), the strength bonus
  minus the weakness malus, the enemy's physical resistance (2 % less per
  point) and, when `special_attack` is set, a fixed 2 to 5. One blow in ten
  misses; hit points never drop below 0. Returns whether the attack was
  carried out.
- `spell_attack(caster, target, enemy, spell, spell_index, is_enemy, current_turn, rng)`
  casts a `Spell` at the enemy's cell. It refuses when the caster is
  stunned or silenced, has already cast this turn, lacks action points,
  is out of range (Manhattan `distance`), is still in cooldown or has no
  casts left for that spell slot. Otherwise it spends the action points,
  rolls for failure, then deals damage to an enemy or heals an ally.
- `perform_attack(attacker, target, enemy, equipment, attack_type, spell_index, current_turn, rng)`
  picks one of the two by `AttackType` (`MELEE` or `SPELL`), building the
  spell from the attacker's class with a cooldown of 3. The target counts as
  an enemy unless it is the attacker's own class. A stunned attacker or an
  unknown attack type does nothing and returns `False`.
- `new_turn(players, current_turn)` gives every player one cast per spell
  slot and clears `cast_this_turn`. `Player.reset_casts(casts_per_spell)`
  sets the casts of every slot.
- `zone_cells(centre, radius)` yields every `Position` within Manhattan
  `radius` of `centre`.

Every function that rolls dice takes an `rng` argument (a `random.Random`,
or anything with the same `randrange`); without one it uses the `random`
module. Passing a seeded generator makes fights repeatable:

```python
import random

from combat_sorts.attacks import AttackType, EnemyStats, Equipment, Player, Position, perform_attack
from combat_sorts.classes import initial_classes

warrior, mage, _, _ = initial_classes()
player = Player(warrior, Position(0, 0))
enemy = EnemyStats(x=1, y=0)

hit = perform_attack(player, mage, enemy, Equipment(), AttackType.MELEE, 0, 1, random.Random(7))
print(hit, mage.hp, warrior.ap)
```

## What it does not do

This is a rules library only. It has no command to run, no game loop, no
map or movement, no screen or rendering and no saving of games. Area
spells are not applied to several targets: `zone_cells` only lists the
cells of an area.