# dungeoncrawl

A small text-based dungeon crawler for the terminal. You walk into a dungeon,
wander from room to room, fight goblins and pick up randomly generated weapons
such as a "Sharp Steel Sword of Agility".

## Installing

```
pip install .
```

## Playing

```
dungeoncrawl
```

The command takes no options other than `--help`. The game quits when you type
`exit` at the main menu or when input ends.

Each screen lists the commands you can type there:

| Where        | Commands                         |
|--------------|----------------------------------|
| Main menu    | `start`, `exit`                  |
| Dungeon      | `enter`, `exit`                  |
| Level        | `go`, `exit`                     |
| Room         | `look`, `attack`, `take`, `exit` |

- `start` begins a new run with a fresh dungeon and a fresh hero.
- `enter` descends into a new level. Leaving that level with `exit` takes you
  back to the main menu.
- `go` generates a fresh room for the current level. `exit` in a room returns
  to the level.
- `look` shows the enemies and loot in the current room. After that, the room
  screen keeps showing them.
- `attack` strikes the first enemy. An enemy whose HP reaches zero is removed.
- `take` moves the first piece of loot into your inventory.

The hero starts with 100 HP, 10 STR, 10 DEX and 10 CON. A room has a 50% chance
of holding one to three goblins and a 30% chance of holding one to five weapons.
Weapon damage grows with the dungeon level.

## What the game does not do

This is an early, minimal game. Enemies never strike back, so the hero cannot
lose HP. You cannot view your inventory or equip a weapon you have picked up:
`take` only stores the item. The hero has no health display, and no game can be
saved or loaded.

## Using the pieces from Python

You can use the game model on its own:

```python
from dungeoncrawl.characters import Enemy, Player
from dungeoncrawl.stats import StatType
from dungeoncrawl.loot import generate_weapon
from dungeoncrawl import rng

rng.seed(42)
player = Player({StatType.HP: 100, StatType.STR: 10,
                 StatType.DEX: 10, StatType.CON: 10}, "Hero")
player.equip_weapon(generate_weapon(1))

goblin = Enemy({StatType.HP: 10, StatType.STR: 3,
                StatType.DEX: 2, StatType.CON: 1}, "Goblin")
player.attack(goblin)
print(goblin.stats[StatType.HP])
```

An attack deals the attacker's STR, plus the damage of any equipped weapon,
minus the target's CON. The target's HP never drops below zero.

- `dungeoncrawl.rng` holds the shared random source: `seed`, `roll_chance`,
  `randint` and `weighted_choice`.
- `dungeoncrawl.loot.generate_item(level)` and `generate_weapon(level)` build
  random `Weapon`s, which are defined in `dungeoncrawl.items`.
- `dungeoncrawl.room_generator.generate_room(level)` builds a `Room`, which is
  defined in `dungeoncrawl.room` and offers `take_loot(index)` and
  `remove_enemy(index)`.
- `Level.enter_new_room()` and `Dungeon.enter_new_level()` in
  `dungeoncrawl.world` move you through new rooms and levels. Their
  `current_room` and `current_level` properties raise `RuntimeError` until
  something has been entered.
- `dungeoncrawl.console.Console` wraps any pair of text streams. You can pass
  one to `Game`, to the views and to the controllers to drive the game from a
  script:

```python
import io
from dungeoncrawl.console import Console
from dungeoncrawl.game import Game

out = io.StringIO()
Game(Console(io.StringIO("start\nexit\nexit\n"), out)).run()
```

## Running the tests

```
pip install .[test]
pytest
```