# sorcery

A two-player card game played in the terminal. Each player has a deck of
minions, spells and rituals, a hand of up to five cards, and a board that
holds up to five minions. Players start with 20 life and 3 magic. At the
start of each turn a player gains one magic and draws a card.

## Installing

```
pip install .
```

## Playing

```
sorcery [-deck1 FILE] [-deck2 FILE] [-init FILE] [-testing] [-graphics]
```

- `-deck1 FILE`, `-deck2 FILE`: deck files for player 1 and player 2
  (both default to `default.deck`). A deck file lists one card name per line.
  Unknown names are reported on standard error and skipped. A file that
  cannot be opened gives an empty deck.
- `-init FILE`: read the two players' names from the first two lines of this
  file. If the file cannot be opened, the names are read from the terminal.
- `-testing`: testing mode. The deck shuffle uses a fixed seed, so games
  repeat. A spell may be played without enough magic, which spends all the
  player's magic. The `draw` and `discard` commands are available.
- `-graphics`: accepted, with no effect on the display.

Any other argument, or a flag with no file name after it, prints an error and
exits with status 1.

Each player's opening hand is five cards. The deck is shuffled before each
draw. Commands are then read from standard input, one per line, for the
current player. The game stops on `quit` or when input runs out.

### Commands

| Command | Effect |
| --- | --- |
| `help` | List the commands. |
| `end` | End the current player's turn. |
| `quit` | End the game. |
| `attack i` | Minion `i` attacks the opponent directly. |
| `attack i j` | Minion `i` attacks the opponent's minion `j`. |
| `play i [p t]` | Play card `i` from the hand, optionally targeting card `t` of player `p`. |
| `hand` | Show the cards in your hand. |
| `board` | Show the board. |
| `draw` | Draw a card (testing mode only). |
| `discard i` | Discard card `i` from the hand (testing mode only). |

Indices are counted from 1. A move that is not allowed is reported on
standard error and the game carries on. Examples of such moves are a bad
index, not enough magic, a full board, or a minion that has already acted
this turn. An unrecognised command prints `Unknown command.`

When minions fight, each one loses defence equal to the other's attack. A
minion whose defence falls to zero or below goes to its owner's graveyard.

### Cards

| Kind | Cards |
| --- | --- |
| Minions | Air Elemental, Earth Elemental, Bone Golem, Fire Elemental, Potion Seller, Novice Pyromancer, Apprentice Summoner, Master Summoner |
| Spells | Banish, Unsummon, Recharge, Disenchant, Raise Dead, Blizzard |
| Rituals | Dark Ritual, Aura of Power, Standstill |

Some spells take a target:

- `Banish` with target card `7` removes the target player's ritual. With any
  other target it destroys that minion.
- `Unsummon` returns a minion to its owner's hand if the hand has room.
- `Recharge` adds three charges to the target player's ritual.
- `Disenchant` replaces an enchanted minion with the minion beneath it.
- `Raise Dead` brings back the newest card in the target player's graveyard,
  with defence 1.
- `Blizzard` deals 2 damage to every minion of both players.

## What the game does not do

- `help` lists `use` and `inspect`, but neither does anything. `use` is
  reported as an unknown command and `inspect` is ignored. Minions' activated
  abilities therefore cannot be used from the command line.
- No triggered abilities or ritual effects fire during play. The `Board` can
  register listeners and pass events to them, but the game registers none.
  It never calls a ritual's `trigger`.
- No enchantment cards can be built from a deck file. Playing an enchantment
  is refused.
- The game does not declare a winner when a player's life reaches zero.

## Using it as a library

```python
from sorcery.cardfactory import create_card, load_deck
from sorcery.graphics import display_spell

card = create_card("Blizzard")
print("\n".join(card.display()))

print("\n".join(display_spell("Banish", 2, "Destroy target minion or ritual")))
```

### Modules

| Module | Contents |
| --- | --- |
| `sorcery.cardfactory` | `create_card(name)` builds a card from its name and raises `UnknownCardError` for a name it does not know. `load_deck(filename)` builds a deck from a file. |
| `sorcery.graphics` | The card templates and the `display_*` functions that fill them in. Each function returns a list of text lines. |
| `sorcery.player` | `Player` and its moves: `play_card`, `attack`, `draw_card`, `discard_card`, `start_turn` and so on. A move that is not allowed raises `GameError`. |
| `sorcery.board` | `Board`. `render()` returns the whole table as lines and `render_hand(player)` returns a hand. It also provides `register_listener` and `notify` for game events. |
| `sorcery.game` | `Game`, which sets up the players (`init`), runs the turn loop (`start`) and carries out single commands (`process_command`). |
| `sorcery.cli` | `parse_arguments(argv)`, which returns `InitOptions`, and `main(argv=None)`. |
| `sorcery.minion`, `sorcery.spell`, `sorcery.ritual`, `sorcery.enchantment`, `sorcery.card`, `sorcery.ability` | The card classes and minion abilities. |