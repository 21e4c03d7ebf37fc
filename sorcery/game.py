"""The game loop: setting up the players and carrying out typed commands."""

from __future__ import annotations

import sys
from typing import TextIO

from sorcery.board import Board
from sorcery.cardfactory import load_deck
from sorcery.player import GameError, Player

_HELP = """\
Commands: help -- Display this message.
          end  -- End the current player's turn.
          quit -- End the game.
          attack minion other-minion -- Orders minion to attack other-minion.
          attack minion -- Orders minion to attack the opponent.
          play card [target-player target-card] -- Play card, optionally targeting target-card owned by target-player.
          use minion [target-player target-card] -- Use minion's special ability, optionally targeting target-card owned by target-player.
          inspect minion -- View a minion's card and all enchantments on that minion.
          hand -- Describe all cards in your hand.
          board -- Describe all cards on the board."""

_TESTING_HELP = """
          draw -- draw a card.
          discard -- discards the ith card in the player's hand."""


def _leading_ints(tokens: list[str]) -> list[int]:
    """The integers at the start of ``tokens``, stopping at the first non-integer."""
    values: list[int] = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


class Game:
    """Two players, a board, and whose turn it is."""

    def __init__(self, testing: bool, graphics: bool, deck_file1: str, deck_file2: str,
                 input_stream: TextIO | None = None) -> None:
        self.testing_mode = testing
        self.graphics_enabled = graphics
        self.deck_file1 = deck_file1
        self.deck_file2 = deck_file2
        self.init_file = ""
        self.current_id = 1
        self.board: Board | None = None
        self._input_stream = input_stream

    @property
    def _input(self) -> TextIO:
        return self._input_stream if self._input_stream is not None else sys.stdin

    def help_text(self) -> str:
        """The list of commands, including the testing-only ones when enabled."""
        return _HELP + _TESTING_HELP if self.testing_mode else _HELP

    def init(self, init_file: str = "") -> None:
        """Read both players' names, load their decks and deal opening hands.

        Names come from ``init_file`` when it can be opened, otherwise from input.
        """
        self.init_file = init_file
        source_lines: list[str] | None = None
        if init_file:
            try:
                with open(init_file, encoding="utf-8") as handle:
                    source_lines = handle.read().splitlines()
            except OSError:
                source_lines = None

        names = iter(source_lines) if source_lines is not None else None

        def read_name() -> str:
            if names is not None:
                return next(names, "")
            return self._input.readline().rstrip("\r\n")

        print("Enter Player 1's name: ", end="")
        name1 = read_name()
        print("Enter Player 2's name: ", end="")
        name2 = read_name()

        p1 = Player(name1, 1, load_deck(self.deck_file1), self)
        p2 = Player(name2, 2, load_deck(self.deck_file2), self)
        p1.draw_initial_hand(self.testing_mode)
        p2.draw_initial_hand(self.testing_mode)
        self.board = Board(p1, p2, self)

    def start(self) -> None:
        """Play turns, reading commands, until the input runs out."""
        while True:
            player = self.current_player
            player.start_turn()
            exhausted = True
            for raw in iter(self._input.readline, ""):
                line = raw.rstrip("\r\n")
                if line == "end":
                    exhausted = False
                    break
                self.process_command(line)
            player.end_turn()
            self.toggle_player()
            if exhausted:
                return

    def process_command(self, line: str) -> None:
        """Carry out one command typed by the current player."""
        tokens = line.split()
        cmd = tokens[0] if tokens else ""
        args = _leading_ints(tokens[1:])
        player = self.current_player
        board = self._board

        try:
            if cmd == "help":
                print(self.help_text())
            elif cmd in ("end", "inspect"):
                pass
            elif cmd == "quit":
                raise SystemExit(0)
            elif cmd == "attack":
                if args:
                    target = args[1] if len(args) > 1 else -1
                    player.attack(args[0], target, self.other_player)
            elif cmd == "play":
                if args:
                    target_player = args[1] if len(args) > 1 else -1
                    target_card = args[2] if len(args) > 2 else -1
                    player.play_card(args[0], target_player, target_card, self.testing_mode)
            elif cmd == "hand":
                print("\n".join(board.render_hand(player)))
            elif cmd == "board":
                print("\n".join(board.render()))
            elif self.testing_mode and cmd == "draw":
                player.draw_card()
            elif self.testing_mode and cmd == "discard":
                if args:
                    player.discard_card(args[0])
            else:
                print("Unknown command.", file=sys.stderr)
        except GameError as err:
            print(err, file=sys.stderr)

    @property
    def _board(self) -> Board:
        if self.board is None:
            raise GameError("The game has not been set up")
        return self.board

    def player(self, index: int) -> Player:
        """The player with the given id (1 or 2)."""
        return self._board.player(index)

    @property
    def current_player(self) -> Player:
        return self._board.player(self.current_id)

    @property
    def other_player(self) -> Player:
        return self._board.opponent(self.current_id)

    def toggle_player(self) -> None:
        """Pass the turn to the other player."""
        self.current_id = 2 if self.current_id == 1 else 1