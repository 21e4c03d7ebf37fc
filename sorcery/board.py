"""The table both players sit at: rendering it and passing game events to listeners."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Sequence

from sorcery.ability import Ability
from sorcery.graphics import (
    CARD_TEMPLATE_BORDER,
    CARD_TEMPLATE_EMPTY,
    CENTRE_GRAPHIC,
    display_player_card,
)
from sorcery.minion import BOARD_LIMIT
from sorcery.player import Player

BLOCK_HEIGHT = 11


@dataclass(frozen=True)
class _Listener:
    key: str
    ability: Ability


def _rows(cards: Sequence[Sequence[str]], height: int) -> list[str]:
    """Lay cards side by side and return the first ``height`` text rows."""
    return ["".join(row) for row in islice(zip(*cards), height)]


class Board:
    """Holds both players and the listeners that react to game events."""

    def __init__(self, player1: Player, player2: Player, game: Any = None) -> None:
        self.player1 = player1
        self.player2 = player2
        self.game = game
        self._listeners: list[_Listener] = []

    def player(self, player_id: int) -> Player:
        """The player with the given id (1 or 2)."""
        return self.player1 if player_id == 1 else self.player2

    def opponent(self, player_id: int) -> Player:
        """The other player from the one with the given id."""
        return self.player2 if player_id == 1 else self.player1

    @staticmethod
    def _minion_row(player: Player) -> list[Sequence[str]]:
        cards: list[Sequence[str]] = [card.display() for card in player.board]
        cards.extend([CARD_TEMPLATE_BORDER] * (BOARD_LIMIT - len(cards)))
        return cards

    @staticmethod
    def _info_row(player: Player, number: int) -> list[Sequence[str]]:
        ritual = player.ritual.display() if player.ritual is not None else CARD_TEMPLATE_BORDER
        grave = player.graveyard[-1].display() if player.graveyard else CARD_TEMPLATE_BORDER
        info = display_player_card(number, player.name, player.life, player.magic)
        return [ritual, CARD_TEMPLATE_EMPTY, info, CARD_TEMPLATE_EMPTY, grave]

    def render(self) -> list[str]:
        """Render the whole board as lines of text."""
        lines = _rows(self._minion_row(self.player1), BLOCK_HEIGHT)
        lines += _rows(self._info_row(self.player1, 1), BLOCK_HEIGHT)
        lines += _rows([CENTRE_GRAPHIC], BLOCK_HEIGHT - 1)
        lines += _rows(self._info_row(self.player2, 2), BLOCK_HEIGHT)
        lines += _rows(self._minion_row(self.player2), BLOCK_HEIGHT)
        return lines

    def render_hand(self, player: Player) -> list[str]:
        """Render the cards in a player's hand side by side."""
        if not player.hand:
            return ["Hand is empty."]
        return _rows([card.display() for card in player.hand], BLOCK_HEIGHT)

    def register_listener(self, key: str, ability: Ability) -> None:
        """Have an ability run whenever the event named by ``key`` happens."""
        self._listeners.append(_Listener(key, ability))

    def notify(self, key: str, player_id: int = -1, board_idx: int = -1) -> None:
        """Run every ability listening for the named event."""
        for listener in list(self._listeners):
            if listener.key == key:
                listener.ability.execute(self.game, player_id, board_idx)

    def start_turn(self) -> None:
        self.notify("StartTurn")

    def end_turn(self) -> None:
        self.notify("EndTurn")

    def minion_enter(self, player_id: int, index: int) -> None:
        self.notify("MinionEnters", player_id, index)

    def minion_leave(self, player_id: int, index: int) -> None:
        self.notify("MinionLeaves", player_id, index)