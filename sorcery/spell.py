"""Spells: one-shot cards that act on the game and are then spent."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from sorcery.card import Card, CardType
from sorcery.enchantment import Enchantment
from sorcery.graphics import display_spell
from sorcery.minion import BOARD_LIMIT, Minion
from sorcery.player import GameError
from sorcery.ritual import Ritual

HAND_LIMIT = 5

# The target number that names a player's ritual rather than a minion.
_RITUAL_TARGET = 7


class Spell(Card):
    """A card whose effect happens once, when it is played."""

    @property
    def card_type(self) -> CardType:
        return CardType.SPELL

    @abstractmethod
    def effect(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        """Apply the spell to the game."""

    def display(self) -> list[str]:
        return display_spell(self.name, self.cost, self.description)


class Banish(Spell):
    """Destroy a target minion or ritual."""

    def __init__(self) -> None:
        super().__init__("Banish", 2, "Destroy target minion or ritual")

    def effect(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        player = game.player(target_player)
        if target_card == _RITUAL_TARGET:
            player.remove_ritual()
        else:
            player.destroy_minion(target_card - 1)


class Unsummon(Spell):
    """Return a target minion to its owner's hand."""

    def __init__(self) -> None:
        super().__init__("Unsummon", 1, "Return target minion to its owner's hand")

    def effect(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        player = game.player(target_player)
        if not 1 <= target_card <= len(player.board) or len(player.hand) >= HAND_LIMIT:
            return
        player.hand.append(player.board.pop(target_card - 1))


class Recharge(Spell):
    """The target player's ritual gains 3 charges."""

    def __init__(self) -> None:
        super().__init__("Recharge", 1, "Your ritual gains 3 charges")

    def effect(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        ritual = game.player(target_player).ritual
        if isinstance(ritual, Ritual):
            ritual.add_charges(3)


class Disenchant(Spell):
    """Strip the top enchantment from a target minion."""

    def __init__(self) -> None:
        super().__init__("Disenchant", 1, "Destroy the top enchantment on target minion")

    def effect(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        board = game.player(target_player).board
        if not 1 <= target_card <= len(board):
            return
        card = board[target_card - 1]
        if isinstance(card, Enchantment):
            board[target_card - 1] = card.base


class RaiseDead(Spell):
    """Bring back the newest minion in the graveyard with 1 defence."""

    def __init__(self) -> None:
        super().__init__(
            "Raise Dead", 1,
            "Resurrect the top minion in your graveyard and set its defence to 1",
        )

    def effect(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        player = game.player(target_player)
        if not player.graveyard or len(player.board) >= BOARD_LIMIT:
            raise GameError("Graveyard is empty or board is full")
        card = player.graveyard.pop()
        if isinstance(card, Minion):
            card.defense = 1
        player.board.append(card)


class Blizzard(Spell):
    """Deal 2 damage to every minion on the board."""

    def __init__(self) -> None:
        super().__init__("Blizzard", 3, "Deal 2 damage to all minions")

    def effect(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        for player in (game.player(1), game.player(2)):
            for card in list(player.board):
                if not isinstance(card, Minion):
                    continue
                card.defense -= 2
                if card.defense <= 0:
                    player.destroy_minion(player.board.index(card))