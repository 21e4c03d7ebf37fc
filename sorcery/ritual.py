"""Rituals: cards that sit beside the board and fire while they hold charges."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from sorcery.card import Card, CardType
from sorcery.graphics import display_ritual
from sorcery.minion import Minion


class Ritual(Card):
    """A card that holds charges and spends them each time it is activated."""

    def __init__(self, name: str, cost: int, description: str,
                 activation_cost: int, charges: int) -> None:
        super().__init__(name, cost, description)
        self.activation_cost = activation_cost
        self.charges = charges

    @property
    def card_type(self) -> CardType:
        return CardType.RITUAL

    def add_charges(self, n: int) -> None:
        """Give the ritual more charges."""
        self.charges += n

    def can_activate(self) -> bool:
        """Whether enough charges remain to pay the activation cost."""
        return self.charges >= self.activation_cost

    def consume_charge(self) -> None:
        """Pay the activation cost, if the ritual can be activated."""
        if self.can_activate():
            self.charges -= self.activation_cost

    @abstractmethod
    def trigger(self, game: Any) -> None:
        """Apply the ritual's effect to the game."""

    def display(self) -> list[str]:
        return display_ritual(self.name, self.cost, self.activation_cost,
                              self.description, self.charges)


class DarkRitual(Ritual):
    """At the start of the owner's turn, the owner gains 1 magic."""

    def __init__(self) -> None:
        super().__init__("Dark Ritual", 0, "At the start of your, gain 1 magic", 1, 5)

    def trigger(self, game: Any) -> None:
        print("Dark Ritual Triggered")
        game.current_player.change_magic(1)


class AuraOfPower(Ritual):
    """Friendly minions gain +1/+1."""

    def __init__(self) -> None:
        super().__init__(
            "Aura of Power", 1,
            "Whenever a minion enters play under your control, it gains +1/+1", 1, 4,
        )

    def trigger(self, game: Any) -> None:
        print("Aura of Power Triggered")
        for card in game.current_player.board:
            if isinstance(card, Minion):
                card.modify_stats(1, 1)


class StandStill(Ritual):
    """Destroys the opponent's most recently played minion."""

    def __init__(self) -> None:
        super().__init__("Standstill", 3, "Whenever a minion enters play, destroy it", 2, 4)

    def trigger(self, game: Any) -> None:
        print("Standstill Triggered")
        opponent = game.other_player
        if opponent.board:
            opponent.graveyard.append(opponent.board.pop())