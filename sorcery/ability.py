"""Abilities that minions carry: paid for on use, or fired by game events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Ability(ABC):
    """Something a card can do to the game."""

    @abstractmethod
    def execute(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        """Carry out the ability, optionally aimed at a player's card."""


class ActivatedAbility(Ability):
    """An ability that a player uses by paying its magic cost."""

    def __init__(self, cost: int) -> None:
        self.cost = cost


class TriggeredAbility(Ability):
    """An ability that fires when the game announces the event named by its key."""

    def __init__(self, key: str) -> None:
        self.key = key