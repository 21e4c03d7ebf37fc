"""The common shape of every card in the game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class CardType(Enum):
    """The kinds of card a deck may hold."""

    MINION = "Minion"
    SPELL = "Spell"
    RITUAL = "Ritual"
    ENCHANTMENT = "Enchantment"


class Card(ABC):
    """A card with a name, a magic cost and a description."""

    def __init__(self, name: str, cost: int, description: str) -> None:
        self.name = name
        self.cost = cost
        self.description = description

    @property
    @abstractmethod
    def card_type(self) -> CardType:
        """The kind of card this is."""

    @abstractmethod
    def display(self) -> list[str]:
        """Render the card as lines of text."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, cost={self.cost})"