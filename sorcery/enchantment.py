"""Enchantments: cards that wrap a minion and change its stats."""

from __future__ import annotations

from sorcery.card import CardType
from sorcery.graphics import display_enchantment, display_enchantment_attack_defence
from sorcery.minion import Minion


class Enchantment(Minion):
    """A layer placed over a minion that may override or adjust its stats."""

    def __init__(self, name: str, cost: int, description: str, target: Minion) -> None:
        super().__init__(name, cost, description, 0, 0)
        self.target = target
        self.attack_modifier = 0
        self.defense_modifier = 0
        self.override_stats = False
        self.new_attack = 0
        self.new_defense = 0

    @property
    def card_type(self) -> CardType:
        return CardType.ENCHANTMENT

    @property
    def base(self) -> Minion:
        """The minion this enchantment was placed on."""
        return self.target

    def set_stat_override(self, attack: int, defense: int) -> None:
        """Replace the minion's attack and defence with fixed values."""
        self.override_stats = True
        self.new_attack = attack
        self.new_defense = defense

    def set_stat_modifier(self, atk_delta: int, def_delta: int) -> None:
        """Adjust the minion's attack and defence by the given amounts."""
        self.attack_modifier = atk_delta
        self.defense_modifier = def_delta

    def display(self) -> list[str]:
        if self.override_stats:
            return display_enchantment_attack_defence(
                self.name, self.cost, self.description,
                str(self.new_attack), str(self.new_defense),
            )
        if self.attack_modifier or self.defense_modifier:
            return display_enchantment_attack_defence(
                self.name, self.cost, self.description,
                f"{self.attack_modifier:+d}", f"{self.defense_modifier:+d}",
            )
        return display_enchantment(self.name, self.cost, self.description)