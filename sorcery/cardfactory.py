"""Building cards by name and loading decks from files."""

from __future__ import annotations

import sys
from collections.abc import Callable
from os import PathLike

from sorcery.card import Card
from sorcery.minion import (
    AirElemental,
    ApprenticeSummoner,
    BoneGolem,
    EarthElemental,
    FireElemental,
    MasterSummoner,
    NovicePyromancer,
    PotionSeller,
)
from sorcery.ritual import AuraOfPower, DarkRitual, StandStill
from sorcery.spell import Banish, Blizzard, Disenchant, RaiseDead, Recharge, Unsummon


class UnknownCardError(ValueError):
    """Raised when a card name matches no known card."""


_CARDS: dict[str, Callable[[], Card]] = {
    "Air Elemental": AirElemental,
    "Earth Elemental": EarthElemental,
    "Bone Golem": BoneGolem,
    "Fire Elemental": FireElemental,
    "Potion Seller": PotionSeller,
    "Novice Pyromancer": NovicePyromancer,
    "Apprentice Summoner": ApprenticeSummoner,
    "Master Summoner": MasterSummoner,
    "Dark Ritual": DarkRitual,
    "Aura of Power": AuraOfPower,
    "Standstill": StandStill,
    "Banish": Banish,
    "Unsummon": Unsummon,
    "Recharge": Recharge,
    "Disenchant": Disenchant,
    "Raise Dead": RaiseDead,
    "Blizzard": Blizzard,
}


def create_card(name: str) -> Card:
    """Make a fresh card from its name."""
    try:
        factory = _CARDS[name]
    except KeyError:
        raise UnknownCardError(f"Unknown card name: {name}") from None
    return factory()


def load_deck(filename: str | PathLike[str]) -> list[Card]:
    """Read a deck file holding one card name per line.

    Unknown names are reported and skipped; a file that cannot be opened
    gives an empty deck.
    """
    deck: list[Card] = []
    try:
        with open(filename, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        return deck
    for name in lines:
        try:
            deck.append(create_card(name))
        except UnknownCardError as err:
            print(err, file=sys.stderr)
    return deck