"""Minions, the named minion cards, and the abilities they carry."""

from __future__ import annotations

from typing import Any

from sorcery.ability import Ability, ActivatedAbility, TriggeredAbility
from sorcery.card import Card, CardType
from sorcery.graphics import display_minion_no_ability

BOARD_LIMIT = 5


class Minion(Card):
    """A card that stays on the board and can attack."""

    def __init__(self, name: str, cost: int, description: str,
                 attack: int, defense: int) -> None:
        super().__init__(name, cost, description)
        self.attack = attack
        self.defense = defense
        self.actions = 0
        self.ability: Ability | None = None

    @property
    def card_type(self) -> CardType:
        return CardType.MINION

    def modify_stats(self, atk_delta: int, def_delta: int) -> None:
        """Add to the minion's attack and defence."""
        self.attack += atk_delta
        self.defense += def_delta

    def can_act(self) -> bool:
        """Whether the minion has an action left this turn."""
        return self.actions > 0

    def restore_action(self) -> None:
        """Give the minion its action for the turn."""
        self.actions = 1

    def spend_action(self) -> None:
        """Use up one action, if any remain."""
        if self.actions > 0:
            self.actions -= 1

    def display(self) -> list[str]:
        return display_minion_no_ability(self.name, self.cost, self.attack, self.defense)


class AirElemental(Minion):
    def __init__(self) -> None:
        super().__init__("Air Elemental", 0, "", 1, 1)


class EarthElemental(Minion):
    def __init__(self) -> None:
        super().__init__("Earth Elemental", 3, "", 4, 4)


class BoneGolem(Minion):
    def __init__(self) -> None:
        super().__init__("Bone Golem", 2, "Gain +1/+1 whenever a minion dies", 1, 3)
        self.ability = BoneGolemTrigger(self)


class FireElemental(Minion):
    def __init__(self) -> None:
        super().__init__("Fire Elemental", 2, "Deal 1 damage to minion entering play", 2, 2)
        self.ability = FireElementalTrigger(self)


class PotionSeller(Minion):
    def __init__(self) -> None:
        super().__init__("Potion Seller", 2, "End of turn: friendly minions get +0/+1", 1, 3)
        self.ability = PotionSellerTrigger(self)


class NovicePyromancer(Minion):
    def __init__(self) -> None:
        super().__init__("Novice Pyromancer", 1, "Deal 1 damage to a minion", 0, 1)
        self.ability = NovicePyromancerAbility()


class ApprenticeSummoner(Minion):
    def __init__(self) -> None:
        super().__init__("Apprentice Summoner", 1, "Summon one Air Elemental", 1, 1)
        self.ability = ApprenticeSummonerAbility()


class MasterSummoner(Minion):
    def __init__(self) -> None:
        super().__init__("Master Summoner", 3, "Summon up to three Air Elementals", 2, 3)
        self.ability = MasterSummonerAbility()


def _board_full(player: Any) -> bool:
    return len(player.board) >= BOARD_LIMIT


def _damage(player: Any, index: int, amount: int) -> None:
    """Deal damage to a minion on the player's board, destroying it if it dies."""
    card = player.board[index]
    if isinstance(card, Minion):
        card.modify_stats(0, -amount)
        if card.defense <= 0:
            player.destroy_minion(index)


class NovicePyromancerAbility(ActivatedAbility):
    """Pay 1 magic: deal 1 damage to a target minion."""

    def __init__(self) -> None:
        super().__init__(1)

    def execute(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        caster = game.current_player
        if caster.magic < self.cost:
            return
        victim = game.player(target_player)
        if not 0 <= target_card < len(victim.board):
            return
        caster.change_magic(-self.cost)
        _damage(victim, target_card, 1)


class ApprenticeSummonerAbility(ActivatedAbility):
    """Pay 1 magic: summon an Air Elemental."""

    def __init__(self) -> None:
        super().__init__(1)

    def execute(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        caster = game.current_player
        if caster.magic < self.cost or _board_full(caster):
            return
        caster.change_magic(-self.cost)
        caster.board.append(AirElemental())


class MasterSummonerAbility(ActivatedAbility):
    """Pay 2 magic: summon up to three Air Elementals."""

    def __init__(self) -> None:
        super().__init__(2)

    def execute(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        caster = game.current_player
        if caster.magic < self.cost:
            return
        caster.change_magic(-self.cost)
        for _ in range(3):
            if _board_full(caster):
                break
            caster.board.append(AirElemental())


class BoneGolemTrigger(TriggeredAbility):
    """Whenever a minion leaves play, the golem gains +1/+1."""

    def __init__(self, host: Minion) -> None:
        super().__init__("MinionLeaves")
        self.host = host

    def execute(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        self.host.modify_stats(1, 1)


class FireElementalTrigger(TriggeredAbility):
    """Whenever an opponent's minion enters play, deal 1 damage to it."""

    def __init__(self, host: Minion) -> None:
        super().__init__("MinionEnters")
        self.host = host

    def execute(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        enemy = game.player(target_player)
        if enemy is game.current_player:
            return
        if not 0 <= target_card < len(enemy.board):
            return
        _damage(enemy, target_card, 1)


class PotionSellerTrigger(TriggeredAbility):
    """At the end of the turn, every friendly minion gains +0/+1."""

    def __init__(self, host: Minion) -> None:
        super().__init__("EndOfTurn")
        self.host = host

    def execute(self, game: Any, target_player: int = -1, target_card: int = -1) -> None:
        for card in game.current_player.board:
            if isinstance(card, Minion):
                card.modify_stats(0, 1)