import pytest

from sorcery.ability import Ability, ActivatedAbility, TriggeredAbility
from sorcery.minion import (
    AirElemental,
    ApprenticeSummonerAbility,
    BoneGolem,
    FireElemental,
    MasterSummonerAbility,
    NovicePyromancerAbility,
)


class FakePlayer:
    def __init__(self, magic=3):
        self.magic = magic
        self.board = []
        self.graveyard = []

    def change_magic(self, delta):
        self.magic += delta

    def destroy_minion(self, index):
        if 0 <= index < len(self.board):
            self.graveyard.append(self.board.pop(index))


class FakeGame:
    def __init__(self):
        self.players = {1: FakePlayer(), 2: FakePlayer()}
        self.current = 1

    @property
    def current_player(self):
        return self.players[self.current]

    def player(self, index):
        return self.players[index]


def test_ability_is_abstract():
    with pytest.raises(TypeError):
        Ability()


def test_activated_ability_without_execute_is_abstract():
    with pytest.raises(TypeError):
        ActivatedAbility(1)


def test_triggered_ability_without_execute_is_abstract():
    with pytest.raises(TypeError):
        TriggeredAbility("StartTurn")


@pytest.mark.parametrize(
    "ability, cost",
    [(NovicePyromancerAbility(), 1), (ApprenticeSummonerAbility(), 1), (MasterSummonerAbility(), 2)],
)
def test_activated_ability_keeps_cost(ability, cost):
    assert isinstance(ability, ActivatedAbility)
    assert ability.cost == cost


def test_execute_works_with_default_targets():
    game = FakeGame()
    ApprenticeSummonerAbility().execute(game)
    assert [m.name for m in game.current_player.board] == ["Air Elemental"]


def test_execute_passes_targets():
    game = FakeGame()
    target = AirElemental()
    target.modify_stats(0, 2)
    game.player(2).board.append(target)
    NovicePyromancerAbility().execute(game, 2, 0)
    assert target.defense == 2


def test_triggered_ability_keeps_key():
    golem = BoneGolem()
    assert isinstance(golem.ability, TriggeredAbility)
    assert golem.ability.key == "MinionLeaves"
    assert FireElemental().ability.key == "MinionEnters"
    golem.ability.execute(FakeGame())
    assert (golem.attack, golem.defense) == (2, 4)