import pytest

from sorcery.card import CardType
from sorcery.graphics import display_ritual
from sorcery.minion import AirElemental, EarthElemental
from sorcery.player import Player
from sorcery.ritual import AuraOfPower, DarkRitual, Ritual, StandStill


class FakeGame:
    def __init__(self, p1, p2):
        self.p1 = p1
        self.p2 = p2

    @property
    def current_player(self):
        return self.p1

    @property
    def other_player(self):
        return self.p2

    def player(self, index):
        return self.p1 if index == 1 else self.p2


@pytest.fixture
def game():
    return FakeGame(Player("Alice", 1, []), Player("Bob", 2, []))


def test_ritual_is_abstract():
    with pytest.raises(TypeError):
        Ritual("X", 1, "", 1, 1)


def test_dark_ritual_fields():
    r = DarkRitual()
    assert r.name == "Dark Ritual"
    assert r.cost == 0
    assert r.activation_cost == 1
    assert r.charges == 5
    assert r.card_type is CardType.RITUAL


def test_consume_charge_spends_activation_cost():
    r = StandStill()
    before = r.charges
    r.consume_charge()
    assert r.charges == before - r.activation_cost


def test_consume_charge_stops_when_exhausted():
    r = StandStill()
    while r.can_activate():
        r.consume_charge()
    remaining = r.charges
    assert remaining < r.activation_cost
    r.consume_charge()
    assert r.charges == remaining
    assert not r.can_activate()


def test_add_charges():
    r = AuraOfPower()
    before = r.charges
    r.add_charges(3)
    assert r.charges == before + 3


def test_dark_ritual_gives_magic(game, capsys):
    before = game.p1.magic
    DarkRitual().trigger(game)
    assert game.p1.magic == before + 1
    assert "Dark Ritual Triggered" in capsys.readouterr().out


def test_aura_of_power_buffs_friendly_minions(game):
    minion = EarthElemental()
    game.p1.board.append(minion)
    enemy = AirElemental()
    game.p2.board.append(enemy)
    atk, dfn = minion.attack, minion.defense
    AuraOfPower().trigger(game)
    assert (minion.attack, minion.defense) == (atk + 1, dfn + 1)
    assert (enemy.attack, enemy.defense) == (1, 1)


def test_standstill_destroys_last_enemy_minion(game):
    first, last = AirElemental(), EarthElemental()
    game.p2.board.extend([first, last])
    StandStill().trigger(game)
    assert game.p2.board == [first]
    assert game.p2.graveyard == [last]


def test_standstill_on_empty_board(game):
    StandStill().trigger(game)
    assert game.p2.board == []
    assert game.p2.graveyard == []


def test_display_matches_renderer():
    r = DarkRitual()
    assert r.display() == display_ritual("Dark Ritual", 0, 1, r.description, 5)
    assert any("Dark Ritual" in line for line in r.display())