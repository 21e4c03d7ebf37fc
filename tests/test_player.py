import pytest

from sorcery.enchantment import Enchantment
from sorcery.minion import AirElemental, EarthElemental
from sorcery.player import GameError, Player
from sorcery.ritual import DarkRitual
from sorcery.spell import Blizzard, Recharge


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
def players():
    p1 = Player("Alice", 1, [])
    p2 = Player("Bob", 2, [])
    game = FakeGame(p1, p2)
    p1.game = game
    p2.game = game
    return p1, p2


def test_starting_values():
    p = Player("Alice", 1, [])
    assert (p.life, p.magic) == (20, 3)
    assert p.hand == [] and p.board == [] and p.ritual is None


def test_draw_card_takes_top_of_deck():
    air, earth = AirElemental(), EarthElemental()
    p = Player("Alice", 1, [air, earth])
    p.draw_card()
    assert p.hand == [earth]
    assert p.deck == [air]


def test_draw_card_respects_hand_limit():
    p = Player("Alice", 1, [AirElemental() for _ in range(7)])
    for _ in range(7):
        p.draw_card()
    assert len(p.hand) == 5
    assert len(p.deck) == 2


def test_initial_hand_in_testing_mode_is_repeatable():
    names = ["Air Elemental", "Earth Elemental", "Bone Golem", "Banish",
             "Blizzard", "Recharge", "Dark Ritual"]
    from sorcery.cardfactory import create_card

    a = Player("A", 1, [create_card(n) for n in names])
    b = Player("B", 2, [create_card(n) for n in names])
    a.draw_initial_hand(True)
    b.draw_initial_hand(True)
    assert [c.name for c in a.hand] == [c.name for c in b.hand]
    assert len(a.hand) == 5
    assert sorted(c.name for c in a.hand + a.deck) == sorted(names)


def test_play_minion(players, capsys):
    p1, _ = players
    earth = EarthElemental()
    p1.hand.append(earth)
    before = p1.magic
    p1.play_card(1)
    assert p1.board == [earth]
    assert p1.hand == []
    assert p1.magic == before - earth.cost
    assert "Alice placed Earth Elemental" in capsys.readouterr().out


def test_play_invalid_index_raises(players):
    p1, _ = players
    with pytest.raises(GameError):
        p1.play_card(1)


def test_play_without_enough_magic_raises(players):
    p1, _ = players
    p1.magic = 0
    earth = EarthElemental()
    p1.hand.append(earth)
    with pytest.raises(GameError):
        p1.play_card(1)
    assert p1.hand == [earth]
    assert p1.magic == 0


def test_testing_mode_spell_drains_magic(players):
    p1, p2 = players
    p1.magic = 1
    p1.hand.append(Blizzard())
    p1.play_card(1, testing_mode=True)
    assert p1.magic == 0
    assert p1.hand == []


def test_play_spell_applies_effect(players, capsys):
    p1, _ = players
    ritual = DarkRitual()
    p1.ritual = ritual
    before = ritual.charges
    p1.hand.append(Recharge())
    p1.play_card(1, 1)
    assert ritual.charges == before + 3
    assert p1.hand == []
    assert "Alice played spell: Recharge" in capsys.readouterr().out


def test_play_ritual(players):
    p1, _ = players
    ritual = DarkRitual()
    p1.hand.append(ritual)
    p1.play_card(1)
    assert p1.ritual is ritual
    assert p1.hand == []


def test_play_enchantment_raises(players):
    p1, _ = players
    p1.hand.append(Enchantment("Giant Strength", 1, "", AirElemental()))
    with pytest.raises(GameError):
        p1.play_card(1)


def test_play_minion_on_full_board_raises(players):
    p1, _ = players
    p1.board.extend(AirElemental() for _ in range(5))
    p1.hand.append(AirElemental())
    with pytest.raises(GameError, match="Board full"):
        p1.play_card(1)
    assert len(p1.board) == 5


def test_attack_player_directly(players):
    p1, p2 = players
    earth = EarthElemental()
    earth.restore_action()
    p1.board.append(earth)
    before = p2.life
    p1.attack(1, -1, p2)
    assert p2.life == before - earth.attack
    assert not earth.can_act()


def test_attack_without_action_raises(players):
    p1, p2 = players
    p1.board.append(EarthElemental())
    with pytest.raises(GameError, match="cannot act"):
        p1.attack(1, -1, p2)


def test_attack_invalid_attacker_raises(players):
    p1, p2 = players
    with pytest.raises(GameError):
        p1.attack(1, -1, p2)


def test_attack_minion_kills_weaker(players):
    p1, p2 = players
    earth, air = EarthElemental(), AirElemental()
    earth.restore_action()
    p1.board.append(earth)
    p2.board.append(air)
    before = earth.defense
    p1.attack(1, 1, p2)
    assert earth.defense == before - air.attack
    assert p2.board == []
    assert p2.graveyard == [air]
    assert p1.board == [earth]


def test_attack_invalid_target_raises(players):
    p1, p2 = players
    earth = EarthElemental()
    earth.restore_action()
    p1.board.append(earth)
    with pytest.raises(GameError):
        p1.attack(1, 2, p2)


def test_start_turn(players, capsys):
    p1, _ = players
    air = AirElemental()
    p1.board.append(air)
    p1.deck.append(EarthElemental())
    before = p1.magic
    p1.start_turn()
    assert p1.magic == before + 1
    assert air.can_act()
    assert len(p1.hand) == 1
    assert f"Alice starts turn with {p1.magic} magic." in capsys.readouterr().out


def test_end_turn(players, capsys):
    p1, _ = players
    p1.end_turn()
    assert "Alice ends turn." in capsys.readouterr().out


def test_discard(players):
    p1, _ = players
    air, earth = AirElemental(), EarthElemental()
    p1.hand.extend([air, earth])
    p1.discard_card(1)
    assert p1.hand == [earth]
    with pytest.raises(GameError):
        p1.discard_card(2)


def test_destroy_minion(players):
    p1, _ = players
    air = AirElemental()
    p1.board.append(air)
    p1.destroy_minion(3)
    assert p1.board == [air]
    p1.destroy_minion(0)
    assert p1.board == []
    assert p1.graveyard == [air]


def test_remove_ritual(players):
    p1, _ = players
    p1.ritual = DarkRitual()
    p1.remove_ritual()
    assert p1.ritual is None
    with pytest.raises(GameError):
        p1.remove_ritual()


def test_change_life_and_magic(players):
    p1, _ = players
    life, magic = p1.life, p1.magic
    p1.change_life(-4)
    p1.change_magic(2)
    assert (p1.life, p1.magic) == (life - 4, magic + 2)