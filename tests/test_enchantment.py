from sorcery.card import CardType
from sorcery.enchantment import Enchantment
from sorcery.graphics import display_enchantment, display_enchantment_attack_defence
from sorcery.minion import EarthElemental


def _make():
    return Enchantment("Silence", 1, "Enchanted minion cannot use abilities",
                       EarthElemental())


def test_type_and_base():
    target = EarthElemental()
    ench = Enchantment("Magic Fatigue", 0, "", target)
    assert ench.card_type is CardType.ENCHANTMENT
    assert ench.base is target


def test_plain_display():
    ench = _make()
    assert ench.display() == display_enchantment(
        "Silence", 1, "Enchanted minion cannot use abilities")


def test_override_sets_fields_and_display():
    ench = _make()
    ench.set_stat_override(4, 5)
    assert ench.override_stats
    assert (ench.new_attack, ench.new_defense) == (4, 5)
    assert ench.display() == display_enchantment_attack_defence(
        "Silence", 1, "Enchanted minion cannot use abilities", "4", "5")


def test_modifier_sets_fields_and_display():
    ench = _make()
    ench.set_stat_modifier(2, 2)
    assert (ench.attack_modifier, ench.defense_modifier) == (2, 2)
    assert ench.display() == display_enchantment_attack_defence(
        "Silence", 1, "Enchanted minion cannot use abilities", "+2", "+2")


def test_modifier_display_differs_from_plain():
    ench = _make()
    plain = ench.display()
    ench.set_stat_modifier(-1, 0)
    assert ench.display() != plain
    assert len(ench.display()) == len(plain)


def test_base_stats_untouched():
    ench = _make()
    ench.set_stat_override(1, 1)
    assert (ench.base.attack, ench.base.defense) == (4, 4)