"""Text-mode card frames and the functions that fill them in."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

Template = tuple[str, ...]

# Stands in for "~" while a template is being filled; never appears in card text.
_DELIMITER = "\v"

_INNER = 31
_BLANK = " " * _INNER


def _top(*widths: int) -> str:
    return "┏" + "┯".join("━" * w for w in widths) + "┓"


def _bottom(*widths: int) -> str:
    return "┗" + "┷".join("━" * w for w in widths) + "┛"


def _row(content: str, left: str = "┃", right: str = "┃") -> str:
    if len(content) != _INNER:
        raise ValueError(f"row content must be {_INNER} wide: {content!r}")
    return left + content + right


def _field(flag: str, width: int) -> str:
    return "~" + flag * (width - 2) + "~"


def _text_block(flag: str, widths: Sequence[int]) -> list[str]:
    """Split one field over several lines, marked at its first and last character."""
    parts = [flag * w for w in widths]
    parts[0] = "~" + parts[0][1:]
    parts[-1] = parts[-1][:-1] + "~"
    return parts


def _card_header() -> list[str]:
    return [
        _top(25, 5),
        _row(" " + _field("N", 23) + " │ " + _field("C", 3) + " "),
        _row("─" * 25 + "┴" + "─" * 5, "┠", "┨"),
        _row(" " + _field("T", 29) + " "),
    ]


def _wide_description(lines: int) -> list[str]:
    return [_row(" " + part + " ") for part in _text_block("E", [29] * lines)]


def _ability_description() -> list[str]:
    first, second, third = _text_block("E", [23, 23, 23])
    return [
        _row("─" * 5 + "┬" + "─" * 25, "┠", "┨"),
        _row(" " + _field("K", 3) + " │ " + first + " "),
        _row("─" * 5 + "┘ " + second + " ", "┠", "┃"),
        _row(" " * 7 + third + " "),
    ]


_STATS_RULE = _row("─" * 5 + "┐" + " " * 19 + "┌" + "─" * 5, "┠", "┨")
_STATS_ROW = _row(" " + _field("A", 4) + "│" + " " * 19 + "│" + _field("D", 4) + " ")
_STATS_BOTTOM = _bottom(5, 19, 5)
_PLAIN_RULE = _row("─" * _INNER, "┠", "┨")

CARD_TEMPLATE_MINION_NO_ABILITY: Template = tuple(
    _card_header()
    + [_PLAIN_RULE]
    + _wide_description(3)
    + [_STATS_RULE, _STATS_ROW, _STATS_BOTTOM]
)

CARD_TEMPLATE_MINION_WITH_ABILITY: Template = tuple(
    _card_header()
    + _ability_description()
    + [_STATS_RULE, _STATS_ROW, _STATS_BOTTOM]
)

CARD_TEMPLATE_BORDER: Template = tuple([_top(_INNER)] + [_row(_BLANK)] * 9 + [_bottom(_INNER)])

CARD_TEMPLATE_EMPTY: Template = (" " * (_INNER + 2),) * 11

CARD_TEMPLATE_RITUAL: Template = tuple(
    _card_header()
    + _ability_description()
    + [
        _row(" " * 25 + "┌" + "─" * 5, "┃", "┨"),
        _row(" " * 25 + "│" + _field("D", 4) + " "),
        _bottom(25, 5),
    ]
)

CARD_TEMPLATE_SPELL: Template = tuple(
    _card_header()
    + [_PLAIN_RULE]
    + _wide_description(5)
    + [_bottom(_INNER)]
)

CARD_TEMPLATE_ENCHANTMENT_WITH_ATTACK_DEFENCE: Template = CARD_TEMPLATE_MINION_NO_ABILITY
CARD_TEMPLATE_ENCHANTMENT: Template = CARD_TEMPLATE_SPELL

_PLAYER_STATS_ROW = _row(_field("H", 4) + " │" + " " * 19 + "│ " + _field("M", 4))

PLAYER_1_TEMPLATE: Template = tuple(
    [_top(_INNER)]
    + [_row(_BLANK)] * 2
    + [_row(" " * 9 + _field("N", 13) + " " * 9)]
    + [_row(_BLANK)] * 4
    + [_STATS_RULE, _PLAYER_STATS_ROW, _STATS_BOTTOM]
)

PLAYER_2_TEMPLATE: Template = tuple(
    [
        _top(5, 19, 5),
        _PLAYER_STATS_ROW,
        _row("─" * 5 + "┘" + " " * 19 + "└" + "─" * 5, "┠", "┨"),
    ]
    + [_row(_BLANK)] * 4
    + [_row(" " * 10 + _field("N", 13) + " " * 8)]
    + [_row(_BLANK)] * 2
    + [_bottom(_INNER)]
)

# Block letters for the banner, one entry per letter, one string per row.
_BANNER_FONT: dict[str, tuple[str, ...]] = {
    "S": ("███████╗", "██╔════╝", "███████╗", "╚════██║", "███████║", "╚══════╝"),
    "O": (" ██████╗ ", "██╔═══██╗", "██║   ██║", "██║   ██║", "╚██████╔╝", " ╚═════╝ "),
    "R": ("██████╗ ", "██╔══██╗", "██████╔╝", "██╔══██╗", "██║  ██║", "╚═╝  ╚═╝"),
    "C": (" ██████╗", "██╔════╝", "██║     ", "██║     ", "╚██████╗", " ╚═════╝"),
    "E": ("███████╗", "██╔════╝", "█████╗  ", "██╔══╝  ", "███████╗", "╚══════╝"),
    "Y": ("██╗   ██╗", "╚██╗ ██╔╝", " ╚████╔╝ ", "  ╚██╔╝  ", "   ██║   ", "   ╚═╝   "),
}


def _banner(word: str) -> list[str]:
    glyphs = [_BANNER_FONT[letter] for letter in word]
    return ["".join(rows) for rows in zip(*glyphs)]


def _centre_graphic(width: int, indent: int) -> Template:
    inner = width - 2
    rule = "╠" + "═" * inner + "╣"
    blank = "║" + " " * inner + "║"
    art = ["║" + (" " * indent + line).ljust(inner) + "║" for line in _banner("SORCERY")]
    return tuple([rule, blank] + art + [blank, rule])


CENTRE_GRAPHIC: Template = _centre_graphic(5 * (_INNER + 2), 53)

EXTERNAL_BORDER_CHAR_UP_DOWN = "║"
EXTERNAL_BORDER_CHAR_LEFT_RIGHT = "═"
EXTERNAL_BORDER_CHAR_TOP_LEFT = "╔"
EXTERNAL_BORDER_CHAR_TOP_RIGHT = "╗"
EXTERNAL_BORDER_CHAR_BOTTOM_LEFT = "╚"
EXTERNAL_BORDER_CHAR_BOTTOM_RIGHT = "╝"


class _Frame:
    """A template being filled in, one field at a time."""

    def __init__(self, template: Iterable[str]) -> None:
        self._rows = [list(line.replace("~", _DELIMITER)) for line in template]

    def _fill(self, flag: str, text: str, from_right: bool) -> None:
        chars: Iterator[str] = reversed(text) if from_right else iter(text)
        step = -1 if from_right else 1
        rows = reversed(self._rows) if from_right else self._rows
        active = False
        for row in rows:
            snapshot = list(row)
            columns = reversed(range(len(row))) if from_right else range(len(row))
            for col in columns:
                ch = snapshot[col]
                neighbour = col + step
                following = snapshot[neighbour] if 0 <= neighbour < len(row) else ""
                closing = False
                if ch == _DELIMITER and following == flag:
                    active = True
                elif ch == _DELIMITER:
                    closing = True
                if active and ch in (flag, _DELIMITER):
                    row[col] = next(chars, " ")
                if closing:
                    active = False

    def left(self, flag: str, text: object) -> _Frame:
        self._fill(flag, str(text), from_right=False)
        return self

    def right(self, flag: str, text: object) -> _Frame:
        self._fill(flag, str(text), from_right=True)
        return self

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._rows]


def _minion(template: Template, name: str, cost: int, attack: int, defence: int,
            desc: str, ability_cost: int) -> list[str]:
    return (
        _Frame(template)
        .left("N", name)
        .right("C", cost)
        .right("T", "Minion")
        .left("A", attack)
        .right("D", defence)
        .left("E", desc)
        .left("K", ability_cost)
        .lines()
    )


def _enchantment(template: Template, name: str, cost: int, desc: str,
                 attack: str, defence: str) -> list[str]:
    return (
        _Frame(template)
        .left("N", name)
        .right("C", cost)
        .right("T", "Enchantment")
        .left("E", desc)
        .left("A", attack)
        .right("D", defence)
        .lines()
    )


def display_minion_no_ability(name: str, cost: int, attack: int, defence: int) -> list[str]:
    """Render a minion that has no ability."""
    return _minion(CARD_TEMPLATE_MINION_NO_ABILITY, name, cost, attack, defence, "", 0)


def display_minion_triggered_ability(name: str, cost: int, attack: int, defence: int,
                                     trigger_desc: str) -> list[str]:
    """Render a minion whose ability fires on a trigger."""
    return _minion(CARD_TEMPLATE_MINION_NO_ABILITY, name, cost, attack, defence,
                   trigger_desc, 0)


def display_minion_activated_ability(name: str, cost: int, attack: int, defence: int,
                                     ability_cost: int, ability_desc: str) -> list[str]:
    """Render a minion with an ability that costs magic to use."""
    return _minion(CARD_TEMPLATE_MINION_WITH_ABILITY, name, cost, attack, defence,
                   ability_desc, ability_cost)


def display_ritual(name: str, cost: int, ritual_cost: int, ritual_desc: str,
                   ritual_charges: int) -> list[str]:
    """Render a ritual card."""
    return (
        _Frame(CARD_TEMPLATE_RITUAL)
        .left("N", name)
        .right("C", cost)
        .right("T", "Ritual")
        .left("K", ritual_cost)
        .left("E", ritual_desc)
        .right("D", ritual_charges)
        .lines()
    )


def display_spell(name: str, cost: int, desc: str) -> list[str]:
    """Render a spell card."""
    return (
        _Frame(CARD_TEMPLATE_SPELL)
        .left("N", name)
        .right("C", cost)
        .right("T", "Spell")
        .left("E", desc)
        .lines()
    )


def display_enchantment(name: str, cost: int, desc: str) -> list[str]:
    """Render an enchantment with no attack or defence change shown."""
    return _enchantment(CARD_TEMPLATE_ENCHANTMENT, name, cost, desc, "", "")


def display_enchantment_attack_defence(name: str, cost: int, desc: str,
                                       attack: str, defence: str) -> list[str]:
    """Render an enchantment that shows its attack and defence change."""
    return _enchantment(CARD_TEMPLATE_ENCHANTMENT_WITH_ATTACK_DEFENCE,
                        name, cost, desc, attack, defence)


def display_player_card(player_num: int, name: str, life: int, mana: int) -> list[str]:
    """Render the card that shows a player's name, life and magic."""
    template = PLAYER_1_TEMPLATE if player_num == 1 else PLAYER_2_TEMPLATE
    if len(name) < 13:
        name = " " * ((13 - len(name)) // 2 - 1) + name
    return (
        _Frame(template)
        .left("N", name)
        .right("H", life)
        .left("M", mana)
        .lines()
    )