"""A player's life, magic and cards, and the moves a player can make."""

from __future__ import annotations

import random
from typing import Any

from sorcery.card import Card, CardType
from sorcery.minion import BOARD_LIMIT, Minion

HAND_LIMIT = 5
STARTING_LIFE = 20
STARTING_MAGIC = 3
TESTING_SEED = 12345


class GameError(Exception):
    """Raised when a move is not allowed."""


class Player:
    """One side of the game: its deck, hand, board, graveyard and ritual."""

    def __init__(self, name: str, player_id: int, deck: list[Card],
                 game: Any = None) -> None:
        self.name = name
        self.player_id = player_id
        self.game = game
        self.life = STARTING_LIFE
        self.magic = STARTING_MAGIC
        self.deck: list[Card] = list(deck)
        self.hand: list[Card] = []
        self.board: list[Card] = []
        self.graveyard: list[Card] = []
        self.ritual: Card | None = None

    def draw_card(self) -> None:
        """Move the top card of the deck into the hand, if there is room."""
        if len(self.hand) < HAND_LIMIT and self.deck:
            self.hand.append(self.deck.pop())

    def draw_initial_hand(self, testing_mode: bool) -> None:
        """Draw the opening hand, shuffling before each draw."""
        for _ in range(HAND_LIMIT):
            self.shuffle_and_draw(testing_mode, TESTING_SEED)

    def shuffle_and_draw(self, testing_mode: bool, seed: int) -> None:
        """Shuffle the deck and draw one card.

        In testing mode the given seed makes the shuffle repeatable.
        """
        rng = random.Random(seed) if testing_mode else random.Random()
        rng.shuffle(self.deck)
        self.draw_card()

    def play_card(self, index: int, target_player: int = -1, target_card: int = -1,
                  testing_mode: bool = False) -> None:
        """Play the card at a 1-based position in the hand."""
        if not 1 <= index <= len(self.hand):
            raise GameError("Invalid hand index")
        card = self.hand[index - 1]
        if card.cost <= self.magic:
            self.change_magic(-card.cost)
        elif testing_mode and card.card_type is CardType.SPELL:
            self.change_magic(-self.magic)
        else:
            raise GameError("Not enough magic")

        kind = card.card_type
        if kind is CardType.MINION:
            if len(self.board) >= BOARD_LIMIT:
                raise GameError("Board full!")
            print(f"{self.name} placed {card.name}")
            self.board.append(self.hand.pop(index - 1))
        elif kind is CardType.SPELL:
            spell = self.hand.pop(index - 1)
            spell.effect(self.game, target_player, target_card)
            print(f"{self.name} played spell: {spell.name}")
        elif kind is CardType.RITUAL:
            self.ritual = self.hand.pop(index - 1)
            print(f"{self.name} played ritual: {self.ritual.name}")
        else:
            raise GameError("enchantment is not allowed to be played on board")

    def attack(self, attacker_idx: int, defender_idx: int, opponent: Player) -> None:
        """Attack with a 1-based board minion, at the opponent or one of theirs (-1)."""
        if not 1 <= attacker_idx <= len(self.board):
            raise GameError("Invalid attacker")
        attacker = self.board[attacker_idx - 1]
        if not isinstance(attacker, Minion):
            raise GameError("Attacker is not a minion")
        if not attacker.can_act():
            raise GameError(f"{attacker.name} cannot act")
        attacker.spend_action()

        if defender_idx == -1:
            print("attacks opponent directly")
            opponent.change_life(-attacker.attack)
            return

        if not 1 <= defender_idx <= len(opponent.board):
            raise GameError("Invalid target minion index")
        target = opponent.board[defender_idx - 1]
        if not isinstance(target, Minion):
            raise GameError("Target card is not a minion")

        attacker.defense -= target.attack
        target.defense -= attacker.attack
        if attacker.defense <= 0:
            self.graveyard.append(self.board.pop(attacker_idx - 1))
        if target.defense <= 0:
            opponent.graveyard.append(opponent.board.pop(defender_idx - 1))

    def start_turn(self) -> None:
        """Gain magic, draw, and ready every minion."""
        self.magic += 1
        self.draw_card()
        print(f"{self.name} starts turn with {self.magic} magic.")
        for card in self.board:
            if isinstance(card, Minion):
                card.restore_action()

    def end_turn(self) -> None:
        """Announce the end of the turn."""
        print(f"{self.name} ends turn.")

    def discard_card(self, index: int) -> None:
        """Throw away the card at a 1-based position in the hand."""
        if not 1 <= index <= len(self.hand):
            raise GameError("Wrong index")
        del self.hand[index - 1]

    def change_life(self, delta: int) -> None:
        self.life += delta

    def change_magic(self, delta: int) -> None:
        self.magic += delta

    def destroy_minion(self, index: int) -> None:
        """Send the minion at a 0-based board position to the graveyard."""
        if 0 <= index < len(self.board):
            card = self.board.pop(index)
            print(f"{card.name} died")
            self.graveyard.append(card)

    def remove_ritual(self) -> None:
        """Take the player's ritual out of play."""
        if self.ritual is None:
            raise GameError("No ritual to remove")
        print(f"{self.ritual.name} removed")
        self.ritual = None

    def __repr__(self) -> str:
        return f"Player({self.name!r}, life={self.life}, magic={self.magic})"