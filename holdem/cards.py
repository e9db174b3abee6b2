"""Playing cards and the deck."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import overload

from holdem.console import read_csv

SUITS = ("corazones", "diamantes", "tréboles", "picas")
RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
DECK_SIZE = 52
DEFAULT_CARDS_PATH = Path("data") / "cartas_poker.csv"

_FACE_VALUES = {"A": 14, "K": 13, "Q": 12, "J": 11}
_SUIT_SYMBOLS = {"corazones": "♥️", "diamantes": "♦️", "picas": "♠️"}
_CLUB_SYMBOL = "♣️"


def card_value(rank: str) -> int:
    """Numeric value of a rank: 2-10 as written, J=11, Q=12, K=13, A=14."""
    if rank in _FACE_VALUES:
        return _FACE_VALUES[rank]
    try:
        return int(rank)
    except ValueError:
        raise ValueError(f"unknown card rank: {rank!r}") from None


def suit_index(suit: str) -> int | None:
    """Position of a suit in the fixed suit order, or ``None`` if unknown."""
    try:
        return SUITS.index(suit)
    except ValueError:
        return None


def suit_symbol(suit: str) -> str:
    """Symbol for a suit; anything not hearts, diamonds or spades shows as clubs."""
    return _SUIT_SYMBOLS.get(suit, _CLUB_SYMBOL)


@dataclass(frozen=True)
class Card:
    """A single card."""

    card_id: int
    rank: str
    suit: str

    def value(self) -> int:
        return card_value(self.rank)

    def describe(self) -> str:
        return f"{self.rank} de {self.suit} {suit_symbol(self.suit)}"


class Deck:
    """An ordered deck of at most 52 cards."""

    def __init__(self, cards=()) -> None:
        self.cards: list[Card] = list(cards)
        if len(self.cards) > DECK_SIZE:
            raise ValueError(f"a deck holds at most {DECK_SIZE} cards")

    @staticmethod
    def standard() -> Deck:
        """The 52 cards in suit order, each suit from 2 to ace."""
        cards = (
            Card(number, rank, suit)
            for number, (suit, rank) in enumerate(
                ((s, r) for s in SUITS for r in RANKS), start=1
            )
        )
        return Deck(cards)

    @staticmethod
    def from_csv(path=DEFAULT_CARDS_PATH) -> Deck:
        """Load a deck from a CSV file with a header and columns id, rank, suit."""
        with open(path, encoding="utf-8", newline="") as stream:
            rows = read_csv(stream)
            next(rows, None)
            cards = [
                Card(int(fields[0]), fields[1], fields[2])
                for fields in rows
                if fields
            ]
        return Deck(cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the cards in place."""
        (rng or random).shuffle(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> list[Card]: ...

    def __getitem__(self, index):
        return self.cards[index]