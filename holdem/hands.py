"""Hand evaluation for seven-card (or fewer) Texas hold'em hands."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from holdem.cards import SUITS, Card, suit_index

HAND_SIZE = 5


class HandType(IntEnum):
    """Hand categories, weakest first."""

    CARTA_ALTA = 0
    PAR = 1
    DOS_PARES = 2
    TRIO = 3
    ESCALERA = 4
    COLOR = 5
    FULL_HOUSE = 6
    POKER_MANO = 7
    ESCALERA_COLOR = 8
    ESCALERA_REAL = 9


@dataclass(frozen=True)
class EvaluatedHand:
    """The best category found, the ranks that decide it and a comparable score."""

    hand_type: HandType
    values: tuple[int, ...]
    score: int

    def __lt__(self, other: EvaluatedHand) -> bool:
        return self.score < other.score

    def __gt__(self, other: EvaluatedHand) -> bool:
        return self.score > other.score


def _padded(values: Iterable[int]) -> tuple[int, ...]:
    items = list(values)[:HAND_SIZE]
    return tuple(items + [0] * (HAND_SIZE - len(items)))


def find_flush(cards: Sequence[Card]) -> tuple[int, ...] | None:
    """Top five values of the first suit holding five or more cards, or ``None``.

    Suits are examined in the fixed suit order; cards of unknown suit are ignored.
    """
    by_suit: list[list[int]] = [[] for _ in SUITS]
    for card in cards:
        index = suit_index(card.suit)
        if index is not None:
            by_suit[index].append(card.value())
    for values in by_suit:
        if len(values) >= HAND_SIZE:
            return tuple(sorted(values, reverse=True)[:HAND_SIZE])
    return None


def find_straight(cards: Sequence[Card]) -> int | None:
    """High card of a straight among the cards, or ``None``.

    The ace-to-five straight is checked first and reported as 5.
    """
    present = {card.value() for card in cards}
    if {14, 2, 3, 4, 5} <= present:
        return 5
    for high in range(14, 5, -1):
        if all(high - step in present for step in range(HAND_SIZE)):
            return high
    return None


def count_ranks(cards: Sequence[Card]) -> Counter[int]:
    """How many cards there are of each value."""
    return Counter(card.value() for card in cards)


def evaluate_hand(cards: Sequence[Card]) -> EvaluatedHand:
    """Evaluate the best hand category available in ``cards``."""
    ordered = sorted(cards, key=lambda card: card.value(), reverse=True)
    counts = count_ranks(ordered)
    flush = find_flush(ordered)
    straight = find_straight(ordered)

    quads = trips = pairs = 0
    quad_value = trip_value = 0
    pair_values = [0, 0]
    kickers: list[int] = []
    for value in range(14, 1, -1):
        count = counts.get(value, 0)
        if count == 4:
            quads += 1
            quad_value = value
        elif count == 3:
            trips += 1
            trip_value = value
        elif count == 2:
            if pairs < 2:
                pair_values[pairs] = value
            pairs += 1
        elif count == 1 and len(kickers) < HAND_SIZE:
            kickers.append(value)
    k = list(_padded(kickers))

    if flush is not None and straight == 14:
        return EvaluatedHand(HandType.ESCALERA_REAL, _padded([14]), 9_000_000)
    if flush is not None and straight is not None:
        return EvaluatedHand(
            HandType.ESCALERA_COLOR, _padded([straight]), 8_000_000 + straight * 10_000
        )
    if quads > 0:
        return EvaluatedHand(
            HandType.POKER_MANO,
            _padded([quad_value, k[0]]),
            7_000_000 + quad_value * 10_000 + k[0],
        )
    if trips > 0 and pairs > 0:
        return EvaluatedHand(
            HandType.FULL_HOUSE,
            _padded([trip_value, pair_values[0]]),
            6_000_000 + trip_value * 10_000 + pair_values[0] * 100,
        )
    if flush is not None:
        f = flush
        return EvaluatedHand(
            HandType.COLOR,
            _padded(f),
            5_000_000 + f[0] * 10_000 + f[1] * 1_000 + f[2] * 100 + f[3] * 10 + f[4],
        )
    if straight is not None:
        return EvaluatedHand(
            HandType.ESCALERA, _padded([straight]), 4_000_000 + straight * 10_000
        )
    if trips > 0:
        return EvaluatedHand(
            HandType.TRIO,
            _padded([trip_value, k[0], k[1]]),
            3_000_000 + trip_value * 10_000 + k[0] * 100 + k[1],
        )
    if pairs >= 2:
        high, low = max(pair_values), min(pair_values)
        return EvaluatedHand(
            HandType.DOS_PARES,
            _padded([high, low, k[0]]),
            2_000_000 + high * 10_000 + low * 1_000 + k[0],
        )
    if pairs == 1:
        return EvaluatedHand(
            HandType.PAR,
            _padded([pair_values[0], k[0], k[1], k[2]]),
            1_000_000 + pair_values[0] * 10_000 + k[0] * 1_000 + k[1] * 100 + k[2] * 10,
        )
    return EvaluatedHand(
        HandType.CARTA_ALTA,
        tuple(k),
        k[0] * 10_000 + k[1] * 1_000 + k[2] * 100 + k[3] * 10 + k[4],
    )