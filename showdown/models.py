from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Hashable, Tuple

from .cards import Card


class HandRank(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


class Comparison(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class EvaluatedHand:
    # Tiebreaker values run most- to least-significant.
    rank: HandRank
    tiebreaker: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiebreaker", tuple(self.tiebreaker))


@dataclass(frozen=True)
class Player:
    id: Hashable
    cards: Tuple[Card, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cards", tuple(self.cards))


@dataclass(frozen=True)
class WinnerEntry:
    player: Hashable
    best: EvaluatedHand
