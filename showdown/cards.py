from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .errors import InvalidInput

RANK_ORDER = "23456789TJQKA"
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANK_ORDER, start=2)}
VALUE_RANK = {value: rank for rank, value in RANK_VALUE.items()}
SUITS = "hdcs"

ACE = 14
LOW_ACE = 1
MIN_VALUE = 2
MAX_VALUE = ACE


@dataclass(frozen=True)
class Card:
    value: int
    suit: str

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidInput(f"Invalid value: {self.value!r}")
        if not MIN_VALUE <= self.value <= MAX_VALUE:
            raise InvalidInput(f"Invalid value: {self.value}")
        if not isinstance(self.suit, str) or len(self.suit) != 1 or self.suit not in SUITS:
            raise InvalidInput(f"Invalid suit: {self.suit!r}")

    @property
    def rank(self) -> str:
        return VALUE_RANK[self.value]

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    text = label.strip()
    if text[:2] == "10":
        text = "T" + text[2:]
    if len(text) != 2:
        raise InvalidInput(f"Invalid card label: {label}")
    rank, suit = text[0].upper(), text[1].lower()
    if rank not in RANK_VALUE:
        raise InvalidInput(f"Invalid rank: {text[0]}")
    return Card(RANK_VALUE[rank], suit)


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
