from __future__ import annotations

import random
from typing import List, Optional, Tuple

from showdown.cards import SUITS, Card, parse_cards
from showdown.models import Player


def build_deck(seed: Optional[int] = None) -> List[Card]:
    """Shuffled 52-card deck; a fixed seed keeps generated datasets stable."""
    rng = random.Random(seed)
    deck = [Card(value, suit) for value in range(2, 15) for suit in SUITS]
    rng.shuffle(deck)
    return deck


def cards(text: str) -> List[Card]:
    return parse_cards(text.split())


def player(player_id: str, text: str) -> Player:
    return Player(player_id, tuple(cards(text)))


def deal_table(seed: int, seats: int, board_size: int = 5) -> Tuple[List[Player], List[Card]]:
    """Deal two hole cards per seat plus a board from a seeded deck."""
    deck = build_deck(seed)
    players = []
    for idx in range(seats):
        hole = deck[:2]
        del deck[:2]
        players.append(Player(f"Player{idx}", tuple(hole)))
    return players, deck[:board_size]
