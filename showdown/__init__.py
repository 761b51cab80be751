"""Poker hand ranking and showdown resolution."""

from .cards import Card, RANK_ORDER, SUITS, cards_to_labels, parse_cards, parse_label
from .errors import InvalidInput
from .evaluator import best_hand, classify_hand, combinations, compare, has_straight, straight_high
from .models import Comparison, EvaluatedHand, HandRank, Player, WinnerEntry
from .table import describe_hand, describe_rank, rank_table, resolve_table

__all__ = [
    "Card",
    "RANK_ORDER",
    "SUITS",
    "cards_to_labels",
    "parse_cards",
    "parse_label",
    "InvalidInput",
    "best_hand",
    "classify_hand",
    "combinations",
    "compare",
    "has_straight",
    "straight_high",
    "Comparison",
    "EvaluatedHand",
    "HandRank",
    "Player",
    "WinnerEntry",
    "describe_hand",
    "describe_rank",
    "rank_table",
    "resolve_table",
]
