from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .cards import ACE, LOW_ACE, MAX_VALUE, MIN_VALUE, Card
from .errors import InvalidInput
from .models import Comparison, EvaluatedHand, HandRank

HAND_SIZE = 5

Tiebreaker = Tuple[int, ...]


def straight_high(values: Iterable[int]) -> Optional[int]:
    """Return the top card of the highest 5-card run in ``values``, or None.

    An ace counts as both 14 and 1, so the wheel (A-2-3-4-5) reports 5.
    """
    distinct = set(values)
    if len(distinct) < HAND_SIZE:
        return None
    if ACE in distinct:
        distinct.add(LOW_ACE)

    ordered = sorted(distinct, reverse=True)
    head = ordered[0]
    run = 1
    for current, following in zip(ordered, ordered[1:]):
        if following == current - 1:
            run += 1
            if run == HAND_SIZE:
                return head
        else:
            head = following
            run = 1
    return None


def has_straight(values: Iterable[int]) -> bool:
    return straight_high(values) is not None


@dataclass(frozen=True)
class _Profile:
    counts: Tuple[int, ...]  # indexed by value - MIN_VALUE
    values: Tuple[int, ...]  # distinct, descending
    is_flush: bool
    straight_high: Optional[int]

    def with_count(self, count: int) -> List[int]:
        return [value for value in self.values if self.counts[value - MIN_VALUE] == count]

    def kickers(self, *excluded: int) -> Tiebreaker:
        return tuple(value for value in self.values if value not in excluded)


def _profile(cards: Sequence[Card]) -> _Profile:
    counts = [0] * (MAX_VALUE - MIN_VALUE + 1)
    suits = {}
    for card in cards:
        counts[card.value - MIN_VALUE] += 1
        suits.setdefault(card.suit, 0)
        suits[card.suit] += 1

    values = tuple(value for value in range(MAX_VALUE, MIN_VALUE - 1, -1) if counts[value - MIN_VALUE])
    return _Profile(
        counts=tuple(counts),
        values=values,
        is_flush=any(count == HAND_SIZE for count in suits.values()),
        straight_high=straight_high(values),
    )


# Each rule returns the tiebreaker when the hand qualifies, else None.


def _royal_flush(p: _Profile) -> Optional[Tiebreaker]:
    if p.is_flush and p.straight_high == ACE:
        return (ACE,)
    return None


def _straight_flush(p: _Profile) -> Optional[Tiebreaker]:
    if p.is_flush and p.straight_high is not None:
        return (p.straight_high,)
    return None


def _four_of_a_kind(p: _Profile) -> Optional[Tiebreaker]:
    quads = p.with_count(4)
    if quads:
        return (quads[0],) + p.kickers(quads[0])
    return None


def _full_house(p: _Profile) -> Optional[Tiebreaker]:
    trips = p.with_count(3)
    pairs = p.with_count(2)
    if trips and pairs:
        return (trips[0], pairs[0])
    return None


def _flush(p: _Profile) -> Optional[Tiebreaker]:
    if p.is_flush:
        return p.values
    return None


def _straight(p: _Profile) -> Optional[Tiebreaker]:
    if p.straight_high is not None:
        return (p.straight_high,)
    return None


def _three_of_a_kind(p: _Profile) -> Optional[Tiebreaker]:
    trips = p.with_count(3)
    if trips:
        return (trips[0],) + p.kickers(trips[0])
    return None


def _two_pair(p: _Profile) -> Optional[Tiebreaker]:
    pairs = p.with_count(2)
    if len(pairs) == 2:
        return tuple(pairs) + p.kickers(*pairs)
    return None


def _one_pair(p: _Profile) -> Optional[Tiebreaker]:
    pairs = p.with_count(2)
    if len(pairs) == 1:
        return (pairs[0],) + p.kickers(pairs[0])
    return None


def _high_card(p: _Profile) -> Optional[Tiebreaker]:
    return p.values


# First match wins; order mirrors HandRank from strongest to weakest.
CLASSIFICATION_RULES: Tuple[Tuple[HandRank, Callable[[_Profile], Optional[Tiebreaker]]], ...] = (
    (HandRank.ROYAL_FLUSH, _royal_flush),
    (HandRank.STRAIGHT_FLUSH, _straight_flush),
    (HandRank.FOUR_OF_A_KIND, _four_of_a_kind),
    (HandRank.FULL_HOUSE, _full_house),
    (HandRank.FLUSH, _flush),
    (HandRank.STRAIGHT, _straight),
    (HandRank.THREE_OF_A_KIND, _three_of_a_kind),
    (HandRank.TWO_PAIR, _two_pair),
    (HandRank.ONE_PAIR, _one_pair),
    (HandRank.HIGH_CARD, _high_card),
)


def _require_cards(cards: Iterable[Card], operation: str) -> List[Card]:
    cards = list(cards)
    for card in cards:
        if not isinstance(card, Card):
            raise InvalidInput(f"{operation} expects Card values, got {card!r}")
    return cards


def classify_hand(cards: Iterable[Card]) -> EvaluatedHand:
    """Classify exactly five cards into a category and tiebreaker."""
    cards = _require_cards(cards, "classify_hand")
    if len(cards) != HAND_SIZE:
        raise InvalidInput(f"classify_hand expects {HAND_SIZE} cards, got {len(cards)}")

    profile = _profile(cards)
    for rank, rule in CLASSIFICATION_RULES:
        tiebreaker = rule(profile)
        if tiebreaker is not None:
            return EvaluatedHand(rank, tiebreaker)
    raise AssertionError("high card rule always matches")


def combinations(cards: Sequence[Card], size: int) -> List[Tuple[Card, ...]]:
    """All ``size``-card subsets of ``cards``, each listed once."""
    if size < 0:
        raise InvalidInput(f"Subset size must be non-negative, got {size}")
    return list(itertools.combinations(cards, size))


def compare(a: EvaluatedHand, b: EvaluatedHand) -> Comparison:
    if a.rank != b.rank:
        return Comparison.GREATER if a.rank > b.rank else Comparison.LESS
    # Missing tiebreaker entries count as zero.
    for left, right in itertools.zip_longest(a.tiebreaker, b.tiebreaker, fillvalue=0):
        if left != right:
            return Comparison.GREATER if left > right else Comparison.LESS
    return Comparison.EQUAL


def best_hand(cards: Iterable[Card]) -> EvaluatedHand:
    """Return the strongest five-card hand among five or more cards (Texas Hold'em)."""
    cards = _require_cards(cards, "best_hand")
    if len(cards) < HAND_SIZE:
        raise InvalidInput(f"best_hand needs at least {HAND_SIZE} cards, got {len(cards)}")

    best: Optional[EvaluatedHand] = None
    for combo in combinations(cards, HAND_SIZE):
        hand = classify_hand(combo)
        if best is None or compare(hand, best) == Comparison.GREATER:
            best = hand
    assert best is not None
    return best
