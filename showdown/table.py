from __future__ import annotations

import functools
import logging
from typing import Iterable, List, Mapping, Sequence, Union

from .cards import Card, cards_to_labels
from .errors import InvalidInput
from .evaluator import HAND_SIZE, best_hand, compare
from .models import Comparison, EvaluatedHand, HandRank, Player, WinnerEntry

LOGGER = logging.getLogger("showdown.table")

# Resolution is a pure function of the cards handed in. Seating, betting and
# pot splitting belong to the caller.

PlayerLike = Union[Player, Mapping[str, object]]

VALUE_NAMES = {
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "jack",
    12: "queen",
    13: "king",
    14: "ace",
}


def describe_rank(rank: int) -> str:
    return HandRank(rank).name.lower()


def _plural(value: int) -> str:
    name = VALUE_NAMES[value]
    return f"{name}es" if name.endswith("x") else f"{name}s"


def describe_hand(hand: EvaluatedHand) -> str:
    """Readable summary, e.g. ``"full house, queens full of nines"``."""
    rank = HandRank(hand.rank)
    top = hand.tiebreaker[0]
    if rank == HandRank.ROYAL_FLUSH:
        return "royal flush"
    if rank == HandRank.STRAIGHT_FLUSH:
        return f"straight flush, {VALUE_NAMES[top]} high"
    if rank == HandRank.FOUR_OF_A_KIND:
        return f"four of a kind, {_plural(top)}"
    if rank == HandRank.FULL_HOUSE:
        return f"full house, {_plural(top)} full of {_plural(hand.tiebreaker[1])}"
    if rank == HandRank.FLUSH:
        return f"flush, {VALUE_NAMES[top]} high"
    if rank == HandRank.STRAIGHT:
        return f"straight, {VALUE_NAMES[top]} high"
    if rank == HandRank.THREE_OF_A_KIND:
        return f"three of a kind, {_plural(top)}"
    if rank == HandRank.TWO_PAIR:
        return f"two pair, {_plural(top)} and {_plural(hand.tiebreaker[1])}"
    if rank == HandRank.ONE_PAIR:
        return f"pair of {_plural(top)}"
    return f"{VALUE_NAMES[top]} high"


def _as_player(entry: PlayerLike) -> Player:
    if isinstance(entry, Player):
        return entry
    if isinstance(entry, Mapping) and "id" in entry and "cards" in entry:
        return Player(entry["id"], tuple(entry["cards"]))
    raise InvalidInput(f"Expected a player with id and cards, got {entry!r}")


def _seat_players(players: Iterable[PlayerLike], community: Sequence[Card]) -> List[Player]:
    seated = [_as_player(entry) for entry in players]
    if not seated:
        raise InvalidInput("At least one player is required")
    for card in community:
        if not isinstance(card, Card):
            raise InvalidInput(f"Community cards must be Card values, got {card!r}")
    for player in seated:
        for card in player.cards:
            if not isinstance(card, Card):
                raise InvalidInput(f"Player {player.id!r} holds a non-card value {card!r}")
        total = len(player.cards) + len(community)
        if total < HAND_SIZE:
            raise InvalidInput(
                f"Player {player.id!r} has {total} cards with the board; need at least {HAND_SIZE}"
            )
    return seated


_strength = functools.cmp_to_key(lambda a, b: compare(a.best, b.best))


def rank_table(players: Iterable[PlayerLike], community: Iterable[Card]) -> List[WinnerEntry]:
    """Every player's best hand, strongest first. Equal hands keep seating order."""
    board = list(community)
    seated = _seat_players(players, board)

    entries: List[WinnerEntry] = []
    for player in seated:
        best = best_hand(list(player.cards) + board)
        LOGGER.debug(
            "Player %r holding %s plays %s %s",
            player.id,
            cards_to_labels(player.cards),
            describe_rank(best.rank),
            list(best.tiebreaker),
        )
        entries.append(WinnerEntry(player.id, best))
    return sorted(entries, key=_strength, reverse=True)


def resolve_table(players: Iterable[PlayerLike], community: Iterable[Card]) -> List[WinnerEntry]:
    """Return the player(s) holding the strongest hand; more than one means a split pot."""
    standings = rank_table(players, community)
    top = standings[0]
    winners = [top]
    for entry in standings[1:]:
        if compare(entry.best, top.best) != Comparison.EQUAL:
            break
        winners.append(entry)
    LOGGER.debug("Winners: %s with %s", [entry.player for entry in winners], describe_rank(top.best.rank))
    return winners
