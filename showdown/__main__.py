import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .cards import cards_to_labels, parse_cards
from .errors import InvalidInput
from .models import Player
from .table import describe_hand, describe_rank, rank_table, resolve_table

LOGGER = logging.getLogger("showdown")


def parse_player(text: str) -> Player:
    name, sep, labels = text.partition(":")
    if not sep or not name.strip():
        raise InvalidInput(f"Player must look like NAME:CARD,CARD, got {text!r}")
    return Player(name.strip(), tuple(parse_cards(_split_labels(labels))))


def _split_labels(text: str) -> List[str]:
    return [label for label in text.replace(" ", ",").split(",") if label]


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Flags double as a quick way to check a showdown by hand.
    parser = argparse.ArgumentParser(description="Rank poker hands and pick the showdown winner(s)")
    parser.add_argument(
        "--player",
        action="append",
        default=[],
        metavar="NAME:CARDS",
        help="Player and hole cards, e.g. Alice:Ah,Kh (repeat per player)",
    )
    parser.add_argument("--board", default="", help="Community cards, e.g. Qh,Jh,Th,5c,2d")
    parser.add_argument("--all", action="store_true", help="Print full standings instead of winners only")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        players = [parse_player(text) for text in args.player]
        names = [player.id for player in players]
        if len(set(names)) != len(names):
            raise InvalidInput(f"Player names must be unique: {names}")
        board = parse_cards(_split_labels(args.board))
        resolve = rank_table if args.all else resolve_table
        entries = resolve(players, board)
    except InvalidInput as exc:
        LOGGER.error("%s", exc)
        return 2

    holdings = {player.id: player.cards for player in players}
    LOGGER.info("Board: %s", " ".join(cards_to_labels(board)) or "-")
    for entry in entries:
        print(
            f"{entry.player}\t{describe_rank(entry.best.rank)}\t{describe_hand(entry.best)}"
            f"\t{list(entry.best.tiebreaker)}\t{' '.join(cards_to_labels(holdings[entry.player]))}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
