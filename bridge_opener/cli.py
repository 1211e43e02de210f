"""
Command line driver: deal four hands, print them, bid the auction.

    bridge-opener --seed 7 --dealer south
"""
import argparse
import sys
from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from . import config
from .auction import Auction
from .cards import parse_cards
from .deal import BridgeDeal, Seat
from .deck import RandomSource
from .errors import BridgeError, InvalidDealSpecError
from .log import setup_logging
from .render import auction_to_str, deal_to_str

SEAT_CHOICES = [seat.name.lower() for seat in Seat]
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bridge-opener",
                                     description="Deal a bridge hand and bid the openings")
    parser.add_argument("--seed", type=int, default=config.SEED,
                        help="Seed for the shuffle (default: $BRIDGE_OPENER_SEED or random)")
    parser.add_argument("--dealer", choices=SEAT_CHOICES,
                        help="Seat that bids first (default: random)")
    parser.add_argument("--hand", action="append", default=[], type=parse_hand_option,
                        metavar="SEAT=S.H.D.C",
                        help="Preset cards for a seat, e.g. north=AKQ2.K32.Q32.J32 (repeatable)")
    parser.add_argument("--log-level", type=log_level, default=config.LOG_LEVEL,
                        metavar="LEVEL",
                        help="Log level for stderr (default: $BRIDGE_OPENER_LOG_LEVEL or WARNING)")
    return parser


def log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"unknown log level {value!r}, use one of {', '.join(LOG_LEVELS)}")
    return level


def parse_hand_option(value: str):
    """'north=AKQ2.K32.Q32.J32' -> (seat name, cards)."""
    seat, sep, cards = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected SEAT=S.H.D.C, got {value!r}")
    try:
        return Seat.get(seat).name.lower(), parse_cards(cards)
    except BridgeError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def seat_assignment(pairs: Sequence[Tuple[str, list]]) -> Dict[str, list]:
    """Collect --hand values into one mapping; a seat may appear once."""
    assignment: Dict[str, list] = {}
    for seat, cards in pairs:
        if seat in assignment:
            raise InvalidDealSpecError(f"{Seat.get(seat)}: seat given twice")
        assignment[seat] = cards
    return assignment


def run(seed: Optional[int] = None, dealer: Optional[str] = None, hands=None) -> str:
    """Deal, bid, and return the printable result.

    `hands` is a seat mapping or a sequence of (seat, cards) pairs.
    """
    if hands is not None and not isinstance(hands, dict):
        hands = seat_assignment(hands)
    rng = RandomSource(seed)
    deal = BridgeDeal(hands or None, rng=rng)
    first = Seat.get(dealer) if dealer else Seat(rng.next_uniform_index(config.SEAT_COUNT))
    auction = Auction(deal, first)
    auction.run()
    logger.info("auction over: {} ({} calls)", auction.contract or "passed out", len(auction.calls))
    return deal_to_str(deal) + "\n" + auction_to_str(auction)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        print(run(args.seed, args.dealer, args.hand), end="")
    except BridgeError as exc:
        logger.error("{}: {}", type(exc).__name__, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
