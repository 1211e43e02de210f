"""Text layout of hands, deals and auctions."""
from typing import Iterable, List

from .cards import Card
from .config import SEAT_COUNT
from .deal import BridgeDeal, Seat
from .scoring import points_str
from .symbols import Orderings

GUTTER = 40
INDENT = " " * 20
COLUMN = 8


def suit_lines(cards: Iterable[Card]) -> List[str]:
    """One line per suit, highest suit first: glyph, then each rank highest first."""
    display = Orderings.display()
    cards = sorted(cards, key=lambda c: display.rank.position(c.rank))
    return [f"{suit} " + "".join(f" {c.rank}" for c in cards if c.suit == suit)
            for suit in display.suit]


def hand_to_str(cards: Iterable[Card]) -> str:
    return "".join(line + "\n" for line in suit_lines(cards))


def deal_to_str(deal: BridgeDeal) -> str:
    """North on top, West and East side by side, South below; points under each hand."""
    north, east = deal.hand(Seat.NORTH), deal.hand(Seat.EAST)
    south, west = deal.hand(Seat.SOUTH), deal.hand(Seat.WEST)

    out = [INDENT + str(Seat.NORTH)]
    out += [INDENT + line for line in suit_lines(north)]
    out.append(INDENT + points_str(north))

    out.append(str(Seat.WEST).ljust(GUTTER) + str(Seat.EAST))
    for w, e in zip(suit_lines(west), suit_lines(east)):
        out.append(w.ljust(GUTTER) + e)
    out.append(points_str(west).ljust(GUTTER) + points_str(east))

    out.append(INDENT + str(Seat.SOUTH))
    out += [INDENT + line for line in suit_lines(south)]
    out.append(INDENT + points_str(south))
    return "\n".join(out) + "\n"


def auction_to_str(auction) -> str:
    """Seat names from the dealer round, then the calls four to a row."""
    seat = auction.dealer
    header = ""
    for _ in range(SEAT_COUNT):
        header += str(seat).ljust(COLUMN)
        seat = seat.next()
    rows = [header.rstrip()]
    calls = [str(bid) for _, bid in auction.calls]
    for i in range(0, len(calls), SEAT_COUNT):
        rows.append("".join(c.ljust(COLUMN) for c in calls[i:i + SEAT_COUNT]).rstrip())
    return "\n".join(rows) + "\n"
