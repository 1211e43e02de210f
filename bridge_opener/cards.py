"""
Card identity and the 52-card ordering.

Cards sort suit first, then rank, each under the Orderings passed in.
Enumeration walks ranks within a suit and wraps to the next suit's first
rank when the ranks run out.
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidCardError, InvalidSymbolError
from .symbols import Orderings, Rank, Suit


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank) or not isinstance(self.suit, Suit):
            raise InvalidCardError(f"illegal card ({self.rank!r}, {self.suit!r})")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    @classmethod
    def get(cls, rank, suit) -> "Card":
        """Resolve a rank and a suit, given as members or names, to a card."""
        try:
            return cls(Rank.get(rank), Suit.get(suit))
        except InvalidSymbolError as exc:
            raise InvalidCardError(f"illegal card ({rank!r}, {suit!r}): {exc}") from exc


def card_sort_key(card: Card, orderings: Orderings) -> Tuple[int, int]:
    return orderings.suit.position(card.suit), orderings.rank.position(card.rank)


def compare(a: Card, b: Card, orderings: Orderings) -> int:
    """Suit decides; rank breaks ties."""
    by_suit = orderings.suit.compare(a.suit, b.suit)
    return by_suit if by_suit else orderings.rank.compare(a.rank, b.rank)


def first_card(orderings: Orderings) -> Card:
    return Card(orderings.rank.first(), orderings.suit.first())


def last_card(orderings: Orderings) -> Card:
    return Card(orderings.rank.last(), orderings.suit.last())


def successor(card: Card, orderings: Orderings) -> Optional[Card]:
    rank = orderings.rank.successor(card.rank)
    if rank is not None:
        return Card(rank, card.suit)
    suit = orderings.suit.successor(card.suit)
    if suit is not None:
        return Card(orderings.rank.first(), suit)
    return None


def enumerate_all(orderings: Orderings) -> Iterator[Card]:
    card = first_card(orderings)
    while card is not None:
        yield card
        card = successor(card, orderings)


def to_ordered_list(orderings: Orderings) -> List[Card]:
    return list(enumerate_all(orderings))


# ---- Hand strings ----
RANK_CHARS = {r.glyph: r for r in Rank if r is not Rank.TEN}
RANK_CHARS["T"] = Rank.TEN
GROUP_SUITS = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


def parse_cards(text: str) -> List[Card]:
    """Cards from S.H.D.C groups like 'J643.AJ54.A7.T97' ('10' or 'T' for ten, '-' for a void)."""
    groups = text.strip().upper().split(".")
    if len(groups) != len(GROUP_SUITS):
        raise InvalidCardError(f"use S.H.D.C groups like 'J643.AJ54.A7.T97', got {text!r}")
    out = []
    for ranks, suit in zip(groups, GROUP_SUITS):
        for r in ranks.replace("10", "T").replace("-", ""):
            if r not in RANK_CHARS:
                raise InvalidCardError(f"bad rank {r!r} in {text!r}")
            out.append(Card(RANK_CHARS[r], suit))
    return out
