"""Point count and shape of a hand."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .cards import Card
from .config import HCP_VALUES, LENGTH_POINT_BASE
from .symbols import Rank, Suit

HCP_MAP = {Rank[name.upper()]: pts for name, pts in HCP_VALUES.items()}

# Suits are scanned in this order by the shape check.
SCAN_ORDER = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


# ---- Basic hand math ----
def high_card_points(cards: Iterable[Card]) -> int:
    return sum(HCP_MAP.get(card.rank, 0) for card in cards)


def suit_lengths(cards: Iterable[Card]) -> Dict[Suit, int]:
    lengths = {suit: 0 for suit in SCAN_ORDER}
    for card in cards:
        lengths[card.suit] += 1
    return lengths


def length_points(cards: Iterable[Card]) -> int:
    return sum(max(0, n - LENGTH_POINT_BASE) for n in suit_lengths(cards).values())


def total_points(cards: Iterable[Card]) -> int:
    cards = list(cards)
    return high_card_points(cards) + length_points(cards)


def suit_points(cards: Iterable[Card], suit: Suit) -> int:
    """Points counted over one suit's cards only."""
    return total_points(card for card in cards if card.suit == suit)


def is_balanced(cards: Iterable[Card]) -> bool:
    """No suit shorter than two and at most one doubleton."""
    lengths = suit_lengths(cards)
    doubletons = 0
    for suit in SCAN_ORDER:
        if lengths[suit] == 2:
            doubletons += 1
        if lengths[suit] < 2 or doubletons > 1:
            return False
    return True


def points_str(cards: Iterable[Card]) -> str:
    """Points line shown under a hand: balanced hands lead with HCP and a star."""
    cards = list(cards)
    hcp, points = high_card_points(cards), total_points(cards)
    if is_balanced(cards):
        return f"{hcp}* points" + ("" if hcp == points else f" ({points})")
    return f"{points} points" + ("" if hcp == points else f" ({hcp})")


@dataclass
class HandProfile:
    """Everything the bidder needs to know about a hand, computed once."""
    cards: List[Card]
    hcp: int = field(init=False)
    length_points: int = field(init=False)
    points: int = field(init=False)
    balanced: bool = field(init=False)
    lengths: Dict[Suit, int] = field(init=False)
    suit_points: Dict[Suit, int] = field(init=False)

    def __post_init__(self):
        self.cards = list(self.cards)
        self.hcp = high_card_points(self.cards)
        self.length_points = length_points(self.cards)
        self.points = self.hcp + self.length_points
        self.balanced = is_balanced(self.cards)
        self.lengths = suit_lengths(self.cards)
        self.suit_points = {suit: suit_points(self.cards, suit) for suit in SCAN_ORDER}

    def length(self, suit: Suit) -> int:
        return self.lengths[suit]

    @property
    def shape(self) -> tuple:
        """Suit lengths as (spades, hearts, diamonds, clubs)."""
        return tuple(self.lengths[suit] for suit in SCAN_ORDER)
