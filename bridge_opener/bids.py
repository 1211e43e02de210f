"""
The bid vocabulary: seven levels of five strains plus Double, Redouble and Pass.

Each Bid's value is its display string, so formatting and parsing are the
two directions of the same one-to-one map.
"""
from enum import Enum
from typing import Optional

from .errors import InvalidBidError
from .symbols import Suit

NOTRUMP = "notrump"

LEVELS = ("ONE", "TWO", "THREE", "FOUR", "FIVE", "SIX", "SEVEN")
STRAIN_NAMES = {
    Suit.CLUBS: "CLUB",
    Suit.DIAMONDS: "DIAMOND",
    Suit.HEARTS: "HEART",
    Suit.SPADES: "SPADE",
    NOTRUMP: "NOTRUMP",
}
NAME_TO_STRAIN = {v: k for k, v in STRAIN_NAMES.items()}


class Bid(Enum):
    ONE_CLUB = "1♣"
    ONE_DIAMOND = "1♦"
    ONE_HEART = "1♥"
    ONE_SPADE = "1♠"
    ONE_NOTRUMP = "1NT"
    TWO_CLUB = "2♣"
    TWO_DIAMOND = "2♦"
    TWO_HEART = "2♥"
    TWO_SPADE = "2♠"
    TWO_NOTRUMP = "2NT"
    THREE_CLUB = "3♣"
    THREE_DIAMOND = "3♦"
    THREE_HEART = "3♥"
    THREE_SPADE = "3♠"
    THREE_NOTRUMP = "3NT"
    FOUR_CLUB = "4♣"
    FOUR_DIAMOND = "4♦"
    FOUR_HEART = "4♥"
    FOUR_SPADE = "4♠"
    FOUR_NOTRUMP = "4NT"
    FIVE_CLUB = "5♣"
    FIVE_DIAMOND = "5♦"
    FIVE_HEART = "5♥"
    FIVE_SPADE = "5♠"
    FIVE_NOTRUMP = "5NT"
    SIX_CLUB = "6♣"
    SIX_DIAMOND = "6♦"
    SIX_HEART = "6♥"
    SIX_SPADE = "6♠"
    SIX_NOTRUMP = "6NT"
    SEVEN_CLUB = "7♣"
    SEVEN_DIAMOND = "7♦"
    SEVEN_HEART = "7♥"
    SEVEN_SPADE = "7♠"
    SEVEN_NOTRUMP = "7NT"
    DOUBLE = "Double"
    REDOUBLE = "Redouble"
    PASS = "Pass"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, level: int, strain) -> "Bid":
        """Contract bid for a level 1-7 and a Suit or NOTRUMP."""
        if not isinstance(level, int) or not 1 <= level <= 7 or strain not in STRAIN_NAMES:
            raise InvalidBidError(f"no bid for level {level!r} in {strain!r}")
        return cls[f"{LEVELS[level - 1]}_{STRAIN_NAMES[strain]}"]

    @property
    def is_call(self) -> bool:
        """Double, Redouble and Pass name no level or strain."""
        return "_" not in self.name

    @property
    def level(self) -> Optional[int]:
        return None if self.is_call else LEVELS.index(self.name.split("_")[0]) + 1

    @property
    def strain(self):
        return None if self.is_call else NAME_TO_STRAIN[self.name.split("_")[1]]


_BY_COMPACT_NAME = {bid.name.replace("_", ""): bid for bid in Bid}


def validate_bid(value) -> Bid:
    """Return the Bid named by `value` (a Bid, or a name like "ONE_CLUB" / "oneclub")."""
    if isinstance(value, Bid):
        return value
    if isinstance(value, str):
        bid = _BY_COMPACT_NAME.get(value.strip().upper().replace("_", ""))
        if bid is not None:
            return bid
    raise InvalidBidError(f"not a bid: {value!r}")


def format_bid(value) -> str:
    return validate_bid(value).value


def parse_bid(text: str) -> Bid:
    """Inverse of format_bid."""
    try:
        return Bid(text.strip() if isinstance(text, str) else text)
    except ValueError:
        raise InvalidBidError(f"not a bid: {text!r}") from None
