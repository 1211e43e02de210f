"""
Opening bid selection.

The conventions are two ordered rule tables. A rule looks at a HandProfile
and returns a Bid or None; the first rule that returns a Bid wins.

- OPENING_RULES: bidding not yet opened, more than 12 points.
- PREEMPT_RULES: bidding not yet opened, 12 points or fewer.
- Once anyone has made a non-pass call, every later bidder passes.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from .bids import NOTRUMP, Bid
from .config import (
    MAJOR_MIN_LENGTH, MINOR_MIN_LENGTH, NOTRUMP_RANGES, OPENING_POINTS,
    PREEMPT_LENGTH, STRONG_CLUB_POINTS, WEAK_TWO_LENGTH, WEAK_TWO_POINTS,
)
from .errors import BiddingLogicError
from .scoring import SCAN_ORDER, HandProfile
from .symbols import Suit


@dataclass(frozen=True)
class Rule:
    name: str
    choose: Callable[[HandProfile], Optional[Bid]]
    reason: str = ""


def when(predicate: Callable[[HandProfile], bool], bid: Bid) -> Callable[[HandProfile], Optional[Bid]]:
    return lambda profile: bid if predicate(profile) else None


def select_bid(rules: Iterable[Rule], profile: HandProfile) -> Optional[Tuple[Rule, Bid]]:
    for rule in rules:
        bid = rule.choose(profile)
        if bid is not None:
            return rule, bid
    return None


# ---- Opening rules (more than 12 points) ----
def _notrump_rule(level: int, low: int, high: int) -> Rule:
    return Rule(f"{level}NT opening",
                when(lambda p: p.balanced and low <= p.hcp <= high, Bid.of(level, NOTRUMP)),
                f"balanced, {low}-{high} HCP")


def _length_rule(suit: Suit, length: int, longer: bool = False) -> Rule:
    if longer:
        test = lambda p: p.length(suit) >= length
        label = f"{length}+"
    else:
        test = lambda p: p.length(suit) == length
        label = str(length)
    return Rule(f"1{suit} opening", when(test, Bid.of(1, suit)), f"{label}-card {suit.name.lower()}")


NOTRUMP_RULES = tuple(_notrump_rule(*r) for r in NOTRUMP_RANGES)

STRONG_RULES = (
    Rule("strong 2♣", when(lambda p: p.points > STRONG_CLUB_POINTS, Bid.TWO_CLUB),
         f"more than {STRONG_CLUB_POINTS} points"),
)

# Longest first: 7+, then 6, then 5. Spades before hearts at each length.
MAJOR_RULES = (
    _length_rule(Suit.SPADES, 7, longer=True),
    _length_rule(Suit.HEARTS, 7, longer=True),
) + tuple(
    _length_rule(suit, n)
    for n in range(6, MAJOR_MIN_LENGTH - 1, -1)
    for suit in (Suit.SPADES, Suit.HEARTS)
)

# Diamonds before clubs down to four cards; with three, clubs first.
MINOR_RULES = (
    _length_rule(Suit.DIAMONDS, 7, longer=True),
    _length_rule(Suit.CLUBS, 7, longer=True),
) + tuple(
    _length_rule(suit, n)
    for n in range(6, MINOR_MIN_LENGTH, -1)
    for suit in (Suit.DIAMONDS, Suit.CLUBS)
) + (
    _length_rule(Suit.CLUBS, MINOR_MIN_LENGTH),
    _length_rule(Suit.DIAMONDS, MINOR_MIN_LENGTH),
)

OPENING_RULES = NOTRUMP_RULES + STRONG_RULES + MAJOR_RULES + MINOR_RULES


# ---- Preemptive rules (12 points or fewer) ----
def _preempt(profile: HandProfile) -> Optional[Bid]:
    for suit in SCAN_ORDER:
        if profile.length(suit) >= PREEMPT_LENGTH:
            return Bid.of(3, suit)
    return None


def _weak_two(profile: HandProfile) -> Optional[Bid]:
    low, high = WEAK_TWO_POINTS
    if not low <= profile.points <= high:
        return None
    # clubs are reserved for the strong 2♣
    sixes = [suit for suit in (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS)
             if profile.length(suit) == WEAK_TWO_LENGTH]
    if not sixes:
        return None
    best = max(sixes, key=lambda suit: profile.suit_points[suit])
    return Bid.of(2, best)


PREEMPT_RULES = (
    Rule("preempt", _preempt, f"{PREEMPT_LENGTH}+ card suit"),
    Rule("weak two", _weak_two,
         f"{WEAK_TWO_LENGTH}-card major or diamonds, {WEAK_TWO_POINTS[0]}-{WEAK_TWO_POINTS[1]} points"),
    Rule("no preempt", lambda p: Bid.PASS, "nothing to preempt with"),
)

FOLLOW_RULES = (
    Rule("already opened", lambda p: Bid.PASS, "responses and competition are not bid"),
)


def bidding_opened(history: Sequence[Bid]) -> bool:
    """True once any call other than Pass has been made."""
    return any(bid != Bid.PASS for bid in history)


class Bidder:
    """One seat at the table: a hand plus the history shared with the other seats."""

    def __init__(self, hand, history: List[Bid]):
        self.profile = hand if isinstance(hand, HandProfile) else HandProfile(list(hand))
        self.history = history
        self.last_rule: Optional[Rule] = None

    def bidding_opened(self) -> bool:
        return bidding_opened(self.history)

    def choose_bid(self) -> Tuple[Rule, Bid]:
        """The rule that fires for this hand and history, without recording it."""
        profile = self.profile
        if self.bidding_opened():
            return select_bid(FOLLOW_RULES, profile)
        if profile.points > OPENING_POINTS:
            chosen = select_bid(OPENING_RULES, profile)
            if chosen is None:
                raise BiddingLogicError(
                    f"opening points, no bid: {profile.points} points, shape {profile.shape}")
            return chosen
        return select_bid(PREEMPT_RULES, profile)

    def decide_bid(self) -> Bid:
        """Choose a bid, append it to the shared history and return it."""
        rule, bid = self.choose_bid()
        self.history.append(bid)
        self.last_rule = rule
        logger.debug("{}: {} ({}; {} HCP, {} points, shape {})",
                     rule.name, bid, rule.reason, self.profile.hcp,
                     self.profile.points, self.profile.shape)
        return bid


def decide_bid(hand, history: List[Bid]) -> Bid:
    return Bidder(hand, history).decide_bid()
