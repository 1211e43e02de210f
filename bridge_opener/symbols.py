"""
Ranks, suits and their orderings.

A symbol type is a closed Enum whose members carry a display glyph and one
integer position per declared ordering. Which ordering is active is not a
property of the symbols: it lives in a SymbolOrdering, and the pair of rank
and suit orderings travels through the card and hand APIs as an Orderings
context.
"""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Iterator, Optional, Tuple

from loguru import logger

from .errors import InvalidOrderingError, InvalidSymbolError, OrderingNotSetError


class OrderedSymbol(Enum):
    """Base for symbol types. Members are declared as (glyph, positions)."""

    def __init__(self, glyph: str, positions: Tuple[int, ...]):
        self.glyph = glyph
        self.positions = positions

    def __str__(self) -> str:
        return self.glyph

    @classmethod
    def ordering_count(cls) -> int:
        return len(next(iter(cls)).positions)

    @classmethod
    def get(cls, symbol):
        """Look a symbol up by member or by name ("ace", "SPADES")."""
        if isinstance(symbol, cls):
            return symbol
        if isinstance(symbol, str):
            try:
                return cls[symbol.strip().upper()]
            except KeyError:
                pass
        raise InvalidSymbolError(f"illegal {cls.__name__.lower()}: {symbol!r}")


class RankOrder(IntEnum):
    ASCEND = 0
    DESCEND = 1


class SuitOrder(IntEnum):
    ASCEND = 0
    BLACKRED = 1
    DESCEND = 2


class Rank(OrderedSymbol):
    TWO = ("2", (0, 12))
    THREE = ("3", (1, 11))
    FOUR = ("4", (2, 10))
    FIVE = ("5", (3, 9))
    SIX = ("6", (4, 8))
    SEVEN = ("7", (5, 7))
    EIGHT = ("8", (6, 6))
    NINE = ("9", (7, 5))
    TEN = ("10", (8, 4))
    JACK = ("J", (9, 3))
    QUEEN = ("Q", (10, 2))
    KING = ("K", (11, 1))
    ACE = ("A", (12, 0))


class Suit(OrderedSymbol):
    CLUBS = ("♣", (0, 2, 3))
    DIAMONDS = ("♦", (1, 3, 2))
    HEARTS = ("♥", (2, 1, 1))
    SPADES = ("♠", (3, 0, 0))


def _walk(start, step: Callable) -> Iterator:
    current = start
    while current is not None:
        yield current
        current = step(current)


class SymbolOrdering:
    """The active ordering for one symbol type.

    Construct with an order id to activate it immediately; without one,
    every positional query raises OrderingNotSetError until set_ordering
    is called.
    """

    def __init__(self, symbol_type, order: Optional[int] = None):
        self.symbol_type = symbol_type
        self._order: Optional[int] = None
        self._ordered: Tuple = ()
        if order is not None:
            self.set_ordering(order)

    def __repr__(self) -> str:
        return f"SymbolOrdering({self.symbol_type.__name__}, order={self._order})"

    def __len__(self) -> int:
        return len(self.symbol_type)

    def __iter__(self) -> Iterator:
        return self.enumerate_all()

    @property
    def order(self) -> Optional[int]:
        return self._order

    def is_valid(self, order) -> bool:
        return isinstance(order, int) and 0 <= order < self.symbol_type.ordering_count()

    def set_ordering(self, order: int) -> "SymbolOrdering":
        if not self.is_valid(order):
            raise InvalidOrderingError(
                f"ordering does not exist for {self.symbol_type.__name__}: {order!r}")
        self._order = int(order)
        self._ordered = tuple(sorted(self.symbol_type, key=lambda s: s.positions[self._order]))
        logger.debug("{} ordering set to {}", self.symbol_type.__name__, self._order)
        return self

    def _require_order(self):
        if self._order is None:
            raise OrderingNotSetError(f"no ordering set for {self.symbol_type.__name__}")

    def _check(self, symbol):
        if not isinstance(symbol, self.symbol_type):
            raise InvalidSymbolError(
                f"{symbol!r} is not a {self.symbol_type.__name__}")

    def position(self, symbol) -> int:
        """Position of `symbol` under the active ordering; usable as a sort key."""
        self._check(symbol)
        self._require_order()
        return symbol.positions[self._order]

    sort_key = position

    def compare(self, a, b) -> int:
        """-1, 0 or 1 as `a` sorts before, with or after `b`."""
        pa, pb = self.position(a), self.position(b)
        return (pa > pb) - (pa < pb)

    def first(self):
        self._require_order()
        return self._ordered[0]

    def last(self):
        self._require_order()
        return self._ordered[-1]

    def successor(self, symbol):
        """The symbol after `symbol`, or None when `symbol` is last."""
        self._check(symbol)
        self._require_order()
        i = self._ordered.index(symbol)
        return self._ordered[i + 1] if i + 1 < len(self._ordered) else None

    def enumerate_all(self) -> Iterator:
        """Fresh iterator over every symbol, first to last."""
        self._require_order()
        return _walk(self.first(), self.successor)


def _rank_ordering(order=RankOrder.ASCEND) -> SymbolOrdering:
    return SymbolOrdering(Rank, order)


def _suit_ordering(order=SuitOrder.ASCEND) -> SymbolOrdering:
    return SymbolOrdering(Suit, order)


@dataclass
class Orderings:
    """Rank and suit orderings used together by cards and hands."""
    rank: SymbolOrdering = field(default_factory=_rank_ordering)
    suit: SymbolOrdering = field(default_factory=_suit_ordering)

    def __post_init__(self):
        if (getattr(self.rank, "symbol_type", None) is not Rank
                or getattr(self.suit, "symbol_type", None) is not Suit):
            raise InvalidOrderingError("Orderings needs a Rank and a Suit ordering")

    @classmethod
    def default(cls) -> "Orderings":
        return cls()

    @classmethod
    def display(cls) -> "Orderings":
        """Descending ranks and suits: the order hands are shown in."""
        return cls(_rank_ordering(RankOrder.DESCEND), _suit_ordering(SuitOrder.DESCEND))

    def copy(self) -> "Orderings":
        return Orderings(SymbolOrdering(Rank, self.rank.order), SymbolOrdering(Suit, self.suit.order))
