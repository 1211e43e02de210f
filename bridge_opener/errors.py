"""Exceptions raised by the bridge opener engine."""


class BridgeError(Exception):
    """Base exception for all engine errors."""
    pass


class InvalidSymbolError(BridgeError, ValueError):
    """Raised when a rank or suit lookup names no known symbol."""
    pass


class InvalidCardError(InvalidSymbolError):
    """Raised when a (rank, suit) pair does not resolve to a card."""
    pass


class InvalidBidError(InvalidSymbolError):
    """Raised when a value is not part of the bid vocabulary."""
    pass


class InvalidOrderingError(BridgeError, ValueError):
    """Raised when an ordering id is out of range for a symbol type."""
    pass


class OrderingNotSetError(BridgeError):
    """Raised when an ordering is used before one was activated."""
    pass


class InvalidDealSpecError(BridgeError, ValueError):
    """Raised when an explicit seat assignment is malformed."""
    pass


class DealError(BridgeError):
    """Raised when dealing more cards than remain or from a bad seat offset."""
    pass


class BiddingLogicError(BridgeError):
    """Raised when an opening hand matches none of the opening rules.

    Every hand with more than 12 points reaches a rule, so this signals a
    broken rule table rather than bad input.
    """
    pass


class AuctionFinishedError(BridgeError):
    """Raised when a bid is requested after the auction has ended."""
    pass
