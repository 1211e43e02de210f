"""
Bridge opener: deal bridge hands, count points and pick opening bids.

- Symbols and orderings: Rank, Suit, SymbolOrdering, Orderings
- Cards, decks and hands: Card, Cards, Hand, new_deck, RandomSource
- Scoring: high_card_points, length_points, total_points, is_balanced, HandProfile
- Bidding: Bid, Bidder, decide_bid, validate_bid, format_bid, parse_bid
- Table: Seat, BridgeDeal, Auction
"""
from loguru import logger

from .auction import Auction
from .bidding import Bidder, bidding_opened, decide_bid
from .bids import NOTRUMP, Bid, format_bid, parse_bid, validate_bid
from .cards import Card
from .deal import BridgeDeal, Seat
from .deck import Cards, Hand, RandomSource, new_deck
from .errors import (
    AuctionFinishedError, BiddingLogicError, BridgeError, DealError,
    InvalidBidError, InvalidCardError, InvalidDealSpecError,
    InvalidOrderingError, InvalidSymbolError, OrderingNotSetError,
)
from .scoring import (
    HandProfile, high_card_points, is_balanced, length_points, total_points,
)
from .symbols import Orderings, Rank, RankOrder, Suit, SuitOrder, SymbolOrdering

__version__ = "1.0.0"

# Silent as a library; the CLI turns logging on.
logger.disable(__name__)
