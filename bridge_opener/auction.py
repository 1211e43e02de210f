"""
The bidding table: four bidders taking turns over one shared history.

Turns go clockwise from the dealer. The auction ends after three passes
follow any bid, or after four passes from the start.
"""
from typing import List, Optional, Tuple

from loguru import logger

from .bidding import Bidder, bidding_opened
from .bids import Bid, format_bid
from .config import PASSES_TO_END, SEAT_COUNT
from .deal import BridgeDeal, Seat
from .errors import AuctionFinishedError


class Auction:
    def __init__(self, deal: BridgeDeal, dealer=Seat.NORTH, history: Optional[List[Bid]] = None):
        self.deal = deal
        self.dealer = Seat.get(dealer)
        self.history: List[Bid] = [] if history is None else history
        self.bidders = [Bidder(hand, self.history) for hand in deal.hands]
        self.current_seat = self.dealer
        self.calls: List[Tuple[Seat, Bid]] = []

    def _trailing_passes(self) -> int:
        count = 0
        for bid in reversed(self.history):
            if bid != Bid.PASS:
                break
            count += 1
        return count

    @property
    def is_finished(self) -> bool:
        if bidding_opened(self.history):
            return self._trailing_passes() >= PASSES_TO_END
        return self._trailing_passes() >= SEAT_COUNT

    def next_bid(self) -> str:
        """Let the seat on turn bid, advance the turn and return the bid's display string."""
        if self.is_finished:
            raise AuctionFinishedError("the auction is over")
        seat = self.current_seat
        bid = self.bidders[seat].decide_bid()
        self.calls.append((seat, bid))
        self.current_seat = seat.next()
        logger.debug("{} bids {}", seat, bid)
        return format_bid(bid)

    def run(self) -> List[str]:
        """Bid until the auction ends; returns every call made."""
        made = []
        while not self.is_finished:
            made.append(self.next_bid())
        return made

    @property
    def contract(self):
        """The last non-pass bid, or None when the hand was passed out."""
        for bid in reversed(self.history):
            if bid != Bid.PASS:
                return bid
        return None
