"""
A bridge deal: four 13-card hands indexed by seat.

A deal is either fully random, or starts from an explicit assignment of
cards to seats with the rest of the deck shuffled and dealt so every hand
ends at 13 cards.
"""
from enum import IntEnum
from typing import Dict, Mapping, Optional, Tuple

from loguru import logger

from .cards import Card
from .config import HAND_SIZE, SEAT_COUNT, SEAT_NAMES
from .deck import Hand, RandomSource, new_deck
from .errors import InvalidCardError, InvalidDealSpecError
from .symbols import Orderings


class Seat(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __str__(self) -> str:
        return SEAT_NAMES[self.value]

    @classmethod
    def get(cls, seat) -> "Seat":
        if isinstance(seat, cls):
            return seat
        if isinstance(seat, str):
            try:
                return cls[seat.strip().upper()]
            except KeyError:
                pass
        raise InvalidDealSpecError(f"invalid seat: {seat!r}")

    def next(self) -> "Seat":
        return Seat((self.value + 1) % SEAT_COUNT)


def _resolve_assignment(assignment) -> Dict[Seat, list]:
    """Validate an explicit seat assignment and turn it into cards per seat."""
    if not isinstance(assignment, Mapping):
        raise InvalidDealSpecError("seat assignment must be a mapping of seat to cards")
    if len(assignment) > SEAT_COUNT:
        raise InvalidDealSpecError("too many hands")

    resolved: Dict[Seat, list] = {}
    seen = set()
    for seat_name, entries in assignment.items():
        seat = Seat.get(seat_name)
        if seat in resolved:
            raise InvalidDealSpecError(f"{seat}: seat given twice")
        if not isinstance(entries, (list, tuple)):
            raise InvalidDealSpecError(f"{seat}: invalid cards array")
        if len(entries) > HAND_SIZE:
            raise InvalidDealSpecError(f"{seat}: too many cards")
        cards = []
        for entry in entries:
            if isinstance(entry, Card):
                card = entry
            elif isinstance(entry, (list, tuple)) and len(entry) == 2:
                try:
                    card = Card.get(*entry)
                except InvalidCardError as exc:
                    raise InvalidDealSpecError(f"{seat}: {exc}") from exc
            else:
                raise InvalidDealSpecError(f"{seat}: invalid card {entry!r}")
            if card in seen:
                raise InvalidDealSpecError(f"{seat}: {card} assigned twice")
            seen.add(card)
            cards.append(card)
        resolved[seat] = cards
    return resolved


class BridgeDeal:
    """Four hands, North to West. Hand contents are fixed once built."""

    def __init__(self, assignment: Optional[Mapping] = None, rng=None):
        resolved = _resolve_assignment(assignment) if assignment is not None else {}
        self.rng = rng or RandomSource()
        hands = [Hand() for _ in Seat]
        deck = new_deck()

        for seat, cards in resolved.items():
            for card in cards:
                deck.remove(card)
                hands[seat].add(card)

        deck.shuffle(self.rng).deal_even(hands)

        display = Orderings.display()
        for hand in hands:
            hand.sort(display)
        self._hands: Tuple[Hand, ...] = tuple(hands)
        logger.debug("deal built with {} preset seats", len(resolved))

    @property
    def hands(self) -> Tuple[Hand, ...]:
        return self._hands

    def hand(self, seat) -> Hand:
        return self._hands[Seat.get(seat)]

    def __iter__(self):
        return iter(zip(Seat, self._hands))
