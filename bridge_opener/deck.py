"""
Decks and hands.

Cards is a bag of cards kept in insertion order. A fresh deck holds all 52
cards in enumeration order; hands start empty and are filled by dealing
from a deck. Randomness comes from an injected source exposing
next_uniform_index(bound), so deals can be seeded.
"""
import random
from typing import Iterable, Iterator, List, Optional, Sequence

from loguru import logger

from .cards import Card, card_sort_key, to_ordered_list
from .errors import DealError
from .symbols import Orderings, Suit


class RandomSource:
    """Uniform index source backed by random.Random."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_uniform_index(self, bound: int) -> int:
        """Integer in [0, bound)."""
        return self._random.randrange(bound)


class Cards:
    """An ordered bag of cards with dealing operations."""

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: List[Card] = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{self}])"

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    def length(self) -> int:
        return len(self._cards)

    def copy(self):
        dup = type(self)()
        dup._cards = list(self._cards)
        return dup

    def add(self, card: Card):
        self._cards.append(card)
        return self

    def remove(self, card: Card):
        """Take `card` out; a card that is not here is left alone."""
        try:
            self._cards.remove(card)
        except ValueError:
            logger.warning("remove: {} is not in {}", card, type(self).__name__)
        return self

    def top(self) -> Card:
        if not self._cards:
            raise DealError("no cards left")
        return self._cards.pop(0)

    def suit(self, suit: Suit) -> List[Card]:
        return [card for card in self._cards if card.suit == suit]

    def sort(self, orderings: Orderings):
        self._cards.sort(key=lambda card: card_sort_key(card, orderings))
        return self

    def shuffle_in_place(self, rng=None):
        """Fisher-Yates shuffle driven by rng.next_uniform_index."""
        rng = rng or RandomSource()
        for i in range(len(self._cards) - 1, 0, -1):
            j = rng.next_uniform_index(i + 1)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]
        return self

    def shuffle(self, rng=None):
        """Shuffled copy; this bag keeps its order."""
        return self.copy().shuffle_in_place(rng)

    def deal(self, hands: Sequence["Cards"], count: Optional[int] = None, start: int = 0):
        """Deal `count` cards one at a time round the hands, beginning at hands[start]."""
        count = len(self._cards) if count is None else count
        if count < 0 or count > len(self._cards):
            raise DealError(f"cannot deal {count} cards from {len(self._cards)}")
        if not hands or not 0 <= start < len(hands):
            raise DealError(f"start offset {start} out of range for {len(hands)} hands")
        for i in range(count):
            hands[(start + i) % len(hands)].add(self.top())
        logger.debug("dealt {} cards round {} hands from offset {}", count, len(hands), start)
        return hands

    def deal_even(self, hands: Sequence["Cards"], count: Optional[int] = None):
        """Deal `count` cards, each to the shortest hand (earliest on ties)."""
        count = len(self._cards) if count is None else count
        if count < 0 or count > len(self._cards):
            raise DealError(f"cannot deal {count} cards from {len(self._cards)}")
        if not hands:
            raise DealError("no hands to deal to")
        for _ in range(count):
            min(hands, key=len).add(self.top())
        logger.debug("dealt {} cards evenly to {} hands", count, len(hands))
        return hands


class Hand(Cards):
    """Cards held by one player."""
    pass


def new_deck(orderings: Optional[Orderings] = None) -> Cards:
    """All 52 cards in enumeration order."""
    return Cards(to_ordered_list(orderings or Orderings.default()))
