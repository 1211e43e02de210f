"""
Unit tests for the opening bid rules.

Hands are written as S.H.D.C strings. The last section shows that no hand
with opening points falls through the opening table.
"""
import itertools

import pytest

from bridge_opener.bidding import (
    MAJOR_RULES, MINOR_RULES, OPENING_RULES, PREEMPT_RULES, Bidder,
    bidding_opened, decide_bid, select_bid,
)
from bridge_opener.bids import Bid
from bridge_opener.cards import Card
from bridge_opener.deal import BridgeDeal
from bridge_opener.deck import RandomSource
from bridge_opener.errors import BiddingLogicError
from bridge_opener.scoring import HandProfile
from bridge_opener.symbols import Orderings, Suit

SCAN = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


class TestBiddingOpened:
    @pytest.mark.parametrize("history, expected", [
        ([], False),
        ([Bid.PASS], False),
        ([Bid.PASS, Bid.PASS, Bid.PASS], False),
        ([Bid.PASS, Bid.ONE_CLUB], True),
        ([Bid.DOUBLE], True),
    ])
    def test_opened(self, history, expected):
        assert bidding_opened(history) is expected


class TestOpeningBids:
    @pytest.mark.parametrize("hand, expected", [
        ("AKQJ.AKQJ.AK2.32", Bid.THREE_NOTRUMP),    # 27 HCP, 4-4-3-2
        ("AKQJ.AKQ2.AK2.32", Bid.THREE_NOTRUMP),    # 26 HCP
        ("AKQ2.AKQ2.K32.32", Bid.TWO_NOTRUMP),      # 21 HCP
        ("AKQ2.AKJ2.K32.32", Bid.TWO_NOTRUMP),      # 20 HCP
    ])
    def test_notrump(self, profile, hand, expected):
        assert decide_bid(profile(hand), []) is expected

    def test_one_notrump(self, profile):
        assert decide_bid(profile("AKQ2.AK32.432.32"), []) is Bid.ONE_NOTRUMP

    def test_notrump_gap_is_not_notrump(self, profile):
        # balanced 18 HCP sits between 1NT and 2NT: bid the suit
        assert decide_bid(profile("AKQ2.AKQ2.432.32"), []) is Bid.ONE_DIAMOND

    def test_strong_club_unbalanced(self, profile):
        assert decide_bid(profile("AKQJ32.AKQ2.AK.2"), []) is Bid.TWO_CLUB

    def test_strong_club_balanced_outside_notrump_ranges(self, profile):
        # 24 HCP balanced: above 2NT, below 3NT
        assert decide_bid(profile("AKQ2.AKQ2.AQ2.32"), []) is Bid.TWO_CLUB

    @pytest.mark.parametrize("hand, expected", [
        ("AKJ32.K32.Q32.32", Bid.ONE_SPADE),        # five spades, balanced 13 HCP
        ("AK432.AQ5432.2.2", Bid.ONE_HEART),        # six hearts beat five spades
        ("AK432.AQ432.32.2", Bid.ONE_SPADE),        # five-five: spades first
        ("A.K2.AKJ432.Q432", Bid.ONE_DIAMOND),      # six diamonds
        ("A..AKJ432.KQ5432", Bid.ONE_DIAMOND),      # six-six minors: diamonds first
        ("2.AK32.AQ32.K432", Bid.ONE_DIAMOND),      # four-four minors: diamonds first
        ("AK32.K32.Q32.J32", Bid.ONE_CLUB),         # three-three minors: clubs first
        ("AK32.K432.Q32.J2", Bid.ONE_DIAMOND),      # 4-4-3-2, 13 HCP: three diamonds before two clubs
        ("K2.A2.K2.AQJ5432", Bid.ONE_CLUB),         # seven clubs with opening points
    ])
    def test_suit_openings(self, profile, hand, expected):
        assert decide_bid(profile(hand), []) is expected

    def test_opens_after_passes(self, profile):
        history = [Bid.PASS, Bid.PASS]
        assert decide_bid(profile("AKQ2.AK32.432.32"), history) is Bid.ONE_NOTRUMP
        assert history == [Bid.PASS, Bid.PASS, Bid.ONE_NOTRUMP]


class TestPreemptiveBids:
    @pytest.mark.parametrize("hand, expected", [
        ("KQJ5432.32.32.32", Bid.THREE_SPADE),
        ("32.KQJ5432.32.32", Bid.THREE_HEART),
        ("32.32.KQJ5432.32", Bid.THREE_DIAMOND),
        ("32.32.32.KQJ5432", Bid.THREE_CLUB),
    ])
    def test_seven_card_preempts(self, profile, hand, expected):
        assert decide_bid(profile(hand), []) is expected

    @pytest.mark.parametrize("hand, expected", [
        ("KQJ432.32.432.32", Bid.TWO_SPADE),
        ("32.AQJ432.432.32", Bid.TWO_HEART),
        ("32.432.AQJ432.32", Bid.TWO_DIAMOND),
    ])
    def test_weak_twos(self, profile, hand, expected):
        assert decide_bid(profile(hand), []) is expected

    def test_six_clubs_is_not_a_weak_two(self, profile):
        assert decide_bid(profile("32.432.32.AQJ432"), []) is Bid.PASS

    def test_better_six_card_suit_wins(self, profile):
        assert decide_bid(profile("J65432.2.QJ5432."), []) is Bid.TWO_DIAMOND

    def test_equal_six_card_suits_take_the_first(self, profile):
        assert decide_bid(profile("Q65432.2.Q65432."), []) is Bid.TWO_SPADE

    def test_five_card_suit_passes(self, profile):
        assert decide_bid(profile("KQJ32.432.432.32"), []) is Bid.PASS

    def test_twelve_points_without_seven_cards_passes(self, profile):
        p = profile("AK2.Q32.432.K432")
        assert p.points == 12
        assert decide_bid(p, []) is Bid.PASS

    def test_too_weak_for_a_weak_two(self, profile):
        p = profile("J65432.32.432.32")
        assert p.points < 5
        assert decide_bid(p, []) is Bid.PASS


class TestAfterOpening:
    @pytest.mark.parametrize("hand", [
        "AKQJ.AKQJ.AK2.32",
        "KQJ5432.32.32.32",
        "KQJ432.32.432.32",
    ])
    def test_everyone_else_passes(self, profile, hand):
        assert decide_bid(profile(hand), [Bid.PASS, Bid.ONE_SPADE]) is Bid.PASS


class TestBidder:
    def test_shared_history_grows(self, profile):
        history = []
        north = Bidder(profile("AKQ2.AK32.432.32"), history)
        east = Bidder(profile("KQJ5432.32.32.32"), history)
        assert east.decide_bid() is Bid.THREE_SPADE
        assert north.bidding_opened()
        assert north.decide_bid() is Bid.PASS
        assert history == [Bid.THREE_SPADE, Bid.PASS]

    def test_accepts_plain_cards(self):
        cards = [Card.get(r, "spades") for r in ("ace", "king", "queen", "jack", "ten", "nine", "eight")]
        cards += [Card.get(r, "hearts") for r in ("two", "three", "four")]
        cards += [Card.get(r, "clubs") for r in ("two", "three", "four")]
        assert Bidder(cards, []).decide_bid() is Bid.ONE_SPADE

    def test_last_rule_is_recorded(self, profile, log_messages):
        bidder = Bidder(profile("AKQJ32.AKQ2.AK.2"), [])
        bidder.decide_bid()
        assert bidder.last_rule.name == "strong 2♣"
        assert any("strong 2♣" in msg for _, msg in log_messages)

    @pytest.mark.parametrize("hand", ["K432.Q432.J43.32", "32.432.32.AQJ432"])
    def test_weak_pass_names_no_preempt(self, profile, hand, log_messages):
        bidder = Bidder(profile(hand), [])
        assert bidder.decide_bid() is Bid.PASS
        assert bidder.last_rule.name == "no preempt"
        assert not any(msg.startswith("weak two") for _, msg in log_messages)

    def test_choose_bid_does_not_record(self, profile):
        history = []
        rule, bid = Bidder(profile("AKQ2.AK32.432.32"), history).choose_bid()
        assert bid is Bid.ONE_NOTRUMP
        assert history == []

    def test_broken_table_raises(self, profile, monkeypatch):
        import bridge_opener.bidding as bidding
        monkeypatch.setattr(bidding, "OPENING_RULES", ())
        with pytest.raises(BiddingLogicError):
            Bidder(profile("AKQ2.AK32.432.32"), []).decide_bid()


# ---- Unreachability of BiddingLogicError ----
def all_shapes():
    """Every (spades, hearts, diamonds, clubs) length split of 13 cards."""
    for s, h, d in itertools.product(range(14), repeat=3):
        c = 13 - s - h - d
        if c >= 0:
            yield s, h, d, c


def top_cards_hand(shape):
    """Highest cards of each suit, so every suit with cards holds its ace."""
    ranks = list(Orderings.display().rank)
    return [Card(rank, suit) for suit, n in zip(SCAN, shape) for rank in ranks[:n]]


class TestOpeningTableIsComplete:
    def test_shape_count(self):
        assert len(list(all_shapes())) == 560

    def test_every_shape_has_a_suit_opening(self):
        for shape in all_shapes():
            profile = HandProfile(top_cards_hand(shape))
            assert profile.shape == shape
            assert select_bid(MAJOR_RULES + MINOR_RULES, profile) is not None, shape

    def test_every_opening_shape_bids(self):
        for shape in all_shapes():
            profile = HandProfile(top_cards_hand(shape))
            assert profile.points > 12
            assert select_bid(OPENING_RULES, profile) is not None, shape
            assert decide_bid(profile, []) is not Bid.PASS

    def test_preempt_table_always_answers(self):
        for shape in all_shapes():
            assert select_bid(PREEMPT_RULES, HandProfile(top_cards_hand(shape))) is not None

    def test_random_deals_never_raise(self):
        rng = RandomSource(13)
        for _ in range(500):
            for hand in BridgeDeal(rng=rng).hands:
                bid = decide_bid(hand, [])
                assert isinstance(bid, Bid)
