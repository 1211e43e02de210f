"""
Central constants for the bridge opener.

The bidding thresholds below are the fixed convention table used by the
bidder. They are module constants, not user settings.
"""

import os

# ---- Deck ----
DECK_SIZE = 52
HAND_SIZE = 13
SEAT_COUNT = 4

SEAT_NAMES = ("North", "East", "South", "West")

# ---- Point count ----
HCP_VALUES = {"ace": 4, "king": 3, "queen": 2, "jack": 1}
LENGTH_POINT_BASE = 4   # each card beyond four in a suit is worth a point

# ---- Opening bids ----
OPENING_POINTS = 12     # strictly more than this opens at the one level or higher
NOTRUMP_RANGES = (
    (3, 25, 27),
    (2, 20, 21),
    (1, 15, 17),
)
STRONG_CLUB_POINTS = 21  # strictly more than this opens 2♣
MAJOR_MIN_LENGTH = 5
MINOR_MIN_LENGTH = 3

# ---- Preempts ----
PREEMPT_LENGTH = 7
WEAK_TWO_LENGTH = 6
WEAK_TWO_POINTS = (5, 11)

# ---- Auction ----
PASSES_TO_END = 3

# ---- Runtime settings ----
LOG_LEVEL = os.getenv("BRIDGE_OPENER_LOG_LEVEL", "WARNING").upper()
SEED = os.getenv("BRIDGE_OPENER_SEED")
