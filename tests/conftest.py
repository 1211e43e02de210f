"""Shared fixtures: seeded randomness, hand builders and a loguru capture."""
import pytest
from loguru import logger

from bridge_opener.cards import parse_cards
from bridge_opener.deck import RandomSource
from bridge_opener.scoring import HandProfile


@pytest.fixture
def rng():
    """Seeded random source so deals repeat run to run."""
    return RandomSource(20070101)


@pytest.fixture
def profile():
    """Build a HandProfile from an S.H.D.C string."""
    def build(text):
        cards = parse_cards(text)
        assert len(cards) == 13, f"{text} has {len(cards)} cards"
        return HandProfile(cards)
    return build


@pytest.fixture
def log_messages():
    """Collect (level, message) for everything the package logs during a test."""
    messages = []
    logger.enable("bridge_opener")
    handler_id = logger.add(
        lambda m: messages.append((m.record["level"].name, m.record["message"])),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
    logger.disable("bridge_opener")
