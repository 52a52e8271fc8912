"""Pytest fixtures for blackjack rules engine tests."""

import pytest
from random import Random
from unittest.mock import Mock

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.events import EventEmitter
from blackjack.hand import Hand
from blackjack.player import Player


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def deck(rng):
    """A full deck in canonical order."""
    return Deck(rng=rng)


@pytest.fixture
def two_aces_deck():
    """A deck holding only two aces."""
    return Deck([Card(Rank.ACE, Suit.HEARTS), Card(Rank.ACE, Suit.SPADES)])


@pytest.fixture
def low_point_hand():
    """A hand worth 9 (3-6)."""
    return Hand([Card(Rank.THREE, Suit.HEARTS), Card(Rank.SIX, Suit.SPADES)])


@pytest.fixture
def high_point_hand():
    """A hand worth 20 (10-Q)."""
    return Hand([Card(Rank.TEN, Suit.HEARTS), Card(Rank.QUEEN, Suit.SPADES)])


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return Hand([Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS)])


@pytest.fixture
def busted_hand():
    """A busted hand worth 24 (10-6-8)."""
    return Hand([
        Card(Rank.TEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.SPADES),
        Card(Rank.EIGHT, Suit.CLUBS),
    ])


@pytest.fixture
def other_busted_hand():
    """A busted hand worth 23 (10-Q-3)."""
    return Hand([
        Card(Rank.TEN, Suit.HEARTS),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.THREE, Suit.CLUBS),
    ])


@pytest.fixture
def dealer():
    """A dealer double that accepts every bet."""
    return Mock(spec=["take_bet"])


@pytest.fixture
def player(events):
    """A player with a 100,000 bankroll."""
    return Player("John Smith", 100_000, events=events)
