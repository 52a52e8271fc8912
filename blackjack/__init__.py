"""Blackjack rules engine - cards, decks, hands and betting."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import (
    BlackjackError,
    HandOverLimit,
    InsufficientCards,
    InsufficientFunds,
    InvalidBet,
    InvalidValueQuery,
)
from blackjack.events import EventEmitter, EventType, GameEvent, log_events
from blackjack.hand import Hand, evaluate_hands
from blackjack.player import Dealer, Player

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "evaluate_hands",
    "Dealer",
    "Player",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "log_events",
    "BlackjackError",
    "HandOverLimit",
    "InsufficientCards",
    "InsufficientFunds",
    "InvalidBet",
    "InvalidValueQuery",
]
