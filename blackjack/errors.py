"""Exceptions raised by the blackjack rules engine."""


class BlackjackError(Exception):
    """Base class for all rules-engine errors."""


class InvalidValueQuery(BlackjackError, ValueError):
    """An ace was asked for its point value outside of a hand."""


class HandOverLimit(BlackjackError, ValueError):
    """A hand at or above the bust limit was hit."""


class InvalidBet(BlackjackError, ValueError):
    """A bet amount was zero or negative."""


class InsufficientFunds(BlackjackError, ValueError):
    """A bet exceeded the player's bankroll."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Cannot bet {required} with a bankroll of {available}")
        self.required = required
        self.available = available


class InsufficientCards(BlackjackError, IndexError):
    """More cards were requested than remain in the deck."""

    def __init__(self, requested: int, remaining: int) -> None:
        super().__init__(f"Cannot take {requested} cards, {remaining} remaining")
        self.requested = requested
        self.remaining = remaining
