"""Player bankroll and betting."""

from typing import Protocol, runtime_checkable

from blackjack.config import config
from blackjack.errors import InsufficientFunds, InvalidBet
from blackjack.events import EventEmitter, EventType
from blackjack.hand import Hand


@runtime_checkable
class Dealer(Protocol):
    """Anything that can register a player's bet."""

    def take_bet(self, player: "Player", amount: int) -> object:
        """Register a bet; raise to reject it."""
        ...


class Player:
    """
    A named player with a bankroll.

    The hand is not dealt here; assign ``player.hand`` (usually via
    ``Hand.deal_from``) once the round starts.
    """

    def __init__(
        self,
        name: str,
        bankroll: int | None = None,
        *,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a player.

        Args:
            name: Display name
            bankroll: Starting bankroll (configured table default if omitted)
            events: Emitter notified of bets
        """
        if bankroll is None:
            bankroll = config.table.default_bankroll
        if bankroll < 0:
            raise ValueError("Bankroll must not be negative")

        self.name = name
        self.bankroll = bankroll
        self.hand: Hand | None = None
        self._events = events

    def place_bet(self, dealer: Dealer, amount: int) -> None:
        """
        Register a bet with the dealer and deduct it from the bankroll.

        The bankroll only changes once the dealer has accepted the bet.

        Raises:
            InvalidBet: if amount is not positive
            InsufficientFunds: if amount exceeds the bankroll; the dealer is
                not contacted
            Exception: whatever the dealer raises to reject the bet
        """
        if amount <= 0:
            raise InvalidBet(f"Bet must be positive, got {amount}")

        if amount > self.bankroll:
            self._emit(
                EventType.INSUFFICIENT_FUNDS,
                player=self.name,
                required=amount,
                available=self.bankroll,
            )
            raise InsufficientFunds(amount, self.bankroll)

        try:
            dealer.take_bet(self, amount)
        except Exception as exc:
            self._emit(
                EventType.BET_REJECTED,
                player=self.name,
                amount=amount,
                reason=str(exc),
            )
            raise

        self.bankroll -= amount
        self._emit(
            EventType.BET_PLACED,
            player=self.name,
            amount=amount,
            bankroll=self.bankroll,
        )

    def _emit(self, event_type: EventType, **data: object) -> None:
        if self._events is not None:
            self._events.emit_new(event_type, **data)

    def __repr__(self) -> str:
        return f"Player({self.name!r}, bankroll={self.bankroll})"
