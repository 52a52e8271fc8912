"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

from blackjack.config import config
from blackjack.errors import InsufficientCards, InvalidValueQuery
from blackjack.events import EventEmitter, EventType

# Shared by every deck built without an rng, so BLACKJACK_SEED repeats the
# whole session rather than each deck.
_default_rng = Random(config.table.shuffle_seed)


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(Enum):
    """Card ranks, ordered from deuce to ace."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        """Return the short display label ("2".."10", "J", "Q", "K", "A")."""
        if self.value <= 10:
            return str(self.value)
        return _FACE_LABELS[self]

    def __str__(self) -> str:
        return self.label

    @property
    def blackjack_value(self) -> int:
        """
        Return the fixed blackjack point value.

        Raises:
            InvalidValueQuery: for an ace, whose value depends on the hand
        """
        if self is Rank.ACE:
            raise InvalidValueQuery("Ace has no fixed value outside of a hand")
        return 10 if self.is_ten_value else self.value

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self is Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return 10 <= self.value <= 13


_FACE_LABELS = {
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

_RANK_STRINGS = {rank.label: rank for rank in Rank}
_RANK_STRINGS["T"] = Rank.TEN

_SUIT_STRINGS = {
    "C": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "S": Suit.SPADES,
}
_SUIT_STRINGS.update({suit.symbol: suit for suit in Suit})


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def blackjack_value(self) -> int:
        """
        Return the blackjack point value of this card.

        Aces have no fixed value; score them through a Hand instead.

        Raises:
            InvalidValueQuery: if the card is an ace
        """
        return self.rank.blackjack_value

    @property
    def symbol(self) -> str:
        """Return the suit symbol."""
        return self.suit.symbol

    @property
    def label(self) -> str:
        """Return the rank label."""
        return self.rank.label

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    @staticmethod
    def suits() -> list[Suit]:
        """Return the four suits in canonical order."""
        return list(Suit)

    @staticmethod
    def ranks() -> list[Rank]:
        """Return the thirteen ranks in canonical order."""
        return list(Rank)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', 'T♦'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_STRINGS:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_STRINGS:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_STRINGS[rank_str], _SUIT_STRINGS[suit_str])


class Deck:
    """
    An ordered pile of cards.

    ``cards[-1]`` is the top of the deck: ``take`` removes from the end and
    ``return_cards`` inserts at the front.
    """

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        *,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a deck.

        Args:
            cards: Initial contents, bottom first (a full ordered deck if omitted).
                No deduplication is done.
            rng: Random number generator for shuffling (the shared session
                generator if omitted)
            events: Emitter notified of shuffles and card movement
        """
        self._rng = rng or _default_rng
        self._events = events
        self.cards: list[Card] = list(cards) if cards is not None else self.all_cards()

    @classmethod
    def all_cards(cls) -> list[Card]:
        """Return the 52 standard cards in suit-major order."""
        return [Card(rank, suit) for suit in Suit for rank in Rank]

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self.cards = self.all_cards()
        self._emit(EventType.DECK_RESET, cards_remaining=len(self.cards))

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self._rng.shuffle(self.cards)
        self._emit(EventType.DECK_SHUFFLED, cards_remaining=len(self.cards))

    def take(self, n: int) -> list[Card]:
        """
        Remove and return the top ``n`` cards, topmost first.

        Raises:
            InsufficientCards: if fewer than ``n`` cards remain; the deck is
                left unchanged
        """
        if n < 0:
            raise ValueError(f"Cannot take a negative number of cards: {n}")
        if n > len(self.cards):
            raise InsufficientCards(n, len(self.cards))

        taken = [self.cards.pop() for _ in range(n)]
        self._emit(EventType.CARDS_TAKEN, count=n, cards_remaining=len(self.cards))
        return taken

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        return self.take(1)[0]

    def return_cards(self, cards: Iterable[Card]) -> None:
        """Put cards on the bottom of the deck, keeping their order."""
        returned = list(cards)
        self.cards[:0] = returned
        self._emit(
            EventType.CARDS_RETURNED,
            count=len(returned),
            cards_remaining=len(self.cards),
        )

    def _emit(self, event_type: EventType, **data: object) -> None:
        if self._events is not None:
            self._events.emit_new(event_type, **data)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self.cards)
