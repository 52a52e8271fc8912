"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator

from blackjack.cards import Card, Deck
from blackjack.config import config
from blackjack.errors import HandOverLimit


@dataclass
class Hand:
    """A blackjack hand with point calculation."""

    cards: list[Card] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cards = list(self.cards)

    @classmethod
    def deal_from(cls, deck: Deck) -> "Hand":
        """Deal a new two-card hand from the deck."""
        return cls(deck.take(config.rules.initial_hand_size))

    def hit(self, deck: Deck) -> Card:
        """
        Draw one card from the deck into the hand.

        Returns:
            The card drawn

        Raises:
            HandOverLimit: if the hand already has 21 or more points; nothing
                is drawn
            InsufficientCards: if the deck is empty
        """
        if self.points >= config.rules.bust_limit:
            raise HandOverLimit(f"Cannot hit a hand with {self.points} points")

        card = deck.draw()
        self.cards.append(card)
        return card

    @property
    def points(self) -> int:
        """
        Calculate the best point total.

        Returns the highest total that doesn't bust, or the lowest bust total.
        """
        rules = config.rules
        total = 0
        soft_aces = 0

        for card in self.cards:
            if card.is_ace:
                soft_aces += 1
                total += rules.ace_high
            else:
                total += card.blackjack_value()

        # Recount aces from 11 to 1 as needed
        while total > rules.bust_limit and soft_aces > 0:
            total -= rules.ace_demotion
            soft_aces -= 1

        return total

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        A hand is soft if it contains an ace that can be counted as 11
        without busting.
        """
        if not any(card.is_ace for card in self.cards):
            return False

        rules = config.rules
        total_hard = sum(
            rules.ace_low if card.is_ace else card.blackjack_value()
            for card in self.cards
        )
        return total_hard + rules.ace_demotion <= rules.bust_limit

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return (
            len(self.cards) == config.rules.initial_hand_size
            and self.points == config.rules.bust_limit
        )

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (points > 21)."""
        return self.points > config.rules.bust_limit

    def beats(self, other: "Hand") -> bool:
        """
        Check if this hand wins outright against another.

        A busted hand never wins, even against another busted hand. Equal
        totals return False in both directions; use ``evaluate_hands`` when
        a push has to be told apart from a loss.
        """
        if self.is_busted:
            return False
        if other.is_busted:
            return True
        return self.points > other.points

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        points_str = f"({self.points})"
        if self.is_soft:
            points_str = f"(soft {self.points})"
        if self.is_busted:
            points_str = "(BUST)"
        return f"{cards_str} {points_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, points={self.points})"


def evaluate_hands(hand: Hand, other: Hand) -> int:
    """
    Compare two hands, telling pushes apart from losses.

    Returns:
        1 if ``hand`` wins
        -1 if ``hand`` loses (always, when ``hand`` is busted)
        0 if push (equal totals, neither busted)
    """
    if hand.beats(other):
        return 1
    if hand.is_busted or other.beats(hand):
        return -1
    return 0
