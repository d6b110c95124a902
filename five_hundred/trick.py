"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .cards import JOKER, Card, Rank, Suit, card_strength


class TrickError(ValueError):
    """Raised when trick play breaks ordering constraints."""


class EmptyTrick(TrickError):
    """Raised when resolving a trick that has no cards."""


@dataclass(frozen=True)
class Trick:
    """Cards played so far, in play order, under the round's trump."""

    trump: Suit
    size: int
    cards: Tuple[Card, ...] = ()

    def __len__(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def is_full(self) -> bool:
        return len(self.cards) >= self.size

    def led_suit(self) -> Optional[Suit]:
        return self.cards[0].suit if self.cards else None

    def add(self, card: Card) -> Trick:
        if self.is_full():
            raise TrickError("Trick already complete.")
        if card in self.cards:
            raise TrickError(f"{card} has already been played to this trick.")
        return replace(self, cards=self.cards + (card,))


def precedence(card: Card, trump: Suit, led: Suit) -> Tuple[bool, bool, bool, bool, bool, int]:
    """Composite ordering key; earlier elements dominate later ones."""
    right_bower = Card(Rank.JACK, trump)
    left_bower = Card(Rank.JACK, trump.opposite)
    return (
        card == JOKER,
        trump is not Suit.NONE and card == right_bower,
        trump is not Suit.NONE and card == left_bower,
        trump is not Suit.NONE and card.suit is trump,
        card.suit is led,
        card_strength(card),
    )


def winning_card(trick: Trick) -> Card:
    """Return the card that takes the trick, honouring joker, bowers and trump."""
    if trick.is_empty():
        raise EmptyTrick("Trick must contain at least one card.")
    led = trick.led_suit()
    return max(trick.cards, key=lambda card: precedence(card, trick.trump, led))


def winning_index(trick: Trick) -> int:
    """Position in play order of the winning card."""
    return trick.cards.index(winning_card(trick))
