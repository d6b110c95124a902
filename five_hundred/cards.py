"""Card-related data structures and helpers for Five Hundred."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, Optional, Tuple


class Color(Enum):
    RED = auto()
    BLACK = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Suit(Enum):
    SPADES = auto()
    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    NONE = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def color(self) -> Optional[Color]:
        return SUIT_COLORS.get(self)

    @property
    def opposite(self) -> Suit:
        """The other suit of the same color, or NONE for no-trump."""
        return OPPOSITE_SUITS.get(self, Suit.NONE)


class Rank(Enum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    ELEVEN = 11
    TWELVE = 12
    THIRTEEN = 13
    JACK = 14
    QUEEN = 15
    KING = 16
    ACE = 17
    JOKER = 18

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def numbered(cls, value: int) -> Rank:
        if not 2 <= value <= 13:
            raise ValueError(f"No numbered rank {value}.")
        return cls(value)


# Suits in deck order; NONE only ever appears on the joker.
SUITS: Tuple[Suit, ...] = (Suit.SPADES, Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS)

FACE_RANKS: Tuple[Rank, ...] = (Rank.JACK, Rank.QUEEN, Rank.KING)

SUIT_COLORS: dict[Suit, Color] = {
    Suit.SPADES: Color.BLACK,
    Suit.CLUBS: Color.BLACK,
    Suit.DIAMONDS: Color.RED,
    Suit.HEARTS: Color.RED,
}

OPPOSITE_SUITS: dict[Suit, Suit] = {
    Suit.HEARTS: Suit.DIAMONDS,
    Suit.DIAMONDS: Suit.HEARTS,
    Suit.CLUBS: Suit.SPADES,
    Suit.SPADES: Suit.CLUBS,
}

# Rank order from lowest to highest for trick resolution.
RANK_ORDER: list[Rank] = [rank for rank in Rank if rank is not Rank.JOKER] + [Rank.JOKER]

RANK_STRENGTH: dict[Rank, int] = {rank: index for index, rank in enumerate(RANK_ORDER)}


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def unsuited(cls, rank: Rank) -> Card:
        return cls(rank, Suit.NONE)

    def is_joker(self) -> bool:
        return self.rank is Rank.JOKER

    def __str__(self) -> str:
        return card_label(self)


JOKER = Card.unsuited(Rank.JOKER)


def card_strength(card: Card) -> int:
    """Return an integer strength used for ordering cards within a suit."""
    return RANK_STRENGTH[card.rank]


def card_sort_key(card: Card) -> Tuple[int, int]:
    """Stable display order: by suit, then by rank."""
    return (card.suit.value, card_strength(card))


def serialize_card(card: Card) -> dict[str, str]:
    return {"rank": card.rank.name.lower(), "suit": card.suit.name.lower()}


def deserialize_card(payload: Mapping[str, str]) -> Card:
    rank_name = payload["rank"].upper()
    suit_name = payload.get("suit", "none").upper()
    return Card(Rank[rank_name], Suit[suit_name])


def card_label(card: Card) -> str:
    if card.is_joker():
        return "Joker"
    return f"{card.rank.name.title()} of {card.suit.name.title()}"
