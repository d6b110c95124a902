"""Player actions for Five Hundred.

Actions only carry data; the phase that receives an action decides what it
means. Bids and passes are ordered by their score so the auction can
compare them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .cards import Card, Suit

MIN_BID = 6
MAX_BID = 10

# Trump precedence used by the bid score, lowest first.
BID_SUITS: Tuple[Suit, ...] = (
    Suit.SPADES,
    Suit.CLUBS,
    Suit.DIAMONDS,
    Suit.HEARTS,
    Suit.NONE,
)


class InvalidBid(ValueError):
    """Raised when a bid names an impossible number of tricks or trump."""


@dataclass(frozen=True)
class Player:
    """A seat at the table, numbered from 1.

    The builder methods create actions on behalf of this player.
    """

    position: int

    def bid(self, number: int, suit: Suit) -> Bid:
        return Bid(self, number, suit)

    def pass_(self) -> Pass:
        return Pass(self)

    def play(self, card: Card) -> Play:
        return Play(self, card)

    def discard(self, cards: Iterable[Card]) -> KittyDiscard:
        return KittyDiscard(self, tuple(cards))

    def __str__(self) -> str:
        return f"Player {self.position}"


@dataclass(frozen=True)
class Action:
    actor: Optional[Player]


class CoreBid(Action):
    """Auction actions, comparable by score only."""

    @property
    def score(self) -> int:
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CoreBid):
            return NotImplemented
        return self.score < other.score

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CoreBid):
            return NotImplemented
        return self.score <= other.score

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CoreBid):
            return NotImplemented
        return self.score > other.score

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CoreBid):
            return NotImplemented
        return self.score >= other.score


@dataclass(frozen=True)
class Bid(CoreBid):
    """Pledge to win ``number`` tricks with ``suit`` as trump."""

    number: int
    suit: Suit

    def __post_init__(self) -> None:
        if not MIN_BID <= self.number <= MAX_BID:
            raise InvalidBid(f"Bid must be between {MIN_BID} and {MAX_BID} tricks, not {self.number}.")
        if self.suit not in BID_SUITS:
            raise InvalidBid(f"Unknown trump {self.suit!r}.")

    @property
    def score(self) -> int:
        """Points earned (or lost) by this bid."""
        suit_score = BID_SUITS.index(self.suit) * 20 + 40
        return (self.number - MIN_BID) * 100 + suit_score

    def __str__(self) -> str:
        return f"<Bid {self.actor} {self.number}{self.suit}>"


@dataclass(frozen=True)
class Pass(CoreBid):
    """Pass priority without bidding. With no actor it marks "no bid yet"."""

    actor: Optional[Player] = None

    @property
    def score(self) -> int:
        return 0


@dataclass(frozen=True)
class Play(Action):
    card: Card


@dataclass(frozen=True)
class KittyDiscard(Action):
    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cards", tuple(self.cards))
