"""Deck creation and dealing utilities for Five Hundred."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .cards import FACE_RANKS, JOKER, SUITS, Card, Color, Rank

KITTY_SIZE = 3


class InvalidConfiguration(ValueError):
    """Raised when a table or deck cannot be built for the requested player count."""


def _make_ranks(numbers: Iterable[int]) -> Tuple[Rank, ...]:
    return tuple(Rank.numbered(n) for n in numbers) + FACE_RANKS + (Rank.ACE,)


# Ranks dealt per color for each supported player count.
DECK_SPECIFICATION: dict[int, dict[Color, Tuple[Rank, ...]]] = {
    3: {
        Color.RED: _make_ranks(range(7, 11)),
        Color.BLACK: _make_ranks(range(7, 11)),
    },
    4: {
        Color.RED: _make_ranks(range(4, 11)),
        Color.BLACK: _make_ranks(range(5, 11)),
    },
    5: {
        Color.RED: _make_ranks(range(2, 11)),
        Color.BLACK: _make_ranks(range(2, 11)),
    },
    6: {
        Color.RED: _make_ranks(range(2, 14)),
        Color.BLACK: _make_ranks(range(2, 13)),
    },
}

# Every rank that can appear outside the joker, lowest first.
ALL_RANKS: Tuple[Rank, ...] = DECK_SPECIFICATION[6][Color.RED]

SUPPORTED_PLAYER_COUNTS: Tuple[int, ...] = tuple(sorted(DECK_SPECIFICATION))


def ensure_player_count(players: int) -> None:
    if players not in DECK_SPECIFICATION:
        raise InvalidConfiguration(f"Only 3 to 6 players are supported, not {players}.")


def build_deck(players: int = 4) -> List[Card]:
    """Return the ordered deck for the given number of players, joker first."""
    ensure_player_count(players)
    ranks_for_colors = DECK_SPECIFICATION[players]
    return [JOKER] + [
        Card(rank, suit)
        for rank in ALL_RANKS
        for suit in SUITS
        if rank in ranks_for_colors[suit.color]
    ]


def deal(deck: Sequence[Card], players: int) -> Tuple[List[List[Card]], List[Card]]:
    """Split an ordered deck into one hand per seat and the kitty.

    Hands are consecutive slices in seat order; the kitty is the last
    three cards.
    """
    ensure_player_count(players)
    cards = list(deck)
    if len(cards) != len(set(cards)):
        raise InvalidConfiguration("Deck must not contain duplicate cards.")
    hand_size, remainder = divmod(len(cards) - KITTY_SIZE, players)
    if remainder or hand_size <= 0:
        raise InvalidConfiguration(
            f"A deck of {len(cards)} cards cannot be dealt to {players} players plus a kitty."
        )

    hands = [cards[seat * hand_size : (seat + 1) * hand_size] for seat in range(players)]
    kitty = cards[players * hand_size :]
    return hands, kitty
