"""Random baseline bot used to exercise the rules engine."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from five_hundred.actions import BID_SUITS, MAX_BID, MIN_BID, Bid, CoreBid, Player
from five_hundred.cards import Card, card_sort_key
from five_hundred.game import Game

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None, bid_chance: float = 0.3) -> None:
        self._rng = random.Random(seed)
        self.bid_chance = bid_chance

    def offer_bid(self, game: Game, player: Player) -> CoreBid:
        current = game.state.bid
        legal_above = [
            Bid(player, number, suit)
            for number in range(MIN_BID, MAX_BID + 1)
            for suit in BID_SUITS
            if Bid(player, number, suit) > current
        ]
        if not legal_above or self._rng.random() >= self.bid_chance:
            return player.pass_()
        # Favour modest bids so rounds are usually makeable.
        return min(self._rng.sample(legal_above, k=min(3, len(legal_above))))

    def discard(self, game: Game, player: Player) -> Sequence[Card]:
        cards = sorted(game.state.hand(player), key=card_sort_key)
        return self._rng.sample(cards, k=game.rules.kitty_size)

    def play_card(self, game: Game, player: Player) -> Card:
        cards = sorted(game.state.hand(player), key=card_sort_key)
        if not cards:
            raise RuntimeError("No cards left to play.")
        return self._rng.choice(cards)
