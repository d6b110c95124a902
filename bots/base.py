"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Sequence

from five_hundred.actions import CoreBid, Player
from five_hundred.cards import Card, card_sort_key
from five_hundred.game import Game


class BotStrategy:
    """Base class for bot policies. The defaults always pass and play the lowest card."""

    name: str = "BaseBot"

    def on_round_start(self, game: Game, player: Player) -> None:
        """Optional hook invoked when a new round has been dealt."""
        return None

    def offer_bid(self, game: Game, player: Player) -> CoreBid:
        """Return a Bid to outbid the table, or a Pass."""
        return player.pass_()

    def discard(self, game: Game, player: Player) -> Sequence[Card]:
        """Return exactly three cards to place back into the kitty."""
        hand = sorted(game.state.hand(player), key=card_sort_key)
        return hand[: game.rules.kitty_size]

    def play_card(self, game: Game, player: Player) -> Card:
        hand = sorted(game.state.hand(player), key=card_sort_key)
        if not hand:
            raise RuntimeError("No cards left to play.")
        return hand[0]
