"""Convenience service layer for front ends and bots."""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import Any, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .actions import Bid, CoreBid, KittyDiscard, Pass, Play, Player
from .cards import Card, Suit, card_label, card_sort_key, deserialize_card, serialize_card
from .game import Game, Phase, Shuffle, apply, create_game
from .rules_schema import RuleSet
from .state import State

logger = logging.getLogger(__name__)

# Phases in which the auction is over and the high bid names trump.
CONTRACT_PHASES = frozenset({Phase.KITTY, Phase.TRICK, Phase.SCORING, Phase.COMPLETED})


class InvalidPayload(ValueError):
    """Raised when a wire payload cannot be turned into an action."""


class CardPayload(BaseModel):
    rank: str
    suit: str = "none"

    def to_card(self) -> Card:
        try:
            return deserialize_card({"rank": self.rank, "suit": self.suit})
        except KeyError as exc:
            raise InvalidPayload(f"Unknown card {self.rank} of {self.suit}.") from exc


class ActionRequest(BaseModel):
    kind: Literal["bid", "pass", "play", "kitty"]
    seat: int = Field(..., ge=1)
    number: Optional[int] = None
    suit: Optional[str] = None
    card: Optional[CardPayload] = None
    cards: List[CardPayload] = Field(default_factory=list)

    def to_action(self, state: State) -> Union[Bid, Pass, Play, KittyDiscard]:
        actor = Player(self.seat)
        if actor not in state.players:
            raise InvalidPayload(f"No player in seat {self.seat}.")
        if self.kind == "pass":
            return actor.pass_()
        if self.kind == "bid":
            if self.number is None or self.suit is None:
                raise InvalidPayload("A bid needs a number and a suit.")
            try:
                suit = Suit[self.suit.upper()]
            except KeyError as exc:
                raise InvalidPayload(f"Unknown suit {self.suit!r}.") from exc
            return actor.bid(self.number, suit)
        if self.kind == "play":
            if self.card is None:
                raise InvalidPayload("A play needs a card.")
            return actor.play(self.card.to_card())
        return actor.discard(card.to_card() for card in self.cards)


@dataclass
class BidView:
    player: Optional[int]
    action: str
    number: Optional[int]
    suit: Optional[str]
    score: int


@dataclass
class CompletedTrickView:
    winner: int
    cards: list[dict]
    winning_card: dict


@dataclass
class GameView:
    phase: str
    round_number: int
    dealer: Optional[int]
    priority: Optional[int]
    bid: BidView
    bidding_history: list[BidView]
    trump: str
    hands: dict[int, list[dict]]
    hand_labels: dict[int, list[str]]
    hand_sizes: dict[int, int]
    kitty: list[dict]
    trick: list[dict]
    completed_tricks: list[CompletedTrickView]
    tricks_won: dict[int, int]
    teams: list[list[int]]
    scores: list[int]


def _bid_view(bid: CoreBid) -> BidView:
    actor = bid.actor.position if bid.actor is not None else None
    if isinstance(bid, Bid):
        return BidView(player=actor, action="bid", number=bid.number, suit=str(bid.suit), score=bid.score)
    return BidView(player=actor, action="pass", number=None, suit=None, score=bid.score)


def _sorted_cards(cards) -> list[Card]:
    return sorted(cards, key=card_sort_key)


def build_view(game: Game, perspective: Optional[int] = None) -> GameView:
    """Read-only snapshot of the game.

    With a ``perspective`` seat only that player's hand is revealed, plus the
    kitty once they have won the auction; ``None`` reveals everything. Trump
    reads ``none`` until bidding closes.
    """
    state = game.state
    visible = [
        player
        for player in state.players
        if perspective is None or player.position == perspective
    ]
    contract = game.phase in CONTRACT_PHASES
    show_kitty = perspective is None or (
        contract and state.bid.actor is not None and state.bid.actor.position == perspective
    )
    return GameView(
        phase=str(game.phase),
        round_number=state.round_number,
        dealer=state.dealer.position if state.dealer else None,
        priority=state.priority.position if state.priority else None,
        bid=_bid_view(state.bid),
        bidding_history=[_bid_view(action) for action in state.bidding],
        trump=str(state.trump if contract else Suit.NONE),
        hands={player.position: [serialize_card(c) for c in _sorted_cards(state.hand(player))] for player in visible},
        hand_labels={player.position: [card_label(c) for c in _sorted_cards(state.hand(player))] for player in visible},
        hand_sizes={player.position: len(state.hand(player)) for player in state.players},
        kitty=[serialize_card(c) for c in _sorted_cards(state.kitty)] if show_kitty else [],
        trick=[serialize_card(c) for c in state.trick.cards] if state.trick else [],
        completed_tricks=[
            CompletedTrickView(
                winner=completed.winner.position,
                cards=[serialize_card(c) for c in completed.cards],
                winning_card=serialize_card(completed.winning_card),
            )
            for completed in state.tricks
        ],
        tricks_won={player.position: state.tricks_won[state.seat(player)] for player in state.players},
        teams=[[player.position for player in team] for team in state.teams],
        scores=list(state.scores),
    )


class GameService:
    """Facade around a single Game for UI consumers.

    Actions are serialized with a lock so concurrent callers always act on
    a consistent game.
    """

    def __init__(
        self,
        players: int = 4,
        *,
        rules: Optional[RuleSet] = None,
        shuffle: Optional[Shuffle] = None,
        undo_limit: int = 64,
    ) -> None:
        self._lock = threading.Lock()
        self.game = create_game(players, rules=rules, shuffle=shuffle)
        self.history: list[Any] = []
        # Only the most recent games are kept; older actions stay in history.
        self._previous: deque[Game] = deque(maxlen=undo_limit)

    # Actions -----------------------------------------------------------

    def submit(self, payload: Union[ActionRequest, Mapping[str, Any]]) -> GameView:
        try:
            request = payload if isinstance(payload, ActionRequest) else ActionRequest.model_validate(payload)
        except ValidationError as exc:
            raise InvalidPayload(str(exc)) from exc
        with self._lock:
            action = request.to_action(self.game.state)
            self._advance(action)
        logger.debug("Seat %d submitted %s", request.seat, action)
        return self.get_view(request.seat)

    def act(self, action) -> Game:
        with self._lock:
            self._advance(action)
            return self.game

    def undo(self) -> Game:
        """Step back to the game as it was before the last accepted action."""
        with self._lock:
            if not self._previous:
                raise RuntimeError("Nothing to undo.")
            self.game = self._previous.pop()
            self.history.pop()
            return self.game

    def _advance(self, action) -> None:
        game = apply(self.game, action)
        self._previous.append(self.game)
        self.history.append(action)
        self.game = game

    # Views -------------------------------------------------------------

    def get_view(self, perspective: Optional[int] = None) -> GameView:
        with self._lock:
            game = self.game
        return build_view(game, perspective)

    def is_complete(self) -> bool:
        return self.game.is_complete()
