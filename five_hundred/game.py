"""Phase state machine for Five Hundred.

Each phase may define four hooks, looked up in the dispatch tables below:

* enter(game) -> State, run once when the phase becomes current;
* apply(game, action) -> State, validate and apply a player action;
* exit(game) -> State, run once before the phase is left;
* transition(game) -> Phase or None, decide whether to move on.

After creation and after every accepted action the machine keeps
transitioning until the current phase decides to stay.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .actions import Bid, CoreBid, KittyDiscard, Pass, Play, Player
from .cards import Card
from .deck import build_deck, ensure_player_count
from .rules_schema import RuleSet
from .scoring import score_round
from .state import ActionRejected, State, TurnViolation
from .trick import winning_index

logger = logging.getLogger(__name__)

Shuffle = Callable[[List[Card]], Sequence[Card]]


class ActionNotAllowed(ActionRejected):
    """Raised when an action does not belong to the current phase."""


class Phase(Enum):
    SETUP = auto()
    NEW_ROUND = auto()
    BIDDING = auto()
    KITTY = auto()
    TRICK = auto()
    SCORING = auto()
    COMPLETED = auto()

    def __str__(self) -> str:
        return self.name.lower()


def _keep_order(cards: List[Card]) -> Sequence[Card]:
    return cards


@dataclass(frozen=True)
class Game:
    """A game of Five Hundred: the current phase plus the state it governs."""

    phase: Phase
    state: State
    rules: RuleSet = field(default_factory=RuleSet)
    shuffle: Shuffle = field(default=_keep_order, compare=False, repr=False)

    @property
    def players(self):
        return self.state.players

    def is_complete(self) -> bool:
        return self.phase is Phase.COMPLETED

    def apply(self, action) -> Game:
        return apply(self, action)


def create_game(
    players: int = 4,
    *,
    rules: Optional[RuleSet] = None,
    shuffle: Optional[Shuffle] = None,
) -> Game:
    """Seat ``players`` players and deal the first round.

    ``shuffle`` receives each round's freshly built deck and returns the
    cards in the order they should be dealt.
    """
    ensure_player_count(players)
    state = State.initial([Player(position) for position in range(1, players + 1)])
    game = Game(
        phase=Phase.SETUP,
        state=state,
        rules=rules or RuleSet(),
        shuffle=shuffle or _keep_order,
    )
    game = replace(game, state=_ENTER[Phase.SETUP](game))
    return _settle(game)


def apply(game: Game, action) -> Game:
    """Validate ``action`` against the current phase and return the advanced game.

    Raises ActionRejected (or a subclass) and leaves ``game`` untouched when
    the action is invalid.
    """
    handler = _APPLY.get(game.phase)
    if handler is None:
        logger.debug("Rejected %s during %s", action, game.phase)
        raise ActionNotAllowed(f"No actions are accepted during {game.phase}.")
    try:
        state = handler(game, action)
    except ActionRejected as exc:
        logger.debug("Rejected %s during %s: %s", action, game.phase, exc)
        raise
    return _settle(replace(game, state=state))


def replay(
    actions: Iterable[object],
    players: int = 4,
    *,
    rules: Optional[RuleSet] = None,
    shuffle: Optional[Shuffle] = None,
) -> Game:
    """Rebuild a game from its action log."""
    game = create_game(players, rules=rules, shuffle=shuffle)
    for action in actions:
        game = apply(game, action)
    return game


def _settle(game: Game) -> Game:
    while True:
        next_phase = _TRANSITION.get(game.phase, _stay)(game)
        if next_phase is None:
            return game
        logger.debug("Phase %s -> %s", game.phase, next_phase)
        game = replace(game, state=_EXIT.get(game.phase, _unchanged)(game))
        game = replace(game, phase=next_phase)
        game = replace(game, state=_ENTER.get(next_phase, _unchanged)(game))


def _unchanged(game: Game) -> State:
    return game.state


def _stay(game: Game) -> Optional[Phase]:
    return None


def _require_priority(state: State, action) -> None:
    actor = getattr(action, "actor", None)
    if actor != state.priority:
        raise TurnViolation(f"{actor} may not act, {state.priority} has priority.")


def _require_kind(game: Game, action, *kinds: type) -> None:
    if not isinstance(action, kinds):
        raise ActionNotAllowed(f"{type(action).__name__} is not allowed during {game.phase}.")


# Setup -----------------------------------------------------------------


def _enter_setup(game: Game) -> State:
    return game.state.give_deal(game.state.players[0])


# New round -------------------------------------------------------------


def _enter_new_round(game: Game) -> State:
    state = game.state
    deck = game.shuffle(build_deck(len(state.players)))
    state = state.deal(deck).advance_dealer()
    assert state.dealer is not None
    return state.give_priority(state.dealer).place_bid(Pass())


# Bidding ---------------------------------------------------------------


def _apply_bidding(game: Game, action) -> State:
    state = game.state
    _require_priority(state, action)
    _require_kind(game, action, Bid, Pass)
    assert isinstance(action, CoreBid)

    state = state.record_bid(action)
    if action > state.bid:
        return state.advance().place_bid(action)
    return state.advance()


def _bidding_transition(game: Game) -> Optional[Phase]:
    state = game.state
    if state.bid.actor is not None and state.bid.actor == state.priority:
        return Phase.KITTY
    if state.bid.actor is None and len(state.bidding) >= len(state.players):
        logger.info("Round %d thrown in: every player passed", state.round_number)
        return Phase.NEW_ROUND
    return None


# Kitty -----------------------------------------------------------------


def _enter_kitty(game: Game) -> State:
    state = game.state
    assert state.bid.actor is not None
    return state.move_kitty_to_hand(state.bid.actor)


def _apply_kitty(game: Game, action) -> State:
    _require_priority(game.state, action)
    _require_kind(game, action, KittyDiscard)
    return game.state.move_cards_to_kitty(action.cards)


def _kitty_transition(game: Game) -> Optional[Phase]:
    if len(game.state.kitty) == game.rules.kitty_size:
        return Phase.TRICK
    return None


# Trick -----------------------------------------------------------------


def _enter_trick(game: Game) -> State:
    return game.state.new_trick()


def _apply_trick(game: Game, action) -> State:
    _require_priority(game.state, action)
    _require_kind(game, action, Play)
    return game.state.add_card_to_trick(action.card).advance()


def _exit_trick(game: Game) -> State:
    state = game.state
    assert state.trick is not None and state.priority is not None
    index = winning_index(state.trick)
    card = state.trick.cards[index]
    # Priority has gone all the way round, so it is back on the leader.
    winner = state.player_relative_to(state.priority, index)
    logger.debug("%s wins the trick with %s", winner, card)
    return state.won_trick(winner, card).give_priority(winner)


def _trick_transition(game: Game) -> Optional[Phase]:
    state = game.state
    if state.is_round_over():
        return Phase.SCORING
    if state.trick is not None and state.trick.is_full():
        return Phase.TRICK
    return None


# Scoring ---------------------------------------------------------------


def _enter_scoring(game: Game) -> State:
    state = game.state
    bid = state.bid
    assert isinstance(bid, Bid) and bid.actor is not None
    result = score_round(
        round_number=state.round_number,
        bidding_team=state.team_index(bid.actor),
        bid_number=bid.number,
        bid_score=bid.score,
        tricks_won=state.team_tricks(),
        prior_scores=state.scores,
        trick_points=game.rules.trick_points,
    )
    logger.info(
        "Round %d: %s %s, scores %s",
        result.round_number,
        bid,
        "made" if result.contract_success else "went set",
        result.new_scores,
    )
    return state.record_result(result)


def _exit_scoring(game: Game) -> State:
    return game.state.clear_tricks()


def _scoring_transition(game: Game) -> Optional[Phase]:
    if game.rules.is_game_over(game.state.scores):
        logger.info("Game complete after %d rounds: %s", game.state.round_number, game.state.scores)
        return Phase.COMPLETED
    return Phase.NEW_ROUND


# Dispatch tables -------------------------------------------------------

_ENTER: Dict[Phase, Callable[[Game], State]] = {
    Phase.SETUP: _enter_setup,
    Phase.NEW_ROUND: _enter_new_round,
    Phase.KITTY: _enter_kitty,
    Phase.TRICK: _enter_trick,
    Phase.SCORING: _enter_scoring,
}

_APPLY: Dict[Phase, Callable[[Game, object], State]] = {
    Phase.BIDDING: _apply_bidding,
    Phase.KITTY: _apply_kitty,
    Phase.TRICK: _apply_trick,
}

_EXIT: Dict[Phase, Callable[[Game], State]] = {
    Phase.TRICK: _exit_trick,
    Phase.SCORING: _exit_scoring,
}

_TRANSITION: Dict[Phase, Callable[[Game], Optional[Phase]]] = {
    Phase.SETUP: lambda game: Phase.NEW_ROUND,
    Phase.NEW_ROUND: lambda game: Phase.BIDDING,
    Phase.BIDDING: _bidding_transition,
    Phase.KITTY: _kitty_transition,
    Phase.TRICK: _trick_transition,
    Phase.SCORING: _scoring_transition,
    Phase.COMPLETED: _stay,
}
