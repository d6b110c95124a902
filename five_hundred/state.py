"""Game state management for Five Hundred.

``State`` is a persistent value: every update returns a new ``State`` and
leaves the receiver untouched, so a rejected action can never leave a
half-applied change behind.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from .actions import Bid, CoreBid, Pass, Player
from .cards import Card, Suit
from .deck import KITTY_SIZE, deal, ensure_player_count
from .scoring import RoundScoreResult
from .trick import Trick

NO_BID = Pass()


class ActionRejected(RuntimeError):
    """Base class for actions refused by the game."""


class TurnViolation(ActionRejected):
    """Raised when a player acts without priority."""


class IllegalCard(ActionRejected):
    """Raised when an action names cards the actor does not hold."""


@dataclass(frozen=True)
class CompletedTrick:
    winner: Player
    cards: Tuple[Card, ...]
    winning_card: Card


@dataclass(frozen=True)
class State:
    players: Tuple[Player, ...]
    dealer: Optional[Player] = None
    priority: Optional[Player] = None
    bid: CoreBid = NO_BID
    bidding: Tuple[CoreBid, ...] = ()
    hands: Tuple[FrozenSet[Card], ...] = ()
    kitty: FrozenSet[Card] = frozenset()
    trick: Optional[Trick] = None
    tricks: Tuple[CompletedTrick, ...] = ()
    tricks_won: Tuple[int, ...] = ()
    scores: Tuple[int, ...] = ()
    round_number: int = 0
    results: Tuple[RoundScoreResult, ...] = ()

    @classmethod
    def initial(cls, players: Sequence[Player]) -> State:
        ensure_player_count(len(players))
        seated = tuple(players)
        state = cls(
            players=seated,
            hands=tuple(frozenset() for _ in seated),
            tricks_won=tuple(0 for _ in seated),
        )
        return replace(state, scores=tuple(0 for _ in state.teams))

    # Seating -----------------------------------------------------------

    def seat(self, player: Player) -> int:
        return self.players.index(player)

    def player_relative_to(self, player: Player, offset: int) -> Player:
        """The player ``offset`` seats after ``player``, wrapping around the table."""
        return self.players[(self.seat(player) + offset) % len(self.players)]

    @property
    def teams(self) -> Tuple[Tuple[Player, ...], ...]:
        """Partners sit opposite each other; with an odd count everyone plays alone."""
        count = len(self.players)
        if count % 2:
            return tuple((player,) for player in self.players)
        half = count // 2
        return tuple((self.players[i], self.players[i + half]) for i in range(half))

    def team_index(self, player: Player) -> int:
        return self.seat(player) % len(self.teams)

    def team_for(self, player: Player) -> Tuple[Player, ...]:
        return self.teams[self.team_index(player)]

    # Turn order --------------------------------------------------------

    def give_deal(self, player: Player) -> State:
        return replace(self, dealer=player)

    def advance_dealer(self) -> State:
        assert self.dealer is not None
        return replace(self, dealer=self.player_relative_to(self.dealer, 1))

    def give_priority(self, player: Player) -> State:
        return replace(self, priority=player)

    def advance(self) -> State:
        assert self.priority is not None
        return replace(self, priority=self.player_relative_to(self.priority, 1))

    # Hands -------------------------------------------------------------

    def hand(self, player: Player) -> FrozenSet[Card]:
        return self.hands[self.seat(player)]

    @property
    def priority_hand(self) -> FrozenSet[Card]:
        assert self.priority is not None
        return self.hand(self.priority)

    def _with_hand(self, player: Player, cards: FrozenSet[Card]) -> Tuple[FrozenSet[Card], ...]:
        hands = list(self.hands)
        hands[self.seat(player)] = cards
        return tuple(hands)

    def deal(self, deck: Sequence[Card]) -> State:
        """Start a new round: deal hands and kitty, forget the previous round's play."""
        hands, kitty = deal(deck, len(self.players))
        return replace(
            self,
            hands=tuple(frozenset(hand) for hand in hands),
            kitty=frozenset(kitty),
            trick=None,
            tricks=(),
            bidding=(),
            round_number=self.round_number + 1,
        )

    def move_kitty_to_hand(self, player: Player) -> State:
        return replace(
            self,
            hands=self._with_hand(player, self.hand(player) | self.kitty),
            kitty=frozenset(),
        )

    def move_cards_to_kitty(self, cards: Iterable[Card]) -> State:
        discards = tuple(cards)
        if len(discards) != KITTY_SIZE or len(set(discards)) != KITTY_SIZE:
            raise IllegalCard(f"Exactly {KITTY_SIZE} different cards must go to the kitty.")
        missing = set(discards) - self.priority_hand
        if missing:
            raise IllegalCard(f"{', '.join(map(str, missing))} not in hand of {self.priority}.")
        assert self.priority is not None
        return replace(
            self,
            hands=self._with_hand(self.priority, self.priority_hand - set(discards)),
            kitty=self.kitty | set(discards),
        )

    def is_round_over(self) -> bool:
        return all(not hand for hand in self.hands)

    # Bidding -----------------------------------------------------------

    def place_bid(self, bid: CoreBid) -> State:
        return replace(self, bid=bid)

    def record_bid(self, action: CoreBid) -> State:
        return replace(self, bidding=self.bidding + (action,))

    @property
    def trump(self) -> Suit:
        return self.bid.suit if isinstance(self.bid, Bid) else Suit.NONE

    # Tricks ------------------------------------------------------------

    def new_trick(self) -> State:
        return replace(self, trick=Trick(trump=self.trump, size=len(self.players)))

    def add_card_to_trick(self, card: Card) -> State:
        if card not in self.priority_hand:
            raise IllegalCard(f"{card} is not in hand of {self.priority}.")
        assert self.priority is not None and self.trick is not None
        return replace(
            self,
            hands=self._with_hand(self.priority, self.priority_hand - {card}),
            trick=self.trick.add(card),
        )

    def won_trick(self, winner: Player, card: Card) -> State:
        """Credit ``winner`` with the current trick and set it aside."""
        assert self.trick is not None
        counts = list(self.tricks_won)
        counts[self.seat(winner)] += 1
        return replace(
            self,
            tricks_won=tuple(counts),
            tricks=self.tricks + (CompletedTrick(winner, self.trick.cards, card),),
            trick=None,
        )

    def tricks_won_by(self, team: Iterable[Player]) -> int:
        return sum(self.tricks_won[self.seat(player)] for player in team)

    def team_tricks(self) -> Tuple[int, ...]:
        return tuple(self.tricks_won_by(team) for team in self.teams)

    def clear_tricks(self) -> State:
        return replace(self, tricks_won=tuple(0 for _ in self.players))

    def played_cards(self) -> FrozenSet[Card]:
        played = {card for completed in self.tricks for card in completed.cards}
        if self.trick is not None:
            played.update(self.trick.cards)
        return frozenset(played)

    # Scores ------------------------------------------------------------

    def record_result(self, result: RoundScoreResult) -> State:
        return replace(self, scores=result.new_scores, results=self.results + (result,))
