"""Round scoring helpers for Five Hundred."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

TRICK_POINTS = 10


class ScoringError(ValueError):
    """Raised when scoring inputs are inconsistent."""


@dataclass(frozen=True)
class RoundScoreResult:
    round_number: int
    bidding_team: int
    bid_number: int
    bid_score: int
    tricks_won: Tuple[int, ...]
    points_added: Tuple[int, ...]
    new_scores: Tuple[int, ...]
    contract_success: bool


def score_round(
    *,
    round_number: int,
    bidding_team: int,
    bid_number: int,
    bid_score: int,
    tricks_won: Sequence[int],
    prior_scores: Sequence[int],
    trick_points: int = TRICK_POINTS,
) -> RoundScoreResult:
    """Score one round.

    The bidding team gains the bid score when it took at least ``bid_number``
    tricks and loses it otherwise. Every other team gains ``trick_points``
    for each trick it took.
    """
    if len(tricks_won) != len(prior_scores):
        raise ScoringError("Trick counts and scores must cover the same teams.")
    if not 0 <= bidding_team < len(prior_scores):
        raise ScoringError(f"Unknown bidding team {bidding_team}.")

    contract_success = tricks_won[bidding_team] >= bid_number
    points = [tricks * trick_points for tricks in tricks_won]
    points[bidding_team] = bid_score if contract_success else -bid_score

    new_scores = tuple(score + added for score, added in zip(prior_scores, points))
    return RoundScoreResult(
        round_number=round_number,
        bidding_team=bidding_team,
        bid_number=bid_number,
        bid_score=bid_score,
        tricks_won=tuple(tricks_won),
        points_added=tuple(points),
        new_scores=new_scores,
        contract_success=contract_success,
    )
