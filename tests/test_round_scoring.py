import pytest

from five_hundred.scoring import RoundScoreResult, ScoringError, score_round


def test_successful_bid_adds_bid_score():
    result = score_round(
        round_number=1,
        bidding_team=0,
        bid_number=6,
        bid_score=100,
        tricks_won=[7, 3],
        prior_scores=[0, 0],
    )

    assert isinstance(result, RoundScoreResult)
    assert result.contract_success
    assert result.new_scores == (100, 30)
    assert result.points_added == (100, 30)


def test_failed_bid_subtracts_bid_score():
    result = score_round(
        round_number=2,
        bidding_team=1,
        bid_number=8,
        bid_score=260,
        tricks_won=[3, 7],
        prior_scores=[50, 60],
    )

    assert not result.contract_success
    assert result.new_scores == (80, -200)


def test_every_other_team_scores_its_own_tricks():
    result = score_round(
        round_number=1,
        bidding_team=2,
        bid_number=6,
        bid_score=40,
        tricks_won=[2, 1, 7],
        prior_scores=[0, 0, 0],
        trick_points=10,
    )

    assert result.new_scores == (20, 10, 40)


def test_mismatched_teams_rejected():
    with pytest.raises(ScoringError):
        score_round(
            round_number=1,
            bidding_team=0,
            bid_number=6,
            bid_score=40,
            tricks_won=[5, 5],
            prior_scores=[0, 0, 0],
        )
