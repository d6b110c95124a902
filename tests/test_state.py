import pytest

from five_hundred.actions import Player
from five_hundred.cards import JOKER
from five_hundred.deck import InvalidConfiguration, build_deck
from five_hundred.state import IllegalCard, State


def seated(count):
    return State.initial([Player(position) for position in range(1, count + 1)])


def test_initial_state_is_unscored():
    state = seated(4)

    assert state.scores == (0, 0)
    assert state.tricks_won == (0, 0, 0, 0)
    assert state.priority is None
    assert state.bid.score == 0


def test_initial_state_rejects_bad_table():
    with pytest.raises(InvalidConfiguration):
        seated(2)


def test_partners_sit_opposite():
    assert seated(4).teams == ((Player(1), Player(3)), (Player(2), Player(4)))
    assert seated(6).team_for(Player(5)) == (Player(2), Player(5))
    assert seated(3).teams == ((Player(1),), (Player(2),), (Player(3),))
    assert len(seated(5).scores) == 5


def test_player_relative_to_wraps_around():
    state = seated(4)

    assert state.player_relative_to(Player(3), 1) == Player(4)
    assert state.player_relative_to(Player(4), 1) == Player(1)
    assert state.player_relative_to(Player(2), 7) == Player(1)


def test_updates_return_new_state():
    state = seated(4)

    updated = state.give_deal(Player(1)).advance_dealer().give_priority(Player(3)).advance()

    assert updated.dealer == Player(2)
    assert updated.priority == Player(4)
    assert state.dealer is None
    assert state.priority is None


def test_deal_fills_hands_and_kitty():
    state = seated(4).deal(build_deck(4))

    assert [len(hand) for hand in state.hands] == [10, 10, 10, 10]
    assert len(state.kitty) == 3
    assert state.round_number == 1
    assert JOKER in state.hand(Player(1))


def test_kitty_round_trip():
    state = seated(3).deal(build_deck(3)).give_priority(Player(1))
    kitty = set(state.kitty)

    state = state.move_kitty_to_hand(Player(1))
    assert len(state.hand(Player(1))) == 13
    assert not state.kitty

    state = state.move_cards_to_kitty(sorted(kitty, key=str))
    assert state.kitty == kitty
    assert len(state.hand(Player(1))) == 10


def test_kitty_requires_three_cards_from_hand():
    state = seated(3).deal(build_deck(3)).give_priority(Player(1))
    hand = list(state.hand(Player(1)))
    other = next(iter(state.hand(Player(2))))

    with pytest.raises(IllegalCard):
        state.move_cards_to_kitty(hand[:2])
    with pytest.raises(IllegalCard):
        state.move_cards_to_kitty([hand[0], hand[0], hand[1]])
    with pytest.raises(IllegalCard):
        state.move_cards_to_kitty(hand[:2] + [other])


def test_trick_cards_leave_the_hand():
    state = seated(3).deal(build_deck(3)).give_priority(Player(1)).new_trick()

    state = state.add_card_to_trick(JOKER)

    assert JOKER not in state.hand(Player(1))
    assert state.trick.cards == (JOKER,)
    with pytest.raises(IllegalCard):
        state.add_card_to_trick(JOKER)


def test_won_trick_counts_and_clears():
    state = seated(4).deal(build_deck(4)).give_priority(Player(1)).new_trick()
    state = state.add_card_to_trick(JOKER)

    state = state.won_trick(Player(3), JOKER)

    assert state.tricks_won == (0, 0, 1, 0)
    assert state.tricks_won_by(state.team_for(Player(1))) == 1
    assert state.team_tricks() == (1, 0)
    assert state.trick is None
    assert state.played_cards() == {JOKER}

    assert state.clear_tricks().tricks_won == (0, 0, 0, 0)
