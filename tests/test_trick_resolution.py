import pytest

from five_hundred.cards import JOKER, Card, Rank, Suit
from five_hundred.trick import EmptyTrick, Trick, TrickError, winning_card, winning_index


def trick(trump, *cards):
    return Trick(trump=trump, size=max(len(cards), 4), cards=tuple(cards))


def test_joker_always_wins():
    result = winning_card(
        trick(
            Suit.HEARTS,
            Card(Rank.JACK, Suit.HEARTS),
            JOKER,
            Card(Rank.JACK, Suit.DIAMONDS),
            Card(Rank.ACE, Suit.HEARTS),
        )
    )

    assert result == JOKER


def test_joker_wins_in_no_trump():
    result = winning_card(trick(Suit.NONE, Card(Rank.ACE, Suit.SPADES), JOKER))

    assert result == JOKER


def test_right_bower_beats_left_bower():
    right = Card(Rank.JACK, Suit.CLUBS)
    left = Card(Rank.JACK, Suit.SPADES)

    assert winning_card(trick(Suit.CLUBS, left, Card(Rank.ACE, Suit.CLUBS), right)) == right


def test_left_bower_beats_trump_ace():
    left = Card(Rank.JACK, Suit.DIAMONDS)

    assert winning_card(trick(Suit.HEARTS, Card(Rank.ACE, Suit.HEARTS), left)) == left


def test_any_trump_beats_led_suit():
    low_trump = Card(Rank.FOUR, Suit.SPADES)

    result = winning_card(
        trick(Suit.SPADES, Card(Rank.ACE, Suit.HEARTS), low_trump, Card(Rank.KING, Suit.HEARTS))
    )

    assert result == low_trump


def test_led_suit_beats_off_suit():
    led = Card(Rank.FIVE, Suit.DIAMONDS)

    result = winning_card(trick(Suit.CLUBS, led, Card(Rank.ACE, Suit.HEARTS), Card(Rank.KING, Suit.SPADES)))

    assert result == led


def test_higher_rank_wins_within_led_suit():
    result = winning_card(
        trick(
            Suit.SPADES,
            Card(Rank.TEN, Suit.HEARTS),
            Card(Rank.QUEEN, Suit.HEARTS),
            Card(Rank.THIRTEEN, Suit.HEARTS),
        )
    )

    assert result == Card(Rank.QUEEN, Suit.HEARTS)


def test_jack_of_opposite_suit_is_not_a_bower_in_no_trump():
    result = winning_card(
        trick(Suit.NONE, Card(Rank.QUEEN, Suit.HEARTS), Card(Rank.JACK, Suit.DIAMONDS), Card(Rank.JACK, Suit.HEARTS))
    )

    assert result == Card(Rank.QUEEN, Suit.HEARTS)


def test_trump_jack_of_led_suit_is_left_bower_when_led():
    left = Card(Rank.JACK, Suit.HEARTS)

    result = winning_card(trick(Suit.DIAMONDS, left, Card(Rank.ACE, Suit.DIAMONDS)))

    assert result == left


def test_winning_index_points_at_play_order():
    assert winning_index(trick(Suit.CLUBS, Card(Rank.TWO, Suit.HEARTS), Card(Rank.TWO, Suit.CLUBS))) == 1


def test_empty_trick_is_rejected():
    with pytest.raises(EmptyTrick):
        winning_card(Trick(trump=Suit.HEARTS, size=4))


def test_trick_cannot_exceed_player_count():
    full = Trick(trump=Suit.HEARTS, size=3).add(JOKER).add(Card(Rank.ACE, Suit.CLUBS)).add(Card(Rank.TWO, Suit.CLUBS))

    assert full.is_full()
    with pytest.raises(TrickError):
        full.add(Card(Rank.THREE, Suit.CLUBS))


def test_adding_returns_a_new_trick():
    empty = Trick(trump=Suit.HEARTS, size=4)

    played = empty.add(JOKER)

    assert empty.is_empty()
    assert played.cards == (JOKER,)
    assert played.led_suit() is Suit.NONE
