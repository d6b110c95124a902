import pytest

from five_hundred.actions import BID_SUITS, Bid, InvalidBid, KittyDiscard, Pass, Play, Player
from five_hundred.cards import JOKER, Suit

SEAT = Player(1)


def test_bid_score_examples():
    assert Bid(SEAT, 7, Suit.DIAMONDS).score == 180
    assert Bid(SEAT, 6, Suit.SPADES).score == 40
    assert Bid(SEAT, 6, Suit.HEARTS).score == 100
    assert Bid(SEAT, 10, Suit.NONE).score == 520


def test_bid_score_increases_with_number():
    for suit in BID_SUITS:
        scores = [Bid(SEAT, number, suit).score for number in range(6, 11)]
        assert scores == sorted(set(scores))


def test_bid_score_increases_with_suit_precedence():
    for number in range(6, 11):
        scores = [Bid(SEAT, number, suit).score for suit in BID_SUITS]
        assert scores == sorted(set(scores))


def test_pass_is_below_every_bid():
    lowest = Bid(SEAT, 6, Suit.SPADES)

    assert Pass(SEAT).score == 0
    assert Pass() < lowest
    assert lowest > Pass(Player(2))
    assert not Pass(SEAT) > Pass()


def test_bids_compare_by_score_only():
    assert Bid(Player(1), 7, Suit.SPADES) > Bid(Player(2), 6, Suit.NONE)
    assert Bid(Player(1), 6, Suit.HEARTS) >= Bid(Player(2), 6, Suit.HEARTS)
    assert not Bid(Player(1), 6, Suit.HEARTS) > Bid(Player(2), 6, Suit.HEARTS)


def test_plays_and_discards_are_not_orderable():
    with pytest.raises(TypeError):
        Play(SEAT, JOKER) < Play(SEAT, JOKER)
    with pytest.raises(TypeError):
        Bid(SEAT, 6, Suit.HEARTS) < Play(SEAT, JOKER)
    with pytest.raises(TypeError):
        KittyDiscard(SEAT, ()) > Pass()


@pytest.mark.parametrize("number", [5, 11, 0])
def test_bid_number_out_of_range(number):
    with pytest.raises(InvalidBid):
        Bid(SEAT, number, Suit.HEARTS)


def test_player_builders():
    player = Player(3)

    assert player.bid(8, Suit.CLUBS) == Bid(player, 8, Suit.CLUBS)
    assert player.pass_() == Pass(player)
    assert player.play(JOKER) == Play(player, JOKER)
    assert player.discard([JOKER]).cards == (JOKER,)
