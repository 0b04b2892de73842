import pickle

import pytest

from twentyone.common.card import Card, Rank, Suit


def test_card_initialization():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert card.suit == Suit.HEARTS
    assert card.rank == Rank.EIGHT


def test_card_repr():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    assert repr(card) == "Card(Suit.HEARTS, Rank.EIGHT)"


def test_card_str():
    assert str(Card(Suit.HEARTS, Rank.EIGHT)) == "8 of ♥"
    assert str(Card(Suit.SPADES, Rank.ACE)) == "A of ♠"
    assert str(Card(Suit.CLUBS, Rank.QUEEN)) == "Q of ♣"


def test_invalid_suit():
    with pytest.raises(TypeError):
        Card("Z", Rank.EIGHT)


def test_invalid_rank():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, 8)


def test_missing_suit():
    with pytest.raises(TypeError):
        Card(None, Rank.ACE)


def test_card_is_immutable():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    with pytest.raises(AttributeError):
        card.rank = Rank.NINE
    with pytest.raises(AttributeError):
        card.suit = Suit.CLUBS
    assert card.rank == Rank.EIGHT


def test_ranks_are_distinct():
    assert len(list(Rank)) == 13
    assert len({rank.value for rank in Rank}) == 13
    assert len(list(Suit)) == 4


@pytest.mark.parametrize(
    "rank, value",
    [
        (Rank.ACE, 1),
        (Rank.TWO, 2),
        (Rank.NINE, 9),
        (Rank.TEN, 10),
        (Rank.JACK, 10),
        (Rank.QUEEN, 10),
        (Rank.KING, 10),
    ],
)
def test_rank_value(rank, value):
    assert rank.rank_value == value


def test_card_equality():
    card1 = Card(Suit.HEARTS, Rank.EIGHT)
    card2 = Card(Suit.HEARTS, Rank.EIGHT)
    card3 = Card(Suit.CLUBS, Rank.EIGHT)
    card4 = Card(Suit.HEARTS, Rank.NINE)

    assert card1 == card2
    assert card1 != card3
    assert card1 != card4
    assert card1 != "8 of ♥"


def test_card_hash():
    card1 = Card(Suit.HEARTS, Rank.EIGHT)
    card2 = Card(Suit.HEARTS, Rank.EIGHT)
    card3 = Card(Suit.CLUBS, Rank.NINE)

    assert len({card1, card2, card3}) == 2

    card_dict = {card1: "card1", card2: "card2", card3: "card3"}
    assert len(card_dict) == 2
    assert card_dict[card1] == "card2"


def test_card_pickles():
    card = Card(Suit.DIAMONDS, Rank.JACK)
    assert pickle.loads(pickle.dumps(card)) == card
