import pytest

from crib_engine.cards import (
    RANK_VALUE,
    RANKS,
    SUITS,
    Card,
    Deck,
    Rank,
    StackedDeck,
    Suit,
    build_hand,
    full_deck,
)
from crib_engine.errors import DeckExhausted, ParseError


def test_parse_card():
    assert Card.parse("As") == Card(Rank.ACE, Suit.SPADES)
    assert Card.parse("th") == Card(Rank.TEN, Suit.HEARTS)
    assert Card.parse("Kd") == Card(Rank.KING, Suit.DIAMONDS)
    assert str(Card.parse("jc")) == "Jc"


@pytest.mark.parametrize("text", ["Xs", "Ax", "A", "", "10h", "Ahh"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ParseError):
        Card.parse(text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        build_hand(["As", "Zz"])


def test_ordering_is_rank_then_suit():
    assert Card.parse("As") < Card.parse("2c")
    assert Card.parse("As") < Card.parse("Ah")
    assert sorted(build_hand(["Kd", "As", "5c", "5s"])) == build_hand(["As", "5s", "5c", "Kd"])


def test_rank_ordinal_and_value():
    assert Rank.ACE.ordinal == 1
    assert Rank.KING.ordinal == 13
    assert RANK_VALUE[Rank.KING] == 10
    assert RANK_VALUE[Rank.NINE] == 9
    assert Card.parse("Qh").value == 10
    assert Card.parse("As").value == 1


def test_canonical_order():
    assert len(RANKS) == 13
    assert SUITS == [Suit.SPADES, Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS]
    deck = full_deck()
    assert deck[0] == Card.parse("As")
    assert deck[-1] == Card.parse("Kd")
    assert len({c.to_index() for c in deck}) == 52


def test_shuffled_deck_has_every_card_once():
    deck = Deck(seed=5)
    deck.shuffle()
    assert len(deck) == 52
    assert set(deck.cards) == set(full_deck())


def test_deal_never_repeats_until_shuffle():
    deck = Deck(seed=11)
    deck.shuffle()
    seen = []
    for _ in range(8):
        seen.extend(deck.deal(6))
    seen.extend(deck.deal(4))
    assert len(seen) == 52
    assert len(set(seen)) == 52
    assert len(deck) == 0
    deck.shuffle()
    assert len(deck) == 52


def test_deal_more_than_remaining_fails():
    deck = Deck(seed=1)
    deck.shuffle()
    deck.deal(50)
    with pytest.raises(DeckExhausted):
        deck.deal(3)
    with pytest.raises(ValueError):
        deck.deal(-1)


def test_stacked_deck_replays_on_shuffle():
    cards = build_hand(["As", "Qh", "5c"])
    deck = StackedDeck(cards)
    assert deck.deal(2) == cards[:2]
    assert deck.cut() == cards[2]
    deck.shuffle()
    assert deck.deal(3) == cards
    with pytest.raises(DeckExhausted):
        deck.cut()
