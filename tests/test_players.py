import pytest

from crib_engine.cards import build_hand
from crib_engine.players import (
    PLAYER_TYPES,
    RandomPlayer,
    RuleBasedPlayer,
    SimplePlayer,
    get_possible_hands,
    player_factory,
)
from crib_engine.scoring import pegging_count, playable_cards


def test_get_possible_hands():
    hand = build_hand(["As", "2s", "3s", "4s", "5s", "6s"])
    options = get_possible_hands(hand)
    assert len(options) == 15
    for kept, crib in options:
        assert len(kept) == 4
        assert len(crib) == 2
        assert sorted(kept + crib) == hand
    with pytest.raises(ValueError):
        get_possible_hands(hand[:5])


def test_reasonable_player_keeps_the_fives():
    player = RuleBasedPlayer()
    hand = build_hand(["5s", "5h", "5c", "Jd", "2c", "9h"])
    assert set(player.choose_crib(hand, is_dealer=False)) == set(build_hand(["2c", "9h"]))


def test_reasonable_player_takes_points():
    player = RuleBasedPlayer()
    hand = build_hand(["Kc", "7d", "5h"])
    assert player.play(hand, build_hand(["Ts"])) == build_hand(["5h"])[0]


def test_reasonable_player_avoids_leaving_five():
    player = RuleBasedPlayer()
    hand = build_hand(["Kc", "7d", "5h"])
    assert player.play(hand, []) == build_hand(["7d"])[0]


def test_simple_player():
    player = SimplePlayer()
    hand = build_hand(["Kc", "3d", "9h", "As", "Qs", "3c"])
    assert player.choose_crib(hand, is_dealer=True) == tuple(build_hand(["As", "3c"]))
    assert player.play(build_hand(["Kc", "9h"]), build_hand(["Qs", "Td"])) == build_hand(["9h"])[0]


def test_random_player_plays_legal_cards():
    player = RandomPlayer(seed=3)
    hand = build_hand(["Kc", "3d", "9h", "As", "Qs", "3c"])
    for _ in range(20):
        discards = player.choose_crib(hand, is_dealer=False)
        assert len(set(discards)) == 2
        assert all(c in hand for c in discards)
    played = build_hand(["Kc", "Qd"])
    for _ in range(20):
        card = player.play(build_hand(["Ts", "9h", "As"]), played)
        assert pegging_count(played + [card]) <= 31


def test_random_player_is_seeded():
    hand = build_hand(["Kc", "3d", "9h", "As", "Qs", "3c"])
    a = RandomPlayer(seed=11)
    b = RandomPlayer(seed=11)
    assert [a.choose_crib(hand, True) for _ in range(5)] == [b.choose_crib(hand, True) for _ in range(5)]


@pytest.mark.parametrize("name", sorted(PLAYER_TYPES))
def test_player_factory(name):
    player = player_factory(name, seed=1)
    assert isinstance(player, PLAYER_TYPES[name])
    assert player.name == name
    hand = build_hand(["Kc", "3d", "9h", "As", "Qs", "3c"])
    assert len(player.choose_crib(hand, is_dealer=True)) == 2
    assert player.play(hand, []) in playable_cards(hand, [])


def test_player_factory_unknown():
    with pytest.raises(ValueError, match="Unknown player type"):
        player_factory("grandmaster")
