import pytest

from crib_engine.game import CribbageGame, Phase
from crib_engine.gamestate import PlayerPosition
from crib_engine.players import RandomPlayer, RuleBasedPlayer, SimplePlayer
from crib_engine.results import CardsDealt, CribScored, GameOver, HandScored, WaitingForPlay


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_smoke_game_valid_score(seed):
    g = CribbageGame(RandomPlayer(seed=seed), RandomPlayer(seed=seed + 100), seed=seed)
    first, second = g.play_game()
    assert max(first, second) == 121
    assert min(first, second) < 121
    assert g.winner is (PlayerPosition.FIRST if first == 121 else PlayerPosition.SECOND)


def test_smoke_game_rule_based_vs_simple():
    g = CribbageGame(RuleBasedPlayer(), SimplePlayer(), seed=5)
    results = list(g)
    assert isinstance(results[-1], GameOver)
    assert sum(isinstance(r, GameOver) for r in results) == 1


def test_scores_never_go_down():
    g = CribbageGame(SimplePlayer(), RandomPlayer(seed=8), seed=8)
    last = {PlayerPosition.FIRST: 0, PlayerPosition.SECOND: 0}
    for result in g:
        scores = getattr(result, "scores", None)
        if scores is None:
            continue
        for position, score in scores.items():
            assert last[position] <= score <= 121
        last = dict(scores)


def test_pegging_count_stays_legal():
    g = CribbageGame(RandomPlayer(seed=4), RandomPlayer(seed=5), seed=4)
    for result in g:
        if isinstance(result, WaitingForPlay):
            assert sum(c.value for c in result.played) <= 31


def test_crib_scored_after_both_hands():
    g = CribbageGame(SimplePlayer(), SimplePlayer(), seed=12)
    kinds = []
    for result in g:
        if isinstance(result, CribScored):
            kinds.append("crib")
        elif isinstance(result, HandScored):
            kinds.append("hand")
    for i, kind in enumerate(kinds):
        if kind == "crib":
            assert kinds[i - 2:i] == ["hand", "hand"]


PEGGING_PHASES = {
    Phase.TURNING_UP_CARD,
    Phase.PEGGING,
    Phase.FIRST_GO,
    Phase.SECOND_GO,
    Phase.RESUME_PEGGING_OR_SCORE_HANDS,
}


@pytest.mark.parametrize("seed", [6, 7])
def test_cards_are_conserved_through_each_deal(seed):
    # every card dealt to a position is in its hand, the crib, or its plays
    g = CribbageGame(RandomPlayer(seed=seed), SimplePlayer(), seed=seed)
    dealt = {}
    played = {}
    checked = 0
    while not g.is_over:
        result = g.advance()
        if isinstance(result, CardsDealt):
            dealt = {p: set(h) for p, h in result.hands.items()}
            played = {p: set() for p in dealt}
        elif isinstance(result, WaitingForPlay) and result.last_play is not None:
            # the turn has already passed to the other player
            played[result.current_player.next()].add(result.last_play)
        if g.phase not in PEGGING_PHASES:
            continue
        assert len(g.state.crib) == 4
        for position, six in dealt.items():
            hand = set(g.state.hands[position])
            discards = set(g.state.crib) & six
            assert len(discards) == 2
            assert set(g.state.dealt[position]) == six - discards
            assert len(hand) + len(discards) + len(played[position]) == 6
            assert hand | discards | played[position] == six
        checked += 1
    assert checked > 0
