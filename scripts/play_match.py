"""Play one cribbage match between two built-in players and print every step.

Usage:
  python scripts/play_match.py --players simple,reasonable --seed 7
"""

from __future__ import annotations

import argparse
import sys
import logging

sys.path.insert(0, ".")

from crib_engine.constants import DEFAULT_PLAYERS, DEFAULT_SEED
from crib_engine.game import CribbageGame
from crib_engine.log_setup import configure_logging
from crib_engine.players import player_factory
from crib_engine.results import (
    CardsDealt,
    CribChosen,
    CribScored,
    DealerChosen,
    GameOver,
    GoAnnounced,
    HandScored,
    LastCardScored,
    PhaseResult,
    WaitingForPlay,
)
from crib_engine.scoring import pegging_count, total_points

logger = logging.getLogger(__name__)


def _cards(cards) -> str:
    return " ".join(str(c) for c in cards)


def _scores(scores) -> str:
    return "-".join(str(s) for s in scores.values())


def describe(result: PhaseResult) -> str:
    if isinstance(result, DealerChosen):
        cut = ", ".join(f"{p} cut {c}" for p, c in result.chosen_cards.items())
        return f"dealer {result.dealer} ({cut})"
    if isinstance(result, CardsDealt):
        hands = " | ".join(_cards(h) for h in result.hands.values())
        return f"dealt {hands} (dealer {result.dealer}, scores {_scores(result.scores)})"
    if isinstance(result, CribChosen):
        hands = " | ".join(_cards(h) for h in result.hands.values())
        return f"kept {hands}"
    if isinstance(result, WaitingForPlay):
        if result.last_play is None:
            extra = f" nibs for {result.dealer}" if result.scorings else ""
            return f"up card {result.up_card}{extra}, {result.current_player} to play"
        count = pegging_count(result.played)
        points = total_points(result.scorings)
        scored = f" scores {points}" if points else ""
        return f"  {result.last_play} -> {count}{scored} (scores {_scores(result.scores)})"
    if isinstance(result, GoAnnounced):
        return f"  go from {result.caller}"
    if isinstance(result, LastCardScored):
        return f"  {result.player} pegs {result.points} for the go (scores {_scores(result.scores)})"
    if isinstance(result, CribScored):
        return f"{result.player} crib {_cards(result.hand)} + {result.up_card}: {result.points} (scores {_scores(result.scores)})"
    if isinstance(result, HandScored):
        return f"{result.player} hand {_cards(result.hand)} + {result.up_card}: {result.points} (scores {_scores(result.scores)})"
    if isinstance(result, GameOver):
        return f"game over, {result.winner} wins (scores {_scores(result.scores)})"
    raise TypeError(f"Unknown result {result!r}")


def build_players(players: str, seed: int | None):
    player_names = players.split(",")
    if len(player_names) != 2:
        raise ValueError("Must specify exactly two players via --players")
    # the second player draws from its own seed
    second_seed = seed + 1 if seed is not None else None
    return player_factory(player_names[0], seed=seed), player_factory(player_names[1], seed=second_seed)


def play_match(args) -> int:
    p0, p1 = build_players(args.players, args.seed)
    logger.info(f"Playing {p0.name} vs {p1.name} (seed {args.seed})")

    game = CribbageGame(p0, p1, seed=args.seed)
    for result in game:
        if not args.quiet:
            print(describe(result))
    s0, s1 = game.state.scores.values()
    print(f"winner={game.winner} scores={s0}-{s1}")
    return 0


if __name__ == "__main__":
    configure_logging()
    ap = argparse.ArgumentParser()
    ap.add_argument("--players", type=str, default=DEFAULT_PLAYERS)
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED)
    ap.add_argument("--quiet", action="store_true")
    args = ap.parse_args()
    sys.exit(play_match(args))

# python scripts/play_match.py --players simple,reasonable --seed 7
# python scripts/play_match.py --players random,random --quiet
