"""Values handed back by every game transition.

Each result is a snapshot: the lists and dicts it holds are copies, so a UI
can keep them around while the game moves on.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .cards import Card
from .gamestate import GameState, PlayerPosition
from .scoring import Scoring, total_points

Hands = Dict[PlayerPosition, List[Card]]
Scores = Dict[PlayerPosition, int]


class PhaseResult:
    pass


@dataclass
class DealerChosen(PhaseResult):
    dealer: PlayerPosition
    chosen_cards: Dict[PlayerPosition, Card]


@dataclass
class CardsDealt(PhaseResult):
    hands: Hands
    dealer: PlayerPosition
    scores: Scores


@dataclass
class CribChosen(PhaseResult):
    hands: Hands
    dealer: PlayerPosition
    scores: Scores


@dataclass
class WaitingForPlay(PhaseResult):
    hands: Hands
    dealer: PlayerPosition
    scores: Scores
    up_card: Card
    played: List[Card]
    current_player: PlayerPosition
    # the card just laid (None after the cut or a go) and what it scored
    last_play: Optional[Card] = None
    scorings: List[Scoring] = field(default_factory=list)


@dataclass
class GoAnnounced(PhaseResult):
    caller: PlayerPosition
    hands: Hands
    dealer: PlayerPosition
    scores: Scores
    up_card: Card
    played: List[Card]


@dataclass
class LastCardScored(PhaseResult):
    player: PlayerPosition
    scorings: List[Scoring]
    hands: Hands
    dealer: PlayerPosition
    scores: Scores
    up_card: Card

    @property
    def points(self) -> int:
        return total_points(self.scorings)


@dataclass
class HandScored(PhaseResult):
    player: PlayerPosition
    hand: List[Card]
    up_card: Card
    scorings: List[Scoring]
    scores: Scores

    @property
    def points(self) -> int:
        return total_points(self.scorings)


@dataclass
class CribScored(HandScored):
    pass


@dataclass
class GameOver(PhaseResult):
    winner: PlayerPosition
    scores: Scores
    hands: Hands
    up_card: Optional[Card]
    scorings: List[Scoring] = field(default_factory=list)


def snapshot_hands(state: GameState) -> Hands:
    return {p: list(h) for p, h in state.hands.items()}


def snapshot_scores(state: GameState) -> Scores:
    return dict(state.scores)


def game_over(state: GameState, scorings: Optional[List[Scoring]] = None) -> GameOver:
    return GameOver(
        winner=state.winner,
        scores=snapshot_scores(state),
        hands=snapshot_hands(state),
        up_card=state.up_card,
        scorings=list(scorings or []),
    )


def waiting_for_play(state: GameState, last_play: Optional[Card] = None, scorings: Optional[List[Scoring]] = None) -> WaitingForPlay:
    return WaitingForPlay(
        hands=snapshot_hands(state),
        dealer=state.dealer,
        scores=snapshot_scores(state),
        up_card=state.up_card,
        played=list(state.played),
        current_player=state.current_player,
        last_play=last_play,
        scorings=list(scorings or []),
    )


def go_announced(state: GameState) -> GoAnnounced:
    return GoAnnounced(
        caller=state.current_player,
        hands=snapshot_hands(state),
        dealer=state.dealer,
        scores=snapshot_scores(state),
        up_card=state.up_card,
        played=list(state.played),
    )
