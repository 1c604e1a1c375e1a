from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
import copy
import json
import hashlib
from logging import getLogger

from .cards import Card
from .constants import WINNING_SCORE
from .scoring import pegging_count

logger = getLogger(__name__)


class PlayerPosition(Enum):
    FIRST = "first"
    SECOND = "second"

    def next(self) -> PlayerPosition:
        return PlayerPosition.SECOND if self is PlayerPosition.FIRST else PlayerPosition.FIRST

    def __str__(self) -> str:
        return self.value


POSITIONS = (PlayerPosition.FIRST, PlayerPosition.SECOND)


def _per_position(factory) -> Dict[PlayerPosition, Any]:
    return {p: factory() for p in POSITIONS}


@dataclass
class GameState:
    hands: Dict[PlayerPosition, List[Card]] = field(default_factory=lambda: _per_position(list))
    # kept 4 cards of each hand, snapshotted after the crib discards, for counting
    dealt: Dict[PlayerPosition, List[Card]] = field(default_factory=lambda: _per_position(list))
    crib: List[Card] = field(default_factory=list)
    scores: Dict[PlayerPosition, int] = field(default_factory=lambda: _per_position(int))
    dealer: PlayerPosition = PlayerPosition.FIRST
    up_card: Optional[Card] = None
    played: List[Card] = field(default_factory=list)
    current_player: PlayerPosition = PlayerPosition.FIRST
    winner: Optional[PlayerPosition] = None
    round_num: int = 0

    @property
    def pone(self) -> PlayerPosition:
        return self.dealer.next()

    @property
    def count(self) -> int:
        return pegging_count(self.played)

    def award(self, position: PlayerPosition, points: int) -> bool:
        """Add points for a position and report whether that won the match.

        The score is clamped at the winning score, which also records the
        winner. Every point in the game goes through here.
        """
        if points <= 0:
            return False
        self.scores[position] = min(self.scores[position] + points, WINNING_SCORE)
        if self.scores[position] >= WINNING_SCORE:
            self.winner = position
            logger.info(f"{position} reached {WINNING_SCORE} and wins")
            return True
        return False

    def reset_scores(self) -> None:
        self.scores = _per_position(int)
        self.winner = None

    def reset_for_deal(self) -> None:
        self.hands = _per_position(list)
        self.dealt = _per_position(list)
        self.crib = []
        self.played = []
        self.up_card = None

    def clone(self) -> GameState:
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        def cards(cs):
            return [str(c) for c in cs]

        return {
            "hands": {str(p): cards(h) for p, h in self.hands.items()},
            "dealt": {str(p): cards(h) for p, h in self.dealt.items()},
            "crib": cards(self.crib),
            "scores": {str(p): s for p, s in self.scores.items()},
            "dealer": str(self.dealer),
            "up_card": str(self.up_card) if self.up_card is not None else None,
            "played": cards(self.played),
            "current_player": str(self.current_player),
            "winner": str(self.winner) if self.winner is not None else None,
            "round_num": self.round_num,
        }

    def serialize(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    def hash(self) -> str:
        s = self.serialize()
        return hashlib.sha256(s.encode('utf-8')).hexdigest()
