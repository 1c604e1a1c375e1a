import random
from typing import List, Tuple
from logging import getLogger

from crib_engine.cards import Card
from crib_engine.players.base_player import Player
from crib_engine.scoring import playable_cards

logger = getLogger(__name__)


class RandomPlayer(Player):
    def __init__(self, name: str = "random", seed: int | None = None):
        super().__init__(name)
        self._rng = random.Random(seed)

    def choose_crib(self, hand: List[Card], is_dealer: bool) -> Tuple[Card, Card]:
        first, second = self._rng.sample(sorted(hand), 2)
        return first, second

    def play(self, hand: List[Card], played: List[Card]) -> Card:
        return self._rng.choice(sorted(playable_cards(hand, played)))
