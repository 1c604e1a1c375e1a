from typing import List, Tuple
from logging import getLogger

from crib_engine.cards import Card
from crib_engine.players.base_player import Player
from crib_engine.scoring import playable_cards

logger = getLogger(__name__)


class SimplePlayer(Player):
    """Throws the two lowest cards and always pegs the lowest legal card."""

    def __init__(self, name: str = "simple"):
        super().__init__(name)

    def choose_crib(self, hand: List[Card], is_dealer: bool) -> Tuple[Card, Card]:
        lowest = sorted(hand)[:2]
        return lowest[0], lowest[1]

    def play(self, hand: List[Card], played: List[Card]) -> Card:
        return sorted(playable_cards(hand, played))[0]
