from abc import ABC
from abc import abstractmethod
from typing import List, Tuple

from crib_engine.cards import Card


class Player(ABC):
    def __init__(self, name):
        self.name = name

    @abstractmethod
    def choose_crib(self, hand: List[Card], is_dealer: bool) -> Tuple[Card, Card]:
        # exactly two cards taken from hand
        return NotImplemented

    @abstractmethod
    def play(self, hand: List[Card], played: List[Card]) -> Card:
        # pegging decision; only asked when some card keeps the count <= 31
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
