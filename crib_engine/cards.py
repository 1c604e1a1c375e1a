from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional
import random
from logging import getLogger

from .errors import DeckExhausted, ParseError

logger = getLogger(__name__)


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def ordinal(self) -> int:
        return int(self)

    def to_char(self) -> str:
        return RANK_CHARS[self]


class Suit(IntEnum):
    SPADES = 1
    HEARTS = 2
    CLUBS = 3
    DIAMONDS = 4

    def to_char(self) -> str:
        return SUIT_CHARS[self]


RANKS = list(Rank)
SUITS = list(Suit)

# pip value used for fifteens and the pegging count
RANK_VALUE = {rank: min(rank.ordinal, 10) for rank in Rank}

RANK_CHARS = dict(zip(Rank, "A23456789TJQK"))
SUIT_CHARS = dict(zip(Suit, "shcd"))
_RANK_FROM_CHAR = {c: r for r, c in RANK_CHARS.items()}
_SUIT_FROM_CHAR = {c.upper(): s for s, c in SUIT_CHARS.items()}


@dataclass(frozen=True, order=True)
class Card:
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.to_char()}{self.suit.to_char()}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    @property
    def value(self) -> int:
        return RANK_VALUE[self.rank]

    def to_index(self) -> int:
        return (self.suit - 1) * 13 + (self.rank - 1)

    @classmethod
    def parse(cls, text: str) -> Card:
        """Build a card from its short form, e.g. "As", "Th", "5d"."""
        if not isinstance(text, str) or len(text.strip()) != 2:
            raise ParseError(f"Can't convert {text!r} to a card")
        rank_char, suit_char = text.strip().upper()
        if rank_char not in _RANK_FROM_CHAR:
            raise ParseError(f"Can't convert {rank_char!r} to a rank")
        if suit_char not in _SUIT_FROM_CHAR:
            raise ParseError(f"Can't convert {suit_char!r} to a suit")
        return cls(_RANK_FROM_CHAR[rank_char], _SUIT_FROM_CHAR[suit_char])


def build_hand(texts: Iterable[str]) -> List[Card]:
    return [Card.parse(t) for t in texts]


def full_deck() -> List[Card]:
    return [Card(r, s) for s in SUITS for r in RANKS]


class Deck:
    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)
        self.cards: List[Card] = full_deck()

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        self.cards = full_deck()
        self._rng.shuffle(self.cards)

    def deal(self, n: int) -> List[Card]:
        if n < 0:
            raise ValueError(f"Can't deal {n} cards")
        if n > len(self.cards):
            raise DeckExhausted(f"Asked for {n} cards but only {len(self.cards)} remain")
        hand = self.cards[:n]
        self.cards = self.cards[n:]
        return hand

    def cut(self) -> Card:
        return self.deal(1)[0]

    def reset(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self.shuffle()


class StackedDeck(Deck):
    """A deck that replays the same card order on every shuffle.

    Only meant for tests and reproducing a specific deal; the cards don't
    have to form a full deck.
    """

    def __init__(self, cards: Iterable[Card]):
        self._stacking: List[Card] = list(cards)
        self.cards = list(self._stacking)

    def shuffle(self) -> None:
        self.cards = list(self._stacking)

    def reset(self, seed: Optional[int] = None) -> None:
        self.shuffle()
