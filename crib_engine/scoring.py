from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Sequence
from logging import getLogger

from .cards import Card, Rank
from .combinatorics import combinations
from .constants import PEGGING_LIMIT

logger = getLogger(__name__)


class ScoreKind(Enum):
    FIFTEEN = "fifteen"
    PAIR = "pair"
    RUN_OF_THREE = "run_of_three"
    RUN_OF_FOUR = "run_of_four"
    RUN_OF_FIVE = "run_of_five"
    RUN_OF_SIX = "run_of_six"
    RUN_OF_SEVEN = "run_of_seven"
    THIRTY_ONE = "thirty_one"
    FOUR_CARD_FLUSH = "four_card_flush"
    FIVE_CARD_FLUSH = "five_card_flush"
    NOBS = "nobs"
    NIBS = "nibs"
    GO = "go"
    LAST_CARD = "last_card"


SCORE_VALUES = {
    ScoreKind.FIFTEEN: 2,
    ScoreKind.PAIR: 2,
    ScoreKind.RUN_OF_THREE: 3,
    ScoreKind.RUN_OF_FOUR: 4,
    ScoreKind.RUN_OF_FIVE: 5,
    ScoreKind.RUN_OF_SIX: 6,
    ScoreKind.RUN_OF_SEVEN: 7,
    ScoreKind.THIRTY_ONE: 2,
    ScoreKind.FOUR_CARD_FLUSH: 4,
    ScoreKind.FIVE_CARD_FLUSH: 5,
    ScoreKind.NOBS: 1,
    ScoreKind.NIBS: 2,
    ScoreKind.GO: 1,
    ScoreKind.LAST_CARD: 1,
}

RUN_KINDS = {
    3: ScoreKind.RUN_OF_THREE,
    4: ScoreKind.RUN_OF_FOUR,
    5: ScoreKind.RUN_OF_FIVE,
    6: ScoreKind.RUN_OF_SIX,
    7: ScoreKind.RUN_OF_SEVEN,
}


@dataclass(frozen=True)
class Scoring:
    kind: ScoreKind
    cards: FrozenSet[Card] = field(default_factory=frozenset)

    @property
    def value(self) -> int:
        return SCORE_VALUES[self.kind]

    def __str__(self) -> str:
        cards = " ".join(str(c) for c in sorted(self.cards))
        return f"{self.kind.value} for {self.value}" + (f" ({cards})" if cards else "")


def total_points(scorings: Iterable[Scoring]) -> int:
    return sum(s.value for s in scorings)


def pegging_count(played: Iterable[Card]) -> int:
    return sum(c.value for c in played)


def playable_cards(hand: Iterable[Card], played: Iterable[Card]) -> List[Card]:
    room = PEGGING_LIMIT - pegging_count(played)
    return [c for c in hand if c.value <= room]


def is_run(cards: Iterable[Card]) -> bool:
    ordinals = sorted(c.rank.ordinal for c in cards)
    return ordinals == list(range(ordinals[0], ordinals[0] + len(ordinals)))


def score_pegging(played: Sequence[Card]) -> List[Scoring]:
    """Score the card just laid, given everything played so far this street."""
    played = list(played)
    scorings: List[Scoring] = []
    if not played:
        return scorings

    count = pegging_count(played)
    if count == 15:
        scorings.append(Scoring(ScoreKind.FIFTEEN, frozenset(played)))
    elif count == PEGGING_LIMIT:
        scorings.append(Scoring(ScoreKind.THIRTY_ONE, frozenset(played)))

    # pairs: consecutive same-rank cards at the tail
    tail = [played[-1]]
    for card in reversed(played[:-1]):
        if card.rank != tail[0].rank:
            break
        tail.append(card)
    for pair in combinations(tail, 2):
        scorings.append(Scoring(ScoreKind.PAIR, pair))

    # runs: longest run made by the trailing cards
    best_run = None
    for length in range(3, len(played) + 1):
        trailing = played[-length:]
        if is_run(trailing):
            best_run = Scoring(RUN_KINDS[length], frozenset(trailing))
    if best_run is not None:
        scorings.append(best_run)

    return scorings


def score_hand(hand: Iterable[Card], up_card: Card) -> List[Scoring]:
    hand = list(hand)
    cards = hand + [up_card]
    scorings: List[Scoring] = []

    for size in range(2, len(cards) + 1):
        for combo in combinations(cards, size):
            if pegging_count(combo) == 15:
                scorings.append(Scoring(ScoreKind.FIFTEEN, combo))

    for combo in combinations(cards, 2):
        left, right = combo
        if left.rank == right.rank:
            scorings.append(Scoring(ScoreKind.PAIR, combo))

    # only runs of the longest length count
    for size in range(min(len(cards), 5), 2, -1):
        runs = [Scoring(RUN_KINDS[size], combo) for combo in combinations(cards, size) if is_run(combo)]
        if runs:
            scorings.extend(runs)
            break

    if len(hand) == 4 and len({c.suit for c in hand}) == 1:
        if up_card.suit == hand[0].suit:
            scorings.append(Scoring(ScoreKind.FIVE_CARD_FLUSH, frozenset(cards)))
        else:
            scorings.append(Scoring(ScoreKind.FOUR_CARD_FLUSH, frozenset(hand)))

    for card in hand:
        if card.rank == Rank.JACK and card.suit == up_card.suit:
            scorings.append(Scoring(ScoreKind.NOBS, frozenset([card])))
            break

    return scorings


def score_crib(hand: Iterable[Card], up_card: Card) -> List[Scoring]:
    # a crib flush needs the cut card too
    return [s for s in score_hand(hand, up_card) if s.kind != ScoreKind.FOUR_CARD_FLUSH]
