from typing import List, Tuple
from logging import getLogger

from crib_engine.cards import Card, full_deck
from crib_engine.combinatorics import combinations
from crib_engine.players.base_player import Player
from crib_engine.scoring import (
    pegging_count,
    playable_cards,
    score_crib,
    score_hand,
    score_pegging,
    total_points,
)

logger = getLogger(__name__)


def get_possible_hands(hand: List[Card]) -> List[Tuple[List[Card], List[Card]]]:
    """
    Given a 6-card hand, return all possible (cards_to_keep, crib_cards) pairs,
    where cards_to_keep is a list of 4 cards and crib_cards is the 2 cards put in the crib.
    """
    if len(hand) != 6:
        raise ValueError("Hand must have exactly 6 cards")
    all_combos = []
    for kept in combinations(hand, 4):
        crib = [c for c in hand if c not in kept]
        all_combos.append((sorted(kept), crib))
    return all_combos


class RuleBasedPlayer(Player):
    def __init__(self, name: str = "reasonable"):
        super().__init__(name)

    def choose_crib(self, hand: List[Card], is_dealer: bool) -> Tuple[Card, Card]:
        # keep the 4 cards with the best average count over every possible cut,
        # adding what the discards are worth to our crib or taking it off theirs
        starters = [c for c in full_deck() if c not in hand]
        best_discards = None
        best_score = float("-inf")
        for kept, discards in get_possible_hands(hand):
            kept_total = 0
            crib_total = 0
            for starter in starters:
                kept_total += total_points(score_hand(kept, starter))
                crib_total += total_points(score_crib(discards, starter))
            score = (kept_total + crib_total if is_dealer else kept_total - crib_total) / len(starters)
            if score > best_score:
                best_score = score
                best_discards = (discards[0], discards[1])
        logger.debug(f"{self.name} discards {best_discards[0]} {best_discards[1]} (expected {best_score:.2f})")
        return best_discards

    def play(self, hand: List[Card], played: List[Card]) -> Card:
        # always take points if available; else play lowest that doesn't leave 5 or 21
        playable = sorted(playable_cards(hand, played))
        best = playable[0]
        best_pts = -1
        for c in playable:
            pts = total_points(score_pegging(played + [c]))
            if pts > best_pts:
                best_pts = pts
                best = c
        if best_pts > 0:
            return best
        safe = [c for c in playable if pegging_count(played + [c]) not in (5, 21)]
        return safe[0] if safe else playable[0]
