from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Tuple
from logging import getLogger

from .cards import Card, Deck, Rank
from .constants import HAND_SIZE, PEGGING_LIMIT
from .errors import GameFinished
from .gamestate import POSITIONS, GameState, PlayerPosition
from .players.base_player import Player
from .results import (
    CardsDealt,
    CribChosen,
    CribScored,
    DealerChosen,
    HandScored,
    LastCardScored,
    PhaseResult,
    game_over,
    go_announced,
    snapshot_hands,
    snapshot_scores,
    waiting_for_play,
)
from .scoring import (
    ScoreKind,
    Scoring,
    playable_cards,
    score_crib,
    score_hand,
    score_pegging,
    total_points,
)

logger = getLogger(__name__)

Players = Mapping[PlayerPosition, Player]


class Phase(Enum):
    CHOOSE_DEALER = "choose_dealer"
    READY_TO_DEAL = "ready_to_deal"
    WAITING_FOR_CRIB = "waiting_for_crib"
    TURNING_UP_CARD = "turning_up_card"
    PEGGING = "pegging"
    FIRST_GO = "first_go"
    SECOND_GO = "second_go"
    RESUME_PEGGING_OR_SCORE_HANDS = "resume_pegging_or_score_hands"
    SCORING_DEALER = "scoring_dealer"
    SCORING_CRIB = "scoring_crib"
    GAME_OVER = "game_over"


Transition = Tuple[Phase, PhaseResult]


def must_say_go(hand: List[Card], played: List[Card]) -> bool:
    return not playable_cards(hand, played)


def choose_dealer(state: GameState, deck: Deck, players: Players) -> Transition:
    state.reset_scores()
    deck.shuffle()
    cards = deck.deal(2)
    # don't entertain a tie, just draw two new cards
    while cards[0].rank == cards[1].rank:
        if len(deck) < 2:
            deck.shuffle()
        cards = deck.deal(2)
    state.dealer = PlayerPosition.FIRST if cards[0].rank < cards[1].rank else PlayerPosition.SECOND
    logger.info(f"Dealer chosen: {state.dealer} (cut {cards[0]} vs {cards[1]})")
    chosen = {PlayerPosition.FIRST: cards[0], PlayerPosition.SECOND: cards[1]}
    return Phase.READY_TO_DEAL, DealerChosen(dealer=state.dealer, chosen_cards=chosen)


def deal(state: GameState, deck: Deck, players: Players) -> Transition:
    state.reset_for_deal()
    state.round_num += 1
    deck.shuffle()
    for position in POSITIONS:
        state.hands[position] = deck.deal(HAND_SIZE)
    logger.debug(f"Round {state.round_num}: dealt {state.hands[PlayerPosition.FIRST]} / {state.hands[PlayerPosition.SECOND]}")
    return Phase.WAITING_FOR_CRIB, CardsDealt(
        hands=snapshot_hands(state),
        dealer=state.dealer,
        scores=snapshot_scores(state),
    )


def choose_crib(state: GameState, deck: Deck, players: Players) -> Transition:
    state.crib = []
    for position in POSITIONS:
        hand = state.hands[position]
        choices = players[position].choose_crib(list(hand), position == state.dealer)
        for card in choices:
            hand.remove(card)
            state.crib.append(card)
        state.dealt[position] = list(hand)
    return Phase.TURNING_UP_CARD, CribChosen(
        hands=snapshot_hands(state),
        dealer=state.dealer,
        scores=snapshot_scores(state),
    )


def turn_up_card(state: GameState, deck: Deck, players: Players) -> Transition:
    state.current_player = state.pone
    state.played = []
    state.up_card = deck.cut()
    scorings: List[Scoring] = []
    if state.up_card.rank == Rank.JACK:
        scorings = [Scoring(ScoreKind.NIBS, frozenset([state.up_card]))]
        logger.info(f"{state.up_card} turned up: nibs for {state.dealer}")
        if state.award(state.dealer, total_points(scorings)):
            return Phase.GAME_OVER, game_over(state, scorings)
    return Phase.PEGGING, waiting_for_play(state, scorings=scorings)


def pegging(state: GameState, deck: Deck, players: Players) -> Transition:
    position = state.current_player
    hand = state.hands[position]
    if must_say_go(hand, state.played):
        logger.debug(f"{position} can't play on {state.count}")
        return Phase.FIRST_GO, go_announced(state)

    card = players[position].play(list(hand), list(state.played))
    hand.remove(card)
    state.played.append(card)
    scorings = score_pegging(state.played)
    if state.count == PEGGING_LIMIT:
        # the card making 31 is also the last card of the street
        scorings.append(Scoring(ScoreKind.LAST_CARD, frozenset([card])))
    logger.debug(f"{position} plays {card} for {state.count}, scoring {total_points(scorings)}")
    if state.award(position, total_points(scorings)):
        return Phase.GAME_OVER, game_over(state, scorings)

    state.current_player = position.next()
    if state.count == PEGGING_LIMIT:
        # 31 closes the street
        result = waiting_for_play(state, card, scorings)
        state.played = []
        return Phase.RESUME_PEGGING_OR_SCORE_HANDS, result
    return Phase.PEGGING, waiting_for_play(state, card, scorings)


def first_go(state: GameState, deck: Deck, players: Players) -> Transition:
    state.current_player = state.current_player.next()
    if must_say_go(state.hands[state.current_player], state.played):
        logger.debug(f"{state.current_player} can't play either")
        return Phase.SECOND_GO, go_announced(state)
    return Phase.PEGGING, waiting_for_play(state)


def second_go(state: GameState, deck: Deck, players: Players) -> Transition:
    # the current player is the one the other couldn't follow
    position = state.current_player
    scorings: List[Scoring] = []
    if state.played:
        last = frozenset(state.played[-1:])
        scorings = [Scoring(ScoreKind.GO, last), Scoring(ScoreKind.LAST_CARD, last)]
    logger.info(f"Go: {total_points(scorings)} for {position} at {state.count}")
    if state.award(position, total_points(scorings)):
        return Phase.GAME_OVER, game_over(state, scorings)

    result = LastCardScored(
        player=position,
        scorings=scorings,
        hands=snapshot_hands(state),
        dealer=state.dealer,
        scores=snapshot_scores(state),
        up_card=state.up_card,
    )
    state.played = []
    state.current_player = position.next()
    return Phase.RESUME_PEGGING_OR_SCORE_HANDS, result


def resume_pegging_or_score_hands(state: GameState, deck: Deck, players: Players) -> Transition:
    state.played = []
    if not state.hands[state.current_player]:
        state.current_player = state.current_player.next()
        if not state.hands[state.current_player]:
            return _count_hand(state, state.pone, Phase.SCORING_DEALER)
    return Phase.PEGGING, waiting_for_play(state)


def scoring_dealer(state: GameState, deck: Deck, players: Players) -> Transition:
    return _count_hand(state, state.dealer, Phase.SCORING_CRIB)


def scoring_crib(state: GameState, deck: Deck, players: Players) -> Transition:
    dealer = state.dealer
    scorings = score_crib(state.crib, state.up_card)
    logger.info(f"{dealer} crib {state.crib} with {state.up_card}: {total_points(scorings)}")
    if state.award(dealer, total_points(scorings)):
        return Phase.GAME_OVER, game_over(state, scorings)
    state.dealer = dealer.next()
    return Phase.READY_TO_DEAL, CribScored(
        player=dealer,
        hand=list(state.crib),
        up_card=state.up_card,
        scorings=scorings,
        scores=snapshot_scores(state),
    )


def _count_hand(state: GameState, position: PlayerPosition, next_phase: Phase) -> Transition:
    hand = state.dealt[position]
    scorings = score_hand(hand, state.up_card)
    logger.info(f"{position} hand {hand} with {state.up_card}: {total_points(scorings)}")
    if state.award(position, total_points(scorings)):
        return Phase.GAME_OVER, game_over(state, scorings)
    return next_phase, HandScored(
        player=position,
        hand=list(hand),
        up_card=state.up_card,
        scorings=scorings,
        scores=snapshot_scores(state),
    )


RULES: Dict[Phase, Callable[[GameState, Deck, Players], Transition]] = {
    Phase.CHOOSE_DEALER: choose_dealer,
    Phase.READY_TO_DEAL: deal,
    Phase.WAITING_FOR_CRIB: choose_crib,
    Phase.TURNING_UP_CARD: turn_up_card,
    Phase.PEGGING: pegging,
    Phase.FIRST_GO: first_go,
    Phase.SECOND_GO: second_go,
    Phase.RESUME_PEGGING_OR_SCORE_HANDS: resume_pegging_or_score_hands,
    Phase.SCORING_DEALER: scoring_dealer,
    Phase.SCORING_CRIB: scoring_crib,
}


def apply_rule(phase: Phase, state: GameState, deck: Deck, players: Players) -> Transition:
    if phase is Phase.GAME_OVER:
        raise GameFinished(f"Game is over, {state.winner} won")
    return RULES[phase](state, deck, players)


class CribbageGame:
    """Runs a match one transition at a time.

    The players live here rather than in the GameState and are handed to each
    rule when it runs.
    """

    def __init__(self, p0: Player, p1: Player, seed: int | None = None, deck: Optional[Deck] = None):
        self.players: Dict[PlayerPosition, Player] = {
            PlayerPosition.FIRST: p0,
            PlayerPosition.SECOND: p1,
        }
        self.deck = deck if deck is not None else Deck(seed)
        self.state = GameState()
        self.phase = Phase.CHOOSE_DEALER

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def winner(self) -> Optional[PlayerPosition]:
        return self.state.winner

    def advance(self) -> Optional[PhaseResult]:
        if self.is_over:
            return None
        self.phase, result = apply_rule(self.phase, self.state, self.deck, self.players)
        return result

    def __iter__(self) -> Iterator[PhaseResult]:
        while not self.is_over:
            yield self.advance()

    def play_game(self) -> Tuple[int, int]:
        # play until someone reaches 121
        for _ in self:
            pass
        return self.state.scores[PlayerPosition.FIRST], self.state.scores[PlayerPosition.SECOND]
