from .base_player import Player
from .random_player import RandomPlayer
from .rule_based_player import RuleBasedPlayer, get_possible_hands
from .simple_player import SimplePlayer

PLAYER_TYPES = {
    "simple": SimplePlayer,
    "reasonable": RuleBasedPlayer,
    "random": RandomPlayer,
}


def player_factory(name: str, seed: int | None = None) -> Player:
    if name not in PLAYER_TYPES:
        raise ValueError(f"Unknown player type: {name}")
    if name == "random":
        return RandomPlayer(name="random", seed=seed)
    return PLAYER_TYPES[name](name=name)


__all__ = [
    "Player",
    "SimplePlayer",
    "RuleBasedPlayer",
    "RandomPlayer",
    "PLAYER_TYPES",
    "player_factory",
    "get_possible_hands",
]
