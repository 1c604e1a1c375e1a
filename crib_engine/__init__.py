from logging import getLogger
logger = getLogger(__name__)

__all__ = [
    "cards",
    "combinatorics",
    "scoring",
    "gamestate",
    "results",
    "game",
    "players",
    "constants",
    "errors",
    "log_setup",
]
