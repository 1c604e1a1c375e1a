class CribEngineError(Exception):
    """Base class for errors raised by the engine."""


class ParseError(CribEngineError, ValueError):
    """Raised when card text can't be turned into a Card."""


class DeckExhausted(CribEngineError):
    """Raised when more cards are dealt than the deck holds."""


class GameFinished(CribEngineError):
    """Raised when a rule is applied after the match has a winner."""
