# Specific exception types for the game session layer
class DamaError(Exception):
    """Base exception for Dama game errors."""

    pass


class IllegalMoveError(DamaError):
    """Raised when a move outside the current legal set is submitted."""

    pass


class GameOverError(DamaError):
    """Raised when play is requested after the game has been decided."""

    pass


class NotAITurnError(DamaError):
    """Raised when an AI turn is requested while a human is to move."""

    pass


class ConfigError(DamaError):
    """Raised when configuration cannot be resolved to a usable value."""

    pass
