"""Exceptions raised by pingis."""


class PingisException(Exception):
    """Base exception for all pingis errors."""

    pass


# ========== Setup Exceptions ==========


class PlayerSetupError(PingisException):
    """Raised when the requested player count and the supplied names disagree."""

    def __init__(self, message: str, names_count: int = 0, players_count: int = 0):
        super().__init__(message)
        self.names_count = names_count
        self.players_count = players_count


# ========== Match Exceptions ==========


class MatchException(PingisException):
    """Base exception for match-related errors."""

    pass


class InvalidSlotError(MatchException, ValueError):
    """Raised when a score or player slot other than 0 or 1 is addressed."""

    pass


class UnknownMatchError(MatchException):
    """Raised when a match does not belong to the current tournament session."""

    pass
