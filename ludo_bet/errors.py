# Exception types raised by the engine. All are recoverable by the caller:
# a rejected call leaves the session untouched.
class LudoError(Exception):
    """Base exception for game engine errors."""

    pass


class InvalidStateTransition(LudoError):
    """Raised when an action is attempted in the wrong turn phase."""

    pass


class IllegalMove(InvalidStateTransition):
    """Raised when the chosen piece cannot move with the current die."""

    pass


class UnknownSession(LudoError, KeyError):
    """Raised for operations on a missing or already discarded session."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
