"""
Interview Exceptions

The error taxonomy shared by walkers, transport decorators and the
top-level driver.
"""


class InterviewError(Exception):
    """Base class for every error raised by this package."""
    pass


class ValidationError(InterviewError):
    """
    An answer could not be turned into its target value, or a value handed
    to a display walker does not fit its shape.
    """
    pass


class TransportError(InterviewError):
    """I/O failure in a transcript medium. Never retried."""
    pass


class BadResponse(InterviewError):
    """
    An answer was rejected and no replacement can be obtained because the
    transport is not interactive.
    """

    def __init__(self, message: str = "Bad response"):
        super().__init__(message)


class CannotReplay(InterviewError):
    """replay() was invoked while the replay log was not recording."""

    def __init__(self, message: str = "Cannot replay"):
        super().__init__(message)


class ControlAction(InterviewError):
    """
    An explicit operator instruction issued through a meta-command.

    Control actions are never handled inside a walker; they always unwind
    to the top-level driver.
    """
    pass


class Cancel(ControlAction):
    """Abandon the interview."""

    def __init__(self):
        super().__init__("Cancel")

    def __eq__(self, other):
        return isinstance(other, Cancel)

    def __hash__(self):
        return hash("Cancel")


class Undo(ControlAction):
    """Withdraw the last `count` answers."""

    def __init__(self, count: int = 1):
        super().__init__(f"Undo({count})")
        self.count = count

    def __eq__(self, other):
        return isinstance(other, Undo) and other.count == self.count

    def __hash__(self):
        return hash(("Undo", self.count))


class Restart(ControlAction):
    """Start over, keeping the first `index` answers."""

    def __init__(self, index: int = 0):
        super().__init__(f"Restart({index})")
        self.index = index

    def __eq__(self, other):
        return isinstance(other, Restart) and other.index == self.index

    def __hash__(self):
        return hash(("Restart", self.index))
