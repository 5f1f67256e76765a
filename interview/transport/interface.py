from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..schemas.kinds import ReportKind, RequestKind


class Responder(ABC):
    """
    Abstract Base Class interface that defines the contract for any transcript
    medium that can display output (a terminal, a text stream, a test double).
    """

    @abstractmethod
    def begin_scope(self, name: str, size: Optional[int] = None) -> None:
        """
        Opens a named nesting level. `size` is a hint of how many values the
        scope will hold, when that is known up front.
        """
        pass

    @abstractmethod
    def end_scope(self) -> None:
        """Closes the innermost open scope."""
        pass

    @abstractmethod
    def respond(self, kind: RequestKind, label: str, text: str) -> None:
        """Displays a labelled value."""
        pass


class Requester(Responder):
    """
    A medium that can also obtain answers.
    """

    @abstractmethod
    def is_interactive(self) -> bool:
        """
        True when a rejected answer can be replaced by asking again. A fixed
        script is not interactive, so failed validation must not loop.
        """
        pass

    @abstractmethod
    def request(
        self,
        kind: RequestKind,
        label: str,
        variants: Sequence[str] = (),
    ) -> str:
        """
        Blocks until an answer is available. `variants` lists the allowed
        answers when they are known (for completion or display).
        """
        pass

    @abstractmethod
    def report(self, kind: ReportKind, message: str) -> None:
        """Reports an informative or error message."""
        pass
