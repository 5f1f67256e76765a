"""
Interactive terminal medium.

Uses `input()` so that line editing, history and tab completion of the
allowed answers are available wherever the readline module is.
"""

import logging
from typing import Optional, Sequence

from ...config import settings
from ...exceptions import Cancel, TransportError
from ...schemas.kinds import RequestKind
from .stream import StreamTransport

logger = logging.getLogger(__name__)

try:
    import readline
except ImportError:
    # Not available on every platform; input() still works without it.
    readline = None


class ConsoleTransport(StreamTransport):
    def __init__(self):
        super().__init__(interactive=True)
        self.completions: Sequence[str] = ()
        if readline is not None:
            readline.set_history_length(settings.HISTORY_LENGTH)
            readline.set_completer(self._complete)
            readline.parse_and_bind("tab: complete")
        else:
            logger.debug("readline unavailable; tab completion disabled")

    def _complete(self, text: str, state: int) -> Optional[str]:
        matches = [v for v in self.completions if v.startswith(text)]
        return matches[state] if state < len(matches) else None

    def request(
        self,
        kind: RequestKind,
        label: str,
        variants: Sequence[str] = (),
    ) -> str:
        self.completions = variants
        try:
            return input(f"{self.indent}{label}: ")
        except KeyboardInterrupt:
            self._write("")
            raise Cancel()
        except EOFError as e:
            raise TransportError("Console input closed") from e
        finally:
            self.completions = ()
