"""
Text-stream transcript medium.

Renders scopes as indented blocks:

    ParentInfo {
      name: Anne
      children {
        [0] {
          ...
        }
      }
    }
"""

import logging
import sys
from typing import Optional, Sequence, TextIO

from ...config import settings
from ...exceptions import TransportError
from ...schemas.kinds import ReportKind, RequestKind
from ..interface import Requester

logger = logging.getLogger(__name__)


class StreamTransport(Requester):
    """
    Reads answers line by line from `reader` and writes the transcript to
    `writer`. Defaults to the process's standard streams.
    """

    def __init__(
        self,
        reader: Optional[TextIO] = None,
        writer: Optional[TextIO] = None,
        interactive: bool = True,
    ):
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout
        self.interactive = interactive
        self.level = 0

    @classmethod
    def responder(cls, writer: Optional[TextIO] = None) -> "StreamTransport":
        """A write-only transport for display passes."""
        return cls(reader=None, writer=writer, interactive=False)

    @property
    def indent(self) -> str:
        return " " * (settings.INDENT_WIDTH * self.level)

    def _write(self, text: str, newline: bool = True) -> None:
        try:
            self.writer.write(text + ("\n" if newline else ""))
            if not newline:
                self.writer.flush()
        except OSError as e:
            raise TransportError(f"Failed to write transcript: {e}") from e

    def _read_line(self) -> str:
        try:
            line = self.reader.readline()
        except OSError as e:
            raise TransportError(f"Failed to read answer: {e}") from e
        if line == "":
            raise TransportError("Input stream closed")
        return line.rstrip("\r\n")

    # ==========================================================================
    # Responder
    # ==========================================================================

    def begin_scope(self, name: str, size: Optional[int] = None) -> None:
        self._write(f"{self.indent}{name} {{")
        self.level += 1

    def end_scope(self) -> None:
        if self.level == 0:
            raise RuntimeError("end_scope() called with no open scope")
        self.level -= 1
        self._write(f"{self.indent}}}")

    def respond(self, kind: RequestKind, label: str, text: str) -> None:
        self._write(f"{self.indent}{label}: {text}")

    # ==========================================================================
    # Requester
    # ==========================================================================

    def is_interactive(self) -> bool:
        return self.interactive

    def request(
        self,
        kind: RequestKind,
        label: str,
        variants: Sequence[str] = (),
    ) -> str:
        self._write(f"{self.indent}{label}: ", newline=False)
        return self._read_line()

    def report(self, kind: ReportKind, message: str) -> None:
        if kind == ReportKind.BAD_RESPONSE:
            logger.debug(f"Rejected answer: {message}")
        self._write(f"{self.indent}{message}")
