"""
Meta-Command Decorator - In-band Control Actions

Intercepts answers that begin with the marker character (`!` by default) and
turns them into control actions:

    !c, !cancel        -> Cancel
    !u, !undo[<n>]     -> Undo(n), n defaults to 1
    !r, !restart[<n>]  -> Restart(n), n defaults to 0
    !h, !help          -> prints the reference, then asks again

An answer that really starts with the marker is typed with the marker
doubled; exactly one is stripped.
"""

import logging
import re
from typing import Optional, Sequence

from ..config import settings
from ..exceptions import BadResponse, Cancel, Restart, Undo
from ..prompts import Template, render_lines
from ..schemas.kinds import ReportKind, RequestKind
from ..transport.decorator import TransportDecorator
from ..transport.interface import Responder

logger = logging.getLogger(__name__)

_COMMAND = re.compile(r"(?P<name>[a-z]+)(?P<count>[0-9]*)")

_CANCEL = ("c", "cancel")
_UNDO = ("u", "undo")
_RESTART = ("r", "restart")
_HELP = ("h", "help")


class MetaCommandTransport(TransportDecorator):
    def __init__(self, inner: Responder, marker: Optional[str] = None):
        super().__init__(inner)
        self.marker = marker or settings.META_COMMAND_MARKER

    def respond(self, kind: RequestKind, label: str, text: str) -> None:
        # Displayed answers stay valid input when typed back in.
        if text.startswith(self.marker):
            text = self.marker + text
        self.inner.respond(kind, label, text)

    def request(
        self,
        kind: RequestKind,
        label: str,
        variants: Sequence[str] = (),
    ) -> str:
        while True:
            answer = self.inner.request(kind, label, variants)
            if not answer.startswith(self.marker):
                return answer
            if answer.startswith(self.marker * 2):
                return answer[len(self.marker):]

            command = answer[len(self.marker):]
            if self._run(command, variants):
                continue

            self.report(
                ReportKind.BAD_RESPONSE,
                f"Bad user action (try {self.marker}help for help)",
            )
            if not self.is_interactive():
                raise BadResponse(f"Unrecognised meta-command '{answer}'")

    def _run(self, command: str, variants: Sequence[str]) -> bool:
        """
        Executes a meta-command. Raises the control action it names, returns
        True after printing help, and False when the command is not
        recognised.
        """
        match = _COMMAND.fullmatch(command)
        if match is None:
            return False
        name = match.group("name")
        count = int(match.group("count")) if match.group("count") else None

        if name in _CANCEL and count is None:
            logger.info("Operator cancelled")
            raise Cancel()
        if name in _UNDO:
            raise Undo(1 if count is None else count)
        if name in _RESTART:
            raise Restart(0 if count is None else count)
        if name in _HELP and count is None:
            self.report(ReportKind.HELP, f"Variants are: {list(variants)}")
            for line in render_lines(Template.META_COMMAND_HELP, marker=self.marker):
                self.report(ReportKind.HELP, line)
            return True
        return False
