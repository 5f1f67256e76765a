"""
Replay Decorator - Undo and Restart Support

A walker cannot be stepped backwards once an answer has been consumed. To
undo, the driver throws the walker away, trims this decorator's log, and
starts a new walker; the decorator then re-issues the logged answers in
order until the new walker has caught up, after which requests go to the
real transport again.

While replaying the decorator reports itself as non-interactive, so a
walker fed from the log never loops on a local retry.
"""

import logging
from typing import List, Sequence

from ..exceptions import CannotReplay
from ..schemas.kinds import ReportKind, RequestKind
from ..state.models import ReplayLog, ReplayMode
from ..transport.decorator import TransportDecorator
from ..transport.interface import Requester

logger = logging.getLogger(__name__)


class ReplayTransport(TransportDecorator):
    def __init__(self, inner: Requester):
        super().__init__(inner)
        self.log = ReplayLog()

    @property
    def mode(self) -> ReplayMode:
        return self.log.mode

    @property
    def responses(self) -> List[str]:
        return list(self.log.entries)

    def reset(self) -> None:
        """Clear the log and stop recording."""
        self.log = ReplayLog(mode=ReplayMode.DISABLED)

    def record(self) -> None:
        """Clear the log and start recording answers."""
        self.log = ReplayLog(mode=ReplayMode.RECORDING)
        logger.debug("Recording answers")

    def replay(self) -> None:
        """
        Freeze the current log as the answers to re-issue, then keep
        recording into a fresh log as they are consumed.

        Raises:
            CannotReplay: when not currently recording.
        """
        if self.log.mode != ReplayMode.RECORDING:
            raise CannotReplay(f"Cannot replay while {self.log.mode.value.lower()}")
        logger.debug(f"Replaying {len(self.log.entries)} answer(s)")
        self.log = ReplayLog(mode=ReplayMode.REPLAYING, pending=self.log.entries)

    def undo(self, count: int) -> None:
        """Remove the last `count` answers from the log."""
        keep = max(len(self.log.entries) - max(count, 0), 0)
        del self.log.entries[keep:]

    def restart_from(self, index: int) -> None:
        """Truncate the log to its first `index` answers."""
        del self.log.entries[max(index, 0):]

    # ==========================================================================
    # Transport
    # ==========================================================================

    def respond(self, kind: RequestKind, label: str, text: str) -> None:
        if kind != RequestKind.SYNTHETIC and self.log.mode == ReplayMode.RECORDING:
            self.log.entries.append(text)
        self.inner.respond(kind, label, text)

    def is_interactive(self) -> bool:
        if self.log.mode == ReplayMode.REPLAYING:
            return False
        return self.inner.is_interactive()

    def request(
        self,
        kind: RequestKind,
        label: str,
        variants: Sequence[str] = (),
    ) -> str:
        if self.log.mode == ReplayMode.REPLAYING:
            if self.log.pending:
                answer = self.log.pending.pop(0)
                self.log.entries.append(answer)
                # Echo as if it had just been typed.
                self.inner.respond(kind, label, answer)
                return answer
            logger.debug("Replay caught up; resuming live answers")
            self.log.mode = ReplayMode.RECORDING

        answer = self.inner.request(kind, label, variants)
        if self.log.mode == ReplayMode.RECORDING:
            self.log.entries.append(answer)
        return answer

    def report(self, kind: ReportKind, message: str) -> None:
        # A rejected answer is withdrawn from the history.
        if kind == ReportKind.BAD_RESPONSE and self.log.entries:
            self.log.entries.pop()
        self.inner.report(kind, message)
