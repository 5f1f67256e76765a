"""
Scope Stack - Balanced Scope Framing

Keeps the begin/end framing sent to a transport balanced across an
arbitrarily deep traversal. Structural containers open EXPLICIT scopes that
the walker closes itself; single-value wrappers (optional values, newtypes,
struct fields) open IMPLICIT scopes that close in a cascade as soon as the
value inside them completes.

Consecutive scopes of the same kind share one run-length entry.
"""

import logging
from typing import List, Optional

from ..state.models import ScopeEntry, ScopeKind
from ..transport.interface import Responder

logger = logging.getLogger(__name__)


class ScopeStack:
    def __init__(self, transport: Responder):
        self.transport = transport
        self.entries: List[ScopeEntry] = []

    @property
    def depth(self) -> int:
        return sum(entry.count for entry in self.entries)

    def begin(self, name: str, size: Optional[int], kind: ScopeKind) -> None:
        self.transport.begin_scope(name, size)
        top = self._top()
        if top is not None and top.kind == kind:
            top.count += 1
        else:
            self.entries.append(ScopeEntry(kind=kind))

    def end_explicit(self) -> None:
        """
        Closes the innermost scope, which must be explicit, then closes every
        implicit scope that was waiting on it.
        """
        top = self._top()
        if top is None or top.kind != ScopeKind.EXPLICIT:
            raise RuntimeError("end_explicit() called without an open explicit scope")
        self.transport.end_scope()
        self._decrement(top)
        self.end_implicit_scopes()

    def end_implicit_scopes(self) -> None:
        top = self._top()
        while top is not None and top.kind == ScopeKind.IMPLICIT:
            self._decrement(top)
            self.transport.end_scope()
            top = self._top()

    def cleanup(self) -> None:
        """Closes every open scope regardless of kind."""
        if self.entries:
            logger.debug(f"Closing {self.depth} dangling scope(s)")
        top = self._top()
        while top is not None:
            self._decrement(top)
            self.transport.end_scope()
            top = self._top()

    def _top(self) -> Optional[ScopeEntry]:
        if not self.entries:
            return None
        return self.entries[-1]

    def _decrement(self, entry: ScopeEntry) -> None:
        entry.count -= 1
        if entry.count == 0:
            self.entries.pop()
