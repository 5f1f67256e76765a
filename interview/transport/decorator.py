"""
Transport Decorator Base.

Decorators wrap another transport and forward every call they do not
intercept, so that a chain (compacting -> meta-commands -> replay) behaves
as a single transport towards a walker.
"""

from typing import Optional, Sequence

from ..schemas.kinds import ReportKind, RequestKind
from .interface import Requester, Responder


class TransportDecorator(Requester):
    def __init__(self, inner: Responder):
        self.inner = inner

    def begin_scope(self, name: str, size: Optional[int] = None) -> None:
        self.inner.begin_scope(name, size)

    def end_scope(self) -> None:
        self.inner.end_scope()

    def respond(self, kind: RequestKind, label: str, text: str) -> None:
        self.inner.respond(kind, label, text)

    # Requester methods are only reachable when the inner transport is one.

    def is_interactive(self) -> bool:
        return self.inner.is_interactive()

    def request(
        self,
        kind: RequestKind,
        label: str,
        variants: Sequence[str] = (),
    ) -> str:
        return self.inner.request(kind, label, variants)

    def report(self, kind: ReportKind, message: str) -> None:
        self.inner.report(kind, message)
