"""
Compacting Decorator - Quieter Transcripts

Scopes that will hold exactly one value (size hint of 1) add a nesting level
without adding information. They are not forwarded; instead their names are
folded into the label of whatever comes next:

    SimpleStruct -> my_field -> string: Test

instead of

    SimpleStruct {
      my_field {
        string: Test
      }
    }
"""

from typing import List, Optional, Sequence

from ..config import settings
from ..schemas.kinds import RequestKind
from ..state.models import CompactFrame
from ..transport.decorator import TransportDecorator
from ..transport.interface import Responder


class CompactingTransport(TransportDecorator):
    def __init__(self, inner: Responder, separator: Optional[str] = None):
        super().__init__(inner)
        self.separator = separator or settings.COMPACT_SEPARATOR
        self.frames: List[CompactFrame] = []

    def compound_label(self, label: str) -> str:
        """Prefixes `label` with the trailing run of compact frame names."""
        names = [label]
        for frame in reversed(self.frames):
            if not frame.compact:
                break
            names.append(frame.name)
        return self.separator.join(reversed(names))

    def begin_scope(self, name: str, size: Optional[int] = None) -> None:
        compact = size == 1
        if not compact:
            self.inner.begin_scope(self.compound_label(name), size)
        self.frames.append(CompactFrame(name=name, compact=compact))

    def end_scope(self) -> None:
        if not self.frames:
            raise RuntimeError("end_scope() called with no open scope")
        frame = self.frames.pop()
        if not frame.compact:
            self.inner.end_scope()

    def respond(self, kind: RequestKind, label: str, text: str) -> None:
        # Synthetic values carry no information worth printing.
        if kind == RequestKind.SYNTHETIC:
            return
        self.inner.respond(kind, self.compound_label(label), text)

    def request(
        self,
        kind: RequestKind,
        label: str,
        variants: Sequence[str] = (),
    ) -> str:
        return self.inner.request(kind, self.compound_label(label), variants)
