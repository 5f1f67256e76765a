"""
Walker - Shared Traversal Plumbing

A walker performs exactly one depth-first pass over a shape. The build and
display directions share the same scope choreography, so both derive from
this base, which owns the ScopeStack and guarantees it is unwound when the
pass ends, however it ends:

    with Builder(transport) as builder:
        value = builder.build(shape)

A walker cannot be rewound. Undo and restart are implemented by discarding
the walker and replaying logged answers into a new one.
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..domain.models import Shape
from ..exceptions import ValidationError
from ..schemas.kinds import RequestKind
from ..state.models import ScopeKind
from ..transport.interface import Responder
from .scopes import ScopeStack

logger = logging.getLogger(__name__)


class Walker:
    # Maps a shape class to the name of the method handling it.
    handlers: Dict[type, str] = {}

    def __init__(self, transport: Responder):
        self.transport = transport
        self.scopes = ScopeStack(transport)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            self.scopes.cleanup()
        except Exception as e:
            if exc_type is None:
                raise
            # The original failure propagates.
            logger.warning(f"Scope cleanup failed while unwinding {exc_type.__name__}: {e}")
        return False

    def _handler_for(self, shape: Shape) -> Callable[..., Any]:
        name = self.handlers.get(type(shape))
        if name is None:
            raise TypeError(f"Unsupported shape: {shape!r}")
        return getattr(self, name)

    # ==========================================================================
    # Scope helpers
    # ==========================================================================

    def _begin_explicit(self, name: str, size: Optional[int] = None) -> None:
        self.scopes.begin(name, size, ScopeKind.EXPLICIT)

    def _begin_implicit(self, name: str, size: Optional[int] = None) -> None:
        self.scopes.begin(name, size, ScopeKind.IMPLICIT)

    def _end_explicit(self) -> None:
        self.scopes.end_explicit()

    def _complete(self) -> None:
        """Marks a value as complete, closing the wrappers waiting on it."""
        self.scopes.end_implicit_scopes()

    def _respond_unit(self) -> None:
        self.transport.respond(RequestKind.SYNTHETIC, "unit", "()")

    @staticmethod
    def _element_label(index: int, length: int) -> str:
        return f"[{index + 1}/{length}]"

    @staticmethod
    def _slot_label(index: int) -> str:
        return f"[{index}]"


def construct(label: str, factory: Callable[..., Any], /, *args, **kwargs) -> Any:
    """
    Calls a user-supplied model factory, turning its rejection into a
    ValidationError. pydantic's ValidationError is a ValueError.
    """
    try:
        return factory(*args, **kwargs)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Could not build {label}: {e}") from e
