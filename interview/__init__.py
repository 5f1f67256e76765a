"""
Interview

Builds typed values by interviewing an operator through a line-oriented
transcript, and displays typed values through the same transcript protocol.
Supports in-band meta-commands for undo, restart and cancel, and compacts
single-value scopes into compound labels.
"""

from interview.domain import (
    BytesShape,
    EnumShape,
    EnumValue,
    MapShape,
    NewtypeShape,
    OptionShape,
    PrimitiveShape,
    SeqShape,
    Shape,
    Some,
    StringShape,
    StructShape,
    TupleShape,
    TupleStructShape,
    UnitShape,
    UnitStructShape,
    Variant,
)
from interview.schemas import ReportKind, RequestKind
from interview.exceptions import (
    BadResponse,
    Cancel,
    CannotReplay,
    ControlAction,
    InterviewError,
    Restart,
    TransportError,
    Undo,
    ValidationError,
)
from interview.transport import Requester, Responder, TransportDecorator
from interview.transport.adapters import ConsoleTransport, StreamTransport
from interview.execution import Builder, Displayer
from interview.services.compacting import CompactingTransport
from interview.services.meta_commands import MetaCommandTransport
from interview.services.replay import ReplayTransport
from interview.services.driver import (
    build,
    build_bare,
    build_bare_confirm,
    build_from_console,
    build_with_replay,
    display,
    display_bare,
)

__all__ = [
    # Domain Layer
    "BytesShape",
    "EnumShape",
    "EnumValue",
    "MapShape",
    "NewtypeShape",
    "OptionShape",
    "PrimitiveShape",
    "SeqShape",
    "Shape",
    "Some",
    "StringShape",
    "StructShape",
    "TupleShape",
    "TupleStructShape",
    "UnitShape",
    "UnitStructShape",
    "Variant",
    # Schemas
    "ReportKind",
    "RequestKind",
    # Errors and Control Actions
    "BadResponse",
    "Cancel",
    "CannotReplay",
    "ControlAction",
    "InterviewError",
    "Restart",
    "TransportError",
    "Undo",
    "ValidationError",
    # Transport Layer
    "ConsoleTransport",
    "Requester",
    "Responder",
    "StreamTransport",
    "TransportDecorator",
    # Execution Layer
    "Builder",
    "Displayer",
    # Services Layer
    "CompactingTransport",
    "MetaCommandTransport",
    "ReplayTransport",
    "build",
    "build_bare",
    "build_bare_confirm",
    "build_from_console",
    "build_with_replay",
    "display",
    "display_bare",
]
