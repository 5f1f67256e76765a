"""
State Layer - Runtime Data Models

This module defines the runtime state kept while a transcript is in progress:
the run-length-encoded scope stack owned by a walker, the frame stack of the
compacting decorator, and the answer log that survives across walker
instances so that undo and restart can be replayed.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class ScopeKind(str, Enum):
    """
    EXPLICIT: Structural container, closed by a matching end call.
    IMPLICIT: Single-value wrapper, closed as soon as its child completes.
    """
    EXPLICIT = "EXPLICIT"
    IMPLICIT = "IMPLICIT"


class ScopeEntry(BaseModel):
    """
    A run of consecutive open scopes of the same kind.
    """
    kind: ScopeKind
    count: int = 1


class CompactFrame(BaseModel):
    """
    A scope seen by the compacting decorator. Compact frames (size hint of
    exactly one) are not forwarded; their names prefix the next label.
    """
    name: str
    compact: bool


class ReplayMode(str, Enum):
    DISABLED = "DISABLED"
    RECORDING = "RECORDING"
    REPLAYING = "REPLAYING"


class ReplayLog(BaseModel):
    """
    The linear history of answers given in this session.

    While REPLAYING, `pending` holds the answers still to be re-issued;
    `entries` is rebuilt as they are consumed.
    """
    mode: ReplayMode = ReplayMode.DISABLED
    entries: List[str] = Field(default_factory=list)
    pending: List[str] = Field(default_factory=list)
