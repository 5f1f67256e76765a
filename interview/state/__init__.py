"""
State Layer - Runtime Data Models

Defines the runtime state tracked while a transcript is in progress: scope
runs, compacting frames and the replayable answer log.
"""

from interview.state.models import (
    CompactFrame,
    ReplayLog,
    ReplayMode,
    ScopeEntry,
    ScopeKind,
)

__all__ = [
    "CompactFrame",
    "ReplayLog",
    "ReplayMode",
    "ScopeEntry",
    "ScopeKind",
]
