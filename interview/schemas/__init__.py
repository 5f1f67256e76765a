"""
Schemas - Exchange Classifications

Defines the request and report kinds exchanged between walkers, transport
decorators and concrete transcript media.
"""

from interview.schemas.kinds import ReportKind, RequestKind

__all__ = [
    "ReportKind",
    "RequestKind",
]
