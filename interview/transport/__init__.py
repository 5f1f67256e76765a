"""
Transport Layer - Transcript Media Contracts

Defines the two capability sets a transcript medium implements (Responder,
Requester) and the delegating base class for decorators.
"""

from interview.transport.interface import Requester, Responder
from interview.transport.decorator import TransportDecorator

__all__ = [
    "Requester",
    "Responder",
    "TransportDecorator",
]
