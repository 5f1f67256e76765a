from interview.transport.adapters.stream import StreamTransport
from interview.transport.adapters.console import ConsoleTransport

__all__ = [
    "ConsoleTransport",
    "StreamTransport",
]
