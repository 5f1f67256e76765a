"""
Schemas - Exchange Classifications

Every exchange with a transport is tagged so that decorators and media can
treat values, control questions and already-known values differently.
"""
from enum import Enum


class RequestKind(str, Enum):
    """
    Classifies a request or a response sent to a transport.

    DATUM: A value fragment of the shape being built or displayed.
    QUESTION: A yes/no control question ("Add element?").
    SYNTHETIC: A value the walker already knows. Display-only, never logged
        for replay and never treated as a correctable answer.
    """
    DATUM = "DATUM"
    QUESTION = "QUESTION"
    SYNTHETIC = "SYNTHETIC"


class ReportKind(str, Enum):
    """
    Classifies a message reported to a transport.

    BAD_RESPONSE: The previous answer was rejected.
    HELP: Informational text only.
    """
    BAD_RESPONSE = "BAD_RESPONSE"
    HELP = "HELP"
