"""
Console Demo.

Interviews the operator for a parent and their children, ages everyone by a
year and prints the transcript that would build the result.

Usage:
    python -m interview.scripts.console_demo

Type !help at any prompt for the meta-command reference.
"""

import logging

from interview.config import settings
from interview.data.example_shapes import PARENT_INFO
from interview.exceptions import Cancel, InterviewError
from interview.services.driver import build_from_console, display
from interview.transport.adapters.stream import StreamTransport

logger = logging.getLogger(__name__)


def run_demo():
    try:
        parent = build_from_console(PARENT_INFO)
    except Cancel:
        print("Cancelled.")
        return
    except InterviewError as e:
        logger.error(f"Interview failed: {e}")
        raise

    parent.age += 1
    for child in parent.children:
        child.age += 1

    print("One year from now you will have to type:")
    display(PARENT_INFO, parent, StreamTransport.responder())


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    run_demo()
