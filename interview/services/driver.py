"""
Interview Driver - Application Orchestration Layer

Entry points that compose the transport decorators around a transcript
medium and run walkers over them.

Build direction, outermost first:

    Builder -> ReplayTransport -> MetaCommandTransport -> CompactingTransport -> medium

The Builder only ever sees one pass. When the pass is aborted by an undo, a
restart or a value the operator's answers could not produce, the driver trims
the replay log and runs a brand-new Builder, which the log fast-forwards to
where the operator left off.
"""

import logging
from typing import Any

from ..config import settings
from ..domain.models import Shape
from ..exceptions import BadResponse, Restart, Undo, ValidationError
from ..execution.builder import Builder
from ..execution.displayer import Displayer
from ..execution.questions import ask_yes_no
from ..schemas.kinds import ReportKind
from ..transport.adapters.console import ConsoleTransport
from ..transport.interface import Requester, Responder
from .compacting import CompactingTransport
from .meta_commands import MetaCommandTransport
from .replay import ReplayTransport

logger = logging.getLogger(__name__)


def build_bare(shape: Shape, transport: Requester) -> Any:
    """Builds a value in a single pass, with no decorators."""
    with Builder(transport) as builder:
        return builder.build(shape)


def build_bare_confirm(shape: Shape, transport: Requester) -> Any:
    """
    Builds a value in a single pass, then asks the operator to accept it.

    Raises:
        Restart: Restart(0) when the value is rejected.
    """
    value = build_bare(shape, transport)
    if ask_yes_no(transport, "Accept value?"):
        return value
    raise Restart(0)


def build_with_replay(shape: Shape, transport: Requester, confirm: bool = True) -> Any:
    """
    Builds a value, handling undo, restart and rejected values by replaying
    the answers given so far into a new pass.

    Control actions and failures propagate unchanged once the transport is
    not interactive, since nothing would replace the answers.
    """
    replay = ReplayTransport(transport)
    replay.record()
    attempt = 1

    while True:
        try:
            if confirm:
                return build_bare_confirm(shape, replay)
            return build_bare(shape, replay)

        except ValidationError as e:
            if not replay.is_interactive():
                raise
            # Reporting withdraws the answer that completed the rejected value.
            replay.report(ReportKind.BAD_RESPONSE, str(e))
            logger.info(f"Attempt {attempt}: value rejected ({e}); undoing last answer")

        except BadResponse as e:
            if not replay.is_interactive():
                raise
            # Already withdrawn when it was reported.
            logger.info(f"Attempt {attempt}: bad response ({e}); undoing last answer")

        except Undo as e:
            if not replay.is_interactive():
                raise
            logger.info(f"Attempt {attempt}: undoing {e.count} answer(s)")
            replay.undo(e.count)

        except Restart as e:
            if not replay.is_interactive():
                raise
            logger.info(f"Attempt {attempt}: restarting after answer {e.index}")
            replay.restart_from(e.index)

        replay.replay()
        attempt += 1


def build(shape: Shape, transport: Requester) -> Any:
    """
    Builds a value with meta-commands, undo/restart and scope compacting.
    """
    chain = MetaCommandTransport(CompactingTransport(transport))
    return build_with_replay(shape, chain, confirm=settings.CONFIRM_VALUE)


def build_from_console(shape: Shape) -> Any:
    """Builds a value by interviewing the operator on the console."""
    return build(shape, ConsoleTransport())


def display_bare(shape: Shape, value: Any, transport: Responder) -> None:
    """Displays a value in a single pass, with no decorators."""
    with Displayer(transport) as displayer:
        displayer.display(shape, value)


def display(shape: Shape, value: Any, transport: Responder) -> None:
    """
    Displays a value with meta-command escaping and scope compacting.
    """
    display_bare(shape, value, MetaCommandTransport(CompactingTransport(transport)))
