"""Lifecycle contract shared by every operation reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pkgreport.models import Action, ErrorCode
from pkgreport.output.protocol import OutputChannelProtocol
from pkgreport_logging import get_logger

if TYPE_CHECKING:
    from pkgreport.decision import DecisionResolver

LIFECYCLE_EVENTS: tuple[str, ...] = ("start", "progress", "problem", "finish")


class OperationReporter:
    """Receiver of engine lifecycle events for one kind of operation.

    The engine calls ``start``, any number of ``progress`` calls, optionally
    ``problem``, and ``finish`` for each subject. Subclasses keep these rules:

    - ``progress`` returns False only to ask the engine to abort the operation
    - ``problem`` always returns an ``Action``
    - ``finish`` must not fail when ``start`` was never seen

    Parameters
    ----------
    output : OutputChannelProtocol
        Channel every event is rendered through
    resolver : DecisionResolver | None
        Resolver consulted for operator decisions, if the kind needs one
    """

    kind: ClassVar[str] = ""
    events: ClassVar[tuple[str, ...]] = LIFECYCLE_EVENTS

    def __init__(
        self,
        output: OutputChannelProtocol,
        resolver: DecisionResolver | None = None,
    ) -> None:
        self.output = output
        self.resolver = resolver
        self._logger = get_logger(self.__class__.__module__)

    def start(self, *args: Any) -> None:
        """Begin reporting on a subject."""

    def progress(self, *args: Any) -> bool:
        """Report progress; returning False requests an abort."""
        return True

    def problem(self, *args: Any) -> Action:
        """Report a problem and decide how the engine continues."""
        return Action.ABORT

    def finish(self, *args: Any) -> None:
        """Finish reporting on a subject."""

    @staticmethod
    def format_error(error: ErrorCode, reason: str) -> str:
        """Describe an engine error together with the engine-provided reason."""
        if not error:
            return reason
        description = error.description[0].upper() + error.description[1:]
        return f"{description}: {reason}" if reason else description

    def display_error(self, error: ErrorCode, reason: str, prefix: str = "") -> None:
        """Render an engine error unless it is ``NO_ERROR``.

        Parameters
        ----------
        error : ErrorCode
            Engine error code
        reason : str
            Engine-provided description
        prefix : str
            Text shown before the error, e.g. an escalation annotation
        """
        if not error:
            return
        text = self.format_error(error, reason)
        self.output.error(f"{prefix} {text}" if prefix else text)

    def log_debug(self, message: str, *args: Any) -> None:
        """Log a debug message with reporter context."""
        self._logger.debug("[%s] " + message, self.kind or self.__class__.__name__, *args)
