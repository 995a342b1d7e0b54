"""Reporter for the installed-package database scan."""

from collections.abc import Callable

from pkgreport.constants import Labels, OperationKind
from pkgreport.models import Action, ErrorCode
from pkgreport.reporters.base import OperationReporter

ProblemPolicy = Callable[[ErrorCode, str], Action]


def engine_default_policy(error: ErrorCode, description: str) -> Action:
    """The engine's own answer to a scan problem."""
    return Action.ABORT


class ScanDatabaseReporter(OperationReporter):
    """Reports reading of the installed-package database.

    Problems are rendered but not decided here; the decision is delegated to
    ``policy``, the engine's default handling.

    Parameters
    ----------
    output : OutputChannelProtocol
        Channel to render through
    resolver : DecisionResolver | None
        Unused; accepted for a uniform constructor
    policy : ProblemPolicy
        Callable returning the engine default action for a problem
    """

    kind = OperationKind.READ_INSTALLED

    def __init__(self, output, resolver=None, policy: ProblemPolicy = engine_default_policy) -> None:
        super().__init__(output, resolver)
        self.policy = policy
        self._last_reported: int | None = None

    def start(self) -> None:
        self._last_reported = None
        self.output.progress_start(self.kind, Labels.READING_INSTALLED)
        self.progress(0)

    def progress(self, value: int) -> bool:
        # The engine calls this far more often than the value changes.
        if value != self._last_reported:
            self.output.progress(self.kind, Labels.READING_INSTALLED, value)
            self._last_reported = value
        return True

    def problem(self, error: ErrorCode, description: str) -> Action:
        self.output.error(description)
        action = self.policy(error, description)
        self.log_debug("scan problem %s resolved by engine policy to %s", error.name, action.name)
        return action

    def finish(self, error: ErrorCode, reason: str) -> None:
        self.output.progress_end(self.kind, Labels.READING_INSTALLED, is_error=bool(error))
        self.display_error(error, reason)
