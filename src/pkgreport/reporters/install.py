"""Reporter for package installation, with silent escalation of failures.

The engine retries a failed install at increasingly permissive execution levels::

    PLAIN  ->  NODEPS  ->  NODEPS_FORCE

A failure below NODEPS_FORCE is absorbed: nothing reaches the operator, the
reporter answers ABORT and the engine moves on to the next level. Only a failure
at NODEPS_FORCE is shown and turned into an operator decision.
"""

from pkgreport.constants import Labels, OperationKind
from pkgreport.models import (
    Action,
    ErrorCode,
    ExecutionLevel,
    OperationSubject,
    PromptId,
    Resolvable,
)
from pkgreport.output.verbosity import Verbosity
from pkgreport.reporters.base import OperationReporter


class InstallReporter(OperationReporter):
    """Escalation controller for install operations.

    Attributes
    ----------
    level : ExecutionLevel
        Level of the most recent attempt reported by the engine; reset to PLAIN
        for every new subject
    resolvable : Resolvable | None
        Subject of the current install
    """

    kind = OperationKind.INSTALL

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.level = ExecutionLevel.PLAIN
        self.resolvable: Resolvable | None = None

    def subject(self, resolvable: Resolvable) -> OperationSubject:
        label = Labels.INSTALLING.format(name=resolvable.name, edition=resolvable.edition)
        return OperationSubject(self.kind, label, resolvable)

    def start(self, resolvable: Resolvable) -> None:
        self.resolvable = resolvable
        self.level = ExecutionLevel.PLAIN
        subject = self.subject(resolvable)
        self.output.progress_start(subject.kind, subject.label)
        self.output.progress(subject.kind, subject.label, 0)

    def progress(self, value: int, resolvable: Resolvable) -> bool:
        subject = self.subject(resolvable)
        self.output.progress(subject.kind, subject.label, value)
        return True

    def problem(
        self,
        resolvable: Resolvable,
        error: ErrorCode,
        description: str,
        level: ExecutionLevel,
    ) -> Action:
        """Decide how the engine continues after a failed attempt.

        Parameters
        ----------
        resolvable : Resolvable
            Package being installed
        error : ErrorCode
            Engine error code
        description : str
            Engine description of the failure
        level : ExecutionLevel
            Level at which the engine just attempted and failed

        Returns
        -------
        Action
            ABORT below the final level, so the engine retries at the next one;
            the operator's decision (default ABORT) at the final level
        """
        self.level = ExecutionLevel(level)

        if not self.level.is_final:
            self.output.info(Labels.INSTALL_RETRY, Verbosity.DEBUG)
            self.log_debug(
                "%s failed at level %s (%s): %s",
                resolvable,
                self.level.name,
                error.name,
                description,
            )
            return Action.ABORT

        failed = Labels.INSTALL_FAILED.format(resolvable=resolvable)
        self.output.error(
            f"{failed} {self.level.annotation}: {description} ({error.description})",
        )
        if self.resolver is None:
            return Action.ABORT
        return self.resolver.resolve(
            PromptId.ARI_RPM_INSTALL_PROBLEM,
            Labels.ARI_QUESTION,
            Action.ABORT,
        )

    def finish(
        self,
        resolvable: Resolvable,
        error: ErrorCode,
        reason: str,
        level: ExecutionLevel | None = None,
    ) -> None:
        """Close the install span.

        An error at a level below NODEPS_FORCE belongs to an attempt the engine is
        about to retry, so nothing is rendered for it; the retry reports its own
        outcome.
        """
        level = self.level if level is None else ExecutionLevel(level)
        self.level = level

        if error and not level.is_final:
            self.log_debug("finish with %s below final level, not displayed", error.name)
            return

        subject = self.subject(resolvable)
        self.output.progress_end(subject.kind, subject.label, is_error=bool(error))
        if error:
            self.display_error(error, reason, prefix=level.annotation)
