"""Reporter for package removal."""

from pkgreport.constants import Labels, OperationKind
from pkgreport.models import Action, ErrorCode, OperationSubject, PromptId, Resolvable
from pkgreport.reporters.base import OperationReporter


class RemoveReporter(OperationReporter):
    """Reports removal of resolvables and asks the operator about failures."""

    kind = OperationKind.REMOVE

    def subject(self, resolvable: Resolvable) -> OperationSubject:
        label = Labels.REMOVING.format(resolvable=resolvable)
        return OperationSubject(self.kind, label, resolvable)

    def start(self, resolvable: Resolvable) -> None:
        subject = self.subject(resolvable)
        self.output.progress_start(subject.kind, subject.label)
        self.output.progress(subject.kind, subject.label, 0)

    def progress(self, value: int, resolvable: Resolvable) -> bool:
        subject = self.subject(resolvable)
        self.output.progress(subject.kind, subject.label, value)
        return True

    def problem(self, resolvable: Resolvable, error: ErrorCode, description: str) -> Action:
        failed = Labels.REMOVAL_FAILED.format(resolvable=resolvable)
        self.output.error(f"{failed} {self.format_error(error, description)}")
        if self.resolver is None:
            return Action.ABORT
        return self.resolver.resolve(
            PromptId.ARI_RPM_REMOVE_PROBLEM,
            Labels.ARI_QUESTION,
            Action.ABORT,
        )

    def finish(self, resolvable: Resolvable, error: ErrorCode, reason: str) -> None:
        subject = self.subject(resolvable)
        self.output.progress_end(subject.kind, subject.label, is_error=bool(error))
        self.display_error(error, reason)
